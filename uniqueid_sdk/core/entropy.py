"""Randomness sources and byte/string helpers."""

from __future__ import annotations

import random
import secrets
from typing import Protocol

from uniqueid_sdk.core.errors import EntropySourceUnavailableError, InvalidLengthError

ALPHANUMERIC = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"


class RandomSource(Protocol):
    def random_bytes(self, size: int) -> bytes: ...

    def random(self) -> float: ...

    def randbelow(self, n: int) -> int: ...


class SystemRandomSource:
    """Default implementation.

    ``random_bytes`` draws from the operating system's secure source.
    ``random`` and ``randbelow`` use a private general-purpose PRNG; passing
    ``seed`` makes only those draws reproducible.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def random_bytes(self, size: int) -> bytes:
        try:
            return secrets.token_bytes(size)
        except (OSError, NotImplementedError) as exc:
            raise EntropySourceUnavailableError(
                f"secure random source failed: {exc}"
            ) from exc

    def random(self) -> float:
        return self._rng.random()

    def randbelow(self, n: int) -> int:
        return self._rng.randrange(n)


_default_source = SystemRandomSource()


def _check_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidLengthError(f"size must be an integer, got {size!r}")
    if size < 0:
        raise InvalidLengthError(f"size must be >= 0, got {size}")


def random_bits(size: int, source: RandomSource | None = None) -> bytes:
    """Return ``size`` secure random bytes."""
    _check_size(size)
    return (source or _default_source).random_bytes(size)


def hex_random_bytes(size: int, source: RandomSource | None = None) -> str:
    """Return ``size`` secure random bytes as a hex string of ``2 * size`` chars."""
    return random_bits(size, source).hex()


def random_alphanumeric(size: int, source: RandomSource | None = None) -> str:
    """Return ``size`` characters drawn from ``ALPHANUMERIC``.

    Not suitable for secrets: draws come from the non-secure source.
    """
    _check_size(size)
    src = source or _default_source
    return "".join(ALPHANUMERIC[src.randbelow(len(ALPHANUMERIC))] for _ in range(size))
