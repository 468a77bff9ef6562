"""UniqueID: the identifier generator and its convenience wrapper."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable

from uniqueid_sdk.config import (
    DEFAULT_TEXT_LENGTH,
    GeneratorConfig,
    UniquenessConfig,
    UUIDOptions,
)
from uniqueid_sdk.core.clock import Clock, SystemClock
from uniqueid_sdk.core.duplicates import find_duplicates
from uniqueid_sdk.core.entropy import RandomSource, SystemRandomSource
from uniqueid_sdk.core.errors import InvalidLengthError
from uniqueid_sdk.core.types import DuplicateReport, GeneratedId, IdKind
from uniqueid_sdk.observability.event_bus import Event, EventBus

logger = logging.getLogger(__name__)

# floor(random() * SCALE) yields up to 18 decimal digits
RANDOM_SCALE = 100_000_000 * 0x100000000
NUMERIC_HEAD_BOUND = 1_000_000_000
HEX_BYTES = 16


def _check_length(length: int | None) -> None:
    if length is None:
        return
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError(f"length must be an integer or None, got {length!r}")


class UniqueID:
    """Generates short, quasi-unique text or integer identifiers.

    Text IDs are built as ``[prefix_]<32 hex><ms timestamp><scaled random><byte>``
    and truncated to ``length`` characters (16 by default). Numeric IDs replace
    the hex block with a random integer below 10**9, ignore the prefix, and are
    only truncated when ``length`` is given.

    Uniqueness is probabilistic. Use ``verify_uniqueness`` to stress-test a
    configuration and ``find_duplicates`` to audit a batch.
    """

    def __init__(
        self,
        prefix: str | None = "",
        kind: IdKind | str | None = IdKind.STRING,
        *,
        random_source: RandomSource | None = None,
        clock: Clock | None = None,
        event_bus: EventBus | None = None,
        uniqueness: UniquenessConfig | None = None,
    ) -> None:
        self._config = GeneratorConfig(prefix=prefix or "", kind=kind or IdKind.STRING)
        self._random = random_source or SystemRandomSource()
        self._clock = clock or SystemClock()
        self._event_bus = event_bus
        self._uniqueness = uniqueness or UniquenessConfig()

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def prefix(self) -> str:
        return self._config.prefix

    @property
    def kind(self) -> IdKind:
        return self._config.kind

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate(self, length: int | None = None) -> GeneratedId:
        _check_length(length)

        rnd = self._random.random_bytes(1)[0]
        timestamp = self._clock.now_ms()
        scaled = int(self._random.random() * RANDOM_SCALE)

        if self._config.kind is IdKind.STRING:
            hex_part = self._random.random_bytes(HEX_BYTES).hex()
            tail = f"{hex_part}{timestamp}{scaled}{rnd}"
            source = f"{self._config.prefix}_{tail}" if self._config.prefix else tail
            if length is None:
                length = DEFAULT_TEXT_LENGTH
            uid = source[: max(length, 0)]
            logger.debug("Generated string id (length=%d)", len(uid))
            return uid

        head = self._random.randbelow(NUMERIC_HEAD_BOUND)
        digits = f"{head}{timestamp}{scaled}{rnd}"
        if length is not None:
            digits = digits[: max(length, 0)]
        if not digits:
            raise InvalidLengthError(
                f"length={length} leaves no digits to form a numeric id"
            )
        logger.debug("Generated numeric id (digits=%d)", len(digits))
        return int(digits)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def verify_uniqueness(self, trials: int | None = None) -> bool:
        """Generate ``trials`` default IDs; False on the first repeat."""
        if trials is None:
            trials = self._uniqueness.trials
        if isinstance(trials, bool) or not isinstance(trials, int) or trials < 0:
            raise InvalidLengthError(f"trials must be a non-negative integer, got {trials!r}")

        seen: set[GeneratedId] = set()
        unique = True
        for _ in range(trials):
            uid = self.generate()
            if uid in seen:
                unique = False
                break
            seen.add(uid)

        if unique:
            logger.info("Uniqueness check passed: %d distinct ids", len(seen))
        else:
            logger.warning("Uniqueness check failed after %d ids", len(seen) + 1)
        self._emit(
            "UniquenessChecked",
            {"trials": trials, "generated": len(seen) + (0 if unique else 1), "unique": unique},
        )
        return unique

    def find_duplicates(self, values: Iterable[GeneratedId]) -> DuplicateReport:
        report = find_duplicates(values)
        if not report.has_duplicate_free:
            logger.warning(
                "Found %d duplicate value(s)", len(report.duplicate_values)
            )
        self._emit(
            "DuplicatesChecked",
            {
                "has_duplicate_free": report.has_duplicate_free,
                "duplicate_count": len(report.duplicate_values),
            },
        )
        return report

    def _emit(self, event_type: str, payload: dict) -> None:
        if self._event_bus is None:
            return
        self._event_bus.emit(
            Event(
                event_type=event_type,
                ts=self._clock.now_ms(),
                tags={"kind": self._config.kind.value},
                payload=payload,
            )
        )


class UUIDHandle:
    """Bound ``generate`` / ``test`` / ``duplicates`` for one set of options."""

    def __init__(self, generator: UniqueID, length: int | None = None) -> None:
        self._generator = generator
        self._length = length

    @property
    def generator(self) -> UniqueID:
        return self._generator

    def generate(self) -> GeneratedId:
        return self._generator.generate(self._length)

    def test(self) -> bool:
        return self._generator.verify_uniqueness()

    def duplicates(self, values: Iterable[GeneratedId]) -> DuplicateReport:
        return self._generator.find_duplicates(values)


def create_uuid(
    options: UUIDOptions | None = None,
    *,
    random_source: RandomSource | None = None,
    clock: Clock | None = None,
    event_bus: EventBus | None = None,
    **overrides,
) -> UUIDHandle:
    """One-line factory: ``create_uuid(type="number", length=14).generate()``.

    ``overrides`` accepts ``type``, ``prefix`` and ``length`` and wins over
    ``options``. The prefix is ignored for numeric IDs.
    """
    opts = replace(options or UUIDOptions(), **overrides)
    _check_length(opts.length)
    generator = UniqueID(
        opts.prefix,
        opts.type,
        random_source=random_source,
        clock=clock,
        event_bus=event_bus,
    )
    return UUIDHandle(generator, opts.length)
