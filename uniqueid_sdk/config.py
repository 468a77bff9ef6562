"""Configuration models."""

from __future__ import annotations

from dataclasses import dataclass

from uniqueid_sdk.core.types import IdKind

DEFAULT_TEXT_LENGTH = 16


@dataclass(frozen=True)
class GeneratorConfig:
    prefix: str = ""
    kind: IdKind = IdKind.STRING

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "prefix", self.prefix or "")
        object.__setattr__(self, "kind", IdKind(self.kind or IdKind.STRING))


@dataclass
class UniquenessConfig:
    trials: int = 100_000


@dataclass
class UUIDOptions:
    type: IdKind | str = IdKind.STRING
    prefix: str = ""
    length: int | None = None  # None: 16 for "string", full digits for "number"
