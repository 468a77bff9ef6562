"""Core data types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class IdKind(str, Enum):
    STRING = "string"
    NUMBER = "number"


GeneratedId = Union[str, int]


@dataclass(frozen=True)
class DuplicateReport:
    """Result of a batch duplicate check.

    ``has_duplicate_free`` is True when no value repeats.
    """

    has_duplicate_free: bool = True
    collision_notes: tuple[str, ...] = field(default_factory=tuple)
    duplicate_values: tuple[GeneratedId, ...] = field(default_factory=tuple)
