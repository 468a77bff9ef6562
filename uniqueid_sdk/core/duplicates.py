"""Batch duplicate detection."""

from __future__ import annotations

from typing import Iterable

from uniqueid_sdk.core.types import DuplicateReport, GeneratedId


def find_duplicates(values: Iterable[GeneratedId]) -> DuplicateReport:
    """Report every repeated occurrence in ``values``.

    Each occurrence after the first is noted against the index where the
    value first appeared. Values of different types never match, so ``1``,
    ``"1"`` and ``True`` are all distinct.
    """
    first_index: dict[tuple[type, GeneratedId], int] = {}
    notes: list[str] = []
    duplicates: list[GeneratedId] = []

    for i, value in enumerate(values):
        j = first_index.setdefault((type(value), value), i)
        if j != i:
            notes.append(f"Case {i} and {j} are duplicates")
            duplicates.append(value)

    return DuplicateReport(
        has_duplicate_free=not duplicates,
        collision_notes=tuple(notes),
        duplicate_values=tuple(duplicates),
    )
