"""Work and movement titles of classical tracks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .roman_numerals import RomanNumeralResolver

WORK_SEPARATOR: Final[str] = " - "


@dataclass(frozen=True, slots=True)
class ClassicalTitle:
    """Where a classical track lands: which work, which movement, which number."""

    work_title: str
    movement_title: str
    movement_number: int


def parse_classical_title(title: str) -> ClassicalTitle:
    """Split ``"Work - IV. Movement"`` into its parts.

    A title without the separator is a single-movement work: work and
    movement share the whole title and the number is 1.

    Raises:
        InvalidMovementTitleError: If the movement part has no leading Roman numeral.
    """
    work_title, separator, movement_part = title.partition(WORK_SEPARATOR)
    if not separator:
        return ClassicalTitle(work_title=title, movement_title=title, movement_number=1)

    movement = RomanNumeralResolver.resolve(movement_part)
    return ClassicalTitle(
        work_title=work_title,
        movement_title=movement.title,
        movement_number=movement.number,
    )


__all__ = ["WORK_SEPARATOR", "ClassicalTitle", "parse_classical_title"]
