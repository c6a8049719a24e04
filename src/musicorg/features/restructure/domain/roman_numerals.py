"""Roman numeral movement numbering.

Where: src/musicorg/features/restructure/domain/roman_numerals.py
What: Resolve the leading Roman numeral of a movement title to its number.
Why: Classical tracks are numbered by movement, not by their position on the disc.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Final, final

from musicorg.shared import InvalidMovementTitleError

ROMAN_NUMERALS: Final[tuple[str, ...]] = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X")


@dataclass(frozen=True, slots=True)
class Movement:
    """A movement number and the title left once its numeral is removed."""

    number: int
    title: str


@final
class RomanNumeralResolver:
    """Map ``"IV. Adagio"`` style titles to ``Movement(4, "Adagio")``."""

    LEADING_NUMERAL: ClassVar[re.Pattern[str]] = re.compile(r"^[IVX]+")
    NUMERAL_SUFFIX: ClassVar[re.Pattern[str]] = re.compile(r"[.:)]?\s*")

    @classmethod
    def resolve(cls, movement_title: str) -> Movement:
        """Resolve ``movement_title``.

        The number comes from the longest leading run of ``I``, ``V`` and
        ``X``. The run is only stripped from the title when it stands apart
        from the following word, so ``"Vivace"`` is movement 5 titled
        ``"Vivace"``.

        Raises:
            InvalidMovementTitleError: If the leading run is missing or not in I to X.
        """
        match = cls.LEADING_NUMERAL.match(movement_title)
        if match is None or match.group() not in ROMAN_NUMERALS:
            raise InvalidMovementTitleError(movement_title)

        number = ROMAN_NUMERALS.index(match.group()) + 1
        rest = movement_title[match.end():]
        if rest[:1].isalnum():
            return Movement(number=number, title=movement_title)

        suffix = cls.NUMERAL_SUFFIX.match(rest)
        title = rest[suffix.end() if suffix else 0:].strip() or movement_title
        return Movement(number=number, title=title)


__all__ = ["ROMAN_NUMERALS", "Movement", "RomanNumeralResolver"]
