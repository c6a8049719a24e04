"""Restructure domain: numbering rules and result types."""

from .results import AlbumResult, RestructureEvent, RestructureOutcome, RestructureReport
from .roman_numerals import ROMAN_NUMERALS, Movement, RomanNumeralResolver
from .titles import WORK_SEPARATOR, ClassicalTitle, parse_classical_title

__all__ = [
    "ROMAN_NUMERALS",
    "WORK_SEPARATOR",
    "AlbumResult",
    "ClassicalTitle",
    "Movement",
    "RestructureEvent",
    "RestructureOutcome",
    "RestructureReport",
    "RomanNumeralResolver",
    "parse_classical_title",
]
