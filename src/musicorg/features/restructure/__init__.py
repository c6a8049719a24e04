"""Restructure feature public API."""

from .domain import (
    AlbumResult,
    RestructureEvent,
    RestructureOutcome,
    RestructureReport,
    RomanNumeralResolver,
    parse_classical_title,
)
from .usecases import (
    AlbumRestructurer,
    ClassicalRestructurer,
    RegularRestructurer,
    SplitterPort,
    StrategyKind,
    TagWriterPort,
)

__all__ = [
    "AlbumRestructurer",
    "AlbumResult",
    "ClassicalRestructurer",
    "RegularRestructurer",
    "RestructureEvent",
    "RestructureOutcome",
    "RestructureReport",
    "RomanNumeralResolver",
    "SplitterPort",
    "StrategyKind",
    "TagWriterPort",
    "parse_classical_title",
]
