"""Restructure feature usecases: strategies, splitting and their ports."""

from .classical import ClassicalRestructurer
from .event_log import log_event
from .ports import SplitterPort, TagWriterPort
from .regular import RegularRestructurer
from .splitting import SplitOutcome, split_merged_album
from .strategy import AlbumRestructurer, StrategyKind

__all__ = [
    "AlbumRestructurer",
    "ClassicalRestructurer",
    "RegularRestructurer",
    "SplitOutcome",
    "SplitterPort",
    "StrategyKind",
    "TagWriterPort",
    "log_event",
    "split_merged_album",
]
