"""Discovery use cases."""

from .album_discoverer import AlbumDiscoverer, DiscoveryResult
from .cover_art import copy_cover, cover_target, find_cover
from .ports import CueSheetParserPort, TagReaderPort

__all__ = [
    "AlbumDiscoverer",
    "CueSheetParserPort",
    "DiscoveryResult",
    "TagReaderPort",
    "copy_cover",
    "cover_target",
    "find_cover",
]
