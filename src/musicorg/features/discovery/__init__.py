"""Album discovery feature public API."""

from .usecases import AlbumDiscoverer, DiscoveryResult, copy_cover, find_cover

__all__ = ["AlbumDiscoverer", "DiscoveryResult", "copy_cover", "find_cover"]
