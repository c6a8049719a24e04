"""Application services."""

from .restructure_service import RestructureMusicService, RestructureRequest

__all__ = ["RestructureMusicService", "RestructureRequest"]
