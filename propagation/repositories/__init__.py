"""Repository layer exports."""

from .base import BaseRepository
from .failing_repository import FAILURE_MESSAGE, FailingRepository

__all__ = [
    "BaseRepository",
    "FailingRepository",
    "FAILURE_MESSAGE",
]
