"""Service/repository call chain showing absorbed and propagated runtime errors."""

from .models import UncheckedError
from .repositories import FailingRepository
from .services import PropagationService

__all__ = ["FailingRepository", "PropagationService", "UncheckedError"]

__version__ = "0.1.0"
