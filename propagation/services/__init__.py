"""Service layer exports."""

from .propagation_service import HANDLED_LOG_TEMPLATE, PropagationService

__all__ = [
    "HANDLED_LOG_TEMPLATE",
    "PropagationService",
]
