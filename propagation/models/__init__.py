"""Public model package exports."""

from .exceptions import UncheckedError

__all__ = ["UncheckedError"]
