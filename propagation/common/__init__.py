"""Common reusable utility exports."""

from .failure_assertions import assert_fails_with

__all__ = ["assert_fails_with"]
