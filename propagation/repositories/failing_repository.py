"""Repository that always fails, used to exercise propagation paths."""

from ..models.exceptions import UncheckedError
from .base import BaseRepository


FAILURE_MESSAGE = "ex"


class FailingRepository(BaseRepository):
    """Dependency guaranteed to fail with `UncheckedError`."""

    def call(self) -> None:
        raise UncheckedError(FAILURE_MESSAGE)
