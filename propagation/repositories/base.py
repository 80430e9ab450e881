"""Repository interface for the propagation call chain."""

from abc import ABC, abstractmethod


class BaseRepository(ABC):
    """Leaf dependency invoked by the service layer."""

    @abstractmethod
    def call(self) -> None:
        """Run the repository operation.

        Raises:
            UncheckedError: If the operation fails.
        """
