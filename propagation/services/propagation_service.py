"""Service showing absorption versus propagation of repository failures."""

import logging
from typing import Optional

from ..core.logging_config import get_logger
from ..models.exceptions import UncheckedError
from ..repositories import BaseRepository, FailingRepository


HANDLED_LOG_TEMPLATE = "exception handled, message=%s"


class PropagationService:
    """Call a repository and either handle or propagate its failure."""

    def __init__(
        self,
        repository: Optional[BaseRepository] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._repository = repository if repository is not None else FailingRepository()
        self._logger = logger if logger is not None else get_logger(__name__)

    def call_catch(self) -> None:
        """Call the repository and absorb `UncheckedError`.

        The failure is logged once with the error attached and does not reach
        the caller. Any other exception type passes through untouched.
        """
        try:
            self._repository.call()
        except UncheckedError as exc:
            self._logger.info(HANDLED_LOG_TEMPLATE, exc.message, exc_info=exc)

    def call_throw(self) -> None:
        """Call the repository without handling; failures reach the caller as raised."""
        self._repository.call()
