"""Custom exceptions for the repository and service layers."""


class UncheckedError(RuntimeError):
    """Runtime failure that callers are free to ignore and let propagate.

    The message is fixed at construction and exposed read-only, so the
    instance observed by any caller up the stack carries exactly what the
    failure site created.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self._message = message

    @property
    def message(self) -> str:
        """Message given at the failure site."""
        return self._message
