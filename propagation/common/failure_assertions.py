"""Assertion helpers for checking how an operation fails."""

import logging
from typing import Any, Callable, Type, TypeVar


logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Exception)


def _describe(operation: Callable[[], Any]) -> str:
    """Return a readable name for an operation in assertion messages."""
    return getattr(operation, "__qualname__", None) or repr(operation)


def assert_fails_with(operation: Callable[[], Any], kind: Type[E]) -> E:
    """Run `operation` and assert it fails with exactly `kind`.

    Subclasses and supertypes of `kind` do not match. `KeyboardInterrupt` and
    `SystemExit` are not intercepted.

    Args:
        operation: Zero-argument callable expected to raise.
        kind: Exact exception type expected.

    Returns:
        The raised exception, for further checks on message or identity.

    Raises:
        AssertionError: If the operation returns normally or raises another type.
    """
    try:
        operation()
    except Exception as exc:
        if type(exc) is not kind:
            raise AssertionError(
                "Expected {0} to fail with {1}, but it failed with {2}: {3}".format(
                    _describe(operation), kind.__name__, type(exc).__name__, exc
                )
            ) from exc
        logger.debug("%s failed with expected %s", _describe(operation), kind.__name__)
        return exc
    raise AssertionError(
        "Expected {0} to fail with {1}, but it returned normally".format(_describe(operation), kind.__name__)
    )
