"""Error types raised by the camera subsystem."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class ArgumentError(ValueError):
    """A required argument or collaborator was not supplied."""


def missing_argument(
    class_name: str,
    function_name: str,
    message: str,
) -> ArgumentError:
    """Log and build an :class:`ArgumentError` for a missing argument.

    Args:
        class_name: Name of the class reporting the error.
        function_name: Name of the method or constructor.
        message: Short description, e.g. ``"missing matrix"``.

    Returns:
        The error, ready to be raised by the caller.
    """
    text = f"{class_name}.{function_name}: {message}"
    logger.error(text)
    return ArgumentError(text)
