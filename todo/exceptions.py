"""
Errors raised by the todo services, and their mapping to JSON responses.

- PreconditionError: the caller asked for something invalid (HTTP 400).
- NotFoundError: a row the request depends on does not exist (HTTP 404).

Database errors are not wrapped; they propagate and roll back the
surrounding transaction.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class TodoError(Exception):
    """Base class for todo service errors."""


class PreconditionError(TodoError, ValueError):
    """A caller error, e.g. inserting a value that already has an id."""


class NotFoundError(TodoError, LookupError):
    """A row needed by the operation is missing (or ambiguous)."""


def check_argument(condition: bool, message: str) -> None:
    if not condition:
        raise PreconditionError(message)


def api_exception_handler(exc, context):
    """
    DRF exception handler: our own errors become 400/404 with a
    `{"detail": ...}` body; everything else goes through DRF's default.
    """
    if isinstance(exc, PreconditionError):
        logger.info("Rejected request: %s", exc)
        return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, NotFoundError):
        logger.info("Not found: %s", exc)
        return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
    return exception_handler(exc, context)
