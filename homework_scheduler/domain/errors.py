"""Error taxonomy shared by the engine, the store and the transport layer."""

from __future__ import annotations


class SchedulerError(Exception):
    """Base class for every error the scheduler raises on purpose."""


class ValidationError(SchedulerError, ValueError):
    """Raised when a required field is missing or malformed, or a subject is unknown."""


class NotFoundError(SchedulerError):
    """Raised when an operation targets a homework id absent from the store."""


class StoreError(SchedulerError):
    """Raised when the homework store fails to answer."""


class ConnectivityError(StoreError):
    """Raised when the store cannot be reached. Never retried automatically."""


class SchemaError(StoreError):
    """Raised when the store answers with data of an unexpected shape."""


# Mapping of scheduler errors to HTTP status codes
ERROR_STATUS = {
    ValidationError: 400,
    NotFoundError: 404,
    StoreError: 502,
    ConnectivityError: 503,
    SchemaError: 500,
}


def status_for(exc: SchedulerError) -> int:
    """Return the HTTP status of the most specific mapped class of *exc*."""
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS:
            return ERROR_STATUS[cls]
    return 500
