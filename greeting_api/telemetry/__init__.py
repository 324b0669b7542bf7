"""Telemetry helpers and metrics."""

from .metrics import (
    GREETING_OPERATIONS,
    REQUEST_LATENCY,
    STORAGE_ERRORS,
    observe_request,
    record_greeting_operation,
    record_storage_error,
)

__all__ = [
    "GREETING_OPERATIONS",
    "REQUEST_LATENCY",
    "STORAGE_ERRORS",
    "observe_request",
    "record_greeting_operation",
    "record_storage_error",
]
