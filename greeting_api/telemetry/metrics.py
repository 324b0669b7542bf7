"""Prometheus metrics definitions and helpers."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds, by matched route template",
    ("method", "route", "status"),
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

GREETING_OPERATIONS = Counter(
    "greeting_operations_total",
    "Greeting endpoint calls by operation and outcome",
    ("operation", "outcome"),
)

STORAGE_ERRORS = Counter(
    "greeting_storage_errors_total",
    "Greeting store operations that failed against the database",
    ("operation",),
)


def observe_request(method: str, route: str, status_code: int, duration_seconds: float) -> None:
    REQUEST_LATENCY.labels(method=method, route=route, status=str(status_code)).observe(
        duration_seconds
    )


def record_greeting_operation(operation: str, outcome: str) -> None:
    """Count one greeting call, e.g. ``("lookup", "missing")`` for a 404."""

    GREETING_OPERATIONS.labels(operation=operation, outcome=outcome).inc()


def record_storage_error(operation: str) -> None:
    STORAGE_ERRORS.labels(operation=operation).inc()
