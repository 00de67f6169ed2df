"""Prometheus metrics for the bank resource services.

Resource Metrics:
- bank_resource_operations_total: CRUD operations by service, operation and outcome
- bank_resource_operation_latency_seconds: CRUD operation latency

Technical Metrics:
- bank_http_requests_total: HTTP requests by endpoint/status
- bank_http_request_latency_seconds: HTTP request latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST

from src.domain.exceptions import DomainException


# =============================================================================
# Resource Metrics
# =============================================================================

resource_operations_total = Counter(
    "bank_resource_operations_total",
    "Total number of resource operations",
    ["service", "operation", "outcome"],  # outcome: success or an error code
)

resource_operation_latency = Histogram(
    "bank_resource_operation_latency_seconds",
    "Resource operation latency in seconds",
    ["service", "operation"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)


# =============================================================================
# Technical Metrics
# =============================================================================

http_requests_total = Counter(
    "bank_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "bank_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_operation(service: str, operation: str, outcome: str) -> None:
    """Record the outcome of a resource operation."""
    resource_operations_total.labels(
        service=service,
        operation=operation,
        outcome=outcome,
    ).inc()


@contextmanager
def track_operation(service: str, operation: str) -> Generator[None, None, None]:
    """
    Context manager to track latency and outcome of a resource operation.

    Domain exceptions are recorded under their lowercased ``code``, any
    other failure as ``internal_error``. Exceptions are re-raised unchanged.
    """
    start = time.perf_counter()
    outcome = "success"
    try:
        yield
    except Exception as exc:
        outcome = exc.code.lower() if isinstance(exc, DomainException) else "internal_error"
        raise
    finally:
        duration = time.perf_counter() - start
        resource_operation_latency.labels(
            service=service,
            operation=operation,
        ).observe(duration)
        record_operation(service, operation, outcome)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
