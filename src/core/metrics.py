"""Prometheus metrics for the EazyBank services.

Business Metrics:
- eazybank_operation_total: Service operations by service/operation/outcome
- eazybank_products_opened_total: Accounts, loans and cards opened

Technical Metrics:
- eazybank_operation_latency_seconds: Service operation latency
- eazybank_error_responses_total: Error payloads by kind and status
- eazybank_http_requests_total: HTTP requests by endpoint/status
- eazybank_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST

from src.domain.exceptions import (
    AlreadyExistsException,
    ResourceNotFoundException,
    ValidationFailedException,
)


# =============================================================================
# Business Metrics
# =============================================================================

operation_total = Counter(
    "eazybank_operation_total",
    "Total number of service operations",
    ["service", "operation", "outcome"],  # success, not_found, already_exists, invalid, error
)

products_opened_total = Counter(
    "eazybank_products_opened_total",
    "Total number of products opened",
    ["product"],  # account, loan, card
)


# =============================================================================
# Technical Metrics
# =============================================================================

operation_latency = Histogram(
    "eazybank_operation_latency_seconds",
    "Service operation latency in seconds",
    ["service", "operation"],
    buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)

error_responses_total = Counter(
    "eazybank_error_responses_total",
    "Total number of error payloads returned",
    ["kind", "status"],  # validation, not_found, already_exists, unhandled
)

http_requests_total = Counter(
    "eazybank_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "eazybank_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def _outcome_for(exc: BaseException) -> str:
    """Map an exception to an outcome label."""
    if isinstance(exc, ValidationFailedException):
        return "invalid"
    if isinstance(exc, ResourceNotFoundException):
        return "not_found"
    if isinstance(exc, AlreadyExistsException):
        return "already_exists"
    return "error"


@contextmanager
def track_operation(service: str, operation: str) -> Generator[None, None, None]:
    """Context manager recording latency and outcome of a service operation."""
    start = time.perf_counter()
    outcome = "success"
    try:
        yield
    except Exception as e:
        outcome = _outcome_for(e)
        raise
    finally:
        operation_latency.labels(service=service, operation=operation).observe(
            time.perf_counter() - start
        )
        operation_total.labels(
            service=service, operation=operation, outcome=outcome
        ).inc()


def record_product_opened(product: str) -> None:
    """Record a newly opened account, loan or card."""
    products_opened_total.labels(product=product).inc()


def record_error_response(kind: str, status: int) -> None:
    """Record an error payload produced by the error normalizer."""
    error_responses_total.labels(kind=kind, status=str(status)).inc()


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
