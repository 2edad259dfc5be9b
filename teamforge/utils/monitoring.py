"""Monitoring utilities leveraging Prometheus client."""

from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

http_requests_total = Counter(
    "teamforge_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)

http_request_latency_seconds = Histogram(
    "teamforge_http_request_latency_seconds",
    "HTTP request latency",
    ["method", "path"],
)

allocation_runs_total = Counter(
    "teamforge_allocation_runs_total",
    "Team builder and optimizer invocations",
    ["operation"],
)

allocation_suggestions_total = Counter(
    "teamforge_allocation_suggestions_total",
    "Members placed by the builder or suggested by the optimizer",
    ["operation"],
)

allocation_latency_seconds = Histogram(
    "teamforge_allocation_latency_seconds",
    "Time spent inside the allocation engine",
    ["operation"],
)


def observe_request(method: str, path: str, status: int, duration_seconds: float) -> None:
    http_requests_total.labels(method=method, path=path, status=str(status)).inc()
    http_request_latency_seconds.labels(method=method, path=path).observe(duration_seconds)


def observe_allocation(operation: str, placed: int, duration_seconds: float) -> None:
    allocation_runs_total.labels(operation=operation).inc()
    allocation_suggestions_total.labels(operation=operation).inc(placed)
    allocation_latency_seconds.labels(operation=operation).observe(duration_seconds)


def render_metrics() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST
