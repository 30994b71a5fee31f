"""
Prometheus metrics for the product catalog service.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Brand metrics
brands_created_total = Counter(
    "brands_created_total",
    "Total brands created",
)

# Event metrics
events_published_total = Counter(
    "events_published_total",
    "Total domain events handed to the event bus",
    ["event_type", "transport"],
)

event_publication_failures_total = Counter(
    "event_publication_failures_total",
    "Domain events that could not be published",
    ["event_type"],
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Total errors",
    ["error_type", "endpoint"],
)
