"""Prometheus metrics for projections, recommendations, and request latency"""

from typing import Iterable
from prometheus_client import Counter, Histogram

# Projection metrics
projection_counter = Counter(
    "growth_projection_total",
    "Total projections computed",
    ["currency"],
)

projection_horizon_histogram = Histogram(
    "growth_projection_duration_months",
    "Requested projection horizon in months",
    buckets=[6, 12, 24, 36, 60, 120, 240, 360, 600],
)

# Recommendation metrics
recommendation_counter = Counter(
    "growth_recommendation_total",
    "Recommendations emitted by category",
    ["category"],  # best_rate | diversify | long_term | regional_opportunity | low_entry
)

# Input quality
validation_error_counter = Counter(
    "growth_validation_errors_total",
    "Requests rejected by domain validation",
    ["field"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_projection(currency: str, duration_months: int) -> None:
    """Record a completed projection"""
    projection_counter.labels(currency=currency).inc()
    projection_horizon_histogram.observe(duration_months)


def record_recommendations(categories: Iterable[str]) -> None:
    """Count each emitted recommendation by category"""
    for category in categories:
        recommendation_counter.labels(category=category).inc()
