"""Prometheus metrics for Nuremento."""

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "nuremento_request_count_total",
    "Total number of requests processed",
    labelnames=["endpoint", "status"],
)

REQUEST_LATENCY = Histogram(
    "nuremento_request_latency_seconds",
    "Request latency in seconds",
    labelnames=["endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

# Daily picker: outcome is one of served, empty, already_served, lost_race
DAILY_PICKS = Counter(
    "nuremento_daily_picks_total",
    "Daily pick requests by collection and outcome",
    labelnames=["collection", "outcome"],
)

CAPSULES_CREATED = Counter(
    "nuremento_capsules_created_total",
    "Time capsules created",
)

# outcome is one of opened, locked, not_found
CAPSULE_OPENS = Counter(
    "nuremento_capsule_opens_total",
    "Time capsule open attempts by mode and outcome",
    labelnames=["mode", "outcome"],
)

ERRORS = Counter(
    "nuremento_errors_total",
    "Total number of errors",
    labelnames=["error_type"],
)
