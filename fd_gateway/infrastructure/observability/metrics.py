"""Prometheus metrics for monitoring calculations, advisories, and generation performance"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "fd_calculations_total",
    "Total maturity calculations performed",
    ["compounding"],  # annually | semi-annually | quarterly | monthly
)

# Advisory metrics
advisory_outcome_counter = Counter(
    "fd_advisory_outcomes_total",
    "Advisory flow outcomes",
    ["outcome"],  # not_triggered | issued | empty | unavailable
)

anomaly_trigger_counter = Counter(
    "fd_anomaly_triggers_total",
    "Advisory gate firings by reason",
    ["reason"],  # rate_deviation | maturity_deviation
)

# Generation service metrics
generation_latency_histogram = Histogram(
    "generation_latency_seconds",
    "Text-generation service response time",
    buckets=[0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

generation_failure_counter = Counter(
    "generation_failures_total",
    "Failed text-generation calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(compounding: str) -> None:
    """Record a completed maturity calculation"""
    calculation_counter.labels(compounding=compounding).inc()


def record_advisory(outcome: str, reasons: list[str]) -> None:
    """Record advisory outcome and which gate rules fired"""
    advisory_outcome_counter.labels(outcome=outcome).inc()
    for reason in reasons:
        anomaly_trigger_counter.labels(reason=reason).inc()
