"""Prometheus metrics for monitoring approval rates, approved amounts and period extensions"""

from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | invalid_personal_code | ... | no_valid_loan
)

approved_amount_bucket_counter = Counter(
    "loan_approved_amount_bucket",
    "Approved loan amounts by bucket",
    ["bucket"],  # 2000-3999, 4000-5999, 6000-7999, 8000-10000
)

period_extended_counter = Counter(
    "loan_period_extended",
    "Decisions approved only after extending the requested period",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(approved_amount: int, approved_period: int, requested_period: int) -> None:
    """Record an approved decision for monitoring approval rates and amount distribution"""
    decision_counter.labels(outcome="approved").inc()

    if approved_amount < 4000:
        bucket = "2000-3999"
    elif approved_amount < 6000:
        bucket = "4000-5999"
    elif approved_amount < 8000:
        bucket = "6000-7999"
    else:
        bucket = "8000-10000"

    approved_amount_bucket_counter.labels(bucket=bucket).inc()

    if approved_period != requested_period:
        period_extended_counter.inc()


def record_rejection(reason: str) -> None:
    """Record a rejected decision by failure kind"""
    decision_counter.labels(outcome=reason).inc()
