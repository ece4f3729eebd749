"""Prometheus metrics for monitoring eligibility outcomes, plans and advisor health"""

from prometheus_client import Counter, Histogram

# Assessment metrics
assessment_counter = Counter(
    "dhan_loan_assessment_total",
    "Total loan eligibility assessments",
    ["tier"],  # Excellent | Good | Fair | Needs Improvement
)

max_loan_bucket_counter = Counter(
    "dhan_max_loan_bucket",
    "Maximum loan amounts issued by bucket",
    ["bucket"],  # 0, <=5L, <=20L, <=50L, 50L+
)

investment_plan_counter = Counter(
    "dhan_investment_plan_total",
    "Total investment plans created",
    ["risk_profile"],
)

# Narrative advice metrics
advisor_latency_histogram = Histogram(
    "advisor_latency_seconds",
    "Text-generation service response time",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

advisor_failure_counter = Counter(
    "advisor_failures_total",
    "Failed text-generation calls, retries included",
)

narrative_fallback_counter = Counter(
    "narrative_fallback_total",
    "Narrative advice replaced by the fixed fallback",
    ["call_site"],  # loan | investment | budget
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_assessment(tier: str, max_loan_amount: int) -> None:
    """Record assessment metrics for monitoring tier mix and loan size distribution"""
    assessment_counter.labels(tier=tier).inc()

    if max_loan_amount == 0:
        bucket = "0"
    elif max_loan_amount <= 500_000:
        bucket = "<=5L"
    elif max_loan_amount <= 2_000_000:
        bucket = "<=20L"
    elif max_loan_amount <= 5_000_000:
        bucket = "<=50L"
    else:
        bucket = "50L+"

    max_loan_bucket_counter.labels(bucket=bucket).inc()


def record_investment_plan(risk_profile: str) -> None:
    investment_plan_counter.labels(risk_profile=risk_profile).inc()
