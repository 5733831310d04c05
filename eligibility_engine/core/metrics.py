"""Prometheus metrics for scoring volume, outcomes and score distribution"""

from prometheus_client import Counter, Histogram

evaluation_counter = Counter(
    "eligibility_evaluations_total",
    "Total eligibility scorings performed",
    ["variant", "status"],  # loan | deposit, recommendation status
)

score_histogram = Histogram(
    "eligibility_score",
    "Distribution of total eligibility scores",
    ["variant"],
    buckets=[10, 20, 30, 40, 55, 70, 85, 100],
)

invalid_input_counter = Counter(
    "eligibility_invalid_input_total",
    "Scoring requests rejected for non-finite input",
    ["variant", "field"],
)


def record_evaluation(variant: str, status: str, total_score: int) -> None:
    evaluation_counter.labels(variant=variant, status=status).inc()
    score_histogram.labels(variant=variant).observe(total_score)


def record_invalid_input(variant: str, field: str) -> None:
    invalid_input_counter.labels(variant=variant, field=field).inc()
