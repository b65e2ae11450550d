"""
Prometheus metrics collection for inputguard

This module provides metrics instrumentation for monitoring validation
outcomes, failure hot spots and rule execution errors.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Registry for inputguard metrics, kept apart from the process default
REGISTRY = CollectorRegistry()


# =======================
# VALIDATION METRICS
# =======================

# Validation runs counter
validation_runs_total = Counter(
    name="inputguard_validation_runs_total",
    documentation="Total number of validation runs",
    labelnames=["outcome"],  # outcome: passed, failed, error
    registry=REGISTRY,
)

# Attribute failures counter
validation_failures_total = Counter(
    name="inputguard_validation_failures_total",
    documentation="Total number of attributes that failed validation",
    labelnames=["attribute"],
    registry=REGISTRY,
)

# Rule execution errors
rule_execution_errors_total = Counter(
    name="inputguard_rule_execution_errors_total",
    documentation="Total number of rules that raised while evaluating a value",
    labelnames=["rule_type"],
    registry=REGISTRY,
)

# Validation duration histogram
validation_duration_seconds = Histogram(
    name="inputguard_validation_duration_seconds",
    documentation="Time spent in a single validation run in seconds",
    labelnames=["outcome"],
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    """Get content type for Prometheus metrics"""
    return CONTENT_TYPE_LATEST


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


def observe_histogram(histogram: Histogram, value: float, **labels) -> None:
    """
    Observe a value in a histogram metric

    Args:
        histogram: Prometheus Histogram metric
        value: Value to observe
        **labels: Label values for the metric
    """
    histogram.labels(**labels).observe(value)


def get_sample_value(name: str, labels: dict[str, str] | None = None) -> float | None:
    """Read the current value of a sample from the inputguard registry."""
    return REGISTRY.get_sample_value(name, labels or {})


# =======================
# METRICS COLLECTOR CLASS
# =======================

class MetricsCollector:
    """
    Metrics collector for validator instances.

    A disabled collector accepts every call and records nothing, so callers
    never need to check whether metrics are on.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def record_run(self, passed: bool, duration_seconds: float = 0.0) -> None:
        """
        Record a completed validation run.

        Args:
            passed: Whether the run found no errors
            duration_seconds: Time taken by the run
        """
        if not self.enabled:
            return
        outcome = "passed" if passed else "failed"
        increment_counter(validation_runs_total, 1, outcome=outcome)
        if duration_seconds > 0:
            observe_histogram(validation_duration_seconds, duration_seconds, outcome=outcome)

    def record_failure(self, attribute: str) -> None:
        """Record an attribute that failed validation."""
        if not self.enabled:
            return
        increment_counter(validation_failures_total, 1, attribute=attribute)

    def record_rule_error(self, rule_type: str) -> None:
        """Record a run aborted by a rule that raised."""
        if not self.enabled:
            return
        increment_counter(rule_execution_errors_total, 1, rule_type=rule_type)
        increment_counter(validation_runs_total, 1, outcome="error")
