"""Prometheus metrics for monitoring calculation volume, loan terms, and chat usage"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "gameplan_calculation_total",
    "Total loan calculations requested",
    ["outcome"],  # success | invalid
)

term_periods_histogram = Histogram(
    "gameplan_term_periods",
    "Requested loan terms in months",
    buckets=[12, 36, 60, 120, 180, 240, 360, 480, 1200],
)

# Chat metrics
chat_counter = Counter(
    "gameplan_chat_messages_total",
    "Chat messages answered",
    ["matched"],  # true | false
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(term_periods: int) -> None:
    """Record a successful calculation and its term"""
    calculation_counter.labels(outcome="success").inc()
    term_periods_histogram.observe(term_periods)


def record_invalid_input() -> None:
    """Record a calculation rejected at validation"""
    calculation_counter.labels(outcome="invalid").inc()


def record_chat(matched: bool) -> None:
    """Record whether a chat message hit a keyword rule"""
    chat_counter.labels(matched="true" if matched else "false").inc()
