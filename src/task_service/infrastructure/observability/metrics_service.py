"""Prometheus metrics declarations for the task service.

All metrics are declared statically at module level.
Labels use ONLY static enumerations, never dynamic IDs (task UUIDs).
"""

from prometheus_client import Counter, Histogram

# ── API-level metrics ──────────────────────────────────────────────

TASK_OPERATIONS_TOTAL = Counter(
    "task_service_operations_total",
    "Total handled task operations",
    ["operation", "outcome"],
)

# ── Storage metrics ────────────────────────────────────────────────

REPOSITORY_LATENCY_SECONDS = Histogram(
    "task_service_repository_latency_seconds",
    "Repository call latency in seconds",
    ["backend", "operation"],
)
