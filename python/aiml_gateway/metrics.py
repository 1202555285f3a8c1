# Prometheus counters shared by the app and the chat service
# Reload-safe registration: uvicorn --reload and test re-imports must not fail on duplicates.

from typing import Sequence

from prometheus_client import REGISTRY, Counter


def _counter(name: str, documentation: str, labelnames: Sequence[str] = ()) -> Counter:
    try:
        return Counter(name, documentation, labelnames)
    except ValueError:
        # already registered, reuse the existing collector
        return REGISTRY._names_to_collectors[name]


http_requests_total = _counter(
    "http_requests_total",
    "Total HTTP requests by method, path template, and status",
    ["method", "route", "status"],
)
chat_requests_total = _counter("chat_requests_total", "Chat requests by detected intent", ["intent"])
provider_errors_total = _counter("provider_errors_total", "Completion provider failures")
fallback_responses_total = _counter(
    "fallback_responses_total", "Answers produced by the keyword fallback, by matched rule", ["rule"]
)
