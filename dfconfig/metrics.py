"""Prometheus metrics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

from dfconfig.lines import Line
from dfconfig.settings import get_settings

REGISTRY = CollectorRegistry()

DOCUMENTS_PARSED = Counter(
    "dfconfig_documents_parsed_total",
    "Number of documents parsed from text",
    registry=REGISTRY,
)

LINES_PARSED = Counter(
    "dfconfig_lines_parsed_total",
    "Number of parsed lines grouped by classification",
    labelnames=("kind",),
    registry=REGISTRY,
)

PARSE_LATENCY = Histogram(
    "dfconfig_parse_latency_seconds",
    "Latency of parsing a document",
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5),
    registry=REGISTRY,
)

SET_REJECTED = Counter(
    "dfconfig_set_rejected_total",
    "Number of set calls rejected by validation",
    labelnames=("field",),
    registry=REGISTRY,
)


def observe_parse(*, latency_ms: float, lines: Iterable[Line]) -> None:
    if not get_settings().metrics_enabled:
        return
    DOCUMENTS_PARSED.inc()
    PARSE_LATENCY.observe(latency_ms / 1000.0)
    for line in lines:
        LINES_PARSED.labels(kind=line.kind).inc()


def observe_set_rejected(*, field: str) -> None:
    if not get_settings().metrics_enabled:
        return
    SET_REJECTED.labels(field=field).inc()


def render_metrics() -> tuple[bytes, str]:
    payload = generate_latest(REGISTRY)
    return payload, CONTENT_TYPE_LATEST
