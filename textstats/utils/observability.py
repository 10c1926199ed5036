"""Logging, metrics and tracing helpers shared by the analysis pipeline.

Loggers are plain :mod:`logging` loggers wrapped in an adapter that renders
structured context as a JSON suffix. Metrics are registered with the default
``prometheus_client`` registry and spans come from the global OpenTelemetry
tracer provider, which is a no-op until an SDK is configured by the host.
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Optional

from opentelemetry import trace
from prometheus_client import REGISTRY, Counter, Histogram

_TRACER_NAME = "textstats"


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Adapter that renders bound and per-call context inline with messages."""

    def bind(self, **context: Any) -> "StructuredLoggerAdapter":
        merged = dict(self.extra or {})
        merged.update(context)
        return StructuredLoggerAdapter(self.logger, merged)

    def process(self, msg: str, kwargs: Dict[str, Any]):
        event_context: Dict[str, Any] = dict(self.extra or {})
        provided = kwargs.pop("context", None)
        if isinstance(provided, dict):
            event_context.update(provided)
        if event_context:
            try:
                payload = json.dumps(event_context, sort_keys=True, default=str)
            except TypeError:
                payload = json.dumps({str(k): str(v) for k, v in event_context.items()})
            msg = f"{msg} | {payload}"
        return msg, kwargs


def get_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """Return a project logger with optional bound context."""

    return StructuredLoggerAdapter(logging.getLogger(name), context)


class _MetricHandle:
    """Thin wrapper giving counters and histograms a shared ``labels`` API."""

    def __init__(self, impl: Any) -> None:
        self._impl = impl

    def labels(self, **labels: Any):
        return self.__class__(self._impl.labels(**labels))


class CounterHandle(_MetricHandle):
    def inc(self, amount: float = 1.0) -> None:
        self._impl.inc(amount)


class HistogramHandle(_MetricHandle):
    def observe(self, value: float) -> None:
        self._impl.observe(value)

    def time(self):
        """Time a block with the wrapped histogram's own timer."""

        return self._impl.time()


def _registered(name: str) -> Any:
    # prometheus_client strips the ``_total`` suffix from counter names.
    collectors = REGISTRY._names_to_collectors  # type: ignore[attr-defined]
    return collectors.get(name) or collectors.get(f"{name}_total")


def create_counter(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> CounterHandle:
    """Create a counter, reusing the registered collector on re-import."""

    existing = _registered(name)
    if existing is not None:
        return CounterHandle(existing)
    return CounterHandle(Counter(name, documentation, labelnames=tuple(label_names or ())))


def create_histogram(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> HistogramHandle:
    """Create a histogram, reusing the registered collector on re-import."""

    existing = _registered(name)
    if existing is not None:
        return HistogramHandle(existing)
    return HistogramHandle(
        Histogram(name, documentation, labelnames=tuple(label_names or ()))
    )


@contextmanager
def start_span(name: str, attributes: Optional[Dict[str, Any]] = None):
    """Start an OpenTelemetry span on the project tracer."""

    tracer = trace.get_tracer(_TRACER_NAME)
    with tracer.start_as_current_span(name) as span:
        if attributes:
            add_span_attributes(span, attributes)
        yield span


def add_span_attributes(span: Any, attributes: Dict[str, Any]) -> None:
    """Attach ``attributes`` to ``span`` when one is active."""

    if span is None:
        return
    for key, value in attributes.items():
        if not isinstance(key, str) or value is None:
            continue
        span.set_attribute(key, value)


def record_exception(span: Any, error: BaseException) -> None:
    """Record ``error`` on ``span`` and flag the span as failed."""

    if span is None:
        return
    span.record_exception(error)
    span.set_attribute("error", True)


__all__ = [
    "StructuredLoggerAdapter",
    "get_logger",
    "CounterHandle",
    "HistogramHandle",
    "create_counter",
    "create_histogram",
    "start_span",
    "add_span_attributes",
    "record_exception",
]
