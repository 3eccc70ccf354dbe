"""
telemetry.py

PURPOSE: OpenTelemetry setup and tracer lookup for parser spans.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk, opentelemetry-exporter-otlp (all optional)

ARCHITECTURE NOTES:
Tracing is opt-in. Until init_telemetry() runs with tracing enabled, and
whenever the otel packages are missing, every span is a NoOpSpan, so the
parser can open spans unconditionally on its hot path.

Exporter choice:
- endpoint configured and OTLP exporter installed -> OTLP
- otherwise -> console
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from text_reality.config import OpenTelemetrySettings

logger = logging.getLogger(__name__)

# Set once per init/shutdown cycle
_configured = False
_provider: Any = None


@runtime_checkable
class Span(Protocol):
    """What parse_command needs from a span."""

    def __enter__(self) -> Span: ...
    def __exit__(self, *args: object) -> None: ...
    def set_attribute(self, key: str, value: object) -> None: ...


@runtime_checkable
class Tracer(Protocol):
    def start_as_current_span(self, name: str, **kwargs: object) -> Span: ...


class NoOpSpan:
    """Context manager that records nothing."""

    def __enter__(self) -> Span:
        return self

    def __exit__(self, *args: object) -> None:
        return None

    def set_attribute(self, key: str, value: object) -> None:  # noqa: ARG002
        return None


class LazyTracer:
    """
    Tracer handle that can be created at import time.

    The provider is checked each time a span starts, so a module-level
    `tracer = get_tracer(__name__)` picks up tracing enabled later by the CLI.
    """

    def __init__(self, name: str) -> None:
        self._name = name

    def start_as_current_span(self, name: str, **kwargs: object) -> Span:
        if _provider is None:
            return NoOpSpan()
        return _provider.get_tracer(self._name).start_as_current_span(name, **kwargs)


def _span_exporter(settings: OpenTelemetrySettings) -> Any:
    from opentelemetry.sdk.trace.export import ConsoleSpanExporter

    if not settings.endpoint:
        return ConsoleSpanExporter()

    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
    except ImportError:
        logger.warning("OTLP exporter not available, exporting spans to console")
        return ConsoleSpanExporter()

    logger.info(f"Exporting spans to {settings.endpoint}")
    return OTLPSpanExporter(endpoint=settings.endpoint)


def _build_provider(settings: OpenTelemetrySettings) -> Any:
    """Return a configured TracerProvider, or None when tracing stays off."""
    if not settings.enabled:
        logger.debug("Tracing disabled")
        return None

    try:
        from opentelemetry import trace
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
    except ImportError:
        logger.warning(
            "Tracing enabled but OpenTelemetry is not installed. "
            "Install with: pip install text-reality[observability]"
        )
        return None

    provider = TracerProvider(resource=Resource.create({"service.name": settings.service_name}))
    provider.add_span_processor(BatchSpanProcessor(_span_exporter(settings)))
    trace.set_tracer_provider(provider)
    return provider


def init_telemetry(settings: OpenTelemetrySettings) -> None:
    """
    Configure tracing from settings. Later calls are ignored until
    shutdown_telemetry() runs.
    """
    global _configured, _provider

    if _configured:
        return
    _configured = True

    _provider = _build_provider(settings)
    if _provider is not None:
        logger.info(f"Tracing started for service {settings.service_name}")


def get_tracer(name: str) -> Tracer:
    """Tracer for a module, usually called as get_tracer(__name__)."""
    return LazyTracer(name)


def shutdown_telemetry() -> None:
    """Flush spans and reset, so init_telemetry() can run again."""
    global _configured, _provider

    if _provider is not None:
        _provider.shutdown()
        logger.debug("Tracing stopped")

    _provider = None
    _configured = False
