"""
observability/__init__.py

PURPOSE: Opt-in OpenTelemetry tracing for the parser.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk (optional)

ARCHITECTURE NOTES:
- Works without otel packages installed (no-op mode)
- Console exporter when enabled without an endpoint
- OTLP export when an endpoint is configured
"""

from text_reality.observability.telemetry import get_tracer, init_telemetry, shutdown_telemetry

__all__ = ["get_tracer", "init_telemetry", "shutdown_telemetry"]
