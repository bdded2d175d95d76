"""
OpenTelemetry Tracing

Spans wrap catalog listing, order creation and payment verification. The
provider is configured once at startup (see ``AuthenticationConfig.ready``);
without it the API's no-op tracer is used and spans cost nothing.
"""

import logging
from typing import Optional

from opentelemetry import trace
from opentelemetry.instrumentation.django import DjangoInstrumentor
from opentelemetry.instrumentation.requests import RequestsInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

logger = logging.getLogger(__name__)

_initialized = False


def setup_tracing(service_name: str = "lmart-backend", enable: bool = True, console_export: bool = False) -> None:
    """
    Install the tracer provider and auto-instrument Django and ``requests``.

    Args:
        service_name: Reported ``service.name`` resource attribute
        enable: Skip setup entirely when False
        console_export: Print finished spans to stdout (local debugging)
    """
    global _initialized

    if _initialized:
        logger.debug("Tracing already initialized. Skipping.")
        return

    if not enable:
        logger.info("Tracing disabled via configuration")
        return

    provider = TracerProvider(resource=Resource(attributes={SERVICE_NAME: service_name}))
    if console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)

    DjangoInstrumentor().instrument()
    RequestsInstrumentor().instrument()

    _initialized = True
    logger.info(f"OpenTelemetry tracing initialized for service: {service_name}")


def get_tracer(name: Optional[str] = None) -> trace.Tracer:
    return trace.get_tracer(name or "lmart")


tracer = get_tracer("lmart")
