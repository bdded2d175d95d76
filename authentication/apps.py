import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class AuthenticationConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "authentication"

    def ready(self):
        """
        Initialize OpenTelemetry tracing when enabled in settings.
        """
        from django.conf import settings

        if not getattr(settings, "OTEL_TRACING_ENABLED", False):
            return
        try:
            from infrastructure.observability import setup_tracing

            setup_tracing(
                service_name=getattr(settings, "OTEL_SERVICE_NAME", "lmart-backend"),
                enable=True,
                console_export=getattr(settings, "DEBUG", False),
            )
            logger.info("OpenTelemetry tracing initialized successfully")
        except Exception as e:
            logger.warning(f"Failed to initialize OpenTelemetry tracing: {e}")
