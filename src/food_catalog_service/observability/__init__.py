"""OpenTelemetry instrumentation and observability utilities."""

from food_catalog_service.observability.config import configure_logging, setup_observability
from food_catalog_service.observability.decorators import traced

__all__ = ["setup_observability", "configure_logging", "traced"]
