"""Observability: structured logging via structlog."""

from pricebook.observability.logging import (
    PIIRedactor,
    configure_from_settings,
    get_logger,
    setup_logging,
)

__all__ = ["PIIRedactor", "configure_from_settings", "get_logger", "setup_logging"]
