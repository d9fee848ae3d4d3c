"""Configuration model exports.

    from pricebook.config.models import LoggingConfig, RecordRulesConfig
"""

from pricebook.config.models.observability import (
    LogFormat,
    LoggingConfig,
    LogLevel,
    ObservabilityConfig,
)
from pricebook.config.models.records import RecordRulesConfig

__all__ = [
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "ObservabilityConfig",
    "RecordRulesConfig",
]
