"""Configuration model exports.

    from nuremento.config.models import APIConfig, CapsuleConfig
"""

from nuremento.config.models.api import APIConfig, RateLimitConfig
from nuremento.config.models.capsules import CapsuleConfig, CapsuleOpenMode
from nuremento.config.models.clock import ClockConfig
from nuremento.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
    TracingConfig,
)
from nuremento.config.models.storage import PostgresConfig, StorageConfig

__all__ = [
    "APIConfig",
    "CapsuleConfig",
    "CapsuleOpenMode",
    "ClockConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    "PostgresConfig",
    "RateLimitConfig",
    "StorageConfig",
    "TracingConfig",
]
