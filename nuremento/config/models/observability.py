"""Logging, tracing and metrics settings."""

from typing import Literal

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = Field(
        default="json",
        description="json for log shipping, console while developing",
    )
    redact_pii: bool = Field(
        default=True,
        description="Scrub credentials and journal text from log events",
    )


class TracingConfig(BaseModel):
    enabled: bool = Field(default=False, description="Instrument FastAPI with OpenTelemetry")


class MetricsConfig(BaseModel):
    enabled: bool = Field(default=True, description="Serve Prometheus metrics at /metrics")


class ObservabilityConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tracing: TracingConfig = Field(default_factory=TracingConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)
