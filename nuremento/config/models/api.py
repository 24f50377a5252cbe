"""HTTP server settings."""

from pydantic import BaseModel, Field, field_validator


class RateLimitConfig(BaseModel):
    """Sliding-window limit on memory creation, counted per owner."""

    enabled: bool = True
    memories_per_window: int = Field(default=6, gt=0)
    window_seconds: int = Field(default=3600, gt=0)


class APIConfig(BaseModel):
    """Bind address and HTTP policy.

    The server runs a single process: the memory rate limiter keeps its
    windows in process memory.
    """

    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    rate_limit: RateLimitConfig = Field(default_factory=RateLimitConfig)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_cors_origins(cls, v: str | list[str]) -> list[str]:
        """Accept a comma-separated string, as env vars provide."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v
