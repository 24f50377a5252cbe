"""Service configuration.

    from nuremento.config import get_settings

    mode = get_settings().capsules.open_mode
"""

from functools import lru_cache

from nuremento.config.loader import load_config
from nuremento.config.settings import Settings, set_toml_config
from nuremento.observability.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load configuration once per process.

    Without a config/default.toml the service runs on code defaults and
    environment variables alone. Tests call get_settings.cache_clear().
    """
    try:
        toml_config = load_config()
    except FileNotFoundError as e:
        logger.warning("config_defaults_only", reason=str(e))
        toml_config = {}
    set_toml_config(toml_config)
    return Settings()


__all__ = ["Settings", "get_settings"]
