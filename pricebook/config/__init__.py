"""Configuration for pricebook.

Usage:
    from pricebook.config import get_settings

    rules = get_settings().records

The default record validator and updater read their rules from here, so
``config/default.toml`` and PRICEBOOK_RECORDS__* variables change how
``validate_record`` and ``update_record`` behave.
"""

from functools import lru_cache

from pricebook.config.loader import load_config
from pricebook.config.settings import Settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process.

    Call `get_settings.cache_clear()` or `reload_settings()` to pick up
    changed files or environment variables.
    """
    return Settings.from_files(load_config())


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
