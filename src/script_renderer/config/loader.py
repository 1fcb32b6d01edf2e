"""Configuration loader."""

from functools import lru_cache

from script_renderer.config.base import FontSettings, Settings


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@lru_cache()
def get_font_settings() -> FontSettings:
    """Get cached font settings instance."""
    return FontSettings()


def reload_settings() -> Settings:
    """Drop the cached settings and read the environment again."""
    get_font_settings.cache_clear()
    get_settings.cache_clear()
    return get_settings()
