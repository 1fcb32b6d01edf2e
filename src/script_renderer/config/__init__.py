"""Configuration module for Script Renderer."""

from script_renderer.config.base import FontSettings, Settings
from script_renderer.config.loader import (
    get_font_settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "FontSettings",
    "Settings",
    "get_font_settings",
    "get_settings",
    "reload_settings",
]
