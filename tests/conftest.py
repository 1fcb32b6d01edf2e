"""Test configuration for the Script Renderer project."""

import os
import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from script_renderer.config import (  # noqa: E402
    get_font_settings,
    get_settings,
    reload_settings,
)
from script_renderer.segmentation import ScriptType  # noqa: E402
from script_renderer.styles import (  # noqa: E402
    ScriptStyleProperties,
    StyleResolver,
    TextStyleProperties,
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from SCRIPT_RENDERER_* variables in the environment."""
    for name in list(os.environ):
        if name.startswith("SCRIPT_RENDERER_"):
            monkeypatch.delenv(name, raising=False)
    reload_settings()
    yield
    # The environment may still hold values a test set on purpose
    get_settings.cache_clear()
    get_font_settings.cache_clear()


@pytest.fixture
def resolver():
    """Resolver using the bundled font registry."""
    return StyleResolver(package="script_renderer")


@pytest.fixture
def base_style():
    """Base layer with a handful of attributes set."""
    return TextStyleProperties(font_size=16, color="#222222", letter_spacing=0.2)


@pytest.fixture
def overrides():
    """Khmer and Latin override layers."""
    return {
        ScriptType.KHMER: ScriptStyleProperties(font_size=20, font_family="Battambang"),
        ScriptType.LATIN: ScriptStyleProperties(color="#0000FF", font_family="Inter"),
    }
