"""
Script Styling Module.

Per-script style layers, the font family registry and the resolver that
turns script segments into concretely styled spans.
"""

from . import font_registry
from .font_registry import (
    FontRegistry,
    ScriptFonts,
    default_registry,
    get_default_font_family,
    get_font_fallbacks,
)
from .localized_text import LocalizedText, build_spans, to_localized_text
from .properties import ResolvedStyle, ScriptStyleProperties, TextStyleProperties
from .style_resolver import ScriptOverrides, StyledSpan, StyleResolver, resolve
from .types import (
    FontFeature,
    FontStyle,
    FontVariation,
    FontWeight,
    Shadow,
    TextBaseline,
    TextDecoration,
    TextDecorationStyle,
    TextLeadingDistribution,
)

__all__ = [
    "FontFeature",
    "FontRegistry",
    "FontStyle",
    "FontVariation",
    "FontWeight",
    "LocalizedText",
    "ResolvedStyle",
    "ScriptFonts",
    "ScriptOverrides",
    "ScriptStyleProperties",
    "Shadow",
    "StyleResolver",
    "StyledSpan",
    "TextBaseline",
    "TextDecoration",
    "TextDecorationStyle",
    "TextLeadingDistribution",
    "TextStyleProperties",
    "build_spans",
    "default_registry",
    "font_registry",
    "get_default_font_family",
    "get_font_fallbacks",
    "resolve",
    "to_localized_text",
]
