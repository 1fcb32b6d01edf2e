"""Script Renderer.

Segments text that mixes Khmer, Thai, Lao, Myanmar, Vietnamese and Latin
and resolves per-script typography for each segment.
"""

from script_renderer.segmentation import (
    ScriptClassifier,
    ScriptType,
    Segment,
    Segmenter,
    classify,
    reconstruct,
    segment,
)
from script_renderer.styles import (
    FontRegistry,
    FontWeight,
    LocalizedText,
    ResolvedStyle,
    ScriptStyleProperties,
    StyledSpan,
    StyleResolver,
    TextStyleProperties,
    build_spans,
    resolve,
    to_localized_text,
)
from script_renderer.utils.exceptions import InvalidInputError, ScriptRendererException

__version__ = "0.1.0"

__all__ = [
    "FontRegistry",
    "FontWeight",
    "InvalidInputError",
    "LocalizedText",
    "ResolvedStyle",
    "ScriptClassifier",
    "ScriptRendererException",
    "ScriptStyleProperties",
    "ScriptType",
    "Segment",
    "Segmenter",
    "StyleResolver",
    "StyledSpan",
    "TextStyleProperties",
    "build_spans",
    "classify",
    "reconstruct",
    "resolve",
    "segment",
    "to_localized_text",
]
