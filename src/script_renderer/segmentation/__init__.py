"""
Script Segmentation Module.

Detects the writing system of each run in mixed Khmer, Thai, Lao, Myanmar,
Vietnamese and Latin text, and splits the text into script-tagged segments
with whitespace and punctuation attached to the preceding script.
"""

from .character_ranges import SCRIPT_PRIORITY, SCRIPT_RANGES
from .script_classifier import (
    ScriptClassifier,
    classify,
    classify_char,
    contains_script,
    detect_scripts,
    is_mixed_script,
)
from .segmenter import Segmenter, reconstruct, segment
from .types import CharacterRange, ScriptType, Segment, coerce_script

__all__ = [
    "CharacterRange",
    "ScriptType",
    "Segment",
    "SCRIPT_PRIORITY",
    "SCRIPT_RANGES",
    "ScriptClassifier",
    "Segmenter",
    "classify",
    "classify_char",
    "coerce_script",
    "contains_script",
    "detect_scripts",
    "is_mixed_script",
    "reconstruct",
    "segment",
]
