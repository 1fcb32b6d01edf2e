"""Typographic value types used by style records."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any


class FontWeight(IntEnum):
    """Font weights on the CSS/OpenType 100-900 scale."""

    W100 = 100
    W200 = 200
    W300 = 300
    W400 = 400
    W500 = 500
    W600 = 600
    W700 = 700
    W800 = 800
    W900 = 900

    # Semantic aliases
    THIN = 100
    EXTRA_LIGHT = 200
    LIGHT = 300
    REGULAR = 400
    MEDIUM = 500
    SEMI_BOLD = 600
    BOLD = 700
    EXTRA_BOLD = 800
    BLACK = 900


class FontStyle(str, Enum):
    """Glyph slant."""

    NORMAL = "normal"
    ITALIC = "italic"


class TextBaseline(str, Enum):
    """Baseline used to align glyphs."""

    ALPHABETIC = "alphabetic"
    IDEOGRAPHIC = "ideographic"


class TextLeadingDistribution(str, Enum):
    """How extra line height is distributed above and below the text."""

    PROPORTIONAL = "proportional"
    EVEN = "even"


class TextDecoration(str, Enum):
    """Line drawn across the text."""

    NONE = "none"
    UNDERLINE = "underline"
    OVERLINE = "overline"
    LINE_THROUGH = "line_through"


class TextDecorationStyle(str, Enum):
    """Stroke style of a text decoration."""

    SOLID = "solid"
    DOUBLE = "double"
    DOTTED = "dotted"
    DASHED = "dashed"
    WAVY = "wavy"


@dataclass(frozen=True)
class Shadow:
    """A drop shadow painted behind the glyphs."""

    color: Any = None
    offset_x: float = 0.0
    offset_y: float = 0.0
    blur_radius: float = 0.0


@dataclass(frozen=True)
class FontFeature:
    """An OpenType feature setting such as ``liga`` or ``kern``."""

    feature: str
    value: int = 1

    def __post_init__(self) -> None:
        if len(self.feature) != 4:
            raise ValueError(
                f"OpenType feature tags are 4 characters: {self.feature!r}"
            )


@dataclass(frozen=True)
class FontVariation:
    """A variable-font axis setting such as ``wght`` = 650."""

    axis: str
    value: float

    def __post_init__(self) -> None:
        if len(self.axis) != 4:
            raise ValueError(f"Variation axis tags are 4 characters: {self.axis!r}")
