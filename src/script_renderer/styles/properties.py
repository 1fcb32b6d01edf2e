"""Style records: base properties, per-script overrides and resolved styles."""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple

from script_renderer.utils.exceptions import InvalidInputError

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

# Fields holding sequences; stored as tuples so records stay hashable
_SEQUENCE_FIELDS = (
    "shadows",
    "font_features",
    "font_variations",
    "font_family_fallback",
)


def _export(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (Shadow, FontFeature, FontVariation)):
        return {f.name: _export(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, tuple):
        return [_export(item) for item in value]
    return value


@dataclass(frozen=True)
class TextStyleProperties:
    """Presentational attributes shared by every script.

    Every field is optional; ``None`` means "defer to the next layer".
    """

    font_size: Optional[float] = None
    color: Any = None
    background_color: Any = None
    font_weight: Optional[FontWeight] = None
    font_style: Optional[FontStyle] = None
    letter_spacing: Optional[float] = None
    word_spacing: Optional[float] = None
    text_baseline: Optional[TextBaseline] = None
    height: Optional[float] = None
    leading_distribution: Optional[TextLeadingDistribution] = None
    locale: Optional[str] = None
    foreground: Any = None  # Paint handle owned by the rendering surface
    background: Any = None  # Paint handle owned by the rendering surface
    shadows: Optional[Sequence[Shadow]] = None
    font_features: Optional[Sequence[FontFeature]] = None
    font_variations: Optional[Sequence[FontVariation]] = None
    decoration: Optional[TextDecoration] = None
    decoration_color: Any = None
    decoration_style: Optional[TextDecorationStyle] = None
    decoration_thickness: Optional[float] = None
    font_family_fallback: Optional[Sequence[str]] = None
    debug_label: Optional[str] = None
    inherit: Optional[bool] = None

    def __post_init__(self) -> None:
        for name in _SEQUENCE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, str):
                # A bare family name is one entry, not a sequence of letters
                object.__setattr__(self, name, (value,))
            elif value is not None and not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))
        if self.font_weight is not None and not isinstance(
            self.font_weight, FontWeight
        ):
            try:
                weight = FontWeight(self.font_weight)
            except ValueError as e:
                raise InvalidInputError(
                    "font_weight must be one of 100-900 in steps of 100, "
                    f"got {self.font_weight!r}"
                ) from e
            object.__setattr__(self, "font_weight", weight)

    def to_dict(self) -> Dict[str, Any]:
        """Return the fields that are set, with enums and records flattened."""
        return {
            f.name: _export(getattr(self, f.name))
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class ScriptStyleProperties(TextStyleProperties):
    """Per-script override layer: base attributes plus a font family."""

    font_family: Optional[str] = None


@dataclass(frozen=True)
class ResolvedStyle(TextStyleProperties):
    """Fully resolved style for one segment.

    ``font_family``, ``font_family_fallback`` and ``inherit`` are always set.
    Other attributes stay ``None`` when no layer set them, leaving the
    rendering surface's own default in effect.
    """

    font_family_fallback: Tuple[str, ...] = ()
    inherit: bool = True
    font_family: str = ""
    package: Optional[str] = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.font_family:
            raise ValueError("a resolved style needs a font family")


# Attributes resolved by plain override-over-base precedence
LAYERED_FIELDS: Tuple[str, ...] = tuple(
    f.name
    for f in fields(TextStyleProperties)
    if f.name not in ("font_family_fallback", "inherit")
)
