"""Styled span building for mixed-script text."""

from typing import Any, Dict, List, Optional

from script_renderer.segmentation.segmenter import Segmenter
from script_renderer.segmentation.types import ScriptType, Segment
from script_renderer.utils.exceptions import require_text

from .properties import ScriptStyleProperties, TextStyleProperties
from .style_resolver import ScriptOverrides, StyledSpan, StyleResolver
from .types import FontWeight


class LocalizedText:
    """Mixed-script text together with the style layers used to draw it.

    The text is segmented by script and each segment is paired with its
    resolved style. The resulting spans are what a rich-text surface needs
    to paint the string.
    """

    def __init__(
        self,
        text: str,
        base: Optional[TextStyleProperties] = None,
        overrides: Optional[ScriptOverrides] = None,
        resolver: Optional[StyleResolver] = None,
        segmenter: Optional[Segmenter] = None,
    ) -> None:
        """Initialize LocalizedText."""
        self.text = require_text(text)
        self.base = base
        self.overrides = overrides
        self.resolver = resolver or StyleResolver()
        self.segmenter = segmenter or Segmenter()

    @classmethod
    def simple(
        cls,
        text: str,
        font_size: Optional[float] = None,
        color: Any = None,
        font_weight: Optional[FontWeight] = None,
        khmer_font_family: Optional[str] = None,
        latin_font_family: Optional[str] = None,
    ) -> "LocalizedText":
        """
        Build a LocalizedText from the most common options.

        Args:
            text: The text to render
            font_size: Size applied to every script
            color: Color applied to every script
            font_weight: Weight applied to every script
            khmer_font_family: Family for Khmer runs
            latin_font_family: Family for Latin and neutral runs

        Returns:
            A LocalizedText with the matching base and override layers
        """
        base = TextStyleProperties(
            font_size=font_size, color=color, font_weight=font_weight
        )
        overrides: Dict[ScriptType, ScriptStyleProperties] = {}
        if khmer_font_family:
            overrides[ScriptType.KHMER] = ScriptStyleProperties(
                font_family=khmer_font_family
            )
        if latin_font_family:
            overrides[ScriptType.LATIN] = ScriptStyleProperties(
                font_family=latin_font_family
            )
        return cls(text, base=base, overrides=overrides)

    def segments(self) -> List[Segment]:
        """Script segments of the text."""
        return self.segmenter.segment(self.text)

    def spans(self) -> List[StyledSpan]:
        """Segments paired with their resolved styles."""
        return self.resolver.resolve_all(self.segments(), self.base, self.overrides)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly representation of the spans."""
        return {
            "text": self.text,
            "spans": [span.to_dict() for span in self.spans()],
        }


def build_spans(
    text: str,
    base: Optional[TextStyleProperties] = None,
    overrides: Optional[ScriptOverrides] = None,
) -> List[StyledSpan]:
    """Segment ``text`` and resolve a style for every segment."""
    return LocalizedText(text, base=base, overrides=overrides).spans()


def to_localized_text(text: str, **options: Any) -> LocalizedText:
    """Wrap a string as LocalizedText; ``options`` as for LocalizedText.simple."""
    return LocalizedText.simple(text, **options)
