"""Resolve the final text style for each script segment."""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from script_renderer.config import get_font_settings
from script_renderer.segmentation.types import ScriptType, Segment, coerce_script
from script_renderer.utils.exceptions import InvalidInputError
from script_renderer.utils.logging import get_logger

from .font_registry import FontRegistry, default_registry
from .properties import (
    LAYERED_FIELDS,
    ResolvedStyle,
    ScriptStyleProperties,
    TextStyleProperties,
)

logger = get_logger(__name__)

ScriptOverrides = Mapping[ScriptType, Optional[ScriptStyleProperties]]

_EMPTY_BASE = TextStyleProperties()
_EMPTY_OVERRIDE = ScriptStyleProperties()


@dataclass(frozen=True)
class StyledSpan:
    """A segment of text paired with its resolved style."""

    text: str
    script: ScriptType
    style: ResolvedStyle

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "text": self.text,
            "script": self.script.value,
            "style": self.style.to_dict(),
        }


class StyleResolver:
    """Merges base and per-script style layers into one concrete style.

    Each attribute is taken from the script override when it is set there,
    otherwise from the base style. The font family and fallback chain come
    from the override or, failing that, from the font registry; the base
    style never supplies them. Neutral text is styled with the Latin layer.
    """

    def __init__(
        self,
        registry: Optional[FontRegistry] = None,
        package: Optional[str] = None,
    ) -> None:
        """Initialize StyleResolver."""
        self.registry = registry or default_registry
        if package is None:
            package = get_font_settings().font_package
        self.package = package

    def resolve(
        self,
        script: ScriptType,
        base: Optional[TextStyleProperties] = None,
        overrides: Optional[ScriptOverrides] = None,
    ) -> ResolvedStyle:
        """
        Resolve the style for one script.

        Args:
            script: Script of the segment being styled
            base: Attributes shared by every script
            overrides: Per-script override layers keyed by script

        Returns:
            The resolved style with font family and fallbacks filled in
        """
        script = coerce_script(script)
        base = self._check_base(base)
        layers = self._check_overrides(overrides)

        if script is ScriptType.NEUTRAL:
            script = ScriptType.LATIN

        override = layers.get(script) or _EMPTY_OVERRIDE

        values: Dict[str, Any] = {}
        for name in LAYERED_FIELDS:
            value = getattr(override, name)
            if value is None:
                value = getattr(base, name)
            values[name] = value

        inherit = override.inherit
        if inherit is None:
            inherit = base.inherit
        if inherit is None:
            inherit = True

        font_family = override.font_family or self.registry.default_family(script)
        fallback = override.font_family_fallback
        if fallback is None:
            fallback = self.registry.fallback_chain(script)

        style = ResolvedStyle(
            **values,
            inherit=inherit,
            font_family=font_family,
            font_family_fallback=tuple(fallback),
            package=self.package,
        )
        logger.debug(
            "style_resolved",
            script=script.value,
            font_family=font_family,
            has_override=script in layers,
        )
        return style

    def resolve_all(
        self,
        segments: Iterable[Segment],
        base: Optional[TextStyleProperties] = None,
        overrides: Optional[ScriptOverrides] = None,
    ) -> List[StyledSpan]:
        """Resolve a style for every segment, keeping segment order."""
        base = self._check_base(base)
        layers = self._check_overrides(overrides)

        # Segments of the same script share one resolved style
        cache: Dict[ScriptType, ResolvedStyle] = {}
        spans: List[StyledSpan] = []
        for segment in segments:
            if not isinstance(segment, Segment):
                raise InvalidInputError(
                    f"expected a Segment, got {type(segment).__name__}"
                )
            if segment.script not in cache:
                cache[segment.script] = self.resolve(segment.script, base, layers)
            style = cache[segment.script]
            spans.append(StyledSpan(segment.text, segment.script, style))
        return spans

    @staticmethod
    def _check_base(base: Optional[TextStyleProperties]) -> TextStyleProperties:
        if base is None:
            return _EMPTY_BASE
        if not isinstance(base, TextStyleProperties):
            raise InvalidInputError(
                f"base must be TextStyleProperties, got {type(base).__name__}"
            )
        return base

    @staticmethod
    def _check_overrides(
        overrides: Optional[ScriptOverrides],
    ) -> Dict[ScriptType, ScriptStyleProperties]:
        if overrides is None:
            return {}
        if not isinstance(overrides, Mapping):
            raise InvalidInputError(
                f"overrides must be a mapping, got {type(overrides).__name__}"
            )

        layers: Dict[ScriptType, ScriptStyleProperties] = {}
        for key, layer in overrides.items():
            if layer is None:
                continue
            if not isinstance(layer, ScriptStyleProperties):
                raise InvalidInputError(
                    f"override for {key!r} must be ScriptStyleProperties, "
                    f"got {type(layer).__name__}"
                )
            layers[coerce_script(key)] = layer
        return layers


_default_resolver: Optional[StyleResolver] = None


def _get_default_resolver() -> StyleResolver:
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = StyleResolver()
    return _default_resolver


def resolve(
    script: ScriptType,
    base: Optional[TextStyleProperties] = None,
    overrides: Optional[ScriptOverrides] = None,
) -> ResolvedStyle:
    """Resolve the style for ``script`` with the shared resolver."""
    return _get_default_resolver().resolve(script, base, overrides)
