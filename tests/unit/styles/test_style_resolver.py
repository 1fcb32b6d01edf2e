"""Test per-script style resolution."""

import pytest

from script_renderer.segmentation import ScriptType, Segment
from script_renderer.styles import (
    FontFeature,
    FontRegistry,
    FontStyle,
    FontWeight,
    ResolvedStyle,
    ScriptStyleProperties,
    Shadow,
    StyleResolver,
    TextDecoration,
    TextStyleProperties,
    default_registry,
    resolve,
)
from script_renderer.styles.font_registry import ScriptFonts
from script_renderer.utils.exceptions import InvalidInputError


class TestStyleResolver:
    """Test field-by-field override-over-base precedence."""

    def test_base_value_used_when_override_unset(self, resolver):
        """Test a missing override field falls through to base."""
        base = TextStyleProperties(font_size=16)
        overrides = {ScriptType.KHMER: ScriptStyleProperties(font_size=None)}

        style = resolver.resolve(ScriptType.KHMER, base, overrides)

        assert style.font_size == 16

    def test_override_value_wins(self, resolver):
        """Test a set override field beats base."""
        base = TextStyleProperties(font_size=16)
        overrides = {ScriptType.KHMER: ScriptStyleProperties(font_size=20)}

        style = resolver.resolve(ScriptType.KHMER, base, overrides)

        assert style.font_size == 20

    def test_fields_resolve_independently(self, resolver, base_style, overrides):
        """Test each attribute picks its own layer."""
        style = resolver.resolve(ScriptType.LATIN, base_style, overrides)

        assert style.color == "#0000FF"  # override
        assert style.font_size == 16  # base
        assert style.letter_spacing == 0.2  # base
        assert style.word_spacing is None  # neither layer

    def test_unset_attributes_stay_none(self, resolver):
        """Test attributes with no script default are left to the surface."""
        style = resolver.resolve(ScriptType.THAI)

        assert style.font_size is None
        assert style.color is None
        assert style.font_weight is None
        assert style.shadows is None
        assert style.decoration is None

    @pytest.mark.parametrize("script", list(ScriptType))
    def test_default_family_and_fallbacks(self, resolver, script):
        """Test every script gets a family and fallback chain from the registry."""
        style = resolver.resolve(script)
        registry_script = ScriptType.LATIN if script is ScriptType.NEUTRAL else script

        assert style.font_family == default_registry.default_family(registry_script)
        assert style.font_family_fallback == default_registry.fallback_chain(
            registry_script
        )
        assert style.font_family
        assert style.font_family_fallback

    def test_override_family_and_fallbacks(self, resolver):
        """Test override family and fallbacks replace the registry defaults."""
        overrides = {
            ScriptType.THAI: ScriptStyleProperties(
                font_family="Kanit", font_family_fallback=["Mitr"]
            )
        }

        style = resolver.resolve(ScriptType.THAI, None, overrides)

        assert style.font_family == "Kanit"
        assert style.font_family_fallback == ("Mitr",)

    def test_base_fallbacks_are_not_inherited(self, resolver):
        """Test the base layer never supplies the fallback chain."""
        base = TextStyleProperties(font_family_fallback=["Comic Sans"])

        style = resolver.resolve(ScriptType.KHMER, base)

        assert style.font_family_fallback == (
            "Battambang",
            "NotoSerifKhmer",
            "Suwannaphum",
        )
        assert style.font_family == "Siemreap"

    def test_neutral_uses_latin_layer(self, resolver, overrides):
        """Test neutral text consults the Latin override, not a neutral one."""
        overrides = dict(overrides)
        overrides[ScriptType.NEUTRAL] = ScriptStyleProperties(font_family="Ignored")

        style = resolver.resolve(ScriptType.NEUTRAL, None, overrides)

        assert style.font_family == "Inter"
        assert style.color == "#0000FF"

    def test_neutral_without_latin_override(self, resolver):
        """Test neutral text gets the Latin registry defaults."""
        style = resolver.resolve(ScriptType.NEUTRAL)

        assert style.font_family == "Roboto"
        assert style.font_family_fallback == ("Roboto", "OpenSans", "Lato")

    def test_other_script_overrides_are_ignored(self, resolver):
        """Test only the segment's own layer applies."""
        overrides = {ScriptType.KHMER: ScriptStyleProperties(font_size=30)}

        style = resolver.resolve(
            ScriptType.MYANMAR, TextStyleProperties(font_size=12), overrides
        )

        assert style.font_size == 12
        assert style.font_family == "Padauk"

    @pytest.mark.parametrize(
        "override,base,expected",
        [
            (None, None, True),
            (None, False, False),
            (True, False, True),
            (False, None, False),
        ],
    )
    def test_inherit_defaults_to_true(self, resolver, override, base, expected):
        """Test inherit falls back override -> base -> True."""
        style = resolver.resolve(
            ScriptType.LAO,
            TextStyleProperties(inherit=base),
            {ScriptType.LAO: ScriptStyleProperties(inherit=override)},
        )
        assert style.inherit is expected

    def test_resolve_is_idempotent(self, resolver, base_style, overrides):
        """Test identical inputs give field-for-field identical results."""
        first = resolver.resolve(ScriptType.KHMER, base_style, overrides)
        second = resolver.resolve(ScriptType.KHMER, base_style, overrides)

        assert first == second
        assert hash(first) == hash(second)

    def test_inputs_are_not_mutated(self, resolver, base_style, overrides):
        """Test resolution leaves the layers untouched."""
        snapshot = dict(overrides)
        resolver.resolve(ScriptType.KHMER, base_style, overrides)

        assert overrides == snapshot
        assert base_style == TextStyleProperties(
            font_size=16, color="#222222", letter_spacing=0.2
        )

    def test_string_keys_and_script_names(self, resolver):
        """Test overrides keyed by script name strings."""
        style = resolver.resolve(
            "vietnamese", None, {"vietnamese": ScriptStyleProperties(font_size=18)}
        )
        assert style.font_size == 18
        assert style.font_family == "BeVietnamPro"

    def test_structured_attributes_pass_through(self, resolver):
        """Test list and enum attributes are carried into the result."""
        base = TextStyleProperties(
            font_weight=FontWeight.BOLD,
            font_style=FontStyle.ITALIC,
            shadows=[Shadow(color="#000000", offset_x=1, offset_y=1)],
            font_features=[FontFeature("liga")],
            decoration=TextDecoration.UNDERLINE,
        )

        style = resolver.resolve(ScriptType.LATIN, base)

        assert style.font_weight is FontWeight.W700
        assert style.font_style is FontStyle.ITALIC
        assert style.shadows == (Shadow(color="#000000", offset_x=1, offset_y=1),)
        assert style.font_features == (FontFeature("liga"),)
        assert style.decoration is TextDecoration.UNDERLINE

    def test_package_is_stamped(self):
        """Test the font package namespace is set on every style."""
        style = StyleResolver(package="my_fonts").resolve(ScriptType.KHMER)
        assert style.package == "my_fonts"

    def test_custom_registry(self):
        """Test a resolver can use a different registry."""
        fonts = ScriptFonts("Custom", ("CustomFallback",), ("Custom",))
        registry = FontRegistry({script: fonts for script in ScriptType})

        style = StyleResolver(registry=registry).resolve(ScriptType.THAI)

        assert style.font_family == "Custom"
        assert style.font_family_fallback == ("CustomFallback",)

    def test_module_level_resolve(self):
        """Test the shared resolver function."""
        style = resolve(ScriptType.KHMER, TextStyleProperties(font_size=14))
        assert isinstance(style, ResolvedStyle)
        assert style.font_size == 14
        assert style.font_family == "Siemreap"


class TestResolveAll:
    """Test resolving a sequence of segments."""

    def test_resolve_all_keeps_order(self, resolver, base_style, overrides):
        """Test spans follow segment order and carry the right styles."""
        segments = [
            Segment("Hello", ScriptType.LATIN),
            Segment(" ", ScriptType.LATIN),
            Segment("សួស្តី", ScriptType.KHMER),
            Segment("!", ScriptType.KHMER),
        ]

        spans = resolver.resolve_all(segments, base_style, overrides)

        assert [span.text for span in spans] == ["Hello", " ", "សួស្តី", "!"]
        assert spans[0].style.font_family == "Inter"
        assert spans[2].style.font_family == "Battambang"
        assert spans[2].style.font_size == 20
        assert spans[3].style == spans[2].style

    def test_resolve_all_empty(self, resolver):
        """Test no segments give no spans."""
        assert resolver.resolve_all([]) == []


class TestResolverInputValidation:
    """Test malformed layers are rejected."""

    def test_rejects_wrong_base_type(self, resolver):
        """Test base must be TextStyleProperties."""
        with pytest.raises(InvalidInputError):
            resolver.resolve(ScriptType.LATIN, {"font_size": 12})

    def test_rejects_non_mapping_overrides(self, resolver):
        """Test overrides must be a mapping."""
        with pytest.raises(InvalidInputError):
            resolver.resolve(ScriptType.LATIN, None, [ScriptStyleProperties()])

    def test_rejects_wrong_override_type(self, resolver):
        """Test override values must be ScriptStyleProperties."""
        with pytest.raises(InvalidInputError):
            resolver.resolve(
                ScriptType.LATIN, None, {ScriptType.LATIN: TextStyleProperties()}
            )

    def test_rejects_unknown_script(self, resolver):
        """Test unknown script names raise InvalidInputError."""
        with pytest.raises(InvalidInputError):
            resolver.resolve("elvish")

    def test_none_override_entries_are_skipped(self, resolver):
        """Test a None layer behaves like a missing one."""
        style = resolver.resolve(
            ScriptType.KHMER,
            TextStyleProperties(font_size=11),
            {ScriptType.KHMER: None},
        )
        assert style.font_size == 11
        assert style.font_family == "Siemreap"

    def test_resolve_all_rejects_non_segments(self, resolver):
        """Test plain tuples are rejected instead of failing on attribute access."""
        with pytest.raises(InvalidInputError):
            resolver.resolve_all([("Hello", ScriptType.LATIN)])

    def test_invalid_font_weight(self):
        """Test weights off the 100-900 scale raise InvalidInputError."""
        with pytest.raises(InvalidInputError) as exc_info:
            TextStyleProperties(font_weight=450)
        assert "450" in str(exc_info.value)

    def test_numeric_font_weight_is_coerced(self, resolver):
        """Test plain integers become FontWeight members."""
        base = TextStyleProperties(font_weight=700)
        style = resolver.resolve(ScriptType.LATIN, base)
        assert style.font_weight is FontWeight.BOLD


class TestFallbackNormalization:
    """Test fallback chains given as a single family name."""

    def test_override_fallback_string(self, resolver):
        """Test a bare family name becomes a one-entry chain."""
        style = resolver.resolve(
            ScriptType.THAI,
            None,
            {ScriptType.THAI: ScriptStyleProperties(font_family_fallback="Kanit")},
        )
        assert style.font_family_fallback == ("Kanit",)

    def test_base_fallback_string(self):
        """Test the base layer stores a bare family name as one entry."""
        base = TextStyleProperties(font_family_fallback="NotoSansThai")
        assert base.font_family_fallback == ("NotoSansThai",)

    def test_list_fallback_becomes_tuple(self, resolver):
        """Test list chains are kept in order as tuples."""
        style = resolver.resolve(
            ScriptType.LAO,
            None,
            {ScriptType.LAO: ScriptStyleProperties(font_family_fallback=["A", "B"])},
        )
        assert style.font_family_fallback == ("A", "B")
