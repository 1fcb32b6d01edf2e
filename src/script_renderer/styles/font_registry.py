"""Font family registry for multi-script text.

Single source of truth for the font family names bundled with the renderer,
the default family for each script and the fallback chain used when a glyph
is missing from the primary family. Only names are handled here; loading the
font files is the job of the host's font asset provider.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from script_renderer.segmentation.types import ScriptType, coerce_script

from .types import FontWeight

# Khmer fonts
KHMER_BATTAMBANG = "Battambang"
KHMER_KOULEN = "Koulen"  # Headlines
KHMER_MOUL = "Moul"  # Formal, traditional
KHMER_NOTO_SERIF = "NotoSerifKhmer"
KHMER_SIEMREAP = "Siemreap"
KHMER_SUWANNAPHUM = "Suwannaphum"

# Thai fonts
THAI_CHAKRA_PETCH = "ChakraPetch"
THAI_KANIT = "Kanit"
THAI_MITR = "Mitr"
THAI_NOTO_SANS = "NotoSansThai"
THAI_PROMPT = "Prompt"
THAI_SARABUN = "Sarabun"
THAI_TAVIRAJ = "Taviraj"

# Lao fonts
LAO_NOTO_SANS = "NotoSansLao"
LAO_NOTO_SANS_LOOPED = "NotoSansLaoLooped"
LAO_NOTO_SERIF = "NotoSerifLao"
LAO_PHETSARATH = "Phetsarath"

# Myanmar fonts
MYANMAR_NOTO_SANS = "NotoSansMyanmar"
MYANMAR_NOTO_SERIF = "NotoSerifMyanmar"
MYANMAR_PADAUK = "Padauk"

# Vietnamese fonts
VIETNAMESE_BE_VIETNAM_PRO = "BeVietnamPro"
VIETNAMESE_LORA = "Lora"
VIETNAMESE_MERRIWEATHER = "Merriweather"
VIETNAMESE_MERRIWEATHER_SANS = "MerriweatherSans"

# Latin fonts
LATIN_IBM_PLEX_SANS = "IBMPlexSans"
LATIN_INTER = "Inter"
LATIN_LATO = "Lato"
LATIN_MONTSERRAT = "Montserrat"
LATIN_NUNITO = "Nunito"
LATIN_OPEN_SANS = "OpenSans"
LATIN_POPPINS = "Poppins"
LATIN_RALEWAY = "Raleway"
LATIN_ROBOTO = "Roboto"
LATIN_SF_NS_DISPLAY = "SFNSDisplay"

# Font weight helper constants
THIN = FontWeight.W100
EXTRA_LIGHT = FontWeight.W200
LIGHT = FontWeight.W300
REGULAR = FontWeight.W400
MEDIUM = FontWeight.W500
SEMI_BOLD = FontWeight.W600
BOLD = FontWeight.W700
EXTRA_BOLD = FontWeight.W800
BLACK = FontWeight.W900


@dataclass(frozen=True)
class ScriptFonts:
    """Font configuration for one script."""

    default_family: str
    fallbacks: Tuple[str, ...]
    families: Tuple[str, ...]  # Every bundled family that covers the script


_SCRIPT_FONTS: Mapping[ScriptType, ScriptFonts] = MappingProxyType(
    {
        ScriptType.KHMER: ScriptFonts(
            default_family=KHMER_SIEMREAP,
            fallbacks=(KHMER_BATTAMBANG, KHMER_NOTO_SERIF, KHMER_SUWANNAPHUM),
            families=(
                KHMER_BATTAMBANG,
                KHMER_KOULEN,
                KHMER_MOUL,
                KHMER_NOTO_SERIF,
                KHMER_SIEMREAP,
                KHMER_SUWANNAPHUM,
            ),
        ),
        ScriptType.THAI: ScriptFonts(
            default_family=THAI_SARABUN,
            fallbacks=(THAI_NOTO_SANS, THAI_KANIT, THAI_PROMPT),
            families=(
                THAI_CHAKRA_PETCH,
                THAI_KANIT,
                THAI_MITR,
                THAI_NOTO_SANS,
                THAI_PROMPT,
                THAI_SARABUN,
                THAI_TAVIRAJ,
            ),
        ),
        ScriptType.LAO: ScriptFonts(
            default_family=LAO_NOTO_SANS,
            fallbacks=(LAO_PHETSARATH, LAO_NOTO_SERIF),
            families=(
                LAO_NOTO_SANS,
                LAO_NOTO_SANS_LOOPED,
                LAO_NOTO_SERIF,
                LAO_PHETSARATH,
            ),
        ),
        ScriptType.MYANMAR: ScriptFonts(
            default_family=MYANMAR_PADAUK,
            fallbacks=(MYANMAR_NOTO_SANS, MYANMAR_NOTO_SERIF),
            families=(MYANMAR_NOTO_SANS, MYANMAR_NOTO_SERIF, MYANMAR_PADAUK),
        ),
        ScriptType.VIETNAMESE: ScriptFonts(
            default_family=VIETNAMESE_BE_VIETNAM_PRO,
            fallbacks=(LATIN_ROBOTO, LATIN_OPEN_SANS, VIETNAMESE_MERRIWEATHER),
            families=(
                VIETNAMESE_BE_VIETNAM_PRO,
                VIETNAMESE_LORA,
                VIETNAMESE_MERRIWEATHER,
                VIETNAMESE_MERRIWEATHER_SANS,
            ),
        ),
        ScriptType.LATIN: ScriptFonts(
            default_family=LATIN_ROBOTO,
            fallbacks=(LATIN_ROBOTO, LATIN_OPEN_SANS, LATIN_LATO),
            families=(
                LATIN_IBM_PLEX_SANS,
                LATIN_INTER,
                LATIN_LATO,
                LATIN_MONTSERRAT,
                LATIN_NUNITO,
                LATIN_OPEN_SANS,
                LATIN_POPPINS,
                LATIN_RALEWAY,
                LATIN_ROBOTO,
                LATIN_SF_NS_DISPLAY,
            ),
        ),
        # Symbols and punctuation use Latin faces, with Khmer as a last resort
        ScriptType.NEUTRAL: ScriptFonts(
            default_family=LATIN_ROBOTO,
            fallbacks=(LATIN_ROBOTO, LATIN_OPEN_SANS, KHMER_SIEMREAP),
            families=(LATIN_ROBOTO, LATIN_OPEN_SANS, KHMER_SIEMREAP),
        ),
    }
)


class FontRegistry:
    """Read-only lookup of default font families by script."""

    def __init__(
        self, script_fonts: Mapping[ScriptType, ScriptFonts] = _SCRIPT_FONTS
    ) -> None:
        """Initialize the registry; every ScriptType must have an entry."""
        missing = [script.value for script in ScriptType if script not in script_fonts]
        if missing:
            raise ValueError(f"font registry has no entry for: {', '.join(missing)}")
        self._script_fonts = script_fonts

    def get(self, script: ScriptType) -> ScriptFonts:
        """Get the full font configuration for a script."""
        return self._script_fonts[coerce_script(script)]

    def default_family(self, script: ScriptType) -> str:
        """Get the default font family for a script."""
        return self.get(script).default_family

    def fallback_chain(self, script: ScriptType) -> Tuple[str, ...]:
        """Get the ordered fallback families for a script."""
        return tuple(self.get(script).fallbacks)

    def families(self, script: ScriptType) -> Tuple[str, ...]:
        """Get every bundled family that covers a script."""
        return self.get(script).families

    def scripts(self) -> Tuple[ScriptType, ...]:
        """Scripts known to the registry, in enum order."""
        return tuple(script for script in ScriptType if script in self._script_fonts)


default_registry = FontRegistry()


def get_default_font_family(script: ScriptType) -> str:
    """Return the default font family for ``script``."""
    return default_registry.default_family(script)


def get_font_fallbacks(script: ScriptType) -> Tuple[str, ...]:
    """Return the fallback chain for ``script``."""
    return default_registry.fallback_chain(script)
