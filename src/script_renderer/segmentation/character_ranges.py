"""Unicode code-point tables for each supported script.

The tables are immutable and built once at import. ``SCRIPT_PRIORITY`` is
the order in which scripts are tested: a run that matches more than one
table belongs to the first script listed here.
"""

import re
from typing import Dict, Pattern, Tuple

from .types import CharacterRange, ScriptType

KHMER_RANGES: Tuple[CharacterRange, ...] = (CharacterRange(0x1780, 0x17FF),)

THAI_RANGES: Tuple[CharacterRange, ...] = (CharacterRange(0x0E00, 0x0E7F),)

LAO_RANGES: Tuple[CharacterRange, ...] = (CharacterRange(0x0E80, 0x0EFF),)

MYANMAR_RANGES: Tuple[CharacterRange, ...] = (CharacterRange(0x1000, 0x109F),)

# Precomposed letters used by Vietnamese orthography. Plain ASCII letters are
# deliberately absent so undecorated Vietnamese falls through to Latin.
VIETNAMESE_RANGES: Tuple[CharacterRange, ...] = (
    CharacterRange(0x00C0, 0x00C3),  # À Á Â Ã
    CharacterRange(0x00C8, 0x00CA),  # È É Ê
    CharacterRange(0x00CC, 0x00CD),  # Ì Í
    CharacterRange(0x00D2, 0x00D5),  # Ò Ó Ô Õ
    CharacterRange(0x00D9, 0x00DA),  # Ù Ú
    CharacterRange(0x00DD, 0x00DD),  # Ý
    CharacterRange(0x00E0, 0x00E3),  # à á â ã
    CharacterRange(0x00E8, 0x00EA),  # è é ê
    CharacterRange(0x00EC, 0x00ED),  # ì í
    CharacterRange(0x00F2, 0x00F5),  # ò ó ô õ
    CharacterRange(0x00F9, 0x00FA),  # ù ú
    CharacterRange(0x00FD, 0x00FD),  # ý
    CharacterRange(0x00FC, 0x00FC),  # ü
    CharacterRange(0x0102, 0x0103),  # Ă ă
    CharacterRange(0x0110, 0x0111),  # Đ đ
    CharacterRange(0x0128, 0x0129),  # Ĩ ĩ
    CharacterRange(0x0168, 0x0169),  # Ũ ũ
    CharacterRange(0x01A0, 0x01A1),  # Ơ ơ
    CharacterRange(0x01AF, 0x01B0),  # Ư ư
    CharacterRange(0x1EA0, 0x1EF9),  # Latin Extended Additional: Ạ .. ỹ
)

LATIN_RANGES: Tuple[CharacterRange, ...] = (
    CharacterRange(0x0030, 0x0039),  # 0-9
    CharacterRange(0x0041, 0x005A),  # A-Z
    CharacterRange(0x0061, 0x007A),  # a-z
)

SCRIPT_RANGES: Dict[ScriptType, Tuple[CharacterRange, ...]] = {
    ScriptType.KHMER: KHMER_RANGES,
    ScriptType.THAI: THAI_RANGES,
    ScriptType.LAO: LAO_RANGES,
    ScriptType.MYANMAR: MYANMAR_RANGES,
    ScriptType.VIETNAMESE: VIETNAMESE_RANGES,
    ScriptType.LATIN: LATIN_RANGES,
}

SCRIPT_PRIORITY: Tuple[ScriptType, ...] = (
    ScriptType.KHMER,
    ScriptType.THAI,
    ScriptType.LAO,
    ScriptType.MYANMAR,
    ScriptType.VIETNAMESE,
    ScriptType.LATIN,
)


def character_class(ranges: Tuple[CharacterRange, ...]) -> str:
    """Build the body of a regex character class from a range table."""
    return "".join(r.to_regex() for r in ranges)


# One "any character of this script" pattern per script, used for classification
SCRIPT_PATTERNS: Dict[ScriptType, Pattern[str]] = {
    script: re.compile(f"[{character_class(SCRIPT_RANGES[script])}]")
    for script in SCRIPT_PRIORITY
}

_ALL_SCRIPT_CHARS = "".join(
    character_class(SCRIPT_RANGES[script]) for script in SCRIPT_PRIORITY
)

# Tokenizer: one named group per category, tried left to right at each
# position. The catch-all excludes every script character and whitespace.
TOKEN_PATTERN: Pattern[str] = re.compile(
    "|".join(
        [
            f"(?P<{script.value}>[{character_class(SCRIPT_RANGES[script])}]+)"
            for script in SCRIPT_PRIORITY
        ]
        + [
            r"(?P<whitespace>\s+)",
            f"(?P<other>[^{_ALL_SCRIPT_CHARS}\\s]+)",
        ]
    )
)
