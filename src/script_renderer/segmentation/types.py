"""Script segmentation types and enums."""

from dataclasses import dataclass
from enum import Enum

from script_renderer.utils.exceptions import InvalidInputError


class ScriptType(str, Enum):
    """Writing scripts recognised by the segmenter."""

    KHMER = "khmer"
    THAI = "thai"
    LAO = "lao"
    MYANMAR = "myanmar"  # Burmese
    VIETNAMESE = "vietnamese"  # Latin letters with Vietnamese diacritics
    LATIN = "latin"
    NEUTRAL = "neutral"  # Whitespace, punctuation, symbols

    @property
    def is_neutral(self) -> bool:
        """True for the script-less category."""
        return self is ScriptType.NEUTRAL


@dataclass(frozen=True)
class CharacterRange:
    """Inclusive range of Unicode code points."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"range start U+{self.start:04X} is after end U+{self.end:04X}"
            )

    def __contains__(self, char: object) -> bool:
        if isinstance(char, str) and len(char) == 1:
            return self.start <= ord(char) <= self.end
        if isinstance(char, int):
            return self.start <= char <= self.end
        return False

    def to_regex(self) -> str:
        """Render the range as a regular expression character-class item."""
        if self.start == self.end:
            return f"\\U{self.start:08X}"
        return f"\\U{self.start:08X}-\\U{self.end:08X}"


@dataclass(frozen=True)
class Segment:
    """A maximal run of text tagged with a single script."""

    text: str
    script: ScriptType

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("segment text must not be empty")

    def __iter__(self):
        # Allows ``text, script = segment``
        yield self.text
        yield self.script


def coerce_script(value: object) -> ScriptType:
    """Accept a ScriptType or its string value; raise InvalidInputError otherwise."""
    try:
        return ScriptType(value)
    except ValueError as e:
        raise InvalidInputError(f"Unknown script: {value!r}") from e
