"""Script classification by Unicode range membership."""

from typing import Set

from script_renderer.utils.exceptions import InvalidInputError, require_text

from .character_ranges import SCRIPT_PATTERNS, SCRIPT_PRIORITY
from .types import ScriptType, coerce_script


class ScriptClassifier:
    """Decides which script a run of characters belongs to.

    A run is tested against each script's code-point table in priority
    order (Khmer, Thai, Lao, Myanmar, Vietnamese, Latin). The first script
    with at least one matching character wins, so ``"aខ"`` is Khmer even
    though half of it is Latin. Runs with no script characters are neutral.
    """

    def classify(self, text: str) -> ScriptType:
        """
        Detect the script of a text run.

        Args:
            text: The run to analyze

        Returns:
            The highest-priority script present, or ScriptType.NEUTRAL
        """
        require_text(text)
        for script in SCRIPT_PRIORITY:
            if SCRIPT_PATTERNS[script].search(text):
                return script
        return ScriptType.NEUTRAL

    def classify_char(self, char: str) -> ScriptType:
        """Detect the script of a single code point."""
        require_text(char, "char")
        if len(char) != 1:
            raise InvalidInputError(
                f"char must be a single code point, got {len(char)} characters"
            )
        return self.classify(char)

    def contains_script(self, text: str, script: ScriptType) -> bool:
        """Check whether any character of ``text`` belongs to ``script``."""
        require_text(text)
        script = coerce_script(script)
        if script is ScriptType.NEUTRAL:
            return any(self.classify(ch) is ScriptType.NEUTRAL for ch in text)
        return SCRIPT_PATTERNS[script].search(text) is not None

    def detect_scripts(self, text: str) -> Set[ScriptType]:
        """Return every non-neutral script that occurs in ``text``."""
        require_text(text)
        return {
            script for script in SCRIPT_PRIORITY if SCRIPT_PATTERNS[script].search(text)
        }

    def is_mixed_script(self, text: str) -> bool:
        """
        Return True when more than one script is observed in the text.
        """
        return len(self.detect_scripts(text)) > 1


_default_classifier = ScriptClassifier()


def classify(text: str) -> ScriptType:
    """Detect the script of ``text`` with the shared classifier."""
    return _default_classifier.classify(text)


def classify_char(char: str) -> ScriptType:
    """Detect the script of a single character."""
    return _default_classifier.classify_char(char)


def contains_script(text: str, script: ScriptType) -> bool:
    """Check whether ``text`` contains characters of ``script``."""
    return _default_classifier.contains_script(text, script)


def detect_scripts(text: str) -> Set[ScriptType]:
    """Return the set of scripts present in ``text``."""
    return _default_classifier.detect_scripts(text)


def is_mixed_script(text: str) -> bool:
    """Return True when ``text`` mixes scripts."""
    return _default_classifier.is_mixed_script(text)
