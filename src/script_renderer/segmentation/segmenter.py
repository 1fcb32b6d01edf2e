"""Split mixed-script text into script-tagged segments."""

from typing import Iterable, List

from script_renderer.utils.exceptions import require_text
from script_renderer.utils.logging import get_logger

from .character_ranges import TOKEN_PATTERN
from .types import ScriptType, Segment

logger = get_logger(__name__)


class Segmenter:
    """Partitions text into maximal runs of a single script.

    The text is tokenized left to right; at each position the categories
    are tried in order Khmer, Thai, Lao, Myanmar, Vietnamese, Latin,
    whitespace, other, and the first one consumes its maximal run.

    Script runs carry their own tag and become the current context.
    Whitespace and other runs are neutral: they take the tag of the nearest
    preceding script run, or ``neutral`` when no script run has been seen
    yet. Neighbouring neutral tokens are emitted as one segment.
    """

    def segment(self, text: str) -> List[Segment]:
        """
        Split text into script segments.

        Args:
            text: The mixed-script text to segment

        Returns:
            Segments in input order; their texts concatenate to ``text``
        """
        require_text(text)

        segments: List[Segment] = []
        current_script = ScriptType.NEUTRAL
        pending_neutral: List[str] = []

        for match in TOKEN_PATTERN.finditer(text):
            category = match.lastgroup
            token = match.group()

            if category in ("whitespace", "other"):
                pending_neutral.append(token)
                continue

            self._flush(segments, pending_neutral, current_script)
            current_script = ScriptType(category)
            segments.append(Segment(token, current_script))

        self._flush(segments, pending_neutral, current_script)

        logger.debug(
            "text_segmented",
            length=len(text),
            segment_count=len(segments),
        )
        return segments

    @staticmethod
    def _flush(
        segments: List[Segment], pending: List[str], script: ScriptType
    ) -> None:
        """Emit buffered neutral tokens as one segment tagged ``script``."""
        if pending:
            segments.append(Segment("".join(pending), script))
            pending.clear()


def reconstruct(segments: Iterable[Segment]) -> str:
    """Concatenate segment texts back into the original string."""
    return "".join(segment.text for segment in segments)


_default_segmenter = Segmenter()


def segment(text: str) -> List[Segment]:
    """Split ``text`` into script segments with the shared segmenter."""
    return _default_segmenter.segment(text)
