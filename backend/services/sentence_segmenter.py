"""
Sentence segmentation for the Text Preprocessor.

Uses NLTK's Punkt boundary algorithm with English (US) punctuation rules and
a configured abbreviation list. No trained model is loaded, so segmentation
is deterministic and needs no downloaded data.

Punkt boundaries are then adjusted to US rules: a period followed by a
lowercase word does not end a sentence, and an ellipsis followed by a
capital letter does.
"""
import logging
import re
from typing import Iterable, List, Optional

from nltk.tokenize.punkt import PunktParameters, PunktSentenceTokenizer

from config import LEGACY_COUNTING, SENTENCE_ABBREVIATIONS
from models.analysis import AnalysisState

logger = logging.getLogger(__name__)

OPENING_PUNCTUATION = "\"'([{“‘"
ELLIPSIS_RE = re.compile(r"\.{3,}\s+")


def _next_letter(text: str, position: int) -> str:
    """First character at or after position that is not whitespace or opening punctuation."""
    for char in text[position:]:
        if char.isspace() or char in OPENING_PUNCTUATION:
            continue
        return char
    return ""


class SentenceSegmenter:
    """Splits text into sentence substrings that cover the whole input."""

    def __init__(
        self,
        abbreviations: Optional[Iterable[str]] = None,
        legacy_counting: bool = LEGACY_COUNTING
    ):
        """
        Initialize SentenceSegmenter.

        Args:
            abbreviations: Lowercase abbreviations without the final period
                (e.g. "dr", "e.g") that never end a sentence
            legacy_counting: Count (segments - 1) sentences per call instead
                of every segment
        """
        self.legacy_counting = legacy_counting

        params = PunktParameters()
        params.abbrev_types = {
            abbr.strip().lower().rstrip(".")
            for abbr in (SENTENCE_ABBREVIATIONS if abbreviations is None else abbreviations)
            if abbr.strip()
        }
        self._punkt = PunktSentenceTokenizer(params)

    def segment(self, text: str, state: Optional[AnalysisState] = None) -> List[str]:
        """
        Split text into sentences.

        Every character of the input belongs to exactly one segment: the
        whitespace between two sentences stays attached to the first one and
        the last segment always ends at the end of the input.

        Args:
            text: A non-blank line or paragraph
            state: Analysis state whose sentence_count is incremented

        Returns:
            Ordered list of sentence substrings
        """
        if not text:
            segments = []
        else:
            breaks = [start for start, _ in self._punkt.span_tokenize(text)][1:]
            breaks = self._drop_lowercase_continuations(text, breaks)
            breaks = sorted(set(breaks) | set(self._ellipsis_breaks(text)))
            bounds = [0] + breaks + [len(text)]
            segments = [text[bounds[i]:bounds[i + 1]] for i in range(len(bounds) - 1)]

        if state is not None:
            state.sentence_count += self.sentences_counted(segments)

        logger.debug(f"Segmented text into {len(segments)} sentences")
        return segments

    def _drop_lowercase_continuations(self, text: str, breaks: List[int]) -> List[int]:
        """A period only ends a sentence when the next word is not lowercase."""
        kept = []
        previous = 0
        for position in breaks:
            ends_with_period = text[previous:position].rstrip().endswith(".")
            if ends_with_period and _next_letter(text, position).islower():
                continue
            kept.append(position)
            previous = position
        return kept

    def _ellipsis_breaks(self, text: str) -> List[int]:
        """Break after an ellipsis followed by whitespace and a capital letter."""
        return [
            match.end()
            for match in ELLIPSIS_RE.finditer(text)
            if match.end() < len(text) and _next_letter(text, match.end()).isupper()
        ]

    def sentences_counted(self, segments: List[str]) -> int:
        """Number of sentences a segmentation contributes to the running total."""
        if self.legacy_counting:
            # Legacy rule: the first sentence of each call is not counted.
            return max(len(segments) - 1, 0)
        return len(segments)
