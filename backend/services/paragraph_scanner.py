"""Paragraph detection over a line-oriented text stream."""
import logging
from typing import Iterable, Iterator, List

from config import LEGACY_COUNTING
from models.analysis import AnalysisState

logger = logging.getLogger(__name__)


class ParagraphScanner:
    """
    Groups non-blank lines into paragraphs and yields the text to segment.

    A line is blank when it is empty or whitespace only. The stream is
    consumed exactly once, left to right.

    Default mode yields one string per paragraph (its lines stripped and
    joined with a single space) and counts a paragraph when a blank line or
    the end of the stream closes a non-empty run of lines.

    Legacy mode yields every non-blank line as soon as it is read and counts
    a paragraph on every blank line and once more at the end of the stream.
    """

    def __init__(self, legacy_counting: bool = LEGACY_COUNTING):
        self.legacy_counting = legacy_counting

    def scan(self, lines: Iterable[str], state: AnalysisState) -> Iterator[str]:
        """
        Scan lines, updating state.paragraph_count.

        Args:
            lines: Lines of the document, in order
            state: Analysis state owned by the current run

        Yields:
            Text units for the sentence segmenter
        """
        if self.legacy_counting:
            yield from self._scan_lines(lines, state)
        else:
            yield from self._scan_paragraphs(lines, state)

    def _scan_lines(self, lines: Iterable[str], state: AnalysisState) -> Iterator[str]:
        for line in lines:
            line = line.rstrip("\r\n")
            if not line.strip():
                state.paragraph_count += 1
            else:
                yield line
        # End of stream closes the last paragraph
        state.paragraph_count += 1

    def _scan_paragraphs(self, lines: Iterable[str], state: AnalysisState) -> Iterator[str]:
        buffer: List[str] = []
        for line in lines:
            stripped = line.strip()
            if stripped:
                buffer.append(stripped)
                continue
            if buffer:
                state.paragraph_count += 1
                logger.debug(f"Paragraph {state.paragraph_count}: {len(buffer)} lines")
                yield " ".join(buffer)
                buffer = []

        if buffer:
            state.paragraph_count += 1
            logger.debug(f"Paragraph {state.paragraph_count}: {len(buffer)} lines")
            yield " ".join(buffer)
