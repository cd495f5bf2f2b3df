"""
Text analysis pipeline for the Text Preprocessor.

Paragraph scanning -> sentence segmentation -> contraction expansion ->
tokenization -> word counting. Each call to ``analyze`` runs on its own
AnalysisState, so one TextAnalyzer can serve any number of independent
analyses.
"""
import io
import logging
from typing import Iterable, Optional

from config import LEGACY_COUNTING
from models.analysis import AnalysisResult, AnalysisState
from services.contraction_expander import ContractionExpander
from services.errors import SourceUnreadableError
from services.paragraph_scanner import ParagraphScanner
from services.sentence_segmenter import SentenceSegmenter
from services.tokenizer import Tokenizer
from services.word_counter import WordCounter

logger = logging.getLogger(__name__)


class TextAnalyzer:
    """Computes paragraph, sentence, token and type statistics for a document."""

    def __init__(
        self,
        legacy_counting: bool = LEGACY_COUNTING,
        segmenter: Optional[SentenceSegmenter] = None,
        expander: Optional[ContractionExpander] = None,
        tokenizer: Optional[Tokenizer] = None,
        counter: Optional[WordCounter] = None
    ):
        """
        Initialize TextAnalyzer.

        Args:
            legacy_counting: Reproduce the legacy paragraph and sentence
                counting rules (per-line segmentation)
            segmenter: Sentence segmenter (built from config if omitted)
            expander: Contraction expander (default rule table if omitted)
            tokenizer: Tokenizer
            counter: Word counter

        Raises:
            MalformedRuleError: If the contraction rules do not compile
        """
        self.legacy_counting = legacy_counting
        self.scanner = ParagraphScanner(legacy_counting=legacy_counting)
        self.segmenter = segmenter or SentenceSegmenter(legacy_counting=legacy_counting)
        self.expander = expander or ContractionExpander()
        self.tokenizer = tokenizer or Tokenizer()
        self.counter = counter or WordCounter()

    def analyze(self, lines: Iterable[str]) -> AnalysisResult:
        """
        Analyze a document given as a sequence of lines.

        The whole stream is consumed before a result is returned.

        Args:
            lines: Lines of the document (trailing newlines allowed)

        Returns:
            AnalysisResult for the document

        Raises:
            SourceUnreadableError: If reading a line fails
            TextAnalysisError: For any other fatal pipeline error
        """
        state = AnalysisState()

        try:
            for text in self.scanner.scan(lines, state):
                for sentence in self.segmenter.segment(text, state):
                    expanded = self.expander.expand(sentence)
                    self.counter.count(self.tokenizer.tokenize(expanded), state)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed reading input: {e}")
            raise SourceUnreadableError(
                f"Error reading the input: {e}",
                details={"reason": type(e).__name__},
            ) from e

        result = state.to_result()
        logger.info(
            "Text analysis complete",
            extra={"extra": {
                "paragraphs": result.paragraph_count,
                "sentences": result.sentence_count,
                "tokens": result.token_count,
                "types": result.type_count,
            }}
        )
        return result

    def analyze_text(self, text: str) -> AnalysisResult:
        """
        Analyze an in-memory document.

        Lines are split the same way as a file read in text mode, on
        line feeds and carriage returns only.
        """
        return self.analyze(io.StringIO(text, newline=None))
