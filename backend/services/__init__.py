"""Services for the Text Preprocessor."""
from .errors import (
    AnalysisError,
    TextAnalysisError,
    SourceNotFoundError,
    SourceUnreadableError,
    MalformedRuleError,
    InvalidMatchArgumentError,
)
from .contraction_expander import ContractionExpander, CONTRACTION_RULES
from .tokenizer import Tokenizer
from .sentence_segmenter import SentenceSegmenter
from .paragraph_scanner import ParagraphScanner
from .word_counter import WordCounter
from .text_analyzer import TextAnalyzer
from .reporter import ReportWriter, format_report, rank_frequencies
from .document_source import DocumentSource

__all__ = ['AnalysisError', 'TextAnalysisError', 'SourceNotFoundError', 'SourceUnreadableError', 'MalformedRuleError', 'InvalidMatchArgumentError', 'ContractionExpander', 'CONTRACTION_RULES', 'Tokenizer', 'SentenceSegmenter', 'ParagraphScanner', 'WordCounter', 'TextAnalyzer', 'ReportWriter', 'format_report', 'rank_frequencies', 'DocumentSource']
