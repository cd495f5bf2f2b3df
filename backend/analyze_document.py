"""
Document Analysis Script for the Text Preprocessor.

This script:
1. Reads a plain-text document line by line
2. Counts paragraphs, sentences, tokens and types
3. Prints the report to the screen
4. Stores the same report in the output file

Usage:
    python analyze_document.py <input_file> <output_file> [--legacy-counting]
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent))

from config import LEGACY_COUNTING, LOG_FORMAT, LOG_LEVEL
from logger import setup_logging
from services.document_source import DocumentSource
from services.errors import TextAnalysisError
from services.reporter import ReportWriter
from services.text_analyzer import TextAnalyzer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Count paragraphs, sentences, tokens and types in a text file"
    )
    parser.add_argument("input_file", help="Plain-text file to analyze")
    parser.add_argument("output_file", help="File to store the analysis report in")
    parser.add_argument(
        "--legacy-counting",
        action="store_true",
        default=LEGACY_COUNTING,
        help="Use per-line sentence counting (segments - 1) and count every blank line as a paragraph break"
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help=f"Logging level (default: {LOG_LEVEL})"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the analysis and report it.

    Returns:
        Process exit status (0 on success, 1 on analysis failure)
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, LOG_FORMAT)

    try:
        source = DocumentSource(args.input_file)
        analyzer = TextAnalyzer(legacy_counting=args.legacy_counting)
        result = analyzer.analyze(source.lines())
        report = ReportWriter(args.output_file).write(result)
    except TextAnalysisError as e:
        logger.error(f"Analysis failed [{e.error.code}]: {e.error.message}")
        print(f"Error: {e.error.message}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(f"Could not write report to {args.output_file}: {e}")
        print(f"Error: could not write report to {args.output_file}: {e}", file=sys.stderr)
        return 1

    print(report, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
