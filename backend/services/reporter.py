"""Report formatting and writing."""
import logging
import os
from typing import List, Mapping, Tuple

from config import REPORT_SEPARATOR
from models.analysis import AnalysisResult

logger = logging.getLogger(__name__)


def rank_frequencies(frequency_table: Mapping[str, int]) -> List[Tuple[str, int]]:
    """
    Order (token, count) pairs by count descending, then token ascending.

    Args:
        frequency_table: Mapping of token to occurrence count

    Returns:
        Ranked list of (token, count) pairs
    """
    return sorted(frequency_table.items(), key=lambda item: (-item[1], item[0]))


def format_header(result: AnalysisResult) -> str:
    """Four labeled counts, one per line."""
    return (
        f"# of paragraphs = {result.paragraph_count}\n"
        f"# of sentences = {result.sentence_count}\n"
        f"# of tokens = {result.token_count}\n"
        f"# of types = {result.type_count}\n"
    )


def format_report(result: AnalysisResult, separator: str = REPORT_SEPARATOR) -> str:
    """
    Render the full plain-text report.

    Layout: header block, blank line, separator line, then one
    "<token> <count>" line per ranked entry.
    """
    lines = [format_header(result), separator]
    lines.extend(f"{token} {count}" for token, count in rank_frequencies(result.frequency_table))
    return "\n".join(lines) + "\n"


class ReportWriter:
    """Writes formatted analysis reports to a file."""

    def __init__(self, output_path: str, separator: str = REPORT_SEPARATOR):
        """
        Initialize ReportWriter.

        Args:
            output_path: Destination file (parent directories are created)
            separator: Line separating the header from the frequency table
        """
        self.output_path = output_path
        self.separator = separator

    def write(self, result: AnalysisResult) -> str:
        """
        Format the result and write it to the output path.

        Returns:
            The report text that was written

        Raises:
            OSError: If the file cannot be written
        """
        report = format_report(result, separator=self.separator)

        directory = os.path.dirname(self.output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(self.output_path, "w", encoding="utf-8") as f:
            f.write(report)

        logger.info(f"Wrote report to {self.output_path} ({len(result.frequency_table)} types)")
        return report
