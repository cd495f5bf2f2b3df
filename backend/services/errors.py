"""Structured errors raised by the text analysis pipeline."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class AnalysisError:
    """Structured error information surfaced to callers."""
    code: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


class TextAnalysisError(Exception):
    """Base exception for all fatal analysis errors."""

    code = "ANALYSIS_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.error = AnalysisError(code=self.code, message=message, details=details or {})
        super().__init__(message)


class SourceNotFoundError(TextAnalysisError):
    """Input path does not exist."""
    code = "SOURCE_NOT_FOUND"


class SourceUnreadableError(TextAnalysisError):
    """Input exists but cannot be read (not a file, permissions, I/O or decode failure)."""
    code = "SOURCE_UNREADABLE"


class MalformedRuleError(TextAnalysisError):
    """A contraction rule pattern does not compile."""
    code = "MALFORMED_RULE"


class InvalidMatchArgumentError(TextAnalysisError):
    """A rewrite or match operation received an invalid argument."""
    code = "INVALID_MATCH_ARGUMENT"
