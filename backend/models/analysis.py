"""Analysis data models."""
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict


@dataclass
class AnalysisState:
    """
    Mutable counters for a single in-flight analysis.

    A new state is created for every run and is never shared between
    analyses.
    """
    paragraph_count: int = 0
    sentence_count: int = 0
    token_count: int = 0
    type_count: int = 0
    frequency_table: Counter = field(default_factory=Counter)

    def to_result(self) -> "AnalysisResult":
        """Snapshot the counters into an immutable AnalysisResult."""
        return AnalysisResult(
            paragraph_count=self.paragraph_count,
            sentence_count=self.sentence_count,
            token_count=self.token_count,
            type_count=self.type_count,
            frequency_table=dict(self.frequency_table),
        )


@dataclass(frozen=True)
class AnalysisResult:
    """Final statistics for an analyzed document."""
    paragraph_count: int
    sentence_count: int
    token_count: int
    type_count: int
    frequency_table: Dict[str, int]  # token -> occurrences (>= 1)
