"""Data models for the Text Preprocessor."""
from .analysis import AnalysisState, AnalysisResult
from .contraction import ContractionRule
from .api import AnalyzeRequest, AnalyzeResponse, FrequencyEntry

__all__ = [
    "AnalysisState",
    "AnalysisResult",
    "ContractionRule",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "FrequencyEntry",
]
