"""API request/response models."""
from typing import List, Optional
from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Body of POST /analyze and POST /analyze/report."""
    text: str = Field(..., description="Plain-text document to analyze")
    legacy_counting: Optional[bool] = Field(
        default=None,
        description="Override LEGACY_COUNTING for this request",
    )


class FrequencyEntry(BaseModel):
    """One row of the ranked frequency table."""
    token: str
    count: int


class AnalyzeResponse(BaseModel):
    """Counts plus the ranked frequency table."""
    paragraph_count: int
    sentence_count: int
    token_count: int
    type_count: int
    frequencies: List[FrequencyEntry]
