"""Main entry point for the Text Preprocessor API."""
import logging
import time
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from config import CORS_ORIGINS, LEGACY_COUNTING, LOG_FORMAT, LOG_LEVEL, PORT
from logger import setup_logging
from models.api import AnalyzeRequest, AnalyzeResponse, FrequencyEntry
from models.analysis import AnalysisResult
from services.errors import InvalidMatchArgumentError, MalformedRuleError, TextAnalysisError
from services.reporter import format_report, rank_frequencies
from services.text_analyzer import TextAnalyzer

# Initialize logging
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Text Preprocessor",
    description="Paragraph, sentence, token and type statistics for plain-text documents",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "Text Preprocessor API"}


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "text-preprocessor",
        "version": "1.0.0"
    }


@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze_endpoint(request: AnalyzeRequest) -> AnalyzeResponse:
    """
    Analyze a plain-text document.

    Args:
        request: AnalyzeRequest with the document text

    Returns:
        AnalyzeResponse with counts and the ranked frequency table

    Raises:
        HTTPException: For empty input or analysis failures
    """
    result = _run_analysis(request)
    return AnalyzeResponse(
        paragraph_count=result.paragraph_count,
        sentence_count=result.sentence_count,
        token_count=result.token_count,
        type_count=result.type_count,
        frequencies=[
            FrequencyEntry(token=token, count=count)
            for token, count in rank_frequencies(result.frequency_table)
        ]
    )


@app.post("/analyze/report", response_class=PlainTextResponse)
async def analyze_report_endpoint(request: AnalyzeRequest) -> str:
    """Analyze a document and return the plain-text report."""
    result = _run_analysis(request)
    return format_report(result)


def _run_analysis(request: AnalyzeRequest) -> AnalysisResult:
    """
    Run a fresh analyzer over the request text.

    Raises:
        HTTPException: 400 for empty text, 500 for configuration errors,
            422 for other analysis failures
    """
    start_time = time.time()

    if not request.text or not request.text.strip():
        raise HTTPException(status_code=400, detail="Text field is required and cannot be empty")

    legacy = LEGACY_COUNTING if request.legacy_counting is None else request.legacy_counting

    try:
        analyzer = TextAnalyzer(legacy_counting=legacy)
        result = analyzer.analyze_text(request.text)
    except (MalformedRuleError, InvalidMatchArgumentError) as e:
        logger.error(f"Analyzer configuration error: {e.error.message}")
        raise HTTPException(status_code=500, detail={"error": _error_detail(e)})
    except TextAnalysisError as e:
        logger.error(f"Analysis error: {e.error.message}")
        raise HTTPException(status_code=422, detail={"error": _error_detail(e)})

    latency_ms = int((time.time() - start_time) * 1000)
    logger.info(f"Analyzed {len(request.text)} characters in {latency_ms}ms")
    return result


def _error_detail(e: TextAnalysisError) -> dict:
    return {
        "code": e.error.code,
        "message": e.error.message,
        "details": e.error.details
    }


if __name__ == "__main__":
    import uvicorn
    setup_logging(LOG_LEVEL, LOG_FORMAT)
    logger.info(f"Starting Text Preprocessor API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
