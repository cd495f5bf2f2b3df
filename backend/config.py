"""Configuration management for the Text Preprocessor."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "json")  # "json" or "text"

# Server Configuration
PORT = int(os.getenv("PORT", "8000"))

# CORS Configuration
CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS",
    "http://localhost:3000,http://localhost:3001"
).split(",")

# Input Configuration
INPUT_ENCODING = os.getenv("INPUT_ENCODING", "utf-8")

# Analysis Configuration
# Legacy counting: per-line segmentation,
# (segments - 1) sentences per line, one paragraph per blank line.
LEGACY_COUNTING = os.getenv("LEGACY_COUNTING", "false").lower() in ("1", "true", "yes")

DEFAULT_ABBREVIATIONS = (
    "mr,mrs,ms,dr,prof,sr,jr,st,vs,etc,e.g,i.e,inc,ltd,co,corp,"
    "jan,feb,mar,apr,jun,jul,aug,sep,sept,oct,nov,dec,fig,approx"
)
SENTENCE_ABBREVIATIONS = [
    abbr.strip().lower().rstrip(".")
    for abbr in os.getenv("SENTENCE_ABBREVIATIONS", DEFAULT_ABBREVIATIONS).split(",")
    if abbr.strip()
]

# Report Configuration
REPORT_SEPARATOR = os.getenv("REPORT_SEPARATOR", "=" * 32)
