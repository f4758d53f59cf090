"""
Document content processing.

Exports:
  - clean_processed_content: control-character stripping and length cap
  - truncate_for_model: paragraph-aware truncation for model input
  - analyze_content_structure, ContentAnalysis: keyword-based structure analysis
"""

from tutorbot.core.ingestion.content_analysis import ContentAnalysis, analyze_content_structure
from tutorbot.core.ingestion.content_cleaner import (
    MAX_PROCESSED_CHARS,
    clean_processed_content,
    truncate_for_model,
)

__all__ = [
    "MAX_PROCESSED_CHARS",
    "ContentAnalysis",
    "analyze_content_structure",
    "clean_processed_content",
    "truncate_for_model",
]
