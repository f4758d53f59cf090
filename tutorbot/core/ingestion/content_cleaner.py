"""
Extracted text cleanup.

Dependencies: re (stdlib)
System role: Normalizes OCR output before it is stored as processed content
"""

import re

MAX_PROCESSED_CHARS = 100_000
TRUNCATION_NOTICE = "\n\n[Content truncated due to length for AI processing...]"

# Keeps \t, \n and \r
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
_SENTENCE_SPLIT = re.compile(r"[.!?]+")


def clean_processed_content(text: str, max_chars: int = MAX_PROCESSED_CHARS) -> str:
    """Strip control characters and cap the length."""
    return _CONTROL_CHARS.sub("", text or "")[:max_chars]


def truncate_for_model(text: str, max_chars: int) -> str:
    """
    Truncate text on paragraph boundaries, falling back to sentences.

    Text that already fits is returned unchanged; anything shorter gets a
    trailing truncation notice.
    """
    if len(text) <= max_chars:
        return text

    truncated = ""
    for paragraph in text.split("\n\n"):
        if len(truncated) + len(paragraph) > max_chars:
            break
        truncated += paragraph + "\n\n"

    if not truncated.strip():
        for sentence in _SENTENCE_SPLIT.split(text):
            if len(truncated) + len(sentence) > max_chars:
                break
            truncated += sentence + "."

    if not truncated.strip():
        truncated = text[:max_chars]

    return truncated.strip() + TRUNCATION_NOTICE
