"""
Course overview question detection.

Dependencies: None
System role: Classifies user messages that bypass the Socratic constraint
"""

OVERVIEW_PHRASES = (
    "what is this course about",
    "what's this course about",
    "what will i learn",
    "course overview",
    "what are the course objectives",
    "what topics are covered",
    "what's in this course",
)

NO_MATERIALS_NOTE = "[NOTE: No course materials have been uploaded yet for this module.]"


def is_course_overview_question(text: str) -> bool:
    """Case-insensitive match against the literal course-overview phrasings."""
    lowered = " ".join(text.lower().split())
    return any(phrase in lowered for phrase in OVERVIEW_PHRASES)
