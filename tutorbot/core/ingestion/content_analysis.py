"""
Keyword-based content structure analysis.

Cheap heuristics that label uploaded course material with a subject area,
content type, difficulty and heading-like topics. The topics end up in
module_content.keywords.

Dependencies: re (stdlib)
System role: Document enrichment during content processing
"""

import re
from dataclasses import dataclass, field

SUBJECT_KEYWORDS: dict[str, tuple[str, ...]] = {
    "algorithms": ("algorithm", "sorting", "searching", "complexity", "big o", "recursion", "dynamic programming"),
    "data structures": ("array", "linked list", "stack", "queue", "tree", "graph", "hash", "heap"),
    "programming": ("function", "variable", "class", "object", "loop", "condition", "syntax", "debug"),
    "web development": ("html", "css", "javascript", "react", "frontend", "backend", "api", "rest"),
    "databases": ("sql", "query", "table", "database", "index", "join", "transaction", "schema"),
    "machine learning": ("neural network", "training", "model", "dataset", "prediction", "classification"),
    "software engineering": ("design pattern", "architecture", "testing", "agile", "scrum", "deployment"),
}

CONTENT_TYPE_INDICATORS: dict[str, tuple[str, ...]] = {
    "theoretical": ("theory", "concept", "principle", "overview"),
    "practical": ("example", "implementation", "code", "practice"),
    "tutorial": ("step", "guide", "how to", "tutorial"),
    "reference": ("reference", "documentation", "api", "manual"),
}

BEGINNER_INDICATORS = ("introduction", "basic", "fundamentals", "getting started")
ADVANCED_INDICATORS = ("advanced", "complex", "optimization", "sophisticated")

HEADING_PATTERNS = (
    re.compile(r"^[A-Z][A-Za-z ]{3,50}$", re.MULTILINE),
    re.compile(r"^\d+\.?\s+[A-Z][A-Za-z ]{3,50}$", re.MULTILINE),
    re.compile(r"^Chapter\s+\d+[:\s]+[A-Za-z ]{3,50}$", re.MULTILINE),
)

MAX_TOPICS = 10


@dataclass
class ContentAnalysis:
    subject: str = "computer science"
    content_type: str = "educational material"
    difficulty: str = "intermediate"
    topics: list[str] = field(default_factory=list)


def _keyword_hits(text: str, keyword: str) -> int:
    pattern = r"\b" + r"\s+".join(map(re.escape, keyword.split())) + r"\b"
    return len(re.findall(pattern, text))


def analyze_content_structure(text: str) -> ContentAnalysis:
    """
    Label text with subject, content type, difficulty and topics.

    Args:
        text: Extracted document text

    Returns:
        ContentAnalysis (defaults when nothing matches)
    """
    lowered = text.lower()
    analysis = ContentAnalysis()

    best_score = 0
    for subject, keywords in SUBJECT_KEYWORDS.items():
        score = sum(_keyword_hits(lowered, keyword) for keyword in keywords)
        if score > best_score:
            best_score, analysis.subject = score, subject

    best_score = 0
    for content_type, indicators in CONTENT_TYPE_INDICATORS.items():
        score = sum(1 for indicator in indicators if indicator in lowered)
        if score > best_score:
            best_score, analysis.content_type = score, content_type

    beginner = sum(1 for word in BEGINNER_INDICATORS if word in lowered)
    advanced = sum(1 for word in ADVANCED_INDICATORS if word in lowered)
    if beginner > advanced:
        analysis.difficulty = "beginner"
    elif advanced > beginner:
        analysis.difficulty = "advanced"

    for pattern in HEADING_PATTERNS:
        for match in pattern.findall(text)[:MAX_TOPICS]:
            topic = match.strip()
            if topic not in analysis.topics:
                analysis.topics.append(topic)
    analysis.topics = analysis.topics[:MAX_TOPICS]

    return analysis
