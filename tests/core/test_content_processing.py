"""
Test suite for extracted-text cleanup and structure analysis.

System role: Verification of document content processing helpers
"""

from tutorbot.core.ingestion import (
    MAX_PROCESSED_CHARS,
    analyze_content_structure,
    clean_processed_content,
    truncate_for_model,
)
from tutorbot.core.ingestion.content_cleaner import TRUNCATION_NOTICE


class TestCleanProcessedContent:
    def test_control_characters_removed(self) -> None:
        # Arrange
        text = "a\x00b\x07c\x1fd\x7fe"

        # Act / Assert
        assert clean_processed_content(text) == "abcde"

    def test_whitespace_controls_kept(self) -> None:
        assert clean_processed_content("a\tb\nc\rd") == "a\tb\nc\rd"

    def test_length_capped(self) -> None:
        # Arrange
        text = "x" * (MAX_PROCESSED_CHARS + 50)

        # Act / Assert
        assert len(clean_processed_content(text)) == MAX_PROCESSED_CHARS

    def test_none_becomes_empty(self) -> None:
        assert clean_processed_content(None) == ""


class TestTruncateForModel:
    def test_short_text_unchanged(self) -> None:
        assert truncate_for_model("short", 100) == "short"

    def test_cuts_on_paragraph_boundary(self) -> None:
        # Arrange
        text = "first paragraph\n\nsecond paragraph\n\nthird paragraph"

        # Act
        result = truncate_for_model(text, 40)

        # Assert
        assert result.startswith("first paragraph\n\nsecond paragraph")
        assert "third" not in result
        assert result.endswith(TRUNCATION_NOTICE)


class TestAnalyzeContentStructure:
    def test_detects_subject_and_difficulty(self) -> None:
        # Arrange
        text = (
            "Introduction to Sorting\n"
            "This basic guide covers the sorting algorithm family, recursion "
            "and complexity. A sorting algorithm example follows."
        )

        # Act
        analysis = analyze_content_structure(text)

        # Assert
        assert analysis.subject == "algorithms"
        assert analysis.difficulty == "beginner"
        assert "Introduction to Sorting" in analysis.topics

    def test_defaults_when_nothing_matches(self) -> None:
        # Act
        analysis = analyze_content_structure("zzz qqq")

        # Assert
        assert analysis.subject == "computer science"
        assert analysis.content_type == "educational material"
        assert analysis.difficulty == "intermediate"
        assert analysis.topics == []
