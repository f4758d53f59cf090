"""
Prompt composition package.

Exports:
  - PromptInputs, build_system_prompt: pure system prompt composer
  - CONTENT_SENTINEL, has_content: aggregated-content flag helpers
  - is_course_overview_question, NO_MATERIALS_NOTE: overview detection
"""

from tutorbot.core.prompting.base_prompt import (
    COURSE_OVERVIEW_EXCEPTION,
    DEFAULT_TUTOR_PROMPT,
    NO_MATERIALS_NOTICE,
)
from tutorbot.core.prompting.composer import PromptInputs, build_system_prompt
from tutorbot.core.prompting.module_context import CONTENT_SENTINEL, has_content
from tutorbot.core.prompting.overview import NO_MATERIALS_NOTE, is_course_overview_question

__all__ = [
    "COURSE_OVERVIEW_EXCEPTION",
    "CONTENT_SENTINEL",
    "DEFAULT_TUTOR_PROMPT",
    "NO_MATERIALS_NOTE",
    "NO_MATERIALS_NOTICE",
    "PromptInputs",
    "build_system_prompt",
    "has_content",
    "is_course_overview_question",
]
