"""
Course-materials block for the system prompt.

Aggregated module content is prefixed with a sentinel flag; this module owns
that flag and renders the block the composer appends when it is present.

Dependencies: tutorbot.core.prompting.base_prompt
System role: Module context rendering
"""

from tutorbot.core.prompting.base_prompt import (
    COURSE_MATERIALS_HEADER,
    COURSE_MATERIALS_REMINDER,
)

CONTENT_SENTINEL = "CONTENT_AVAILABLE=TRUE"


def has_content(module_context: str | None) -> bool:
    """Whether an aggregated context string carries the content sentinel."""
    return bool(module_context) and module_context.startswith(CONTENT_SENTINEL)


def strip_sentinel(module_context: str) -> str:
    """Return the aggregated documents without the leading sentinel line."""
    if module_context.startswith(CONTENT_SENTINEL):
        return module_context[len(CONTENT_SENTINEL):].lstrip("\n")
    return module_context


def build_course_materials_block(module_context: str) -> str:
    """
    Render aggregated module content for the system prompt.

    Args:
        module_context: Sentinel-prefixed output of the content aggregator

    Returns:
        str: Header, materials and overview reminder
    """
    return (
        f"{COURSE_MATERIALS_HEADER}\n\n"
        f"{strip_sentinel(module_context)}\n\n"
        f"{COURSE_MATERIALS_REMINDER}"
    )
