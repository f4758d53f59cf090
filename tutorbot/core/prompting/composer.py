"""
System prompt composer.

Builds the instruction text sent with every chat turn. The composition is a
pure function over PromptInputs: identical inputs always give the identical
prompt, and nothing here performs I/O.

Layering:
    1. base text: the admin override when non-blank, otherwise the default
       tutor prompt (never both)
    2. the course-overview exception, exactly once
    3. the course-materials block when module content exists, otherwise the
       no-materials notice
    4. tool guidance, only for a non-empty tool list

Dependencies: tutorbot.core.prompting
System role: Prompt assembly for the chat completion call
"""

from dataclasses import dataclass, field

from tutorbot.core.prompting.base_prompt import (
    COURSE_OVERVIEW_EXCEPTION,
    DEFAULT_TUTOR_PROMPT,
    NO_MATERIALS_NOTICE,
    TOOLS_GUIDANCE,
)
from tutorbot.core.prompting.module_context import (
    build_course_materials_block,
    has_content,
)

SECTION_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class PromptInputs:
    """
    Everything the system prompt depends on.

    Attributes:
        override: Admin-supplied replacement for the default prompt (blank = absent)
        module_context: Sentinel-prefixed aggregated course content, or None
        tools: Names of tools offered to the model
    """

    override: str | None = None
    module_context: str | None = None
    tools: tuple[str, ...] = field(default_factory=tuple)

    @property
    def effective_override(self) -> str | None:
        if self.override is None or not self.override.strip():
            return None
        return self.override

    @property
    def has_module_content(self) -> bool:
        return has_content(self.module_context)


def build_tools_block(tools: tuple[str, ...] | list[str]) -> str:
    """Render tool guidance; empty string when no tools are offered."""
    if not tools:
        return ""
    return TOOLS_GUIDANCE.format(tool_names=", ".join(tools))


def build_system_prompt(inputs: PromptInputs) -> str:
    """
    Compose the system prompt for a chat turn.

    Args:
        inputs: Override text, aggregated module context and tool names

    Returns:
        str: Final system instruction text
    """
    sections = [inputs.effective_override or DEFAULT_TUTOR_PROMPT, COURSE_OVERVIEW_EXCEPTION]

    if inputs.has_module_content:
        sections.append(build_course_materials_block(inputs.module_context))
    else:
        sections.append(NO_MATERIALS_NOTICE)

    tools_block = build_tools_block(inputs.tools)
    if tools_block:
        sections.append(tools_block)

    return SECTION_SEPARATOR.join(sections)
