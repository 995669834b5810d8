"""Prompt builders for each generation stage.

Every builder is a pure function returning a :class:`PromptPair` of system
and user message text.
"""

from carouselgen.prompts.base import PromptPair
from carouselgen.prompts.basic import build_basic_prompt
from carouselgen.prompts.content_outline import build_content_outline_prompt
from carouselgen.prompts.design_system import build_design_system_prompt
from carouselgen.prompts.image_keywords import build_image_keywords_prompt
from carouselgen.prompts.layout import build_layout_prompt
from carouselgen.prompts.refinement import build_refinement_prompt

__all__ = [
    "PromptPair",
    "build_basic_prompt",
    "build_content_outline_prompt",
    "build_design_system_prompt",
    "build_image_keywords_prompt",
    "build_layout_prompt",
    "build_refinement_prompt",
]
