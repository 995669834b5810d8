"""Refinement prompt: fix a slide's validation errors while keeping its style."""

from __future__ import annotations

import json

from carouselgen.core.models import LayoutIssue, SlideData

from .base import PromptPair, join_sections, to_pretty_json

_ERROR_TYPES = """ERROR TYPES:
- "overlap": text elements overlap. Move one of them.
- "out_of_bounds": an element leaves the canvas. Adjust its position or size.
- "low_contrast": text is hard to read. Change the text or background color.
- "missing_element": a required text element is missing. Add it."""


def format_errors(errors: list[LayoutIssue]) -> str:
    """Number the errors one per line, with their details as JSON."""
    lines = []
    for number, error in enumerate(errors, start=1):
        line = f"{number}. [{error.type}] {error.message}"
        if error.details:
            line += f" ({json.dumps(error.details, ensure_ascii=False)})"
        lines.append(line)
    return "\n".join(lines)


def build_refinement_prompt(
    slide: SlideData,
    slide_index: int,
    errors: list[LayoutIssue],
    canvas_width: int,
    canvas_height: int,
    attempt: int,
    max_attempts: int,
) -> PromptPair:
    """Build the prompt that asks the model to repair one slide.

    Args:
        slide: The current (invalid) slide.
        slide_index: 0-based position of the slide.
        errors: Validation errors for this slide only.
        canvas_width: Canvas width in pixels.
        canvas_height: Canvas height in pixels.
        attempt: 1-based refinement pass number.
        max_attempts: Total number of passes allowed.
    """
    system = join_sections(
        "You are a layout corrector for social media carousels. "
        "You fix layout errors while preserving the slide's style.",
        f"CANVAS: {canvas_width}x{canvas_height}px",
        _ERROR_TYPES,
        "RULES:\n"
        "1. Change only what is needed to fix the errors\n"
        "2. Keep the overall style\n"
        "3. Make sure the fix introduces no new errors\n"
        "4. All x, y, width and height values are >= 0\n"
        "5. Every element stays inside the canvas",
        f"This is attempt {attempt} of {max_attempts}. Be precise.",
    )
    user = join_sections(
        f"Fix slide {slide_index + 1}:",
        f"ERRORS:\n{format_errors(errors)}",
        f"CURRENT LAYOUT:\n{to_pretty_json(slide)}",
        "Return the corrected slide object.",
    )
    return PromptPair(system, user)
