"""Single-call prompt for the basic quality tier.

The basic tier asks for the whole carousel (every slide with positioned
elements) in one structured-output call, so this prompt carries the style,
language, brand and layout guidance that the multi-step tiers spread across
several stages.
"""

from __future__ import annotations

from carouselgen.core.models import BrandKit, PipelineConfig

from .base import PromptPair, join_sections

_STYLE_INSTRUCTIONS = {
    "professional": (
        "Create a professional, business-focused design. Use clean layouts, ample "
        "whitespace and a sophisticated color palette."
    ),
    "casual": (
        "Create a friendly, approachable design. Use warm colors, relaxed layouts and "
        "a conversational tone."
    ),
    "educational": (
        "Create a clear, informative design. Use structured layouts, numbered lists and "
        "a strong visual hierarchy."
    ),
    "inspirational": (
        "Create an emotional, motivating design. Use bold typography, impactful "
        "statements and dynamic compositions."
    ),
}

_LANGUAGE_INSTRUCTIONS = {
    "de": "Write all text content in German.",
    "en": "Write all text content in English.",
}

_GUIDELINES = """DESIGN GUIDELINES:
- Build a clear hierarchy of headline, body text and optional decorative shapes
- Keep at least 60px of padding from every canvas edge
- Headlines are large (48-72px) and bold
- Body text stays readable (24-36px)
- Use shapes sparingly, for visual interest only
- Every slide is complete and visually balanced on its own
- The first slide is a hook that grabs attention
- The last slide ends with a call to action"""

_REQUIREMENTS = """CRITICAL REQUIREMENTS:
- Every slide has at least 2 text elements: a headline and body text
- Text colors contrast clearly with the slide background
- Text elements never overlap each other"""


def brand_kit_lines(brand_kit: BrandKit) -> tuple[str, str]:
    """Format a brand kit as ``(colors, fonts)`` summary lines."""
    colors = ", ".join(f"{color.name}: {color.hex}" for color in brand_kit.colors)
    fonts = ", ".join(f"{font.name}: {font.family} ({font.weight})" for font in brand_kit.fonts)
    return colors or "none", fonts or "none"


def build_basic_prompt(config: PipelineConfig) -> PromptPair:
    """Build the one-shot carousel prompt for ``config``."""
    brand_section = ""
    if config.brand_kit is not None:
        colors, fonts = brand_kit_lines(config.brand_kit)
        brand_section = (
            "BRAND KIT - use these consistently:\n"
            f"- Colors: {colors}\n"
            f"- Fonts: {fonts}"
        )

    system = join_sections(
        "You are a professional carousel designer for social media.",
        f"CANVAS SIZE: {config.canvas_width}x{config.canvas_height} pixels",
        f"{_STYLE_INSTRUCTIONS[config.style]}\n{_LANGUAGE_INSTRUCTIONS[config.language]}",
        brand_section,
        _GUIDELINES,
        _REQUIREMENTS,
    )
    user = f'Create a {config.slide_count}-slide carousel about: "{config.topic}"'
    return PromptPair(system, user)
