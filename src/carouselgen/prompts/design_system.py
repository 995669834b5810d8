"""Stage 2 prompt: one design system shared by every slide."""

from __future__ import annotations

from carouselgen.core.models import BrandKit

from .base import PromptPair, join_sections
from .basic import brand_kit_lines

_STYLE_GUIDELINES = {
    "professional": {
        "colors": "Muted, trustworthy colors (blue, dark green, slate). High contrast for legibility.",
        "typography": "Large headlines (56-64px) with a clear hierarchy. Body 22-26px. Semibold for emphasis.",
        "spacing": "Generous spacing, at least 60px padding, plenty of whitespace.",
        "decorative": "Minimal decoration. Subtle geometric shapes at low opacity.",
    },
    "casual": {
        "colors": "Warm, friendly colors. Playful accents for highlights.",
        "typography": "Expressive headlines (52-60px). Relaxed body text (24-28px).",
        "spacing": "Moderate spacing (50-70px). Nothing too stiff.",
        "decorative": "More decoration allowed. Organic or bold shapes at medium opacity.",
    },
    "educational": {
        "colors": "Clear, legible combinations. Secondary color for highlights. Strong contrast.",
        "typography": "Legibility first. Headlines 52-58px, body 24-28px with comfortable line height.",
        "spacing": "Structured, consistent gaps between elements.",
        "decorative": "Geometric shapes that structure content, such as numbered steps.",
    },
    "inspirational": {
        "colors": "Bold, emotional colors with strong contrast and energetic accents.",
        "typography": "Big, impactful headlines (60-72px), bold weights. Body can be compact.",
        "spacing": "Tighter for impact, but headlines need room to breathe.",
        "decorative": "Bold, dominant shapes at higher opacity.",
    },
}

_RULES = """RULES:
1. Text must be legible: light text on dark backgrounds, dark text on light backgrounds
2. All colors are hex (#RRGGBB)
3. Typography sizes are in pixels
4. Spacing values fit the canvas size
5. Font weights are "normal" (400), "medium" (500), "semibold" (600) or "bold" (700)"""

_EXAMPLE = """EXAMPLE - professional style with a blue/white brand kit:
{
  "colors": {"primary": "#1E40AF", "secondary": "#3B82F6", "background": "#FFFFFF", "backgroundAlt": "#F1F5F9", "text": "#1E293B", "textMuted": "#64748B", "accent": "#F59E0B"},
  "typography": {
    "headline": {"size": 56, "weight": "bold", "lineHeight": 1.1},
    "subheadline": {"size": 32, "weight": "semibold", "lineHeight": 1.2},
    "body": {"size": 24, "weight": "normal", "lineHeight": 1.5},
    "caption": {"size": 18, "weight": "normal", "lineHeight": 1.4}
  },
  "spacing": {"paddingHorizontal": 60, "paddingVertical": 60, "elementGap": 24, "sectionGap": 40},
  "decorative": {"useShapes": true, "shapeStyle": "geometric", "cornerRadius": 12, "opacity": 0.15}
}"""


def build_design_system_prompt(
    style: str,
    brand_kit: BrandKit | None,
    canvas_width: int,
    canvas_height: int,
) -> PromptPair:
    """Build the design system prompt.

    When a brand kit is given its colors and fonts are listed as mandatory
    and the primary/secondary colors must be taken from it.
    """
    guidelines = _STYLE_GUIDELINES[style]

    brand_section = ""
    if brand_kit is not None:
        colors, fonts = brand_kit_lines(brand_kit)
        brand_section = (
            "BRAND KIT (mandatory):\n"
            f"- Colors: {colors}\n"
            f"- Fonts: {fonts}\n"
            "Primary and secondary colors must come from the brand kit."
        )

    system = join_sections(
        "You are an experienced UI designer specializing in social media carousels. "
        "You create a consistent design system that is attractive and easy to read.",
        f"CANVAS SIZE: {canvas_width}x{canvas_height}px",
        f'STYLE GUIDELINES FOR "{style.upper()}":\n'
        f"- Colors: {guidelines['colors']}\n"
        f"- Typography: {guidelines['typography']}\n"
        f"- Spacing: {guidelines['spacing']}\n"
        f"- Decorative: {guidelines['decorative']}",
        brand_section,
        _RULES,
        _EXAMPLE,
    )

    if brand_kit is not None:
        user = f'Create a design system for the "{style}" style using the brand kit.'
    else:
        user = f'Create a design system for the "{style}" style.'
    return PromptPair(system, user)
