"""Image planning prompt: which slides get a stock photo, and what to search for."""

from __future__ import annotations

from carouselgen.core.models import ContentOutline

from .base import PromptPair, join_sections, to_pretty_json

_STYLE_GUIDANCE = {
    "professional": "Business-appropriate imagery: office, teamwork, technology, success.",
    "casual": "Friendly, relatable imagery: lifestyle, people, nature, everyday moments.",
    "educational": "Clear, illustrative imagery: concepts, learning, books, diagrams.",
    "inspirational": "Emotional, powerful imagery: landscapes, achievement, adventure.",
}

_SLIDE_GUIDELINES = """GUIDELINES PER SLIDE TYPE:
1. Hook: "background" for drama or "element" for a modern look
2. Content: prefer "element" so the image balances the text
3. List: small "element" accent or "none" to keep the focus on text
4. Quote: "background" with an overlay for emotional impact
5. CTA: "element" or "none" to keep the focus on the action"""

_IMAGE_TYPES = """IMAGE TYPES:
- "background": full-slide image behind a darkened text overlay
- "element": image placed next to, above or below the text
- "none": no image for this slide"""

_KEYWORD_RULES = """KEYWORD RULES:
- Keywords are ALWAYS in English
- Use 2-4 descriptive words, specific but not niche
- "element" images: clear, object-focused subjects
- "background" images: atmospheric, wide shots
- Good: "business meeting teamwork", "laptop coffee workspace"
- Bad: "success", "the concept of time"
- Aim for images on 50-70% of slides and mix both image types"""


def build_image_keywords_prompt(outline: ContentOutline, style: str) -> PromptPair:
    """Build the image planning prompt for a finished content outline."""
    system = join_sections(
        "You are an image curator for social media carousels. Decide which slides "
        "need images and write stock photo search keywords for them.",
        _SLIDE_GUIDELINES,
        _IMAGE_TYPES,
        f'STYLE GUIDANCE FOR "{style.upper()}":\n{_STYLE_GUIDANCE[style]}',
        _KEYWORD_RULES,
    )
    user = join_sections(
        "Analyze this carousel content and plan images for every slide.",
        f"CONTENT:\n{to_pretty_json(outline)}",
        "For each slide (0-based slideIndex) decide useImage, imageType, "
        "keywords (English) and style (photo/abstract/minimal/illustration).",
    )
    return PromptPair(system, user)
