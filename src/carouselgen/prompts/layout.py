"""Layout prompt: absolute element positions for one slide.

Recommended padding and font sizes are derived from the canvas so that the
worked examples stay valid for any canvas size:

- padding: 6% of the width
- headline font: 5% of the width
- subheadline font: 3.2% of the width
- body font: 2.8% of the width
"""

from __future__ import annotations

from carouselgen.core.models import DesignSystem, SlideContent, SlideImageData

from .base import PromptPair, join_sections, to_pretty_json

_SLIDE_TYPE_DESCRIPTIONS = {
    "hook": "attention-grabbing, centered, high impact",
    "content": "informative, headline on top, body below",
    "list": "structured, headline plus one text element per bullet",
    "quote": "large, emotional, with quotation marks",
    "cta": "call to action, button-like, centered",
}


def _scaled(value: float, ratio: float) -> int:
    return round(value * ratio)


def _layout_examples(canvas_width: int, canvas_height: int) -> str:
    padding = _scaled(canvas_width, 0.06)
    content_width = canvas_width - padding * 2
    headline = _scaled(canvas_width, 0.05)
    subheadline = _scaled(canvas_width, 0.032)
    body = _scaled(canvas_width, 0.028)
    list_y = _scaled(canvas_height, 0.22)
    list_gap = _scaled(canvas_height, 0.08)

    return f"""EXAMPLE 1 - hook slide (vertically centered):
{{
  "backgroundColor": "#1E40AF",
  "elements": [
    {{"type": "text", "text": "Are you working hard or smart?", "x": {padding}, "y": {_scaled(canvas_height, 0.35)}, "width": {content_width}, "fontSize": {headline}, "fontWeight": "bold", "color": "#FFFFFF", "textAlign": "center", "height": null, "fill": null, "cornerRadius": null, "radius": null, "opacity": null}},
    {{"type": "text", "text": "5 strategies that change everything", "x": {padding}, "y": {_scaled(canvas_height, 0.48)}, "width": {content_width}, "fontSize": {subheadline}, "fontWeight": "normal", "color": "#BFDBFE", "textAlign": "center", "height": null, "fill": null, "cornerRadius": null, "radius": null, "opacity": null}},
    {{"type": "circle", "x": {_scaled(canvas_width, 0.85)}, "y": {_scaled(canvas_height, 0.12)}, "radius": {_scaled(canvas_width, 0.08)}, "fill": "#3B82F6", "opacity": 0.3, "text": null, "width": null, "height": null, "fontSize": null, "fontWeight": null, "color": null, "textAlign": null, "cornerRadius": null}}
  ]
}}

EXAMPLE 2 - list slide (headline on top, one element per bullet):
{{
  "backgroundColor": "#FFFFFF",
  "elements": [
    {{"type": "text", "text": "The 3 pillars of focus", "x": {padding}, "y": {_scaled(canvas_height, 0.08)}, "width": {content_width}, "fontSize": {headline}, "fontWeight": "bold", "color": "#1E293B", "textAlign": "left", "height": null, "fill": null, "cornerRadius": null, "radius": null, "opacity": null}},
    {{"type": "rectangle", "x": {padding}, "y": {_scaled(canvas_height, 0.16)}, "width": {_scaled(canvas_width, 0.1)}, "height": 4, "fill": "#1E40AF", "cornerRadius": 2, "opacity": 1, "text": null, "fontSize": null, "fontWeight": null, "color": null, "textAlign": null, "radius": null}},
    {{"type": "text", "text": "• Plan the day the evening before", "x": {padding}, "y": {list_y}, "width": {content_width}, "fontSize": {body}, "fontWeight": "normal", "color": "#334155", "textAlign": "left", "height": null, "fill": null, "cornerRadius": null, "radius": null, "opacity": null}},
    {{"type": "text", "text": "• Block time for deep work", "x": {padding}, "y": {list_y + list_gap}, "width": {content_width}, "fontSize": {body}, "fontWeight": "normal", "color": "#334155", "textAlign": "left", "height": null, "fill": null, "cornerRadius": null, "radius": null, "opacity": null}},
    {{"type": "text", "text": "• Silence notifications", "x": {padding}, "y": {list_y + list_gap * 2}, "width": {content_width}, "fontSize": {body}, "fontWeight": "normal", "color": "#334155", "textAlign": "left", "height": null, "fill": null, "cornerRadius": null, "radius": null, "opacity": null}}
  ]
}}"""


def _image_section(image_data: SlideImageData | None) -> str:
    if image_data is None or image_data.image is None or image_data.image_type == "none":
        return ""

    image = image_data.image
    lines = [
        "IMAGE FOR THIS SLIDE:",
        f"- URL: {image.url}",
        f"- Size: {image.width}x{image.height}px",
        f"- Photographer: {image.photographer}",
    ]
    if image_data.image_type == "background":
        lines.append(
            "- Usage: full-slide background. The image is rendered behind all elements; "
            "add a dark semi-transparent rectangle over it and use light text."
        )
    else:
        lines.append(
            "- Usage: inline element. Reserve a clear area (about 40% of the canvas) "
            "for the image and keep all text outside it."
        )
    return "\n".join(lines)


def build_layout_prompt(
    slide_content: SlideContent,
    slide_index: int,
    total_slides: int,
    design_system: DesignSystem,
    canvas_width: int,
    canvas_height: int,
    image_data: SlideImageData | None = None,
) -> PromptPair:
    """Build the layout prompt for one slide.

    Args:
        slide_content: Text content of the slide from the outline.
        slide_index: 0-based position of the slide.
        total_slides: Number of slides in the carousel.
        design_system: Shared colors, typography, spacing and decoration.
        canvas_width: Canvas width in pixels.
        canvas_height: Canvas height in pixels.
        image_data: Resolved image for this slide, if any.

    Returns:
        PromptPair asking for one complete slide object.
    """
    colors = design_system.colors
    typography = design_system.typography
    spacing = design_system.spacing
    decorative = design_system.decorative

    padding = _scaled(canvas_width, 0.06)
    content_width = canvas_width - padding * 2

    if decorative.use_shapes:
        decoration = f"Shapes ({decorative.shape_style}, opacity {decorative.opacity:g})"
    else:
        decoration = "No shapes"

    system = join_sections(
        "You are a layout designer for social media carousels. "
        "You compute precise absolute positions for every element of a slide.",
        f"CANVAS: {canvas_width}x{canvas_height}px",
        "VALUES FOR THIS CANVAS:\n"
        f"- Padding: {padding}px (6% of width)\n"
        f"- Content width: {content_width}px\n"
        f"- Recommended headline size: {_scaled(canvas_width, 0.05)}px\n"
        f"- Recommended body size: {_scaled(canvas_width, 0.028)}px",
        "DESIGN SYSTEM:\n"
        f"- Colors: primary {colors.primary}, secondary {colors.secondary}, "
        f"background {colors.background}, text {colors.text}, muted {colors.text_muted}, "
        f"accent {colors.accent}\n"
        f"- Typography: headline {typography.headline.size:g}px {typography.headline.weight}, "
        f"body {typography.body.size:g}px {typography.body.weight}\n"
        f"- Spacing: {spacing.padding_horizontal:g}px horizontal, "
        f"{spacing.padding_vertical:g}px vertical, gap {spacing.element_gap:g}px\n"
        f"- Decorative: {decoration}",
        "LAYOUT RULES:\n"
        f"1. Text stays inside the canvas: x >= {padding}, x + width <= {canvas_width - padding}\n"
        f"2. y >= {padding}, and nothing extends below {canvas_height - padding}\n"
        f'3. hook/cta headlines are centered: x = {padding}, width = {content_width}, textAlign "center"\n'
        f'4. content/list headlines are left-aligned: x = {padding}, textAlign "left"\n'
        "5. Each bullet is its own text element prefixed with •\n"
        f"6. Leave at least {_scaled(canvas_height, 0.04)}px vertically between text elements\n"
        "7. Text colors contrast clearly with the background",
        "ELEMENT FIELDS (every key is present; keys that do not apply are null):\n"
        '- "text": text, x, y, width, fontSize, fontWeight, color, textAlign\n'
        '- "rectangle": x, y, width, height, fill, cornerRadius, opacity\n'
        '- "circle": x and y are the CENTER, radius, fill, opacity',
        _layout_examples(canvas_width, canvas_height),
    )

    user = join_sections(
        f"Lay out slide {slide_index + 1} of {total_slides}.",
        f"SLIDE TYPE: {slide_content.type} ({_SLIDE_TYPE_DESCRIPTIONS[slide_content.type]})",
        f"CONTENT:\n{to_pretty_json(slide_content)}",
        _image_section(image_data),
        "Return one complete slide object with backgroundColor and elements.",
    )
    return PromptPair(system, user)
