"""Bounds and overlap checks for positioned slide elements.

Circles are positioned by their center; text boxes and rectangles by their
top-left corner.  Only text elements are checked for overlap: decorative
shapes may sit behind or around text freely.

Text height is rarely present in generated layouts, so it is estimated from
the text length, box width and font size with an average character width of
``font_size * 0.5``.  This is an approximation without real font metrics.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from carouselgen.core.models import CircleElement, ElementData, TextElement

# Fallbacks used by the overlap detector when a text box lacks a dimension.
DEFAULT_TEXT_WIDTH = 400
DEFAULT_FONT_SIZE = 24
DEFAULT_LINE_HEIGHT = 1.2
AVG_CHAR_WIDTH_RATIO = 0.5


@dataclass(frozen=True)
class BoundingBox:
    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class OverlapResult:
    overlaps: bool
    overlap_area: float
    overlap_percent: float


@dataclass(frozen=True)
class TextOverlap:
    """A pair of overlapping text elements, by index into the slide's elements."""

    index1: int
    index2: int
    overlap_percent: float


@dataclass
class BoundsCheck:
    within_bounds: bool
    violations: list[str] = field(default_factory=list)


def get_element_bounds(element: ElementData) -> BoundingBox:
    """Axis-aligned bounding box of an element.

    Text elements without an explicit height get a zero-height box here;
    the overlap detector estimates their height separately.
    """
    if isinstance(element, CircleElement):
        return BoundingBox(
            x=element.x - element.radius,
            y=element.y - element.radius,
            width=element.radius * 2,
            height=element.radius * 2,
        )
    return BoundingBox(
        x=element.x,
        y=element.y,
        width=element.width or 0,
        height=getattr(element, "height", None) or 0,
    )


def check_overlap(box1: BoundingBox, box2: BoundingBox) -> OverlapResult:
    """Intersect two boxes.

    ``overlap_percent`` is relative to the smaller box, so a small box fully
    covered by a large one reports 100% regardless of the large box's size.
    """
    x_overlap = max(0.0, min(box1.x + box1.width, box2.x + box2.width) - max(box1.x, box2.x))
    y_overlap = max(0.0, min(box1.y + box1.height, box2.y + box2.height) - max(box1.y, box2.y))

    overlap_area = x_overlap * y_overlap
    smaller_area = min(box1.area, box2.area)
    overlap_percent = (overlap_area / smaller_area) * 100 if smaller_area > 0 else 0.0

    return OverlapResult(
        overlaps=overlap_area > 0,
        overlap_area=overlap_area,
        overlap_percent=overlap_percent,
    )


def estimate_text_height(
    text: str,
    width: float,
    font_size: float,
    line_height: float = DEFAULT_LINE_HEIGHT,
) -> float:
    """Estimate the rendered height of wrapped text.

    Args:
        text: Text content.
        width: Box width in pixels.
        font_size: Font size in pixels.
        line_height: Line height multiplier.

    Returns:
        ``lines * font_size * line_height``.  Empty text has zero height; a
        box too narrow for one character counts as a single line.
    """
    avg_char_width = font_size * AVG_CHAR_WIDTH_RATIO
    chars_per_line = math.floor(width / avg_char_width) if avg_char_width > 0 else 0
    if chars_per_line <= 0:
        return font_size * line_height

    lines = math.ceil(len(text) / chars_per_line)
    return lines * font_size * line_height


def _text_box(element: TextElement) -> BoundingBox:
    width = element.width or DEFAULT_TEXT_WIDTH
    font_size = element.font_size or DEFAULT_FONT_SIZE
    height = element.height or estimate_text_height(
        element.text or "",
        width,
        font_size,
        element.line_height or DEFAULT_LINE_HEIGHT,
    )
    return BoundingBox(x=element.x, y=element.y, width=width, height=height)


def find_text_overlaps(
    elements: Sequence[ElementData],
    min_overlap_percent: float = 10,
) -> list[TextOverlap]:
    """Find every pair of text elements overlapping by at least the threshold.

    All pairs are compared; ``index1 < index2`` always holds and indices refer
    to positions in ``elements`` (not among text elements only).
    """
    text_items = [
        (index, _text_box(element))
        for index, element in enumerate(elements)
        if isinstance(element, TextElement)
    ]

    overlaps: list[TextOverlap] = []
    for i, (index1, box1) in enumerate(text_items):
        for index2, box2 in text_items[i + 1 :]:
            result = check_overlap(box1, box2)
            if result.overlaps and result.overlap_percent >= min_overlap_percent:
                overlaps.append(TextOverlap(index1, index2, result.overlap_percent))

    return overlaps


def is_within_bounds(element: ElementData, canvas_width: float, canvas_height: float) -> BoundsCheck:
    """Check an element's box against the canvas ``[0, 0, width, height]``.

    Every violated edge is reported as a readable string so the refinement
    prompt can target it.
    """
    bounds = get_element_bounds(element)
    violations: list[str] = []

    if bounds.x < 0:
        violations.append("x is negative")
    if bounds.y < 0:
        violations.append("y is negative")
    if bounds.x + bounds.width > canvas_width:
        violations.append("exceeds canvas width")
    if bounds.y + bounds.height > canvas_height:
        violations.append("exceeds canvas height")

    return BoundsCheck(within_bounds=not violations, violations=violations)
