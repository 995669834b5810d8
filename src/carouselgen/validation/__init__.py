"""Layout validation for generated carousels.

- **contrast**: WCAG 2.1 luminance, contrast ratio and conformance level
- **geometry**: element bounds and text overlap detection
- **carousel**: per-slide and carousel-wide aggregation into a ValidationResult
"""

from carouselgen.validation.carousel import (
    ValidationOptions,
    get_invalid_slide_indices,
    get_slide_errors,
    is_slide_valid,
    validate_carousel,
    validate_slide,
)
from carouselgen.validation.contrast import (
    ContrastCheck,
    adjust_color,
    get_contrast_ratio,
    get_luminance,
    get_wcag_level,
    has_sufficient_contrast,
    hex_to_rgb,
    suggest_text_color,
)
from carouselgen.validation.geometry import (
    BoundingBox,
    check_overlap,
    estimate_text_height,
    find_text_overlaps,
    get_element_bounds,
    is_within_bounds,
)

__all__ = [
    "BoundingBox",
    "ContrastCheck",
    "ValidationOptions",
    "adjust_color",
    "check_overlap",
    "estimate_text_height",
    "find_text_overlaps",
    "get_contrast_ratio",
    "get_element_bounds",
    "get_invalid_slide_indices",
    "get_luminance",
    "get_slide_errors",
    "get_wcag_level",
    "has_sufficient_contrast",
    "hex_to_rgb",
    "is_slide_valid",
    "is_within_bounds",
    "suggest_text_color",
    "validate_carousel",
    "validate_slide",
]
