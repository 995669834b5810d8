"""Carousel-level layout validation.

Runs the geometry and contrast checks over every slide and aggregates the
findings into a :class:`~carouselgen.core.models.ValidationResult`.  Errors
block (``is_valid`` is false when any exist); warnings never do.

Per slide, checks run in this order:

1. Minimum number of text elements
2. Canvas bounds for every element
3. Contrast of every text element against the slide background
4. Pairwise text overlap

Strict mode (premium quality) adds warnings for overly wide or small text
and for contrast that only passes because AA-large applies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from carouselgen.core.models import (
    CarouselData,
    LayoutIssue,
    SlideData,
    TextElement,
    ValidationResult,
    ValidationWarning,
)

from .contrast import has_sufficient_contrast, suggest_text_color
from .geometry import DEFAULT_FONT_SIZE, find_text_overlaps, is_within_bounds

logger = logging.getLogger(__name__)

STRICT_HORIZONTAL_MARGIN = 80
STRICT_MIN_FONT_SIZE = 16


@dataclass(frozen=True)
class ValidationOptions:
    """Parameters for :func:`validate_slide` and :func:`validate_carousel`."""

    canvas_width: float
    canvas_height: float
    strict_mode: bool = False
    min_text_elements: int = 1


def validate_slide(
    slide: SlideData,
    slide_index: int,
    options: ValidationOptions,
) -> tuple[list[LayoutIssue], list[ValidationWarning]]:
    """Validate one slide.

    Returns:
        Tuple of ``(errors, warnings)``.
    """
    errors: list[LayoutIssue] = []
    warnings: list[ValidationWarning] = []
    text_elements = slide.text_elements

    # --- Minimum text elements ---------------------------------------------
    if len(text_elements) < options.min_text_elements:
        errors.append(
            LayoutIssue(
                type="missing_element",
                slide_index=slide_index,
                message=(
                    f"Slide has {len(text_elements)} text element(s), "
                    f"minimum is {options.min_text_elements}"
                ),
                details={"actual": len(text_elements), "required": options.min_text_elements},
            )
        )

    # --- Per-element bounds and contrast -----------------------------------
    for element_index, element in enumerate(slide.elements):
        bounds = is_within_bounds(element, options.canvas_width, options.canvas_height)
        if not bounds.within_bounds:
            errors.append(
                LayoutIssue(
                    type="out_of_bounds",
                    slide_index=slide_index,
                    element_index=element_index,
                    message=(
                        f"Element {element_index} is out of bounds: "
                        f"{', '.join(bounds.violations)}"
                    ),
                    details={
                        "element": element.type,
                        "x": element.x,
                        "y": element.y,
                        "violations": bounds.violations,
                    },
                )
            )

        if not isinstance(element, TextElement):
            continue

        contrast = has_sufficient_contrast(
            element.color or "",
            slide.background_color,
            element.font_size or DEFAULT_FONT_SIZE,
            element.font_weight,
        )
        if not contrast.passes:
            errors.append(
                LayoutIssue(
                    type="low_contrast",
                    slide_index=slide_index,
                    element_index=element_index,
                    message=f"Text has insufficient contrast (ratio: {contrast.ratio:.2f})",
                    details={
                        "textColor": element.color,
                        "backgroundColor": slide.background_color,
                        "ratio": contrast.ratio,
                        "suggestedColor": suggest_text_color(slide.background_color),
                    },
                )
            )
        elif options.strict_mode and contrast.level == "AA-large":
            warnings.append(
                ValidationWarning(
                    type="contrast_warning",
                    slide_index=slide_index,
                    message=f"Text contrast could be improved (level: {contrast.level})",
                )
            )

    # --- Text overlaps -----------------------------------------------------
    for overlap in find_text_overlaps(slide.elements):
        errors.append(
            LayoutIssue(
                type="overlap",
                slide_index=slide_index,
                message=(
                    f"Text elements {overlap.index1} and {overlap.index2} "
                    f"overlap by {overlap.overlap_percent:.1f}%"
                ),
                details={
                    "element1Index": overlap.index1,
                    "element2Index": overlap.index2,
                    "overlapPercent": overlap.overlap_percent,
                },
            )
        )

    # --- Strict-mode advisories --------------------------------------------
    if options.strict_mode:
        max_width = options.canvas_width - STRICT_HORIZONTAL_MARGIN
        for idx, element in enumerate(text_elements):
            if element.width is not None and element.width > max_width:
                warnings.append(
                    ValidationWarning(
                        type="text_too_wide",
                        slide_index=slide_index,
                        message=(
                            f"Text element {idx} width ({element.width:g}px) exceeds "
                            f"recommended max ({max_width:g}px)"
                        ),
                    )
                )
            if element.font_size is not None and element.font_size < STRICT_MIN_FONT_SIZE:
                warnings.append(
                    ValidationWarning(
                        type="text_too_small",
                        slide_index=slide_index,
                        message=(
                            f"Text element {idx} font size ({element.font_size:g}px) is below "
                            f"recommended minimum ({STRICT_MIN_FONT_SIZE}px)"
                        ),
                    )
                )

    return errors, warnings


def validate_carousel(carousel: CarouselData, options: ValidationOptions) -> ValidationResult:
    """Validate every slide and aggregate the results.

    An empty carousel yields exactly one ``missing_element`` error with
    ``slide_index == -1``.
    """
    all_errors: list[LayoutIssue] = []
    all_warnings: list[ValidationWarning] = []

    for index, slide in enumerate(carousel.slides):
        errors, warnings = validate_slide(slide, index, options)
        all_errors.extend(errors)
        all_warnings.extend(warnings)

    if not carousel.slides:
        all_errors.append(
            LayoutIssue(type="missing_element", slide_index=-1, message="Carousel has no slides")
        )

    logger.debug(
        f"Validated {len(carousel.slides)} slide(s): "
        f"{len(all_errors)} error(s), {len(all_warnings)} warning(s)"
    )
    return ValidationResult(is_valid=not all_errors, errors=all_errors, warnings=all_warnings)


def get_slide_errors(result: ValidationResult, slide_index: int) -> list[LayoutIssue]:
    return [error for error in result.errors if error.slide_index == slide_index]


def is_slide_valid(result: ValidationResult, slide_index: int) -> bool:
    return not get_slide_errors(result, slide_index)


def get_invalid_slide_indices(result: ValidationResult) -> list[int]:
    """Sorted distinct slide indices with at least one error (carousel-level excluded)."""
    return sorted({error.slide_index for error in result.errors if error.slide_index >= 0})
