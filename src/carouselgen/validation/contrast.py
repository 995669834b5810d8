"""WCAG 2.1 contrast checks for text on slide backgrounds.

Relative luminance uses the sRGB transfer function and the Rec. 709
coefficients (0.2126, 0.7152, 0.0722).  The contrast ratio is
``(L_lighter + 0.05) / (L_darker + 0.05)`` and always lies in ``[1, 21]``.

Large text is 24px and up, or 18.67px and up when bold (WCAG's 18pt / 14pt
bold carve-out).
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Literal

logger = logging.getLogger(__name__)

WCAGLevel = Literal["AAA", "AA", "AA-large", "fail"]

_HEX_PATTERN = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)
_BOLD_WEIGHTS = frozenset({"bold", "semibold", "600", "700"})

# Luminance at which pure black and pure white text have equal contrast.
_EQUAL_CONTRAST_LUMINANCE = 0.179

DARK_TEXT = "#1E293B"
LIGHT_TEXT = "#F8FAFC"


@dataclass(frozen=True)
class ContrastCheck:
    """Outcome of :func:`has_sufficient_contrast`."""

    passes: bool
    ratio: float
    level: WCAGLevel


def hex_to_rgb(hex_color: str) -> tuple[int, int, int] | None:
    """Parse ``#RRGGBB`` (leading ``#`` optional) into an RGB tuple.

    Returns:
        ``(r, g, b)`` in 0-255, or ``None`` if the string is not a 6-digit hex color.
    """
    match = _HEX_PATTERN.match(hex_color.strip()) if hex_color else None
    if not match:
        return None
    return tuple(int(group, 16) for group in match.groups())  # type: ignore[return-value]


def get_luminance(r: int, g: int, b: int) -> float:
    """Relative luminance of an sRGB color (0.0 black to 1.0 white)."""

    def to_linear(channel: int) -> float:
        s = channel / 255
        return s / 12.92 if s <= 0.03928 else ((s + 0.055) / 1.055) ** 2.4

    return 0.2126 * to_linear(r) + 0.7152 * to_linear(g) + 0.0722 * to_linear(b)


def get_contrast_ratio(color1: str, color2: str) -> float:
    """Contrast ratio between two hex colors.

    Unparseable colors yield 1.0 (no contrast) rather than raising, so a
    malformed color shows up as a ``low_contrast`` validation error.
    """
    rgb1 = hex_to_rgb(color1)
    rgb2 = hex_to_rgb(color2)
    if rgb1 is None or rgb2 is None:
        logger.debug(f"Unparseable color pair: {color1!r}, {color2!r}")
        return 1.0

    lum1 = get_luminance(*rgb1)
    lum2 = get_luminance(*rgb2)
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def get_wcag_level(contrast_ratio: float, is_large_text: bool = False) -> WCAGLevel:
    """Map a contrast ratio to a WCAG conformance level.

    ``"AA-large"`` is only returned for normal-size text: it means the ratio
    fails AA for this text but would pass if the text were large.
    """
    if is_large_text:
        if contrast_ratio >= 4.5:
            return "AAA"
        if contrast_ratio >= 3:
            return "AA"
        return "fail"
    if contrast_ratio >= 7:
        return "AAA"
    if contrast_ratio >= 4.5:
        return "AA"
    if contrast_ratio >= 3:
        return "AA-large"
    return "fail"


def is_large_text(font_size: float, font_weight: str = "normal") -> bool:
    is_bold = str(font_weight) in _BOLD_WEIGHTS
    return font_size >= 24 or (font_size >= 18.67 and is_bold)


def has_sufficient_contrast(
    text_color: str,
    background_color: str,
    font_size: float,
    font_weight: str = "normal",
) -> ContrastCheck:
    """Check whether text is legible on its background.

    Args:
        text_color: Hex color of the text.
        background_color: Hex color of the background.
        font_size: Font size in pixels.
        font_weight: ``normal``, ``medium``, ``semibold``, ``bold`` or a
            numeric weight string.

    Returns:
        ContrastCheck where ``passes`` is true for every level except ``"fail"``.
    """
    ratio = get_contrast_ratio(text_color, background_color)
    level = get_wcag_level(ratio, is_large_text(font_size, font_weight))
    return ContrastCheck(passes=level != "fail", ratio=ratio, level=level)


def suggest_text_color(background_color: str) -> str:
    """Pick near-black or near-white text for a background."""
    rgb = hex_to_rgb(background_color)
    if rgb is None:
        return "#000000"
    return DARK_TEXT if get_luminance(*rgb) > _EQUAL_CONTRAST_LUMINANCE else LIGHT_TEXT


def adjust_color(hex_color: str, percent: float) -> str:
    """Lighten (positive percent) or darken (negative percent) a hex color.

    Lightening mixes each channel toward 255; darkening scales each channel
    toward 0.  Channels round half up.  Unparseable input is returned unchanged.
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return hex_color

    if percent < 0:
        factor = 1 + percent / 100
        channels = [math.floor(value * factor + 0.5) for value in rgb]
    else:
        channels = [math.floor(value + (255 - value) * (percent / 100) + 0.5) for value in rgb]

    return "#" + "".join(f"{max(0, min(255, c)):02x}" for c in channels)
