"""Quality tier lookups: credit cost, model per stage, and stage count."""

from __future__ import annotations

from carouselgen.core.config import CarouselGenConfig, config
from carouselgen.core.models import QualityTier

CREDITS_PER_QUALITY: dict[str, int] = {
    "basic": 1,
    "standard": 2,
    "premium": 4,
}


def get_credits_for_quality(quality: QualityTier) -> int:
    """Credits a run of the given tier costs.

    Raises:
        KeyError: If ``quality`` is not a known tier.
    """
    return CREDITS_PER_QUALITY[quality]


def get_model_for_step(
    quality: QualityTier,
    step: str,
    settings: CarouselGenConfig | None = None,
) -> str:
    """Model used for one stage of a run.

    Premium content outlines use the strong model; every other combination
    uses the light model.
    """
    settings = settings or config
    if quality == "premium" and step == "content":
        return settings.strong_model
    return settings.light_model


def count_steps(quality: QualityTier, use_images: bool) -> int:
    """Number of stages reported in the ``start`` event."""
    if quality == "basic":
        return 1
    steps = 4 if quality == "standard" else 5
    return steps + 1 if use_images else steps
