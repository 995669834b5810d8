"""Carousel Generator - AI social media carousels with layout validation."""

__version__ = "0.1.0"

from carouselgen.core.config import CarouselGenConfig, config
from carouselgen.core.models import CarouselData, PipelineConfig
from carouselgen.pipeline import (
    GenerationPipeline,
    PipelineEvent,
    PipelineRun,
    get_credits_for_quality,
)
from carouselgen.validation import validate_carousel

__all__ = [
    "CarouselData",
    "CarouselGenConfig",
    "GenerationPipeline",
    "PipelineConfig",
    "PipelineEvent",
    "PipelineRun",
    "config",
    "get_credits_for_quality",
    "validate_carousel",
]
