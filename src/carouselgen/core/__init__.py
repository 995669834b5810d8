"""Core data model and configuration for the carousel generator.

- **CarouselGenConfig / config**: environment-based settings (Pydantic Settings,
  ``CAROUSELGEN_`` prefix)
- **models**: pydantic types for run parameters, stage outputs, the final
  carousel document and the validation report
- **schemas**: strict JSON schemas requested from the model for each stage
"""

from carouselgen.core.config import CarouselGenConfig, config
from carouselgen.core.models import (
    BrandKit,
    CarouselData,
    CircleElement,
    ContentOutline,
    DesignSystem,
    ImagePlan,
    LayoutIssue,
    PipelineConfig,
    RectangleElement,
    SlideContent,
    SlideData,
    SlideImageData,
    StockImage,
    TextElement,
    ValidationResult,
    ValidationWarning,
)

__all__ = [
    "BrandKit",
    "CarouselData",
    "CarouselGenConfig",
    "CircleElement",
    "ContentOutline",
    "DesignSystem",
    "ImagePlan",
    "LayoutIssue",
    "PipelineConfig",
    "RectangleElement",
    "SlideContent",
    "SlideData",
    "SlideImageData",
    "StockImage",
    "TextElement",
    "ValidationResult",
    "ValidationWarning",
    "config",
]
