"""Pydantic request models for the carousel generation API.

Models
------
GenerateCarouselRequest
    Payload for ``POST /api/generate-carousel``.  Uses the same camelCase
    wire format as the rest of the data model.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from carouselgen.core.config import config
from carouselgen.core.models import BrandKit, CamelModel, Language, PipelineConfig, QualityTier, Style

MAX_SLIDES = 10


class GenerateCarouselRequest(CamelModel):
    """Request body for ``POST /api/generate-carousel``.

    Attributes:
        topic: What the carousel is about.
        style: Tone of voice and visual direction.
        slide_count: Requested number of slides; values above 10 are clamped.
        language: Language of the generated text.
        quality: Quality tier.  Defaults to ``"basic"``.
        brand_kit: Optional brand colors and fonts.
        canvas_width: Canvas width in pixels.  Defaults to the configured width.
        canvas_height: Canvas height in pixels.  Defaults to the configured height.
        use_images: Whether to search stock images (standard and premium only).
    """

    topic: str = Field(..., min_length=1)
    style: Style = "professional"
    slide_count: int = Field(default=5, ge=1)
    language: Language = "en"
    quality: QualityTier = "basic"
    brand_kit: BrandKit | None = None
    canvas_width: int | None = Field(default=None, gt=0)
    canvas_height: int | None = Field(default=None, gt=0)
    use_images: bool = False

    @field_validator("slide_count", mode="after")
    @classmethod
    def _clamp_slide_count(cls, value: int) -> int:
        return min(value, MAX_SLIDES)

    def to_pipeline_config(self) -> PipelineConfig:
        """Build the run parameters, filling canvas defaults from settings."""
        values: dict[str, Any] = self.model_dump(exclude={"canvas_width", "canvas_height"})
        return PipelineConfig(
            **values,
            canvas_width=self.canvas_width or config.default_canvas_width,
            canvas_height=self.canvas_height or config.default_canvas_height,
        )
