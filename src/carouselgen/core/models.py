"""Pydantic data model for carousel generation.

Every artifact that flows through the generation pipeline is defined here:
run parameters, the intermediate stage outputs (content outline, design
system, image plan), the final carousel document, and the validation report.

Wire Format
-----------
Model responses, event payloads and HTTP bodies all use camelCase keys
(``backgroundColor``, ``fontSize``, ``slideIndex``).  The models expose
snake_case attributes and accept either spelling on input::

    slide = SlideData.model_validate({"backgroundColor": "#fff", "elements": []})
    slide.background_color      # "#fff"
    slide.to_dict()             # {"backgroundColor": "#fff", "elements": []}

Elements
--------
``ElementData`` is a discriminated union on ``type``.  Structured-output
responses carry every element key and set the ones that do not apply to the
element type to ``null``; those are ignored on parsing, and ``null`` for an
optional styling field falls back to its default.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Style = Literal["professional", "casual", "educational", "inspirational"]
Language = Literal["de", "en"]
QualityTier = Literal["basic", "standard", "premium"]
SlideType = Literal["hook", "content", "list", "quote", "cta"]
ImageType = Literal["background", "element", "none"]
FontWeight = Literal["normal", "bold", "500", "600", "700"]
IssueType = Literal["overlap", "out_of_bounds", "low_contrast", "missing_element"]


class CamelModel(BaseModel):
    """Base model with camelCase aliases and lenient extra-field handling."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Brand kit (read-only input from the persistence layer).
# ---------------------------------------------------------------------------


class BrandColor(CamelModel):
    name: str
    hex: str


class BrandFont(CamelModel):
    name: str
    family: str
    weight: str = "normal"


class BrandKit(CamelModel):
    """Color and font constraints a design system must respect."""

    id: str | None = None
    name: str | None = None
    colors: list[BrandColor] = Field(default_factory=list)
    fonts: list[BrandFont] = Field(default_factory=list)
    logo_url: str | None = None


# ---------------------------------------------------------------------------
# Run parameters.
# ---------------------------------------------------------------------------


class PipelineConfig(CamelModel):
    """Immutable parameters of a single generation run.

    Attributes:
        topic: What the carousel is about.  Must contain non-whitespace text.
        style: Tone of voice and visual direction.
        slide_count: Number of slides to create (1-10).
        language: Language of all generated text.
        quality: Quality tier selecting the pipeline strategy.
        brand_kit: Optional color/font constraints.
        canvas_width: Canvas width in pixels.
        canvas_height: Canvas height in pixels.
        use_images: Whether the stock image stage runs (ignored for basic).
    """

    model_config = ConfigDict(frozen=True)

    topic: str = Field(..., min_length=1)
    style: Style = "professional"
    slide_count: int = Field(default=5, ge=1, le=10)
    language: Language = "en"
    quality: QualityTier = "basic"
    brand_kit: BrandKit | None = None
    canvas_width: int = Field(default=1080, gt=0)
    canvas_height: int = Field(default=1350, gt=0)
    use_images: bool = False

    @field_validator("topic")
    @classmethod
    def _topic_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("topic must not be blank")
        return value

    @property
    def images_enabled(self) -> bool:
        """True when the image stage runs for this configuration."""
        return self.use_images and self.quality != "basic"


# ---------------------------------------------------------------------------
# Stage 1: content outline.
# ---------------------------------------------------------------------------


class SlideContent(CamelModel):
    """Text content of one slide before layout."""

    type: SlideType
    headline: str
    subheadline: str | None = None
    body: str | None = None
    bullets: list[str] | None = None
    quote: str | None = None
    attribution: str | None = None
    cta: str | None = None


class ContentOutline(CamelModel):
    title: str
    slides: list[SlideContent] = Field(..., min_length=1, max_length=10)


# ---------------------------------------------------------------------------
# Stage 2: design system.
# ---------------------------------------------------------------------------


class ColorPalette(CamelModel):
    primary: str
    secondary: str
    background: str
    background_alt: str
    text: str
    text_muted: str
    accent: str


class TypographyStyle(CamelModel):
    size: float
    weight: Literal["normal", "medium", "semibold", "bold"]
    line_height: float | None = None


class TypographySystem(CamelModel):
    headline: TypographyStyle
    subheadline: TypographyStyle
    body: TypographyStyle
    caption: TypographyStyle


class SpacingSystem(CamelModel):
    padding_horizontal: float
    padding_vertical: float
    element_gap: float
    section_gap: float


class DecorativeStyle(CamelModel):
    use_shapes: bool
    shape_style: Literal["geometric", "organic", "minimal", "bold"]
    corner_radius: float
    opacity: float = Field(..., ge=0, le=1)


class DesignSystem(CamelModel):
    """Shared visual vocabulary applied to every slide of one carousel."""

    colors: ColorPalette
    typography: TypographySystem
    spacing: SpacingSystem
    decorative: DecorativeStyle


# ---------------------------------------------------------------------------
# Optional stage: images.
# ---------------------------------------------------------------------------


class SlideImageKeywords(CamelModel):
    slide_index: int
    use_image: bool
    image_type: ImageType
    keywords: str
    style: Literal["photo", "abstract", "minimal", "illustration"]


class ImagePlan(CamelModel):
    slides: list[SlideImageKeywords] = Field(default_factory=list)


class StockImage(CamelModel):
    """A resolved stock photo with attribution."""

    id: str
    url: str
    thumb_url: str | None = None
    width: int
    height: int
    description: str | None = None
    photographer: str
    photographer_url: str | None = None


class SlideImageData(CamelModel):
    """Image decision for one slide, passed to the layout stage."""

    slide_index: int
    image_type: ImageType = "none"
    image: StockImage | None = None


# ---------------------------------------------------------------------------
# Layout: slides and elements.
# ---------------------------------------------------------------------------


class TextElement(CamelModel):
    type: Literal["text"] = "text"
    text: str
    x: float
    y: float
    width: float | None = None
    height: float | None = None
    font_size: float | None = None
    font_weight: FontWeight = "normal"
    color: str | None = None
    text_align: Literal["left", "center", "right"] = "left"
    line_height: float | None = None

    @field_validator("font_weight", mode="before")
    @classmethod
    def _normalize_weight(cls, value: Any) -> Any:
        if value is None:
            return "normal"
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("text_align", mode="before")
    @classmethod
    def _default_align(cls, value: Any) -> Any:
        return "left" if value is None else value


class RectangleElement(CamelModel):
    type: Literal["rectangle"] = "rectangle"
    x: float
    y: float
    width: float
    height: float
    fill: str
    corner_radius: float = 0
    opacity: float = Field(default=1, ge=0, le=1)

    @field_validator("corner_radius", mode="before")
    @classmethod
    def _default_radius(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("opacity", mode="before")
    @classmethod
    def _default_opacity(cls, value: Any) -> Any:
        return 1 if value is None else value


class CircleElement(CamelModel):
    type: Literal["circle"] = "circle"
    x: float
    y: float
    radius: float
    fill: str
    opacity: float = Field(default=1, ge=0, le=1)

    @field_validator("opacity", mode="before")
    @classmethod
    def _default_opacity(cls, value: Any) -> Any:
        return 1 if value is None else value


ElementData = Annotated[
    Union[TextElement, RectangleElement, CircleElement],
    Field(discriminator="type"),
]


class SlideData(CamelModel):
    """One laid-out slide: a background color plus positioned elements."""

    background_color: str
    elements: list[ElementData] = Field(default_factory=list)

    @property
    def text_elements(self) -> list[TextElement]:
        return [el for el in self.elements if isinstance(el, TextElement)]


class CarouselData(CamelModel):
    """The final artifact returned by a pipeline run."""

    slides: list[SlideData] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Validation report.
# ---------------------------------------------------------------------------


class LayoutIssue(CamelModel):
    """A blocking validation error on one slide (or the whole carousel).

    ``slide_index`` is ``-1`` for carousel-level issues.
    """

    type: IssueType
    slide_index: int
    element_index: int | None = None
    message: str
    details: dict[str, Any] | None = None


class ValidationWarning(CamelModel):
    """A non-blocking quality note."""

    type: str
    slide_index: int
    message: str


class ValidationResult(CamelModel):
    is_valid: bool
    errors: list[LayoutIssue] = Field(default_factory=list)
    warnings: list[ValidationWarning] = Field(default_factory=list)
