"""Tests for carouselgen.core.models: the carousel data model.

Tests cover:
- camelCase wire format on input and output.
- Element union discrimination and null-field defaults.
- PipelineConfig constraints (blank topic, slide count, immutability).
- Image settings per quality tier.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from carouselgen.core.models import (
    BrandKit,
    CircleElement,
    ContentOutline,
    LayoutIssue,
    PipelineConfig,
    RectangleElement,
    SlideData,
    SlideImageData,
    TextElement,
)


class TestWireFormat:
    """Test camelCase aliases."""

    def test_accepts_camel_case(self):
        slide = SlideData.model_validate({"backgroundColor": "#FFFFFF", "elements": []})
        assert slide.background_color == "#FFFFFF"

    def test_accepts_snake_case(self):
        slide = SlideData(background_color="#000000")
        assert slide.elements == []

    def test_to_dict_uses_camel_case_and_drops_none(self):
        issue = LayoutIssue(type="overlap", slide_index=0, message="m")
        assert issue.to_dict() == {"type": "overlap", "slideIndex": 0, "message": "m"}

    def test_unknown_keys_ignored(self):
        kit = BrandKit.model_validate({"colors": [], "userId": "u1"})
        assert kit.colors == []


class TestElements:
    """Test the element union and null handling."""

    def test_discriminates_on_type(self):
        slide = SlideData.model_validate(
            {
                "backgroundColor": "#FFFFFF",
                "elements": [
                    {"type": "text", "text": "Hi", "x": 0, "y": 0, "width": 100, "fontSize": 20, "color": "#000000"},
                    {"type": "rectangle", "x": 0, "y": 0, "width": 10, "height": 10, "fill": "#000000"},
                    {"type": "circle", "x": 5, "y": 5, "radius": 5, "fill": "#000000"},
                ],
            }
        )
        assert [type(el) for el in slide.elements] == [TextElement, RectangleElement, CircleElement]
        assert len(slide.text_elements) == 1

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            SlideData.model_validate(
                {"backgroundColor": "#FFFFFF", "elements": [{"type": "triangle", "x": 0, "y": 0}]}
            )

    def test_text_nulls_fall_back_to_defaults(self):
        element = TextElement.model_validate(
            {
                "text": "Hi",
                "x": 0,
                "y": 0,
                "width": 100,
                "fontSize": 20,
                "color": "#000000",
                "fontWeight": None,
                "textAlign": None,
            }
        )
        assert element.font_weight == "normal"
        assert element.text_align == "left"

    def test_text_size_width_and_color_may_be_null(self):
        element = TextElement.model_validate(
            {"text": "Hi", "x": 0, "y": 0, "width": None, "fontSize": None, "color": None}
        )
        assert (element.width, element.font_size, element.color) == (None, None, None)

    def test_numeric_font_weight(self):
        element = TextElement(text="Hi", x=0, y=0, width=100, font_size=20, color="#000", font_weight=700)
        assert element.font_weight == "700"

    def test_rectangle_nulls_fall_back_to_defaults(self):
        rect = RectangleElement.model_validate(
            {"x": 0, "y": 0, "width": 1, "height": 1, "fill": "#000000", "cornerRadius": None, "opacity": None}
        )
        assert rect.corner_radius == 0
        assert rect.opacity == 1

    def test_opacity_range(self):
        with pytest.raises(ValidationError):
            CircleElement(x=0, y=0, radius=1, fill="#000000", opacity=1.5)


class TestPipelineConfig:
    """Test run parameter constraints."""

    def test_defaults(self):
        config = PipelineConfig(topic="Habits")
        assert config.style == "professional"
        assert config.slide_count == 5
        assert config.language == "en"
        assert config.quality == "basic"
        assert (config.canvas_width, config.canvas_height) == (1080, 1350)
        assert config.use_images is False

    @pytest.mark.parametrize("topic", ["", "   ", "\n\t"])
    def test_blank_topic_rejected(self, topic):
        with pytest.raises(ValidationError):
            PipelineConfig(topic=topic)

    @pytest.mark.parametrize("count", [0, 11])
    def test_slide_count_range(self, count):
        with pytest.raises(ValidationError):
            PipelineConfig(topic="x", slide_count=count)

    def test_frozen(self):
        config = PipelineConfig(topic="x")
        with pytest.raises(ValidationError):
            config.topic = "y"

    @pytest.mark.parametrize(
        ("quality", "use_images", "expected"),
        [
            ("basic", True, False),
            ("standard", True, True),
            ("premium", True, True),
            ("premium", False, False),
        ],
    )
    def test_images_enabled(self, quality, use_images, expected):
        config = PipelineConfig(topic="x", quality=quality, use_images=use_images)
        assert config.images_enabled is expected

    def test_brand_kit_from_camel_case(self):
        config = PipelineConfig.model_validate(
            {
                "topic": "x",
                "brandKit": {
                    "colors": [{"name": "Primary", "hex": "#FF0000"}],
                    "fonts": [{"name": "Heading", "family": "Inter"}],
                },
            }
        )
        assert config.brand_kit.colors[0].hex == "#FF0000"
        assert config.brand_kit.fonts[0].weight == "normal"


class TestStageModels:
    """Test intermediate stage models."""

    def test_outline_needs_slides(self):
        with pytest.raises(ValidationError):
            ContentOutline(title="x", slides=[])

    def test_slide_image_defaults_to_none(self):
        data = SlideImageData(slide_index=2)
        assert data.image_type == "none"
        assert data.image is None
