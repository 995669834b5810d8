"""Tests for carouselgen.core.schemas: structured-output schemas."""

from __future__ import annotations

from typing import Any, Iterator

import pytest
from conftest import DESIGN_SYSTEM, make_outline, make_valid_slide

from carouselgen.core.models import CarouselData, ContentOutline, DesignSystem, SlideData
from carouselgen.core.schemas import (
    CAROUSEL_JSON_SCHEMA,
    CONTENT_OUTLINE_JSON_SCHEMA,
    DESIGN_SYSTEM_JSON_SCHEMA,
    IMAGE_PLAN_JSON_SCHEMA,
    SLIDE_SCHEMA,
    slide_json_schema,
)

ALL_SCHEMAS = [
    CAROUSEL_JSON_SCHEMA,
    CONTENT_OUTLINE_JSON_SCHEMA,
    DESIGN_SYSTEM_JSON_SCHEMA,
    IMAGE_PLAN_JSON_SCHEMA,
    slide_json_schema("slide_layout"),
]


def _objects(node: Any) -> Iterator[dict[str, Any]]:
    """Yield every object schema nested anywhere in ``node``."""
    if isinstance(node, dict):
        if node.get("type") == "object":
            yield node
        for value in node.values():
            yield from _objects(value)
    elif isinstance(node, list):
        for item in node:
            yield from _objects(item)


class TestStrictness:
    """Strict structured output needs closed objects with every field required."""

    @pytest.mark.parametrize("schema", ALL_SCHEMAS, ids=lambda s: s["name"])
    def test_envelope(self, schema):
        assert schema["strict"] is True
        assert schema["schema"]["type"] == "object"

    @pytest.mark.parametrize("schema", ALL_SCHEMAS, ids=lambda s: s["name"])
    def test_every_object_is_closed_and_fully_required(self, schema):
        objects = list(_objects(schema["schema"]))
        assert objects
        for obj in objects:
            assert obj["additionalProperties"] is False
            assert set(obj["required"]) == set(obj["properties"])

    def test_schema_names(self):
        assert [s["name"] for s in ALL_SCHEMAS] == [
            "carousel",
            "content_outline",
            "design_system",
            "image_plan",
            "slide_layout",
        ]


class TestSlideJsonSchema:
    """Test the per-slide schema factory."""

    def test_named(self):
        assert slide_json_schema("refined_slide")["name"] == "refined_slide"

    def test_returns_independent_copy(self):
        schema = slide_json_schema("slide_layout")
        schema["schema"]["properties"]["elements"]["items"]["required"].append("extra")
        assert "extra" not in SLIDE_SCHEMA["properties"]["elements"]["items"]["required"]

    def test_shape_fields_are_nullable(self):
        element = slide_json_schema("x")["schema"]["properties"]["elements"]["items"]
        for field in ("text", "fontSize", "fill", "radius", "opacity"):
            assert "null" in element["properties"][field]["type"]


class TestSchemasMatchModels:
    """Payloads shaped like the schemas parse into the data models."""

    def test_carousel(self):
        carousel = CarouselData.model_validate({"slides": [make_valid_slide()]})
        assert len(carousel.slides[0].elements) == 3

    def test_slide_with_circle(self):
        slide = make_valid_slide()
        slide["elements"].append(
            {
                "type": "circle",
                "x": 900,
                "y": 150,
                "radius": 60,
                "fill": "#F59E0B",
                "opacity": None,
                "text": None,
                "width": None,
                "height": None,
                "fontSize": None,
                "fontWeight": None,
                "color": None,
                "textAlign": None,
                "cornerRadius": None,
            }
        )
        parsed = SlideData.model_validate(slide)
        assert parsed.elements[-1].type == "circle"
        assert parsed.elements[-1].opacity == 1

    def test_outline(self):
        assert len(ContentOutline.model_validate(make_outline(4)).slides) == 4

    def test_design_system(self):
        design = DesignSystem.model_validate(DESIGN_SYSTEM)
        assert design.spacing.padding_horizontal == 60
