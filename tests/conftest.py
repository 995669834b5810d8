"""Shared pytest fixtures for carousel generator tests.

Pipeline tests never talk to OpenAI or Unsplash: :class:`StubModelClient`
answers structured-output requests from canned payloads keyed by schema name
(``carousel``, ``content_outline``, ``design_system``, ``image_plan``,
``slide_layout``, ``refined_slide``) and :class:`StubImageClient` returns a
fixed list of stock images.
"""

from __future__ import annotations

import copy
from typing import Any, Iterator

import pytest
from fastapi.testclient import TestClient

from carouselgen.clients.images import ImageSearchError
from carouselgen.core.config import CarouselGenConfig
from carouselgen.core.models import PipelineConfig, StockImage

# ---------------------------------------------------------------------------
# Stub collaborators.
# ---------------------------------------------------------------------------


class StubModelClient:
    """Structured-output client answering from canned responses.

    Each response may be a dict (returned as a deep copy), a callable taking
    the user prompt and returning a dict, or an exception instance to raise.

    Attributes:
        responses: Canned responses keyed by schema name.
        calls: One record per request, in order.
    """

    def __init__(self, responses: dict[str, Any]) -> None:
        self.responses = dict(responses)
        self.calls: list[dict[str, str]] = []

    async def complete(
        self,
        system: str,
        user: str,
        schema: dict[str, Any],
        model: str,
    ) -> dict[str, Any]:
        name = schema["name"]
        self.calls.append({"name": name, "model": model, "system": system, "user": user})
        response = self.responses[name]
        if isinstance(response, BaseException):
            raise response
        if callable(response):
            response = response(user)
        return copy.deepcopy(response)

    def call_names(self) -> list[str]:
        return [call["name"] for call in self.calls]


class StubImageClient:
    """Image search returning fixed results; queries containing a fail word raise."""

    def __init__(self, images: list[StockImage] | None = None, fail_words: tuple[str, ...] = ()):
        self.images = images or []
        self.fail_words = fail_words
        self.queries: list[str] = []

    async def search(
        self,
        query: str,
        per_page: int = 3,
        orientation: str = "squarish",
    ) -> list[StockImage]:
        self.queries.append(query)
        if any(word in query for word in self.fail_words):
            raise ImageSearchError(f"search failed for {query!r}")
        return list(self.images[:per_page])


# ---------------------------------------------------------------------------
# Canned model payloads (camelCase, as the model returns them).
# ---------------------------------------------------------------------------


def text_element(text: str, x: float, y: float, **overrides: Any) -> dict[str, Any]:
    """A text element dict with the null shape fields structured output includes."""
    element = {
        "type": "text",
        "text": text,
        "x": x,
        "y": y,
        "width": 950,
        "fontSize": 28,
        "fontWeight": "normal",
        "color": "#1E293B",
        "textAlign": "left",
        "height": None,
        "fill": None,
        "cornerRadius": None,
        "radius": None,
        "opacity": None,
    }
    element.update(overrides)
    return element


def make_valid_slide(headline: str = "Five tips for focus") -> dict[str, Any]:
    """A slide that passes strict validation on a 1080x1350 canvas."""
    return {
        "backgroundColor": "#FFFFFF",
        "elements": [
            text_element(headline, 65, 100, fontSize=54, fontWeight="bold"),
            text_element("Small habits compound into big results.", 65, 400),
            {
                "type": "rectangle",
                "x": 65,
                "y": 200,
                "width": 108,
                "height": 4,
                "fill": "#1E40AF",
                "cornerRadius": 2,
                "opacity": 1,
                "text": None,
                "fontSize": None,
                "fontWeight": None,
                "color": None,
                "textAlign": None,
                "radius": None,
            },
        ],
    }


def make_invalid_slide() -> dict[str, Any]:
    """A slide whose headline starts left of the canvas (out of bounds)."""
    slide = make_valid_slide()
    slide["elements"][0]["x"] = -50
    return slide


def make_outline(slide_count: int = 3) -> dict[str, Any]:
    types = ["hook"] + ["content"] * max(slide_count - 2, 0) + ["cta"]
    slides = []
    for index, slide_type in enumerate(types[:slide_count]):
        slides.append(
            {
                "type": slide_type,
                "headline": f"Headline {index + 1}",
                "subheadline": None,
                "body": f"Body text for slide {index + 1}",
                "bullets": None,
                "quote": None,
                "attribution": None,
                "cta": "Follow for more" if slide_type == "cta" else None,
            }
        )
    return {"title": "Focus", "slides": slides}


DESIGN_SYSTEM = {
    "colors": {
        "primary": "#1E40AF",
        "secondary": "#3B82F6",
        "background": "#FFFFFF",
        "backgroundAlt": "#F1F5F9",
        "text": "#1E293B",
        "textMuted": "#64748B",
        "accent": "#F59E0B",
    },
    "typography": {
        "headline": {"size": 56, "weight": "bold", "lineHeight": 1.1},
        "subheadline": {"size": 32, "weight": "semibold", "lineHeight": 1.2},
        "body": {"size": 24, "weight": "normal", "lineHeight": None},
        "caption": {"size": 18, "weight": "normal", "lineHeight": 1.4},
    },
    "spacing": {
        "paddingHorizontal": 60,
        "paddingVertical": 60,
        "elementGap": 24,
        "sectionGap": 40,
    },
    "decorative": {
        "useShapes": True,
        "shapeStyle": "geometric",
        "cornerRadius": 12,
        "opacity": 0.15,
    },
}


# ---------------------------------------------------------------------------
# Fixtures.
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> CarouselGenConfig:
    """Settings with defaults only (no ``.env`` file).

    Returns:
        CarouselGenConfig with the default refinement cap of 3.
    """
    return CarouselGenConfig(_env_file=None, max_refinement_attempts=3, min_text_elements=2)


@pytest.fixture
def multi_step_responses() -> dict[str, Any]:
    """Canned responses for a 3-slide standard/premium run with valid layouts."""
    return {
        "content_outline": make_outline(3),
        "design_system": DESIGN_SYSTEM,
        "slide_layout": make_valid_slide(),
        "refined_slide": make_valid_slide(),
        "image_plan": {"slides": []},
    }


@pytest.fixture
def basic_config() -> PipelineConfig:
    """The end-to-end basic scenario: 3 professional English slides."""
    return PipelineConfig(
        topic="5 tips",
        style="professional",
        slide_count=3,
        language="en",
        quality="basic",
    )


@pytest.fixture
def stock_image() -> StockImage:
    return StockImage(
        id="abc123",
        url="https://images.unsplash.com/photo-abc123",
        thumb_url="https://images.unsplash.com/photo-abc123?w=200",
        width=1080,
        height=1080,
        description="A tidy desk",
        photographer="Jane Doe",
        photographer_url="https://unsplash.com/@janedoe",
    )


@pytest.fixture
def image_client(stock_image: StockImage) -> StubImageClient:
    return StubImageClient([stock_image])


@pytest.fixture
def test_client(multi_step_responses: dict[str, Any]) -> Iterator[TestClient]:
    """FastAPI test client with stub model and image clients installed.

    The stub also answers single-call ``carousel`` requests with three valid
    slides.

    Yields:
        A started TestClient; ``app.state.model_client`` holds the stub.
    """
    from carouselgen.api.main import app

    responses = dict(multi_step_responses)
    responses["carousel"] = {"slides": [make_valid_slide(f"Slide {i}") for i in range(1, 4)]}

    with TestClient(app) as client:
        app.state.model_client = StubModelClient(responses)
        app.state.image_client = StubImageClient()
        yield client
