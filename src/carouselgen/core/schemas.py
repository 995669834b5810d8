"""Strict JSON schemas sent to the model as structured-output formats.

Each schema is a dict of the form ``{"name", "strict", "schema"}`` accepted as
the ``json_schema`` member of an OpenAI ``response_format``.  Strict mode
requires every property to be listed in ``required`` and
``additionalProperties`` to be false, so element fields that only apply to
some element types are declared nullable instead of optional.

The schemas mirror :mod:`carouselgen.core.models`; responses are parsed with
those models after decoding.
"""

from __future__ import annotations

import copy
from typing import Any

_TYPOGRAPHY_WEIGHTS = ["normal", "medium", "semibold", "bold"]

# ---------------------------------------------------------------------------
# Slides and elements.
# ---------------------------------------------------------------------------

_ELEMENT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "type": {"type": "string", "enum": ["text", "rectangle", "circle"]},
        # Text properties (null for shapes)
        "text": {"type": ["string", "null"]},
        "x": {"type": "number"},
        "y": {"type": "number"},
        "width": {"type": ["number", "null"]},
        "fontSize": {"type": ["number", "null"]},
        "fontWeight": {
            "type": ["string", "null"],
            "enum": ["normal", "bold", "500", "600", "700", None],
        },
        "color": {"type": ["string", "null"]},
        "textAlign": {"type": ["string", "null"], "enum": ["left", "center", "right", None]},
        # Shape properties (null for text)
        "height": {"type": ["number", "null"]},
        "fill": {"type": ["string", "null"]},
        "cornerRadius": {"type": ["number", "null"]},
        "radius": {"type": ["number", "null"]},
        "opacity": {"type": ["number", "null"]},
    },
    "required": [
        "type",
        "x",
        "y",
        "text",
        "width",
        "fontSize",
        "fontWeight",
        "color",
        "textAlign",
        "height",
        "fill",
        "cornerRadius",
        "radius",
        "opacity",
    ],
    "additionalProperties": False,
}

SLIDE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "backgroundColor": {
            "type": "string",
            "description": "Background color in hex format (e.g., #ffffff)",
        },
        "elements": {"type": "array", "items": _ELEMENT_SCHEMA},
    },
    "required": ["backgroundColor", "elements"],
    "additionalProperties": False,
}

CAROUSEL_JSON_SCHEMA: dict[str, Any] = {
    "name": "carousel",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {"slides": {"type": "array", "items": SLIDE_SCHEMA}},
        "required": ["slides"],
        "additionalProperties": False,
    },
}


def slide_json_schema(name: str) -> dict[str, Any]:
    """Return a strict schema for a single slide under the given name.

    The layout stage uses ``"slide_layout"`` and the refinement stage
    ``"refined_slide"``; both share the carousel's slide item schema.
    """
    return {"name": name, "strict": True, "schema": copy.deepcopy(SLIDE_SCHEMA)}


# ---------------------------------------------------------------------------
# Content outline.
# ---------------------------------------------------------------------------

CONTENT_OUTLINE_JSON_SCHEMA: dict[str, Any] = {
    "name": "content_outline",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "title": {"type": "string", "description": "Overall carousel title/theme"},
            "slides": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "type": {
                            "type": "string",
                            "enum": ["hook", "content", "list", "quote", "cta"],
                            "description": "Type of slide",
                        },
                        "headline": {"type": "string", "description": "Main headline"},
                        "subheadline": {"type": ["string", "null"]},
                        "body": {"type": ["string", "null"]},
                        "bullets": {"type": ["array", "null"], "items": {"type": "string"}},
                        "quote": {"type": ["string", "null"]},
                        "attribution": {"type": ["string", "null"]},
                        "cta": {"type": ["string", "null"]},
                    },
                    "required": [
                        "type",
                        "headline",
                        "subheadline",
                        "body",
                        "bullets",
                        "quote",
                        "attribution",
                        "cta",
                    ],
                    "additionalProperties": False,
                },
            },
        },
        "required": ["title", "slides"],
        "additionalProperties": False,
    },
}

# ---------------------------------------------------------------------------
# Design system.
# ---------------------------------------------------------------------------


def _typography_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "size": {"type": "number", "description": "Font size in pixels"},
            "weight": {"type": "string", "enum": list(_TYPOGRAPHY_WEIGHTS)},
            "lineHeight": {"type": ["number", "null"], "description": "Line height multiplier"},
        },
        "required": ["size", "weight", "lineHeight"],
        "additionalProperties": False,
    }


_COLOR_NAMES = ["primary", "secondary", "background", "backgroundAlt", "text", "textMuted", "accent"]

DESIGN_SYSTEM_JSON_SCHEMA: dict[str, Any] = {
    "name": "design_system",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "colors": {
                "type": "object",
                "properties": {
                    name: {"type": "string", "description": f"{name} color (hex)"}
                    for name in _COLOR_NAMES
                },
                "required": list(_COLOR_NAMES),
                "additionalProperties": False,
            },
            "typography": {
                "type": "object",
                "properties": {
                    "headline": _typography_schema(),
                    "subheadline": _typography_schema(),
                    "body": _typography_schema(),
                    "caption": _typography_schema(),
                },
                "required": ["headline", "subheadline", "body", "caption"],
                "additionalProperties": False,
            },
            "spacing": {
                "type": "object",
                "properties": {
                    "paddingHorizontal": {"type": "number"},
                    "paddingVertical": {"type": "number"},
                    "elementGap": {"type": "number"},
                    "sectionGap": {"type": "number"},
                },
                "required": ["paddingHorizontal", "paddingVertical", "elementGap", "sectionGap"],
                "additionalProperties": False,
            },
            "decorative": {
                "type": "object",
                "properties": {
                    "useShapes": {"type": "boolean"},
                    "shapeStyle": {
                        "type": "string",
                        "enum": ["geometric", "organic", "minimal", "bold"],
                    },
                    "cornerRadius": {"type": "number"},
                    "opacity": {"type": "number"},
                },
                "required": ["useShapes", "shapeStyle", "cornerRadius", "opacity"],
                "additionalProperties": False,
            },
        },
        "required": ["colors", "typography", "spacing", "decorative"],
        "additionalProperties": False,
    },
}

# ---------------------------------------------------------------------------
# Image plan.
# ---------------------------------------------------------------------------

IMAGE_PLAN_JSON_SCHEMA: dict[str, Any] = {
    "name": "image_plan",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "slides": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "slideIndex": {"type": "number", "description": "0-based slide index"},
                        "useImage": {"type": "boolean"},
                        "imageType": {"type": "string", "enum": ["background", "element", "none"]},
                        "keywords": {
                            "type": "string",
                            "description": "Search keywords (2-4 words, in English)",
                        },
                        "style": {
                            "type": "string",
                            "enum": ["photo", "abstract", "minimal", "illustration"],
                        },
                    },
                    "required": ["slideIndex", "useImage", "imageType", "keywords", "style"],
                    "additionalProperties": False,
                },
            },
        },
        "required": ["slides"],
        "additionalProperties": False,
    },
}
