"""Shared pieces for the stage prompt builders."""

from __future__ import annotations

import json
from typing import Any, NamedTuple


class PromptPair(NamedTuple):
    """System and user message text for one model call."""

    system: str
    user: str


def to_pretty_json(value: Any) -> str:
    """Serialize a model or plain value as indented camelCase JSON."""
    if hasattr(value, "to_dict"):
        value = value.to_dict()
    return json.dumps(value, indent=2, ensure_ascii=False)


def join_sections(*sections: str) -> str:
    """Join non-empty sections with blank lines between them."""
    return "\n\n".join(section.strip() for section in sections if section and section.strip())
