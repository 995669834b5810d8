"""Structured-output model client.

The pipeline never sees raw model text: every call sends a strict JSON
schema and gets back the decoded object.  :class:`StructuredModelClient` is
the seam tests replace with a stub; :class:`OpenAIStructuredClient` is the
production implementation on top of the async OpenAI SDK.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

from openai import AsyncOpenAI

from carouselgen.pipeline.errors import EmptyModelResponseError

logger = logging.getLogger(__name__)


class StructuredModelClient(Protocol):
    """Anything that can answer a prompt with schema-conforming JSON."""

    async def complete(
        self,
        system: str,
        user: str,
        schema: dict[str, Any],
        model: str,
    ) -> dict[str, Any]: ...


class OpenAIStructuredClient:
    """Chat-completions client requesting ``json_schema`` structured output.

    Token usage is accumulated across calls and logged per call.

    Attributes:
        total_input_tokens: Prompt tokens used so far.
        total_output_tokens: Completion tokens used so far.
    """

    def __init__(
        self,
        api_key: str,
        timeout: float | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._client = client or AsyncOpenAI(api_key=api_key, timeout=timeout)
        self.total_input_tokens = 0
        self.total_output_tokens = 0

    async def complete(
        self,
        system: str,
        user: str,
        schema: dict[str, Any],
        model: str,
    ) -> dict[str, Any]:
        """Send one structured-output request and decode the response.

        Args:
            system: System prompt.
            user: User message.
            schema: ``{"name", "strict", "schema"}`` structured-output format.
            model: Model identifier.

        Returns:
            The decoded JSON object.

        Raises:
            EmptyModelResponseError: If the first choice has no content.
            json.JSONDecodeError: If the content is not valid JSON.
        """
        response = await self._client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            response_format={"type": "json_schema", "json_schema": schema},
        )

        usage = response.usage
        if usage is not None:
            self.total_input_tokens += usage.prompt_tokens
            self.total_output_tokens += usage.completion_tokens
            logger.debug(
                f"{schema.get('name', 'response')} ({model}): "
                f"input={usage.prompt_tokens}, output={usage.completion_tokens}"
            )

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise EmptyModelResponseError(f"Model returned no content for {schema.get('name')!r}")

        return json.loads(content)

    def get_token_totals(self) -> tuple[int, int]:
        """Return accumulated ``(input, output)`` tokens."""
        return self.total_input_tokens, self.total_output_tokens
