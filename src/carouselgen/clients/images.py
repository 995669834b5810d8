"""Stock image search for the optional image stage.

Usage
-----
::

    client = UnsplashClient(access_key="...")
    images = await client.search("laptop coffee workspace", per_page=3)

Without an access key the client logs a warning and returns no images, so
the pipeline simply produces slides without photos.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Protocol

import aiohttp

from carouselgen.core.models import StockImage

logger = logging.getLogger(__name__)

UNSPLASH_API_URL = "https://api.unsplash.com"

_STOP_WORDS = frozenset(
    {
        # German
        "der", "die", "das", "und", "oder", "aber", "für", "mit", "von", "zu", "in",
        "an", "auf", "ist", "sind", "wie", "was", "ein", "eine", "dein", "deine",
        "ihr", "ihre",
        # English
        "the", "a", "and", "or", "but", "for", "with", "of", "to", "on",
    }
)

_SLIDE_TYPE_CONTEXT = {
    "hook": "professional business",
    "content": "abstract concept",
    "list": "minimal icons",
    "quote": "inspirational",
    "cta": "action success",
}


class ImageSearchError(Exception):
    """The image search service failed or answered with an error status."""


class ImageSearchClient(Protocol):
    async def search(
        self,
        query: str,
        per_page: int = 3,
        orientation: str = "squarish",
    ) -> list[StockImage]: ...


def _to_stock_image(result: dict[str, Any]) -> StockImage:
    return StockImage(
        id=result["id"],
        url=result["urls"]["regular"],
        thumb_url=result["urls"].get("thumb"),
        width=result["width"],
        height=result["height"],
        description=result.get("description") or result.get("alt_description"),
        photographer=result["user"]["name"],
        photographer_url=result["user"].get("links", {}).get("html"),
    )


class UnsplashClient:
    """Unsplash photo search over aiohttp.

    Attributes:
        access_key: Unsplash API access key, or ``None`` to disable search.
        base_url: API root, overridable for tests.
    """

    def __init__(
        self,
        access_key: str | None,
        base_url: str = UNSPLASH_API_URL,
        timeout: float = 30.0,
    ) -> None:
        self.access_key = access_key
        self.base_url = base_url
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    @property
    def is_available(self) -> bool:
        return bool(self.access_key)

    async def search(
        self,
        query: str,
        per_page: int = 3,
        orientation: str = "squarish",
    ) -> list[StockImage]:
        """Search photos matching ``query``.

        Args:
            query: Search keywords (English works best).
            per_page: Maximum number of results.
            orientation: ``landscape``, ``portrait`` or ``squarish``.

        Returns:
            Matching images in relevance order; empty when no key is configured.

        Raises:
            ImageSearchError: On a non-2xx response or a transport failure.
        """
        if not self.is_available:
            logger.warning("Unsplash access key not configured, image search disabled")
            return []

        params = {
            "query": query,
            "per_page": str(per_page),
            "page": "1",
            "orientation": orientation,
        }
        headers = {
            "Authorization": f"Client-ID {self.access_key}",
            "Accept-Version": "v1",
        }

        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.get(
                    f"{self.base_url}/search/photos", params=params, headers=headers
                ) as response:
                    if response.status >= 300:
                        body = await response.text()
                        raise ImageSearchError(
                            f"Unsplash search failed with status {response.status}: {body[:200]}"
                        )
                    payload = await response.json()
        except aiohttp.ClientError as e:
            raise ImageSearchError(f"Unsplash search failed: {e}") from e

        images = [_to_stock_image(result) for result in payload.get("results", [])]
        logger.debug(f"Unsplash returned {len(images)} image(s) for {query!r}")
        return images


def generate_search_keywords(
    headline: str,
    body: str | None = None,
    slide_type: str | None = None,
) -> str:
    """Derive stock photo search keywords from slide text.

    Keeps the first three words longer than three characters that are not
    stop words, then appends a context hint for the slide type.

    Example:
        >>> generate_search_keywords("Master your morning routine", slide_type="hook")
        'master your morning professional business'
    """
    text = f"{headline} {body or ''}".lower()
    words = [
        word
        for word in re.sub(r"[^\w\s]", " ", text).split()
        if len(word) > 3 and word not in _STOP_WORDS
    ]
    keywords = " ".join(words[:3])
    context = _SLIDE_TYPE_CONTEXT.get(slide_type or "", "")
    return f"{keywords} {context}".strip()
