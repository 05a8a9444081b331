# photo_search/flickr.py
"""Flickr photo search client: relevance search + random sampling of large URLs."""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Optional

import httpx

from .results import Failed, Found, NotFound, PhotoResult, SearchFailed

logger = logging.getLogger(__name__)

FLICKR_REST_URL = "https://api.flickr.com/services/rest/"
# _b = large, 1024 px по длинной стороне
FLICKR_LARGE_URL = "https://live.staticflickr.com/{server}/{id}_{secret}_b.jpg"

DEFAULT_COUNT = 5
DEFAULT_CANDIDATES_PER_PAGE = 20
MAX_PER_PAGE = 500  # предел Flickr API


def large_url(photo: Dict[str, Any]) -> Optional[str]:
    """Large/full-resolution URL of a Flickr photo record, or None if it can't be built."""
    url = photo.get("url_l")
    if isinstance(url, str) and url:
        return url

    server = photo.get("server")
    photo_id = photo.get("id")
    secret = photo.get("secret")
    if not (server and photo_id and secret):
        return None
    return FLICKR_LARGE_URL.format(server=server, id=photo_id, secret=secret)


def _dedup(urls: List[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for url in urls:
        if url in seen:
            continue
        seen.add(url)
        out.append(url)
    return out


class FlickrClient:
    """
    Async client for ``flickr.photos.search``.

    Usage:
        async with FlickrClient(api_key) as flickr:
            result = await flickr.search("sunset", count=5)

    The client holds only immutable configuration plus its own httpx
    connection pool, so one instance is shared by all in-flight dispatches.
    """

    def __init__(
        self,
        api_key: str,
        *,
        candidates_per_page: int = DEFAULT_CANDIDATES_PER_PAGE,
        timeout: float = 20.0,
        rng: Optional[random.Random] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if not api_key:
            raise ValueError("Flickr API key is empty")
        self._api_key = api_key
        self._candidates_per_page = candidates_per_page
        self._rng = rng or random.Random()
        self._http = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "FlickrClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def search(self, query: str, count: int = DEFAULT_COUNT) -> PhotoResult:
        """
        Search photos by free text and pick ``count`` of them at random.

        The whole relevance-ranked page is the sampling pool, so repeated
        identical queries give different pictures. Returns:
          - Found(urls) with min(count, pool size) distinct URLs
          - NotFound if Flickr returned no usable candidates
          - Failed(SearchFailed) if the call itself failed
        """
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")

        try:
            candidates = await self.fetch_candidates(query, count)
        except SearchFailed as e:
            return Failed(e)

        if not candidates:
            logger.info("Flickr: nothing found for %r", query)
            return NotFound(query)

        result_count = min(count, len(candidates))
        selected = self._rng.sample(candidates, result_count)
        logger.info("Flickr: %d of %d candidates selected for %r", result_count, len(candidates), query)
        return Found(tuple(selected))

    async def fetch_candidates(self, query: str, count: int) -> List[str]:
        """Relevance-ranked, deduplicated large URLs of one result page. Raises SearchFailed."""
        per_page = min(max(count, self._candidates_per_page), MAX_PER_PAGE)
        params = {
            "method": "flickr.photos.search",
            "api_key": self._api_key,
            "text": query,
            "sort": "relevance",
            "per_page": per_page,
            "extras": "url_l",
            "format": "json",
            "nojsoncallback": 1,
        }

        try:
            resp = await self._http.get(FLICKR_REST_URL, params=params)
            resp.raise_for_status()
        except httpx.TimeoutException as e:
            raise SearchFailed(query, "timeout") from e
        except httpx.HTTPStatusError as e:
            raise SearchFailed(query, "HTTP error", code=e.response.status_code) from e
        except httpx.HTTPError as e:
            raise SearchFailed(query, f"transport error: {e}") from e

        try:
            payload = resp.json()
        except ValueError as e:
            raise SearchFailed(query, "response is not JSON") from e

        if not isinstance(payload, dict):
            raise SearchFailed(query, "unexpected response shape")

        if payload.get("stat") != "ok":
            raise SearchFailed(
                query,
                str(payload.get("message") or "provider error"),
                code=payload.get("code"),
            )

        page = payload.get("photos")
        photos = page.get("photo") if isinstance(page, dict) else None
        if not isinstance(photos, list):
            raise SearchFailed(query, "unexpected response shape")

        urls = [url for url in (large_url(p) for p in photos if isinstance(p, dict)) if url]
        return _dedup(urls)
