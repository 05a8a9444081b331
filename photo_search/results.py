# photo_search/results.py
"""Tagged search results and the search error."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


class SearchFailed(Exception):
    """The provider call itself failed (network, HTTP status, bad payload)."""

    def __init__(self, query: str, reason: str, code: Optional[int] = None) -> None:
        self.query = query
        self.reason = reason
        self.code = code
        message = f"Photo search failed for {query!r}: {reason}"
        if code is not None:
            message += f" (code {code})"
        super().__init__(message)


@dataclass(frozen=True)
class Found:
    urls: Tuple[str, ...]


@dataclass(frozen=True)
class NotFound:
    query: str


@dataclass(frozen=True)
class Failed:
    error: SearchFailed


PhotoResult = Union[Found, NotFound, Failed]
