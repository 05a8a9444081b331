"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import random
from typing import Callable, List, Tuple

import httpx
import pytest

from photo_search import FlickrClient

from .fakes import FakeTransport

# ============================================================
# Flickr client over httpx.MockTransport
# ============================================================


@pytest.fixture
def make_flickr():
    """Build a FlickrClient whose HTTP calls go to ``handler``.

    Returns (client, requests); ``requests`` collects every outgoing request.
    """

    def factory(
        handler: Callable[[httpx.Request], httpx.Response],
        seed: int = 0,
        candidates_per_page: int = 20,
    ) -> Tuple[FlickrClient, List[httpx.Request]]:
        requests: List[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = FlickrClient(
            "test-key",
            candidates_per_page=candidates_per_page,
            rng=random.Random(seed),
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(recording_handler)),
        )
        return client, requests

    return factory


# ============================================================
# Chat transport
# ============================================================


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()
