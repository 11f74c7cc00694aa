""" Fakes shared by indicator cloud test cases
"""
import asyncio
from contextlib import asynccontextmanager
from typing import Callable, Dict, List, Optional

import pytest

from ..app.service.render_adapter import BaseRenderAdapter


class FakeResponse:

    def __init__(self, status: int = 200, payload=None, reason: str = "OK", invalid_json: bool = False):
        self.status = status
        self.reason = reason
        self._payload = payload
        self._invalid_json = invalid_json

    async def json(self, content_type=None):
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeRequestClient:
    """ Answers GET requests with `handler(url, params)`

    The handler returns a FakeResponse or raises to simulate transport errors.
    """

    def __init__(self, handler: Callable):
        self._handler = handler
        self.requests: List[tuple] = []
        self.in_flight = 0
        self.max_in_flight = 0

    @asynccontextmanager
    async def get(self, url: str, params: dict = {}):
        self.requests.append((url, dict(params)))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
            yield self._handler(url, params)
        finally:
            self.in_flight -= 1


class RecordingRenderAdapter(BaseRenderAdapter):

    def __init__(self):
        self.calls = []

    def render(self, items, target, layout=None):
        self.calls.append((list(items), target, layout))


class FakeEnrichmentClient:

    def __init__(self, synonyms: Optional[Dict[str, List[str]]] = None,
                 frequencies: Optional[Dict[str, float]] = None):
        self._synonyms = synonyms or {}
        self._frequencies = frequencies or {}
        self.credentials = []

    async def fetch_synonyms(self, words, credential):
        self.credentials.append(credential)
        return [synonym for word in words for synonym in self._synonyms.get(word, [])]

    async def fetch_frequencies(self, words):
        return {word: self._frequencies.get(word, 0) for word in words}


@pytest.fixture
def render_adapter():
    return RecordingRenderAdapter()


@pytest.fixture
def literacy_rows():
    return [
        {"indicator_name": "Male literacy rate"},
        {"indicator_name": "Female literacy rate"},
        {"indicator_name": "Adult literacy rate"},
    ]
