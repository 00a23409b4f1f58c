"""
Shared fixtures for the page mirror tests.
"""

from typing import Dict, List, Union

import pytest

from page_mirror.errors import NetworkError
from page_mirror.mirror.client import FetchedResponse


class FakeClient:
    """In-memory stand-in for HttpClient that records every request."""

    def __init__(self, responses: Dict[str, Union[bytes, str, Exception]]):
        self.responses = responses
        self.requests: List[str] = []

    async def get(self, url: str) -> FetchedResponse:
        self.requests.append(url)
        body = self.responses.get(url)

        if body is None:
            raise NetworkError(url, "HTTP 404", 404)
        if isinstance(body, Exception):
            raise body
        if isinstance(body, str):
            body = body.encode('utf-8')

        return FetchedResponse(url=url, status=200, content=body, text=body.decode('utf-8', errors='replace'))


@pytest.fixture
def fake_client():
    """Factory for FakeClient instances."""
    return FakeClient
