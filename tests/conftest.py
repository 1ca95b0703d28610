"""Shared fixtures: a fake Perfex API behind httpx.MockTransport."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import httpx
import pytest

from perfex_mcp.client import create_http_client
from perfex_mcp.config import PerfexSettings
from perfex_mcp.pipeline import PerfexToolPipeline

API_URL = "https://crm.example.com/api"
API_KEY = "secret-token-123"


class FakePerfex:
    """Records every request and answers with one canned response."""

    def __init__(self, body=None, status_code=200, text=None, exc=None):
        self.body = body
        self.status_code = status_code
        self.text = text
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings():
    return PerfexSettings(api_url=API_URL, api_key=API_KEY)


@pytest.fixture
def perfex(settings):
    """Factory returning (pipeline, fake) for a canned API response."""

    def factory(body=None, status_code=200, text=None, exc=None):
        fake = FakePerfex(body=body, status_code=status_code, text=text, exc=exc)
        client = create_http_client(settings, transport=httpx.MockTransport(fake))
        return PerfexToolPipeline(client), fake

    return factory
