"""Outbound HTTP client for the Perfex REST API."""

import httpx

from .config import PerfexSettings


def create_http_client(settings: PerfexSettings, **kwargs) -> httpx.AsyncClient:
    """Build the single AsyncClient shared by every tool call.

    Extra keyword arguments go straight to ``httpx.AsyncClient`` (tests pass
    ``transport=httpx.MockTransport(...)``).
    """
    return httpx.AsyncClient(
        base_url=settings.api_url,
        headers={
            "authtoken": settings.api_key,
            "Content-Type": "application/json",
        },
        **kwargs,
    )
