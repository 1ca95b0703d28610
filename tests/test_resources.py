"""Tests for the customer search resource template."""

import asyncio
import json

import pytest
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_REQUEST

from perfex_mcp.pipeline import CUSTOMER_SEARCH_TEMPLATE, JSON_MIME_TYPE


class TestResourceTemplates:
    """Verify the advertised template."""

    def test_single_customer_search_template(self, perfex):
        pipeline, _ = perfex()
        templates = pipeline.list_resource_templates()
        assert len(templates) == 1
        assert templates[0]["uriTemplate"] == CUSTOMER_SEARCH_TEMPLATE == "perfex://customers/search/{keysearch}"
        assert templates[0]["mimeType"] == "application/json"


class TestReadResource:
    """Reading a search URI runs the search_customers tool."""

    def test_read_search_results(self, perfex):
        customers = [{"userid": "4", "company": "Acme Inc"}]
        pipeline, fake = perfex(body=customers)
        uri = "perfex://customers/search/acme%20inc"

        result = asyncio.run(pipeline.read_resource(uri))

        assert fake.last.url.raw_path == b"/api/customers/search/acme%20inc"
        assert result == {
            "contents": [
                {"uri": uri, "mimeType": JSON_MIME_TYPE, "text": json.dumps(customers, indent=2)}
            ]
        }

    def test_plain_keyword(self, perfex):
        pipeline, fake = perfex(body=[])
        asyncio.run(pipeline.read_resource("perfex://customers/search/acme"))
        assert fake.last.url.path == "/api/customers/search/acme"

    @pytest.mark.parametrize("uri", [
        "perfex://customers/search/",
        "perfex://customers/acme",
        "perfex://leads/search/acme",
        "perfex://customers/search/acme/extra",
        "http://customers/search/acme",
    ])
    def test_malformed_uri_is_invalid_request(self, perfex, uri):
        pipeline, fake = perfex(body=[])
        with pytest.raises(McpError) as exc_info:
            asyncio.run(pipeline.read_resource(uri))
        assert exc_info.value.error.code == INVALID_REQUEST
        assert exc_info.value.error.message == f"Invalid URI format: {uri}"
        assert fake.requests == []

    def test_non_array_result_is_internal_error(self, perfex):
        pipeline, _ = perfex(body={"message": "No data were found"})
        with pytest.raises(McpError) as exc_info:
            asyncio.run(pipeline.read_resource("perfex://customers/search/zzz"))
        assert exc_info.value.error.code == INTERNAL_ERROR
