"""
Request pipeline shared by every Perfex tool and the customer search resource.

    lookup -> validate -> one HTTP call -> response shape check -> text payload

Protocol failures (unknown tool, bad arguments, API/transport errors, bad
response shape) are raised as McpError. Failures the Perfex API reports in a
successful response body (``success: false``) are returned as a
``ToolCallResult`` with ``is_error`` set.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional
from urllib.parse import unquote

import httpx

from .categories import ALL_TOOLS, build_tool_table
from .errors import internal_error, invalid_request, method_not_found, raise_api_error
from .schema import ToolSpec

logger = logging.getLogger(__name__)

JSON_MIME_TYPE = "application/json"

CUSTOMER_SEARCH_TEMPLATE = "perfex://customers/search/{keysearch}"
_CUSTOMER_SEARCH_URI = re.compile(r"^perfex://customers/search/([^/]+)$")

# Checked in this order when reporting the ID of a created/updated record
ID_KEYS = ("id", "leadid", "customerid")


def to_json_text(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def decode_body(response: httpx.Response) -> Any:
    """JSON body if it parses, raw text otherwise."""
    try:
        return response.json()
    except ValueError:
        return response.text


@dataclass(frozen=True)
class ToolCallResult:
    text: str
    is_error: bool = False

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"content": [{"type": "text", "text": self.text}]}
        if self.is_error:
            result["isError"] = True
        return result


def interpret_mutation_response(data: Any, operation: str) -> ToolCallResult:
    """Turn a create/update/delete response body into a result.

    Success when ``success`` is truthy or ``status`` is exactly True; the text
    is the API message (or a default) plus the record ID when one is present.
    Anything else is a soft failure.
    """
    body = data if isinstance(data, dict) else {}

    if body.get("success") or body.get("status") is True:
        message = body.get("message") or f"{operation} completed successfully"
        record_id = next((body[key] for key in ID_KEYS if body.get(key)), None)
        if record_id:
            return ToolCallResult(f"{message}. ID: {record_id}")
        return ToolCallResult(str(message))

    message = body.get("message") or f"{operation} failed"
    return ToolCallResult(f"Error: {message}", is_error=True)


class PerfexToolPipeline:
    """Dispatches tool calls against the Perfex REST API.

    Args:
        client: Pre-configured AsyncClient (base URL + authtoken header)
        tools: Tool specs to serve. Defaults to every category's tools.
    """

    def __init__(self, client: httpx.AsyncClient, tools: Optional[Iterable[ToolSpec]] = None):
        self.client = client
        self.tools = build_tool_table(list(ALL_TOOLS if tools is None else tools))

    def list_tools(self) -> List[Dict[str, Any]]:
        return [spec.descriptor() for spec in self.tools.values()]

    def list_resource_templates(self) -> List[Dict[str, Any]]:
        return [
            {
                "uriTemplate": CUSTOMER_SEARCH_TEMPLATE,
                "name": "Search customers by keyword",
                "mimeType": JSON_MIME_TYPE,
                "description": "Search for customers in Perfex CRM using a search term",
            }
        ]

    async def invoke(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolCallResult:
        operation = f"execute tool {name}"
        try:
            spec = self.tools.get(name)
            if spec is None:
                raise method_not_found(f"Unknown tool: {name}")
            params = spec.validate(arguments)
            operation = spec.describe(params)
            data = await self._send(spec, params)
            return self._format(spec, data)
        except Exception as e:
            raise_api_error(e, operation)

    async def read_resource(self, uri: str) -> Dict[str, Any]:
        """Serve ``perfex://customers/search/{keysearch}``."""
        match = _CUSTOMER_SEARCH_URI.match(uri)
        if not match:
            raise_api_error(invalid_request(f"Invalid URI format: {uri}"), f"read resource {uri}")

        keysearch = unquote(match.group(1))
        result = await self.invoke("search_customers", {"keysearch": keysearch})
        return {
            "contents": [
                {"uri": uri, "mimeType": JSON_MIME_TYPE, "text": result.text}
            ]
        }

    async def _send(self, spec: ToolSpec, params: Mapping[str, Any]) -> Any:
        path = spec.render_path(params)
        logger.info("%s %s (%s)", spec.method, path, spec.name)
        response = await self.client.request(spec.method, path, json=spec.request_body(params))
        response.raise_for_status()
        return decode_body(response)

    def _format(self, spec: ToolSpec, data: Any) -> ToolCallResult:
        if spec.response == "mutation":
            return interpret_mutation_response(data, spec.operation)

        if spec.response == "list":
            valid = isinstance(data, list)
        else:
            # JSON object (or array, which some single-record endpoints return)
            valid = isinstance(data, (dict, list))
        if not valid:
            raise internal_error(f"Perfex API returned unexpected data format for {spec.operation}.")
        return ToolCallResult(to_json_text(data))
