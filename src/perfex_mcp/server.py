"""
Perfex CRM MCP Server - FastMCP adapter.

Registers every tool spec from the category table as a FastMCP tool, plus the
customer search resource template and a /health route for HTTP mode.

FastMCP reports a failed tool call by raising ToolError, which it turns into
a result with ``isError: true``. Soft failures from the Perfex API and
protocol errors from the pipeline both take that route here.
"""

import asyncio
import logging
import os
import sys
from typing import Any, Dict

from fastmcp import FastMCP
from fastmcp.exceptions import ResourceError, ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.shared.exceptions import McpError
from mcp.types import TextContent, ToolAnnotations
from pydantic import Field
from starlette.requests import Request
from starlette.responses import JSONResponse

from . import SERVER_NAME, __version__
from .client import create_http_client
from .config import ConfigError, load_settings
from .pipeline import (
    CUSTOMER_SEARCH_TEMPLATE,
    JSON_MIME_TYPE,
    PerfexToolPipeline,
)
from .schema import ToolSpec

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


class PerfexTool(Tool):
    """FastMCP tool backed by one Perfex tool spec."""

    pipeline: Any = Field(exclude=True, repr=False)

    @classmethod
    def from_spec(cls, spec: ToolSpec, pipeline: PerfexToolPipeline) -> "PerfexTool":
        return cls(
            name=spec.name,
            description=spec.description,
            parameters=spec.input_schema(),
            annotations=ToolAnnotations(
                readOnlyHint=spec.read_only,
                destructiveHint=spec.destructive,
                openWorldHint=True,  # Tool accesses external Perfex API
            ),
            pipeline=pipeline,
        )

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        try:
            result = await self.pipeline.invoke(self.name, arguments)
        except McpError as e:
            raise ToolError(e.error.message) from e

        if result.is_error:
            raise ToolError(result.text)
        return ToolResult(content=[TextContent(type="text", text=result.text)])


def build_server(pipeline: PerfexToolPipeline) -> FastMCP:
    """Create the FastMCP server for a configured pipeline."""
    mcp = FastMCP(
        name=SERVER_NAME,
        instructions=(
            "Tools for the Perfex CRM REST API: customers, leads, proposals, invoices, "
            "tasks, estimates, calendar events, contacts, projects, expenses and lookup "
            "tables. Use search_* or list_* tools to find record IDs before get/update/delete."
        ),
    )

    for spec in pipeline.tools.values():
        mcp.add_tool(PerfexTool.from_spec(spec, pipeline))
    logger.info("Registered %d Perfex tools", len(pipeline.tools))

    @mcp.resource(
        CUSTOMER_SEARCH_TEMPLATE,
        name="Search customers by keyword",
        description="Search for customers in Perfex CRM using a search term",
        mime_type=JSON_MIME_TYPE,
    )
    async def search_customers_resource(keysearch: str) -> str:
        # FastMCP has already percent-decoded the template parameter
        try:
            result = await pipeline.invoke("search_customers", {"keysearch": keysearch})
        except McpError as e:
            raise ResourceError(e.error.message) from e
        return result.text

    @mcp.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse({"status": "healthy", "service": SERVER_NAME})

    return mcp


def configure_logging(level_name: str) -> None:
    # stdout carries the stdio MCP stream, so logs go to stderr
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main() -> None:
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))

    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error("Failed to load configuration: %s", e)
        logger.error("Please ensure PERFEX_API_URL and PERFEX_API_KEY are set")
        sys.exit(1)

    logger.info("Perfex CRM MCP server v%s", __version__)
    logger.info("API_URL: Loaded (%s)", settings.api_url)
    logger.info("API_KEY: Loaded (%s)", settings.redacted_key)

    client = create_http_client(settings)
    mcp = build_server(PerfexToolPipeline(client))

    try:
        if settings.http_mode:
            logger.info("Starting server on http://%s:%s (MCP endpoint: /mcp, health: /health)",
                        settings.host, settings.port)
            mcp.run(transport="http", host=settings.host, port=settings.port)
        else:
            logger.info("Perfex CRM MCP server running on stdio")
            mcp.run(transport="stdio")
    finally:
        asyncio.run(client.aclose())
        logger.info("Perfex API client closed")
