#!/usr/bin/env python3
"""
Perfex CRM MCP Server - FastMCP server exposing the Perfex CRM REST API.

Configuration (environment):
- PERFEX_API_URL: Perfex REST API base URL (required)
- PERFEX_API_KEY: Perfex API token, sent as the 'authtoken' header (required)
- MCP_HTTP_MODE: 'true' to serve streamable HTTP instead of stdio
- MCP_HOST / MCP_PORT (or PORT): HTTP bind address (default 127.0.0.1:8000)
- LOG_LEVEL: logging level (default INFO); logs go to stderr

Register with an MCP client as a stdio server:
    python server.py
"""

import sys
from pathlib import Path

# --- Add src to path when running from a checkout ---
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from perfex_mcp.server import main


if __name__ == "__main__":
    main()
