"""Invoice tools (read-only)."""

from ._shared import get_tool, list_tool, search_tool

ENTITY = "invoice"
PLURAL = "invoices"

TOOLS = [
    list_tool(PLURAL),
    get_tool(ENTITY, PLURAL),
    search_tool(ENTITY, PLURAL),
]
