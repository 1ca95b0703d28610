"""Task tools (read-only). Perfex has no plain task listing endpoint."""

from ._shared import get_tool, search_tool

ENTITY = "task"
PLURAL = "tasks"

TOOLS = [
    get_tool(ENTITY, PLURAL),
    search_tool(ENTITY, PLURAL),
]
