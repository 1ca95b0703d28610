"""
Perfex MCP Tools - Category Modules

One module per Perfex CRM entity, each exporting a TOOLS list:
- customers: search, list, get, create, update, delete
- leads: list, create, get, update, search, delete
- proposals: list, create, get, update, search, delete
- invoices: list, get, search (read-only)
- tasks: get, search (read-only)
- estimates: list, get, search, create, update, delete
- calendar_events: list, get, create, update, delete
- contacts: list (per customer), get, search, create, update, delete
- projects: list, get, search, create, update, delete
- expenses: list, get, search, create, update, delete
- common: payment modes, expense categories, taxes

New tools are added here and nowhere else.
"""

from typing import Dict, List

from ..schema import ToolSpec
from . import (
    calendar_events,
    common,
    contacts,
    customers,
    estimates,
    expenses,
    invoices,
    leads,
    projects,
    proposals,
    tasks,
)

CATEGORY_MODULES = [
    customers,
    invoices,
    tasks,
    leads,
    proposals,
    estimates,
    calendar_events,
    contacts,
    projects,
    expenses,
    common,
]


def build_tool_table(tools: List[ToolSpec]) -> Dict[str, ToolSpec]:
    """Index tools by name, rejecting duplicates."""
    table: Dict[str, ToolSpec] = {}
    for tool in tools:
        if tool.name in table:
            raise ValueError(f"Duplicate tool name: {tool.name}")
        table[tool.name] = tool
    return table


ALL_TOOLS: List[ToolSpec] = [tool for module in CATEGORY_MODULES for tool in module.TOOLS]

TOOL_TABLE: Dict[str, ToolSpec] = build_tool_table(ALL_TOOLS)

__all__ = ["ALL_TOOLS", "TOOL_TABLE", "build_tool_table"]
