"""Lookup tables shared across entities (payment modes, expense categories, taxes)."""

from ._shared import list_tool

TOOLS = [
    list_tool("payment modes", path="/common/payment_mode"),
    list_tool("expense categories", path="/common/expense_category"),
    list_tool("taxes", path="/common/tax_data"),
]
