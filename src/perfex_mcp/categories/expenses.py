"""Expense tools."""

from ..schema import FieldSpec
from ._shared import create_tool, delete_tool, get_tool, list_tool, search_tool, update_tool

ENTITY = "expense"
PLURAL = "expenses"

EXPENSE_FIELDS = {
    "category": FieldSpec("integer", "Expense category ID (required)", required=True),
    "amount": FieldSpec("number", "Expense amount (required)", required=True),
    "date": FieldSpec("string", "Expense date (YYYY-MM-DD) (required)", required=True),
    "currency": FieldSpec("integer", "Currency ID (required)", required=True),
    "expense_name": FieldSpec("string", "Expense name"),
    "note": FieldSpec("string", "Note"),
    "paymentmode": FieldSpec("integer", "Payment mode ID"),
    "tax": FieldSpec("integer", "Tax ID"),
    "clientid": FieldSpec("integer", "Customer ID"),
    "project_id": FieldSpec("integer", "Project ID"),
    "billable": FieldSpec("integer", "1 if billable to the customer, 0 otherwise"),
    "reference_no": FieldSpec("string", "Reference number"),
}

TOOLS = [
    list_tool(PLURAL),
    get_tool(ENTITY, PLURAL),
    search_tool(ENTITY, PLURAL),
    create_tool(ENTITY, PLURAL, EXPENSE_FIELDS),
    update_tool(ENTITY, PLURAL, EXPENSE_FIELDS),
    delete_tool(ENTITY, PLURAL),
]
