"""Estimate tools."""

from ..schema import FieldSpec
from ._shared import create_tool, delete_tool, get_tool, list_tool, search_tool, update_tool

ENTITY = "estimate"
PLURAL = "estimates"

ESTIMATE_FIELDS = {
    "clientid": FieldSpec("integer", "Customer ID (required)", required=True),
    "number": FieldSpec("integer", "Estimate number (required)", required=True),
    "date": FieldSpec("string", "Estimate date (YYYY-MM-DD) (required)", required=True),
    "currency": FieldSpec("integer", "Currency ID (required)", required=True),
    "expirydate": FieldSpec("string", "Expiry date (YYYY-MM-DD)"),
    "status": FieldSpec("integer", "Estimate status ID"),
    "sale_agent": FieldSpec("integer", "Sale agent staff ID"),
    "reference_no": FieldSpec("string", "Reference number"),
    "clientnote": FieldSpec("string", "Note visible to the customer"),
    "adminnote": FieldSpec("string", "Internal admin note"),
    "terms": FieldSpec("string", "Terms and conditions"),
}

TOOLS = [
    list_tool(PLURAL),
    get_tool(ENTITY, PLURAL),
    search_tool(ENTITY, PLURAL),
    create_tool(ENTITY, PLURAL, ESTIMATE_FIELDS),
    update_tool(ENTITY, PLURAL, ESTIMATE_FIELDS),
    delete_tool(ENTITY, PLURAL),
]
