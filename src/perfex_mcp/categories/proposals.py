"""Proposal tools."""

from ..schema import FieldSpec
from ._shared import create_tool, delete_tool, get_tool, list_tool, search_tool, update_tool

ENTITY = "proposal"
PLURAL = "proposals"

PROPOSAL_FIELDS = {
    "subject": FieldSpec("string", "Proposal subject (required)", required=True, min_length=1),
    "rel_type": FieldSpec("string", "Related type: lead, customer (required)", required=True),
    "rel_id": FieldSpec("integer", "Related ID (Lead or Customer ID) (required)", required=True),
    "date": FieldSpec("string", "Proposal date (YYYY-MM-DD) (required)", required=True),
    "currency": FieldSpec("integer", "Currency ID (required)", required=True),
    "assigned": FieldSpec("integer", "Assigned staff ID"),
    "content": FieldSpec("string", "Proposal content (HTML)"),
}

TOOLS = [
    list_tool(PLURAL),
    create_tool(ENTITY, PLURAL, PROPOSAL_FIELDS),
    get_tool(ENTITY, PLURAL),
    update_tool(ENTITY, PLURAL, PROPOSAL_FIELDS),
    search_tool(ENTITY, PLURAL),
    delete_tool(ENTITY, PLURAL),
]
