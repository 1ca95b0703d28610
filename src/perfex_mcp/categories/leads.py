"""
Lead tools.

Lead source, status and assignee are lookup ids; Perfex accepts them as
numbers or numeric strings.
"""

from ..schema import FieldSpec
from ._shared import create_tool, delete_tool, get_tool, list_tool, search_tool, update_tool

ENTITY = "lead"
PLURAL = "leads"

LEAD_FIELDS = {
    "name": FieldSpec("string", "Lead name (required)", required=True, min_length=1),
    "source": FieldSpec("id", "Lead source ID (required)", required=True),
    "status": FieldSpec("id", "Lead status ID (required)", required=True),
    "assigned": FieldSpec("id", "Assigned staff ID (required)", required=True),
    "email": FieldSpec("string", "Email address"),
    "phonenumber": FieldSpec("string", "Phone number"),
    "company": FieldSpec("string", "Company name"),
}

TOOLS = [
    list_tool(PLURAL),
    create_tool(ENTITY, PLURAL, LEAD_FIELDS),
    get_tool(ENTITY, PLURAL),
    update_tool(ENTITY, PLURAL, LEAD_FIELDS),
    search_tool(ENTITY, PLURAL),
    # The remote API routes lead deletion under /delete/, unlike other entities.
    delete_tool(ENTITY, PLURAL, path="/delete/leads/{id}"),
]
