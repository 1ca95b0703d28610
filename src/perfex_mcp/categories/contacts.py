"""
Contact tools.

Contacts belong to a customer: listing and single lookups are addressed
through the customer ID, while create/update/delete use the contact ID.
"""

from ..schema import FieldSpec, ToolSpec
from ._shared import create_tool, delete_tool, search_tool, update_tool

ENTITY = "contact"
PLURAL = "contacts"

CUSTOMER_ID = FieldSpec("id", "Customer ID the contacts belong to", required=True)

CONTACT_FIELDS = {
    "customer_id": FieldSpec("integer", "Customer ID (required)", required=True),
    "firstname": FieldSpec("string", "First name (required)", required=True, min_length=1),
    "lastname": FieldSpec("string", "Last name (required)", required=True, min_length=1),
    "email": FieldSpec("string", "Email address (required)", required=True, min_length=1),
    "title": FieldSpec("string", "Position/title"),
    "phonenumber": FieldSpec("string", "Phone number"),
    "direction": FieldSpec("string", "Text direction: ltr or rtl"),
    "password": FieldSpec("string", "Customer portal password"),
}

TOOLS = [
    ToolSpec(
        name="list_contacts",
        description="List all contacts of a customer",
        method="GET",
        path="/contacts/{customer_id}",
        response="list",
        operation="list contacts for customer",
        fields={"customer_id": CUSTOMER_ID},
    ),
    ToolSpec(
        name="get_contact_by_id",
        description="Get detailed information about a specific contact of a customer",
        method="GET",
        path="/contacts/{customer_id}/{id}",
        response="object",
        operation="get contact",
        fields={
            "customer_id": CUSTOMER_ID,
            "id": FieldSpec("id", "Contact unique ID", required=True),
        },
    ),
    search_tool(ENTITY, PLURAL),
    create_tool(ENTITY, PLURAL, CONTACT_FIELDS),
    update_tool(ENTITY, PLURAL, CONTACT_FIELDS),
    delete_tool(ENTITY, PLURAL),
]
