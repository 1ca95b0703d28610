"""Customer (client company) tools."""

from ..schema import FieldSpec
from ._shared import create_tool, delete_tool, get_tool, list_tool, search_tool, update_tool

ENTITY = "customer"
PLURAL = "customers"

CUSTOMER_FIELDS = {
    "company": FieldSpec("string", "Company name (required)", required=True, min_length=1),
    "vat": FieldSpec("string", "VAT/Tax ID number"),
    "phonenumber": FieldSpec("string", "Phone number"),
    "website": FieldSpec("string", "Website URL"),
    "address": FieldSpec("string", "Address"),
    "city": FieldSpec("string", "City"),
    "state": FieldSpec("string", "State/Province"),
    "zip": FieldSpec("string", "ZIP/Postal code"),
    "country": FieldSpec("integer", "Country ID"),
    "default_currency": FieldSpec("integer", "Default currency ID"),
    "default_language": FieldSpec("string", "Default language (e.g. english)"),
}

TOOLS = [
    search_tool(ENTITY, PLURAL),
    list_tool(PLURAL),
    get_tool(ENTITY, PLURAL),
    create_tool(ENTITY, PLURAL, CUSTOMER_FIELDS),
    update_tool(ENTITY, PLURAL, CUSTOMER_FIELDS),
    delete_tool(ENTITY, PLURAL),
]
