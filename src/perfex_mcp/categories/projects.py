"""Project tools."""

from ..schema import FieldSpec
from ._shared import create_tool, delete_tool, get_tool, list_tool, search_tool, update_tool

ENTITY = "project"
PLURAL = "projects"

PROJECT_FIELDS = {
    "name": FieldSpec("string", "Project name (required)", required=True, min_length=1),
    "rel_type": FieldSpec("string", "Related type, usually customer (required)", required=True),
    "clientid": FieldSpec("integer", "Customer ID (required)", required=True),
    "billing_type": FieldSpec("integer", "Billing type: 1 fixed rate, 2 project hours, 3 task hours (required)", required=True),
    "start_date": FieldSpec("string", "Start date (YYYY-MM-DD) (required)", required=True),
    "status": FieldSpec("integer", "Project status ID (required)", required=True),
    "deadline": FieldSpec("string", "Deadline (YYYY-MM-DD)"),
    "project_cost": FieldSpec("number", "Total project cost (fixed rate billing)"),
    "project_rate_per_hour": FieldSpec("number", "Rate per hour (project hours billing)"),
    "estimated_hours": FieldSpec("number", "Estimated hours"),
    "description": FieldSpec("string", "Project description"),
}

TOOLS = [
    list_tool(PLURAL),
    get_tool(ENTITY, PLURAL),
    search_tool(ENTITY, PLURAL),
    create_tool(ENTITY, PLURAL, PROJECT_FIELDS),
    update_tool(ENTITY, PLURAL, PROJECT_FIELDS),
    delete_tool(ENTITY, PLURAL),
]
