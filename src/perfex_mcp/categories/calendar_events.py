"""Calendar event tools. Events live under /calendar on the Perfex API."""

from ..schema import FieldSpec
from ._shared import create_tool, delete_tool, get_tool, list_tool, update_tool

ENTITY = "calendar event"
PLURAL = "calendar events"
BASE_PATH = "/calendar"

EVENT_FIELDS = {
    "title": FieldSpec("string", "Event title (required)", required=True, min_length=1),
    "start": FieldSpec("string", "Start date/time (YYYY-MM-DD HH:MM:SS) (required)", required=True),
    "end": FieldSpec("string", "End date/time (YYYY-MM-DD HH:MM:SS)"),
    "description": FieldSpec("string", "Event description"),
    "userid": FieldSpec("integer", "Owner staff ID"),
    "color": FieldSpec("string", "Display color (e.g. #28B8DA)"),
    "public": FieldSpec("integer", "1 to share the event with all staff, 0 otherwise"),
    "reminder_before": FieldSpec("integer", "Reminder offset value"),
    "reminder_before_type": FieldSpec("string", "Reminder offset unit: minutes, hours, days, weeks"),
}

TOOLS = [
    list_tool(PLURAL, path=BASE_PATH),
    get_tool(ENTITY, PLURAL, path=f"{BASE_PATH}/{{id}}"),
    create_tool(ENTITY, PLURAL, EVENT_FIELDS, path=BASE_PATH),
    update_tool(ENTITY, PLURAL, EVENT_FIELDS, path=f"{BASE_PATH}/{{id}}"),
    delete_tool(ENTITY, PLURAL, path=f"{BASE_PATH}/{{id}}"),
]
