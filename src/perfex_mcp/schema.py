"""
Tool descriptors and the generic argument validator.

Every tool is one ``ToolSpec``: its fields, the HTTP call it maps to and the
shape of response it expects. Arguments are validated by a pydantic model
generated from the fields, so adding a tool never means writing a validator.

Field types:
- string: str
- integer: int (bools rejected)
- number: int or float
- id: int or a digits-only string ("42"); advertised as integer
"""

import string
from dataclasses import dataclass, field, replace
from functools import cached_property
from typing import Annotated, Any, Dict, List, Mapping, Optional, Tuple, Type, Union
from urllib.parse import quote

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    StringConstraints,
    ValidationError,
    create_model,
)

from .errors import invalid_params

HTTP_METHODS = {"GET", "POST", "PUT", "DELETE"}
BODY_METHODS = {"POST", "PUT"}

# list: JSON array expected; object: non-null JSON object; mutation: any body,
# interpreted by the success/status flags
RESPONSE_KINDS = {"list", "object", "mutation"}

NumericString = Annotated[StrictStr, StringConstraints(pattern=r"^[0-9]+$")]

_PYTHON_TYPES = {
    "string": StrictStr,
    "integer": StrictInt,
    "number": Union[StrictInt, StrictFloat],
    "id": Union[StrictInt, NumericString],
}

_JSON_TYPES = {
    "string": "string",
    "integer": "integer",
    "number": "number",
    "id": "integer",
}


@dataclass(frozen=True)
class FieldSpec:
    type: str
    description: str = ""
    required: bool = False
    min_length: Optional[int] = None

    def __post_init__(self):
        if self.type not in _PYTHON_TYPES:
            raise ValueError(
                f"Invalid field type: '{self.type}'. "
                f"Valid types: {', '.join(sorted(_PYTHON_TYPES))}"
            )

    def as_optional(self) -> "FieldSpec":
        """Same field, not required and without a length floor (update tools)."""
        return replace(self, required=False, min_length=None)

    def json_schema(self) -> Dict[str, Any]:
        schema = {"type": _JSON_TYPES[self.type]}
        if self.description:
            schema["description"] = self.description
        return schema

    def pydantic_definition(self) -> Tuple[Any, Any]:
        default = ... if self.required else None
        return (
            _PYTHON_TYPES[self.type],
            Field(default, description=self.description or None, min_length=self.min_length),
        )


@dataclass(frozen=True)
class ToolSpec:
    """One MCP tool backed by one Perfex REST call."""

    name: str
    description: str
    method: str
    path: str
    response: str
    operation: str
    fields: Dict[str, FieldSpec] = field(default_factory=dict)

    def __post_init__(self):
        if self.method not in HTTP_METHODS:
            raise ValueError(f"{self.name}: unsupported HTTP method '{self.method}'")
        if self.response not in RESPONSE_KINDS:
            raise ValueError(f"{self.name}: unsupported response kind '{self.response}'")
        for param in self.path_params:
            spec = self.fields.get(param)
            if spec is None or not spec.required:
                raise ValueError(f"{self.name}: path parameter '{param}' must be a required field")

    @property
    def path_params(self) -> Tuple[str, ...]:
        return tuple(
            name for _, name, _, _ in string.Formatter().parse(self.path) if name
        )

    @property
    def required_fields(self) -> List[str]:
        return [name for name, spec in self.fields.items() if spec.required]

    @property
    def read_only(self) -> bool:
        return self.method == "GET"

    @property
    def destructive(self) -> bool:
        return self.method == "DELETE"

    @cached_property
    def arguments_model(self) -> Type[BaseModel]:
        model_name = "".join(part.capitalize() for part in self.name.split("_")) + "Arguments"
        definitions = {name: spec.pydantic_definition() for name, spec in self.fields.items()}
        return create_model(model_name, __config__=ConfigDict(extra="ignore"), **definitions)

    def input_schema(self) -> Dict[str, Any]:
        schema = {
            "type": "object",
            "properties": {name: spec.json_schema() for name, spec in self.fields.items()},
        }
        if self.required_fields:
            schema["required"] = self.required_fields
        return schema

    def descriptor(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }

    def validate(self, arguments: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Validate raw tool arguments.

        Returns only the supplied, known fields. Raises INVALID_PARAMS with the
        first validation error otherwise.
        """
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise invalid_params("Invalid arguments: expected an object")

        try:
            parsed = self.arguments_model.model_validate(dict(arguments))
        except ValidationError as e:
            raise invalid_params(f"Invalid arguments: {_first_error(e)}")
        return parsed.model_dump(exclude_unset=True)

    def render_path(self, arguments: Mapping[str, Any]) -> str:
        encoded = {name: quote(str(arguments[name]), safe="") for name in self.path_params}
        return self.path.format(**encoded)

    def request_body(self, arguments: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        if self.method not in BODY_METHODS:
            return None
        return {key: value for key, value in arguments.items() if key not in self.path_params}

    def describe(self, arguments: Mapping[str, Any]) -> str:
        """Operation label used in error messages, e.g. 'get customer 42'."""
        if "keysearch" in self.path_params:
            return f'{self.operation} for "{arguments["keysearch"]}"'
        parts = [self.operation] + [str(arguments[name]) for name in self.path_params]
        return " ".join(parts)


def _first_error(error: ValidationError) -> str:
    first = error.errors()[0]
    loc = first.get("loc") or ()
    if loc:
        return f"{loc[0]}: {first['msg']}"
    return first["msg"]
