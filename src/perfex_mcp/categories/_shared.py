"""
Shared builders for the per-entity tool modules.

Most Perfex entities expose the same endpoint family:

    GET    /<plural>                       list
    GET    /<plural>/{id}                  get by id
    GET    /<plural>/search/{keysearch}    search
    POST   /<plural>                       create
    PUT    /<plural>/{id}                  update
    DELETE /<plural>/{id}                  delete

These helpers build the ToolSpec for each so entity modules only carry
their field lists and any endpoint that deviates from the pattern.
"""

from typing import Dict, Optional

from ..schema import FieldSpec, ToolSpec


def id_field(entity: str, purpose: str = "") -> Dict[str, FieldSpec]:
    suffix = f" {purpose}" if purpose else ""
    return {"id": FieldSpec("id", f"{entity.capitalize()} unique ID{suffix}", required=True)}


def keysearch_field(plural: str) -> Dict[str, FieldSpec]:
    return {"keysearch": FieldSpec("string", f"Search term to find {plural}", required=True)}


def optional_fields(fields: Dict[str, FieldSpec]) -> Dict[str, FieldSpec]:
    return {name: spec.as_optional() for name, spec in fields.items()}


def list_tool(
    plural: str,
    path: Optional[str] = None,
    fields: Optional[Dict[str, FieldSpec]] = None,
    description: Optional[str] = None,
) -> ToolSpec:
    return ToolSpec(
        name=f"list_{plural.replace(' ', '_')}",
        description=description or f"List all {plural}",
        method="GET",
        path=path or f"/{plural}",
        response="list",
        operation=f"list {plural}",
        fields=dict(fields or {}),
    )


def get_tool(entity: str, plural: str, path: Optional[str] = None) -> ToolSpec:
    return ToolSpec(
        name=f"get_{entity.replace(' ', '_')}_by_id",
        description=f"Get detailed information about a specific {entity}",
        method="GET",
        path=path or f"/{plural}/{{id}}",
        response="object",
        operation=f"get {entity}",
        fields=id_field(entity),
    )


def search_tool(entity: str, plural: str, path: Optional[str] = None) -> ToolSpec:
    return ToolSpec(
        name=f"search_{plural.replace(' ', '_')}",
        description=f"Search for {plural} by keyword",
        method="GET",
        path=path or f"/{plural}/search/{{keysearch}}",
        response="list",
        operation=f"search {plural}",
        fields=keysearch_field(plural),
    )


def create_tool(entity: str, plural: str, fields: Dict[str, FieldSpec], path: Optional[str] = None) -> ToolSpec:
    return ToolSpec(
        name=f"create_{entity.replace(' ', '_')}",
        description=f"Create a new {entity}",
        method="POST",
        path=path or f"/{plural}",
        response="mutation",
        operation=f"create {entity}",
        fields=dict(fields),
    )


def update_tool(entity: str, plural: str, fields: Dict[str, FieldSpec], path: Optional[str] = None) -> ToolSpec:
    """Update tool: ``id`` in the path, every other field optional in the body."""
    return ToolSpec(
        name=f"update_{entity.replace(' ', '_')}",
        description=f"Update an existing {entity}",
        method="PUT",
        path=path or f"/{plural}/{{id}}",
        response="mutation",
        operation=f"update {entity}",
        fields={**id_field(entity, "(required)"), **optional_fields(fields)},
    )


def delete_tool(entity: str, plural: str, path: Optional[str] = None) -> ToolSpec:
    return ToolSpec(
        name=f"delete_{entity.replace(' ', '_')}",
        description=f"Delete a {entity} permanently",
        method="DELETE",
        path=path or f"/{plural}/{{id}}",
        response="mutation",
        operation=f"delete {entity}",
        fields=id_field(entity, "to delete"),
    )
