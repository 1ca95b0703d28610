"""Invariants over the whole tool table."""

import asyncio
import json

import pytest
from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS

from perfex_mcp.categories import ALL_TOOLS, TOOL_TABLE, build_tool_table

SAMPLE_VALUES = {
    "string": "sample",
    "integer": 7,
    "number": 12.5,
    "id": 7,
}

CANNED_BODIES = {
    "list": [],
    "object": {"id": 7},
    "mutation": {"success": True, "message": "ok"},
}


def valid_arguments(spec):
    return {name: SAMPLE_VALUES[field.type] for name, field in spec.fields.items() if field.required}


REQUIRED_CASES = [
    pytest.param(spec, field_name, id=f"{spec.name}-{field_name}")
    for spec in ALL_TOOLS
    for field_name in spec.required_fields
]


class TestTableShape:
    """Verify the static table itself."""

    def test_tool_names_unique(self):
        assert len(TOOL_TABLE) == len(ALL_TOOLS)

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError, match="Duplicate tool name"):
            build_tool_table([TOOL_TABLE["list_leads"], TOOL_TABLE["list_leads"]])

    def test_expected_entities_present(self):
        for name in [
            "search_customers", "list_customers", "get_customer_by_id", "create_customer",
            "list_invoices", "get_invoice_by_id", "get_task_by_id",
            "list_leads", "create_lead", "get_lead_by_id", "update_lead", "search_leads", "delete_lead",
            "list_proposals", "create_proposal", "get_proposal_by_id", "update_proposal",
            "search_proposals", "delete_proposal",
            "list_estimates", "create_calendar_event", "list_contacts", "create_project",
            "create_expense", "list_payment_modes", "list_expense_categories", "list_taxes",
        ]:
            assert name in TOOL_TABLE, name

    def test_read_only_entities_have_no_mutations(self):
        for name in TOOL_TABLE:
            if "invoice" in name or "task" in name:
                assert TOOL_TABLE[name].method == "GET", name

    def test_delete_lead_route_preserved(self):
        assert TOOL_TABLE["delete_lead"].path == "/delete/leads/{id}"
        for name, spec in TOOL_TABLE.items():
            if spec.method == "DELETE" and name != "delete_lead":
                assert not spec.path.startswith("/delete/"), name

    def test_update_tools_require_only_id(self):
        for name, spec in TOOL_TABLE.items():
            if name.startswith("update_"):
                assert spec.required_fields == ["id"], name

    def test_mutations_are_not_read_only(self):
        for spec in ALL_TOOLS:
            assert spec.read_only == (spec.response != "mutation"), spec.name


class TestRequiredFields:
    """Every required field is enforced before any HTTP call."""

    @pytest.mark.parametrize("spec,field_name", REQUIRED_CASES)
    def test_omitting_required_field(self, perfex, spec, field_name):
        pipeline, fake = perfex(body=CANNED_BODIES[spec.response])
        arguments = valid_arguments(spec)
        del arguments[field_name]

        with pytest.raises(McpError) as exc_info:
            asyncio.run(pipeline.invoke(spec.name, arguments))

        assert exc_info.value.error.code == INVALID_PARAMS
        assert field_name in exc_info.value.error.message
        assert fake.requests == []


class TestEveryToolDispatches:
    """With valid arguments each tool issues exactly one matching request."""

    @pytest.mark.parametrize("spec", ALL_TOOLS, ids=lambda spec: spec.name)
    def test_one_request(self, perfex, spec):
        pipeline, fake = perfex(body=CANNED_BODIES[spec.response])
        arguments = valid_arguments(spec)

        asyncio.run(pipeline.invoke(spec.name, arguments))

        assert len(fake.requests) == 1
        request = fake.last
        assert request.method == spec.method
        assert request.url.path == "/api" + spec.render_path(arguments)
        if spec.method in ("POST", "PUT"):
            body = json.loads(request.content)
            assert not set(body) & set(spec.path_params)
        else:
            assert request.content == b""
