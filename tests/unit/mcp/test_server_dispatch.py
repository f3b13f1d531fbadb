"""Tests for MCP tool listing and dispatch."""

import json

import pytest

from palettesmith.mcp.server import TOOL_HANDLERS, call_tool, dispatch_tool, list_tools_handler
from palettesmith.mcp.server.tools import TOOL_NAMES, get_all_tools


class TestToolDefinitions:
    """get_all_tools."""

    def test_every_tool_has_a_handler(self) -> None:
        assert set(TOOL_NAMES) == set(TOOL_HANDLERS)
        assert len(TOOL_NAMES) == 8

    def test_schemas_are_objects(self) -> None:
        for tool in get_all_tools():
            assert tool.description
            assert tool.inputSchema["type"] == "object"

    def test_required_arguments(self) -> None:
        schemas = {tool.name: tool.inputSchema for tool in get_all_tools()}
        assert schemas["generate_palette"]["required"] == ["brand_color"]
        assert set(schemas["validate_accessibility"]["required"]) == {"foreground", "background"}
        assert set(schemas["generate_dynamic_colors"]["required"]) == {
            "project_description",
            "primary_color",
        }

    def test_hex_pattern_in_schema(self) -> None:
        schema = next(t for t in get_all_tools() if t.name == "generate_color_scale").inputSchema
        assert schema["properties"]["seed_color"]["pattern"] == "^#[0-9A-Fa-f]{3,6}$"


class TestDispatch:
    """dispatch_tool / call_tool."""

    def test_unknown_tool(self) -> None:
        data = json.loads(dispatch_tool("paint_everything", {}))
        assert data["error"] == "Unknown tool: paint_everything"
        assert "generate_palette" in data["available_tools"]

    def test_none_arguments(self) -> None:
        data = json.loads(dispatch_tool("generate_color_scale", None))
        assert "error" in data

    @pytest.mark.asyncio
    async def test_list_tools(self) -> None:
        tools = await list_tools_handler()
        assert [tool.name for tool in tools] == list(TOOL_NAMES)

    @pytest.mark.asyncio
    async def test_call_tool_returns_text_content(self) -> None:
        result = await call_tool("suggest_secondary_color", {"primary_color": "#ff0000"})
        assert len(result) == 1
        assert result[0].type == "text"
        assert json.loads(result[0].text)["scheme"] == "analogous"

    @pytest.mark.asyncio
    async def test_call_tool_error_is_json(self) -> None:
        result = await call_tool("validate_accessibility", {"foreground": "#000"})
        assert "error" in json.loads(result[0].text)
