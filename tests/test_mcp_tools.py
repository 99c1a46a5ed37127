"""Tests for MCP tool dispatch."""

from writecraft_forms.content_types.registry import ContentTypeRegistry, register_content_type
from writecraft_forms.mcp_server.tools import dispatch_tool, get_mcp_tools
from writecraft_forms.models.form_output import FormConfig


class TestToolDefinitions:
    """Tests for the advertised tools."""

    def test_tool_names(self):
        """Test that every tool is listed with a schema."""
        tools = get_mcp_tools()
        assert [t["name"] for t in tools] == [
            "list_content_types",
            "get_form_config",
            "validate_content_type",
            "analyze_content_schema",
        ]
        assert all(t["inputSchema"]["type"] == "object" for t in tools)

    def test_dispatchable(self):
        """Test that every advertised tool is dispatched."""
        for tool in get_mcp_tools():
            result = dispatch_tool(tool["name"], {"content_type": "character"})
            assert "error" not in result


class TestDispatch:
    """Tests for dispatch_tool."""

    def test_list_content_types(self):
        """Test listing content types."""
        result = dispatch_tool("list_content_types")
        keys = [entry["key"] for entry in result["content_types"]]
        assert "character" in keys
        assert "weapon" in keys
        character = next(e for e in result["content_types"] if e["key"] == "character")
        assert character["title"] == "Character Editor"
        assert character["schema_driven"] is True

    def test_get_form_config(self):
        """Test building a form payload."""
        result = dispatch_tool("get_form_config", {"content_type": "character"})
        form = result["form"]
        assert form["title"] == "Character Editor"
        assert form["tabs"][0]["id"] == "basic"
        species = next(f for f in form["tabs"][0]["fields"] if f["name"] == "species")
        assert species["type"] == "autocomplete-species"

    def test_validate_content_type(self):
        """Test checking a schema-driven and a template-built type."""
        result = dispatch_tool("validate_content_type", {"content_type": "potion"})
        assert result["is_valid"] is True
        assert result["errors"] == []
        template = dispatch_tool("validate_content_type", {"content_type": "weapon"})
        assert template["is_valid"] is True
        assert "message" in template

    def test_analyze_content_schema(self):
        """Test returning raw field metadata."""
        result = dispatch_tool("analyze_content_schema", {"content_type": "law"})
        fields = {f["name"]: f for f in result["fields"]}
        assert fields["text"]["type"] == "textarea"
        assert fields["dateEnacted"]["type"] == "date"
        assert fields["name"]["is_required"] is True
        assert "userId" in fields

    def test_analyze_template_type(self):
        """Test that a template-built type has no schema to analyze."""
        result = dispatch_tool("analyze_content_schema", {"content_type": "weapon"})
        assert "error" in result

    def test_unknown_tool(self):
        """Test calling a tool that does not exist."""
        assert dispatch_tool("delete_everything", {}) == {"error": "Unknown tool: delete_everything"}

    def test_missing_argument(self):
        """Test calling a tool without its content type."""
        result = dispatch_tool("get_form_config", {})
        assert result == {"error": "Missing required argument: content_type"}

    def test_unknown_content_type(self):
        """Test asking for a content type that is not registered."""
        result = dispatch_tool("get_form_config", {"content_type": "dragon"})
        assert result == {"error": "Unknown content type: dragon"}

    def test_custom_registry(self):
        """Test serving from a caller-supplied registry."""
        registry = register_content_type(
            "note",
            builder=lambda: FormConfig(title="Note"),
            registry=ContentTypeRegistry(),
        )
        result = dispatch_tool("list_content_types", registry=registry)
        assert [e["key"] for e in result["content_types"]] == ["note"]
        assert dispatch_tool("get_form_config", {"content_type": "note"}, registry)["form"]["title"] == "Note"
