"""
Tests for Tool and ToolRegistry.
"""

import pytest

from namhatta.app import App, Tool, ToolConfig, ToolRegistry
from namhatta.app.errors import (
    DupToolError,
    MissingParentError,
    ToolRegistrationError,
    UndefNameError,
)


class EchoTool(Tool):
    def __init__(self, parent=None, name="echo", aliases=None):
        super().__init__(parent, ToolConfig(name=name, aliases=aliases or [], help_text="Echo"))
        self.configured = 0

    def configure(self):
        self.configured += 1

    def run(self, **kwargs):
        return 0


@pytest.mark.unit
class TestToolConfig:
    def test_defaults(self):
        config = ToolConfig(name="x")
        assert config.aliases == []
        assert config.help_text == ""
        assert config.description == ""


@pytest.mark.unit
class TestTool:
    """Test Tool properties and setup."""

    def test_name_required(self):
        with pytest.raises(UndefNameError):
            Tool()

    def test_cmd(self):
        tool = EchoTool(aliases=["e"])
        args, kwargs = tool.cmd
        assert args == ["echo"]
        assert kwargs == {"aliases": ["e"], "help": "Echo", "description": "Echo"}

    def test_lg_before_setup(self):
        with pytest.raises(MissingParentError):
            EchoTool().lg

    def test_app_without_parent(self):
        with pytest.raises(MissingParentError):
            EchoTool().app

    def test_args_without_parent(self):
        with pytest.raises(MissingParentError):
            EchoTool().args

    def test_setup_without_parent(self):
        with pytest.raises(MissingParentError):
            EchoTool().setup()

    def test_setup_derives_logger_once(self, lg):
        app = App("test")
        app._lg = lg
        tool = EchoTool()
        app.add_tool(tool)

        tool.setup()
        tool.setup()

        assert tool.initialized
        assert tool.configured == 1
        assert tool.lg.name == "/echo"
        assert tool.app is app

    def test_run_not_implemented(self):
        tool = Tool(config=ToolConfig(name="bare"))
        with pytest.raises(NotImplementedError):
            tool.run()


@pytest.mark.unit
class TestToolRegistry:
    """Test registration and lookup."""

    def test_register_and_lookup(self):
        registry = ToolRegistry()
        tool = EchoTool(aliases=["e"])

        registry.register(tool)

        assert registry.get_tool("echo") is tool
        assert registry.get_tool("e") is tool
        assert registry.get_tool("missing") is None
        assert registry.list_tools() == ["echo"]
        assert registry.list_aliases() == {"e": "echo"}
        assert len(registry) == 1

    def test_registration_order(self):
        registry = ToolRegistry()
        for name in ("seed", "dev", "config"):
            registry.register(EchoTool(name=name))
        assert [t.name for t in registry.tools()] == ["seed", "dev", "config"]

    def test_duplicate_name(self):
        registry = ToolRegistry()
        registry.register(EchoTool())
        with pytest.raises(DupToolError):
            registry.register(EchoTool())

    def test_alias_taken(self):
        registry = ToolRegistry()
        registry.register(EchoTool(name="dev", aliases=["d"]))
        with pytest.raises(ToolRegistrationError, match="Alias 'd' already registered"):
            registry.register(EchoTool(name="db-config", aliases=["d"]))

    def test_alias_clashes_with_name(self):
        registry = ToolRegistry()
        registry.register(EchoTool(name="dev"))
        with pytest.raises(ToolRegistrationError):
            registry.register(EchoTool(name="other", aliases=["dev"]))

    @pytest.mark.parametrize("name", ["Dev", "1dev", "dev tool", "dev.x", ""])
    def test_invalid_names(self, name):
        registry = ToolRegistry()
        with pytest.raises((ToolRegistrationError, UndefNameError)):
            registry.register(EchoTool(name=name))

    def test_failed_alias_leaves_registry_unchanged(self):
        registry = ToolRegistry()
        with pytest.raises(ToolRegistrationError):
            registry.register(EchoTool(name="dev", aliases=["Bad"]))
        assert len(registry) == 0
