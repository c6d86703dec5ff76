# tests/test_config.py
from __future__ import annotations

from blanklines.config import Settings
from blanklines.enums import DEFAULT_TOOLS, ToolType


def test_defaults():
    settings = Settings()
    assert settings.enabled == DEFAULT_TOOLS
    assert settings.is_enabled(ToolType.PROXY)
    assert settings.is_enabled(ToolType.EXTENSIONS)
    assert not settings.is_enabled(ToolType.SCANNER)
    assert settings.is_scope_restricted() is False


def test_set_enabled_replaces_selection():
    settings = Settings()
    settings.set_enabled(ToolType.REPEATER)
    assert settings.is_enabled(ToolType.REPEATER)
    assert not settings.is_enabled(ToolType.PROXY)


def test_enable_and_disable():
    settings = Settings(enabled=ToolType.PROXY)
    settings.enable(ToolType.SCANNER)
    assert settings.is_enabled(ToolType.SCANNER)
    settings.disable(ToolType.PROXY)
    assert not settings.is_enabled(ToolType.PROXY)
    assert settings.enabled == ToolType.SCANNER


def test_disable_all():
    settings = Settings()
    settings.disable(ToolType.ALL)
    assert not any(settings.is_enabled(tool) for tool in ToolType)


def test_empty_tool_is_never_enabled():
    assert not Settings(enabled=ToolType.ALL).is_enabled(ToolType(0))


def test_scope_restriction_toggle():
    settings = Settings()
    settings.set_scope_restricted(True)
    assert settings.is_scope_restricted() is True
    settings.set_scope_restricted(False)
    assert settings.is_scope_restricted() is False


def test_reset_to_defaults():
    settings = Settings(enabled=ToolType.SCANNER, scope_restricted=True)
    settings.reset_to_defaults()
    assert settings.enabled == DEFAULT_TOOLS
    assert settings.is_scope_restricted() is False


def test_describe():
    settings = Settings(enabled=ToolType.PROXY | ToolType.REPEATER, scope_restricted=True)
    assert settings.describe() == (
        "Enabled tools: proxy, repeater\nApplies to: in-scope targets only"
    )


def test_describe_nothing_enabled():
    assert Settings(enabled=ToolType(0)).describe() == (
        "Enabled tools: none\nApplies to: all targets"
    )


def test_repr():
    assert "scope_restricted=False" in repr(Settings())
