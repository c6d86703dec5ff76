"""Settings that gate which intercepted messages get normalized."""

from __future__ import annotations

import logging

from blanklines.enums import DEFAULT_TOOLS, ToolType

logger = logging.getLogger(__name__)


class Settings:
    """Enabled tools and scope restriction.

    Values are kept in memory only; nothing is validated beyond the
    :class:`ToolType` flags themselves.
    """

    def __init__(
        self,
        enabled: ToolType = DEFAULT_TOOLS,
        scope_restricted: bool = False,
    ) -> None:
        self._enabled = ToolType(enabled)
        self._scope_restricted = bool(scope_restricted)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(enabled={self._enabled!r}, "
            f"scope_restricted={self._scope_restricted!r})"
        )

    def is_enabled(self, tool: ToolType) -> bool:
        return bool(tool) and tool in self._enabled

    @property
    def enabled(self) -> ToolType:
        return self._enabled

    def set_enabled(self, tools: ToolType) -> None:
        """Replace the set of enabled tools."""
        self._enabled = ToolType(tools)
        logger.debug("Enabled tools set to %r", self._enabled)

    def enable(self, tool: ToolType) -> None:
        self._enabled |= tool

    def disable(self, tool: ToolType) -> None:
        self._enabled = ToolType(self._enabled.value & ~int(tool))

    def is_scope_restricted(self) -> bool:
        return self._scope_restricted

    def set_scope_restricted(self, restricted: bool) -> None:
        self._scope_restricted = bool(restricted)
        logger.debug("Scope restriction %s", "on" if restricted else "off")

    def reset_to_defaults(self) -> None:
        """Enable the default tools and lift the scope restriction."""
        self._enabled = DEFAULT_TOOLS
        self._scope_restricted = False

    def describe(self) -> str:
        """A human-readable summary, one setting per line."""
        tools = ", ".join(
            tool.name.lower()
            for tool in ToolType
            if tool is not ToolType.ALL and tool in self._enabled
        )
        scope = "in-scope targets only" if self._scope_restricted else "all targets"
        return f"Enabled tools: {tools or 'none'}\nApplies to: {scope}"
