"""Tool registry for screenq SDK tools."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass
class ToolDef:
    """Definition of a registered tool."""

    name: str
    description: str
    fn: Callable[..., dict[str, Any]]


class ToolRegistry:
    """Central registry for SDK tools, keyed by tool name."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolDef] = {}

    def tool(self, name: str, description: str) -> Callable[..., Any]:
        """Decorator to register a tool function. Names must be unique."""

        def decorator(fn: Callable[..., dict[str, Any]]) -> Callable[..., dict[str, Any]]:
            if name in self._tools:
                msg = f"Tool '{name}' is already registered"
                raise ValueError(msg)
            self._tools[name] = ToolDef(name=name, description=description, fn=fn)
            return fn

        return decorator

    def all_tools(self) -> list[ToolDef]:
        """Return all registered tools in registration order."""
        return list(self._tools.values())

    def names(self) -> list[str]:
        return list(self._tools)

    def get(self, name: str) -> ToolDef:
        """Get a tool by name. Raises KeyError listing the known names."""
        try:
            return self._tools[name]
        except KeyError:
            msg = f"Unknown tool '{name}'. Available: {sorted(self._tools)}"
            raise KeyError(msg) from None

    def call(self, name: str, **kwargs: Any) -> dict[str, Any]:
        return self.get(name).fn(**kwargs)


# Module-level singleton; tool modules import this directly.
registry = ToolRegistry()
