"""screenq.tools — SDK tool definitions with central registry."""

from screenq.tools import dataset as _dataset_tools  # noqa: F401
from screenq.tools import screener as _screener_tools  # noqa: F401
from screenq.tools.registry import ToolDef, ToolRegistry, registry

__all__ = ["ToolDef", "ToolRegistry", "registry"]
