"""Tuesday tool layer: schemas, registry, catalog, HTTP client and dispatcher."""

from tuesday_mcp.tools.catalog import ToolDescriptor, list_tools
from tuesday_mcp.tools.client import TuesdayClient
from tuesday_mcp.tools.gateway import ToolDispatcher, ToolInvocation
from tuesday_mcp.tools.registry import ToolSpec, build_registry, validate_arguments

__all__ = [
    "ToolDescriptor",
    "ToolDispatcher",
    "ToolInvocation",
    "ToolSpec",
    "TuesdayClient",
    "build_registry",
    "list_tools",
    "validate_arguments",
]
