"""MCP stdio server wiring for the Tuesday tools.

Unknown tool names are answered with a JSON-RPC ``METHOD_NOT_FOUND`` error.
Every other failure comes back as a tool result flagged ``isError`` so the
calling agent can read the message and adjust its arguments.
"""

from __future__ import annotations

import asyncio
import logging
import sys

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from tuesday_mcp.config.settings import Settings, get_settings
from tuesday_mcp.errors import ToolError, UnknownToolError
from tuesday_mcp.tools.catalog import ToolDescriptor
from tuesday_mcp.tools.gateway import ToolDispatcher

logger = logging.getLogger(__name__)


def to_mcp_tool(descriptor: ToolDescriptor) -> types.Tool:
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.input_schema,
    )


async def call_tool(
    dispatcher: ToolDispatcher,
    name: str,
    arguments: dict | None,
) -> types.CallToolResult:
    try:
        text = await dispatcher.invoke(name, arguments or {})
    except UnknownToolError as exc:
        raise McpError(
            types.ErrorData(code=types.METHOD_NOT_FOUND, message=exc.message)
        ) from exc
    except ToolError as exc:
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=f"Error: {exc.message}")],
            isError=True,
        )
    return types.CallToolResult(content=[types.TextContent(type="text", text=text)])


def build_server(dispatcher: ToolDispatcher, *, name: str, version: str) -> Server:
    server = Server(name, version=version)

    @server.list_tools()
    async def _list_tools() -> list[types.Tool]:
        return [to_mcp_tool(descriptor) for descriptor in dispatcher.list_tools()]

    # set directly: the call_tool decorator would turn McpError into an isError result
    async def _call_tool(request: types.CallToolRequest) -> types.ServerResult:
        result = await call_tool(dispatcher, request.params.name, request.params.arguments)
        return types.ServerResult(result)

    server.request_handlers[types.CallToolRequest] = _call_tool
    return server


def build_dispatcher(settings: Settings) -> ToolDispatcher:
    return ToolDispatcher(
        fallback_api_key=settings.resolved_api_key(),
        base_url=settings.base_url,
    )


def configure_logging(level: str) -> None:
    # stdout carries the MCP stream
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )


async def serve(settings: Settings) -> None:
    server = build_server(
        build_dispatcher(settings),
        name=settings.app_name,
        version=settings.app_version,
    )
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Tuesday MCP server started name=%s", settings.app_name)
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    if not settings.resolved_api_key():
        logger.warning("TUESDAY_API_KEY is not set; tool calls must pass api_key")
    try:
        asyncio.run(serve(settings))
    except Exception:  # noqa: BLE001
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
