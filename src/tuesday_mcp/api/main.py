"""FastAPI bridge exposing the same tool catalog and dispatcher over HTTP."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from fastapi import Body, FastAPI, HTTPException
from pydantic import BaseModel

from tuesday_mcp.config.settings import Settings, get_settings
from tuesday_mcp.errors import (
    MissingCredentialError,
    ToolError,
    TransportError,
    UnknownToolError,
    ValidationError,
)
from tuesday_mcp.server import build_dispatcher, configure_logging
from tuesday_mcp.tools.gateway import ToolDispatcher

_STATUS_BY_ERROR: dict[type[ToolError], int] = {
    UnknownToolError: 404,
    MissingCredentialError: 401,
    ValidationError: 422,
    TransportError: 502,
}


class ToolCallResponse(BaseModel):
    tool: str
    status: str = "ok"
    text: str


def create_app(
    *,
    settings_override: Settings | None = None,
    dispatcher: ToolDispatcher | None = None,
) -> FastAPI:
    settings = settings_override or get_settings()
    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.state.dispatcher = dispatcher or build_dispatcher(settings)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "service": settings.app_name}

    @app.get("/tools")
    def tools() -> dict[str, list[dict[str, Any]]]:
        return {"tools": [asdict(descriptor) for descriptor in app.state.dispatcher.list_tools()]}

    @app.post("/tools/{tool_name}/call", response_model=ToolCallResponse)
    async def call_tool(
        tool_name: str,
        arguments: dict[str, Any] | None = Body(default=None),
    ) -> ToolCallResponse:
        try:
            text = await app.state.dispatcher.invoke(tool_name, arguments or {})
        except ToolError as exc:
            raise HTTPException(status_code=_status_for(exc), detail=exc.message) from exc
        return ToolCallResponse(tool=tool_name, text=text)

    return app


def _status_for(exc: ToolError) -> int:
    for kind, status_code in _STATUS_BY_ERROR.items():
        if isinstance(exc, kind):
            return status_code
    return 500


def run() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        create_app(settings_override=settings),
        host=settings.http_host,
        port=settings.http_port,
    )


# Module-level app for `uvicorn tuesday_mcp.api.main:app`.
app = create_app()
