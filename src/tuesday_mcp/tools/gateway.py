"""Tool dispatcher: credential, schema, HTTP call, formatting, error boundary."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

import httpx

from tuesday_mcp.errors import (
    MissingCredentialError,
    ToolError,
    UnexpectedError,
    UnknownToolError,
    ValidationError,
)
from tuesday_mcp.tools.catalog import ToolDescriptor, ensure_catalog_matches, list_tools
from tuesday_mcp.tools.client import DEFAULT_BASE_URL, TuesdayClient
from tuesday_mcp.tools.registry import ToolSpec, get_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolInvocation:
    tool_name: str
    raw_arguments: Any


class ToolDispatcher:
    """Route tool calls to the Tuesday API.

    The fallback API key comes from configuration at construction time; a
    non-empty per-call ``api_key`` argument always wins over it.
    """

    def __init__(
        self,
        *,
        fallback_api_key: str = "",
        base_url: str = DEFAULT_BASE_URL,
        registry: dict[str, ToolSpec] | None = None,
        catalog: tuple[ToolDescriptor, ...] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.registry = registry if registry is not None else get_registry()
        self.catalog = catalog if catalog is not None else list_tools()
        ensure_catalog_matches(self.registry, self.catalog)
        self.fallback_api_key = fallback_api_key.strip()
        self.base_url = base_url
        self.transport = transport

    def list_tools(self) -> tuple[ToolDescriptor, ...]:
        return self.catalog

    def resolve_api_key(self, invocation: ToolInvocation) -> str:
        arguments = invocation.raw_arguments
        candidate = arguments.get("api_key") if isinstance(arguments, dict) else None
        if candidate is not None and not isinstance(candidate, str):
            raise ValidationError(invocation.tool_name, ["api_key: must be a string"])
        if candidate and candidate.strip():
            return candidate.strip()
        if self.fallback_api_key:
            return self.fallback_api_key
        raise MissingCredentialError()

    async def invoke(self, tool_name: str, raw_arguments: Any) -> str:
        invocation = ToolInvocation(
            tool_name=tool_name,
            raw_arguments={} if raw_arguments is None else raw_arguments,
        )
        api_key = self.resolve_api_key(invocation)

        started_at = time.perf_counter()
        logger.info(
            "tool_call event=start tool=%s argument_keys=%s",
            tool_name,
            _argument_keys(invocation.raw_arguments),
        )
        try:
            text = await self._dispatch(invocation, api_key)
        except ToolError as exc:
            logger.warning(
                "tool_call event=failed tool=%s error=%s duration_ms=%s",
                tool_name,
                type(exc).__name__,
                _duration_ms(started_at),
            )
            raise
        except Exception as exc:  # noqa: BLE001
            logger.exception(
                "tool_call event=failed tool=%s error=unexpected duration_ms=%s",
                tool_name,
                _duration_ms(started_at),
            )
            raise UnexpectedError(str(exc) or type(exc).__name__) from exc

        logger.info(
            "tool_call event=completed tool=%s duration_ms=%s",
            tool_name,
            _duration_ms(started_at),
        )
        return text

    async def _dispatch(self, invocation: ToolInvocation, api_key: str) -> str:
        spec = self.registry.get(invocation.tool_name)
        if spec is None:
            raise UnknownToolError(invocation.tool_name)

        payload = spec.validate(invocation.raw_arguments)
        async with TuesdayClient(
            api_key,
            base_url=self.base_url,
            transport=self.transport,
        ) as client:
            envelope = await spec.operation(client, payload)
        return spec.formatter(payload, envelope)


def _argument_keys(raw_arguments: Any) -> list[str]:
    if not isinstance(raw_arguments, dict):
        return []
    return sorted(key for key in raw_arguments if key != "api_key")


def _duration_ms(started_at: float) -> float:
    return round((time.perf_counter() - started_at) * 1000.0, 2)
