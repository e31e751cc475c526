"""Render remote envelopes as the text returned to the calling agent."""

from __future__ import annotations

import json
from typing import Any, Callable

from tuesday_mcp.tools.schemas import ListEnvelope, SingleEnvelope, ToolInput

Formatter = Callable[[Any, Any], str]


def dump_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def labeled(label: str) -> Formatter:
    def _format(payload: ToolInput, envelope: SingleEnvelope) -> str:
        _ = payload
        return f"{label}:\n\n{dump_json(envelope.data)}"

    return _format


def paged(noun: str) -> Formatter:
    def _format(payload: ToolInput, envelope: ListEnvelope) -> str:
        page = getattr(payload, "page", 1)
        return f"Found {len(envelope.data)} {noun} (Page {page}):\n\n{dump_json(envelope.data)}"

    return _format


def workspace_summary(payload: ToolInput, envelope: SingleEnvelope) -> str:
    _ = payload
    data = envelope.data
    return (
        "API Key validated successfully!\n\n"
        f"Workspace: {data.get('name')}\n"
        f"ID: {data.get('id')}\n"
        f"User ID: {data.get('user_id')}"
    )
