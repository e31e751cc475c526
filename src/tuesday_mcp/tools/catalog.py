"""Tool discovery descriptors, generated from the registry's pydantic models."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from tuesday_mcp.tools.registry import ToolSpec, get_registry

API_KEY_PROPERTY: dict[str, Any] = {
    "type": "string",
    "description": "Tuesday API key (optional if TUESDAY_API_KEY environment variable is set)",
}


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    input_schema: dict[str, Any]


def describe(spec: ToolSpec) -> ToolDescriptor:
    schema = spec.input_model.model_json_schema()
    input_schema: dict[str, Any] = {
        "type": "object",
        "properties": {"api_key": dict(API_KEY_PROPERTY), **schema.get("properties", {})},
    }
    if schema.get("required"):
        input_schema["required"] = list(schema["required"])
    if schema.get("$defs"):
        input_schema["$defs"] = schema["$defs"]
    return ToolDescriptor(
        name=spec.name,
        description=spec.description,
        input_schema=input_schema,
    )


def build_catalog(registry: dict[str, ToolSpec]) -> tuple[ToolDescriptor, ...]:
    return tuple(describe(spec) for spec in registry.values())


@lru_cache(maxsize=1)
def list_tools() -> tuple[ToolDescriptor, ...]:
    return build_catalog(get_registry())


def ensure_catalog_matches(
    registry: dict[str, ToolSpec],
    catalog: tuple[ToolDescriptor, ...],
) -> None:
    """Fail at startup when the handler table and the catalog disagree."""
    catalog_names = [descriptor.name for descriptor in catalog]
    if len(set(catalog_names)) != len(catalog_names):
        raise RuntimeError(f"Duplicate tool names in catalog: {sorted(catalog_names)}")
    missing = sorted(set(catalog_names) - set(registry))
    extra = sorted(set(registry) - set(catalog_names))
    if missing or extra:
        raise RuntimeError(
            f"Tool catalog and registry drifted: no handler for {missing}, "
            f"not in catalog {extra}"
        )
