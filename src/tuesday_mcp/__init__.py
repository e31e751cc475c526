"""MCP adapter exposing the Tuesday people and company data API as tools."""

__version__ = "1.0.0"
