"""Error taxonomy shared by the dispatcher and the protocol boundaries."""

from __future__ import annotations


class ToolError(Exception):
    """Base class for every failure raised while handling a tool call."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnknownToolError(ToolError):
    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class MissingCredentialError(ToolError):
    def __init__(self) -> None:
        super().__init__(
            "API key is required. Set TUESDAY_API_KEY environment variable "
            "or provide api_key parameter."
        )


class ValidationError(ToolError):
    """Raised when tool arguments violate the declared schema.

    ``violations`` holds one ``"<field>: <problem>"`` line per violated
    constraint, in the order they were discovered.
    """

    def __init__(self, tool_name: str, violations: list[str]) -> None:
        joined = "; ".join(violations) if violations else "invalid arguments"
        super().__init__(f"Invalid arguments for {tool_name}: {joined}")
        self.tool_name = tool_name
        self.violations = list(violations)


class TransportError(ToolError):
    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(f"API request failed: {status_code} - {detail}")
        self.status_code = status_code
        self.detail = detail


class UnexpectedError(ToolError):
    pass
