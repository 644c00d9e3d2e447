"""Exceptions raised by the MCP server and its session machinery."""

from __future__ import annotations

from typing import Any

from .protocol import JSONRPCError, Method


class MCPError(Exception):
    """Base class for every error the server reports."""

    default_message = "mcp error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class UnsupportedError(MCPError):
    """A capability needed by the request was not enabled on the server."""

    default_message = "not supported"


class ResourceNotFoundError(MCPError):
    default_message = "resource not found"


class PromptNotFoundError(MCPError):
    default_message = "prompt not found"


class ToolNotFoundError(MCPError):
    default_message = "tool not found"


class SessionExistsError(MCPError):
    default_message = "session already exists"


class SessionNotFoundError(MCPError):
    default_message = "session not found"


class SessionNotInitializedError(MCPError):
    default_message = "session not properly initialized"


class SessionDoesNotSupportToolsError(MCPError):
    default_message = "session does not support per-session tools"


class SessionDoesNotSupportLoggingError(MCPError):
    default_message = "session does not support setting logging level"


class NotificationNotInitializedError(MCPError):
    default_message = "notification not initialized"


class NotificationChannelBlockedError(MCPError):
    default_message = "notification channel blocked"


class UnparsableMessageError(MCPError):
    """A request whose body could not be decoded for its method."""

    def __init__(
        self, raw_message: Any, method: Method | str, error: BaseException
    ) -> None:
        self.raw_message = raw_message
        self.method = method
        self.error = error
        super().__init__(f"unparsable {method} request: {error}")
        self.__cause__ = error


class RequestError(MCPError):
    """An error tied to a request id and a JSON-RPC error code."""

    def __init__(self, request_id: Any, code: int, error: BaseException) -> None:
        self.request_id = request_id
        self.code = code
        self.error = error
        super().__init__(f"request error: {error}")
        self.__cause__ = error

    def to_jsonrpc_error(self) -> JSONRPCError:
        """Build the JSON-RPC error message sent back to the client."""
        return JSONRPCError(id=self.request_id, code=self.code, message=str(self.error))