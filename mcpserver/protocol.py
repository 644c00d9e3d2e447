"""Model Context Protocol message types and JSON-RPC envelopes."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

JSONRPC_VERSION = "2.0"
LATEST_PROTOCOL_VERSION = "2025-03-26"
VALID_PROTOCOL_VERSIONS = ("2024-11-05", LATEST_PROTOCOL_VERSION)

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
RESOURCE_NOT_FOUND = -32002


class Method(str, Enum):
    """Methods the server understands, requests and notifications."""

    INITIALIZE = "initialize"
    PING = "ping"
    SET_LOG_LEVEL = "logging/setLevel"
    RESOURCES_LIST = "resources/list"
    RESOURCES_TEMPLATES_LIST = "resources/templates/list"
    RESOURCES_READ = "resources/read"
    PROMPTS_LIST = "prompts/list"
    PROMPTS_GET = "prompts/get"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"
    NOTIFICATION_RESOURCES_LIST_CHANGED = "notifications/resources/list_changed"
    NOTIFICATION_PROMPTS_LIST_CHANGED = "notifications/prompts/list_changed"
    NOTIFICATION_TOOLS_LIST_CHANGED = "notifications/tools/list_changed"

    def __str__(self) -> str:
        return self.value


class LoggingLevel(str, Enum):
    """Syslog-style severity levels a client may select."""

    DEBUG = "debug"
    INFO = "info"
    NOTICE = "notice"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"
    ALERT = "alert"
    EMERGENCY = "emergency"

    def __str__(self) -> str:
        return self.value


def _omitempty(default: Any = "") -> Any:
    return field(default=default, metadata={"omitempty": True})


def _default_input_schema() -> dict[str, Any]:
    return {"type": "object", "properties": {}}


@dataclass
class Implementation:
    name: str = ""
    version: str = ""


@dataclass
class Tool:
    name: str
    description: str = _omitempty()
    input_schema: dict[str, Any] = field(default_factory=_default_input_schema)
    annotations: dict[str, Any] | None = None


@dataclass
class PromptArgument:
    name: str
    description: str = _omitempty()
    required: bool = _omitempty(False)


@dataclass
class Prompt:
    name: str
    description: str = _omitempty()
    arguments: list[PromptArgument] = field(
        default_factory=list, metadata={"omitempty": True}
    )


@dataclass
class Resource:
    uri: str
    name: str
    description: str = _omitempty()
    mime_type: str = _omitempty()


@dataclass
class ResourceTemplate:
    uri_template: str
    name: str
    description: str = _omitempty()
    mime_type: str = _omitempty()


@dataclass
class TextContent:
    text: str
    type: str = "text"


@dataclass
class TextResourceContents:
    uri: str
    text: str
    mime_type: str = _omitempty()


@dataclass
class PromptMessage:
    role: str
    content: Any


@dataclass
class ServerCapabilities:
    """Advertised capabilities; a field left as None is not offered."""

    resources: dict[str, Any] | None = None
    prompts: dict[str, Any] | None = None
    tools: dict[str, Any] | None = None
    logging: dict[str, Any] | None = None


@dataclass
class InitializeResult:
    protocol_version: str
    server_info: Implementation
    capabilities: ServerCapabilities
    instructions: str = _omitempty()


@dataclass
class EmptyResult:
    pass


@dataclass
class ListResourcesResult:
    resources: list[Resource]
    next_cursor: str = _omitempty()


@dataclass
class ListResourceTemplatesResult:
    resource_templates: list[ResourceTemplate]
    next_cursor: str = _omitempty()


@dataclass
class ReadResourceResult:
    contents: list[Any]


@dataclass
class ListPromptsResult:
    prompts: list[Prompt]
    next_cursor: str = _omitempty()


@dataclass
class GetPromptResult:
    messages: list[PromptMessage]
    description: str = _omitempty()


@dataclass
class ListToolsResult:
    tools: list[Tool]
    next_cursor: str = _omitempty()


@dataclass
class CallToolResult:
    content: list[Any] = field(default_factory=list)
    is_error: bool = _omitempty(False)


@dataclass
class Request:
    """A decoded request: its method and its parameters object."""

    method: str
    params: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_message(cls, data: dict[str, Any]) -> Request:
        """Build a request from a decoded JSON-RPC object."""
        params = data.get("params")
        if params is None:
            params = {}
        if not isinstance(params, dict):
            raise TypeError(
                f"params must be an object, not {type(params).__name__}"
            )
        return cls(method=str(data.get("method", "")), params=params)


@dataclass
class JSONRPCResponse:
    id: Any
    result: Any
    jsonrpc: str = JSONRPC_VERSION

    def to_dict(self) -> dict[str, Any]:
        return {"jsonrpc": self.jsonrpc, "id": self.id, "result": to_jsonable(self.result)}


@dataclass
class JSONRPCError:
    id: Any
    code: int
    message: str
    data: Any = None
    jsonrpc: str = JSONRPC_VERSION

    def to_dict(self) -> dict[str, Any]:
        error: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            error["data"] = to_jsonable(self.data)
        return {"jsonrpc": self.jsonrpc, "id": self.id, "error": error}


@dataclass
class JSONRPCNotification:
    method: str
    params: dict[str, Any] | None = None
    jsonrpc: str = JSONRPC_VERSION

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"jsonrpc": self.jsonrpc, "method": str(self.method)}
        if self.params:
            out["params"] = to_jsonable(self.params)
        return out


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def to_jsonable(value: Any) -> Any:
    """Convert protocol objects into plain JSON-compatible values."""
    if isinstance(value, Enum):
        return value.value
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        out: dict[str, Any] = {}
        for f in dataclasses.fields(value):
            item = getattr(value, f.name)
            if item is None:
                continue
            if f.metadata.get("omitempty") and not item:
                continue
            out[f.metadata.get("json", _camel(f.name))] = to_jsonable(item)
        return out
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def create_response(request_id: Any, result: Any) -> JSONRPCResponse:
    return JSONRPCResponse(id=request_id, result=result)


def create_error_response(request_id: Any, code: int, message: str) -> JSONRPCError:
    return JSONRPCError(id=request_id, code=code, message=message)


def text_result(text: str) -> CallToolResult:
    """A tool result holding a single text item."""
    return CallToolResult(content=[TextContent(text=text)])