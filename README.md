# mcpserver

Building blocks for a Model Context Protocol (MCP) server, using only the
standard library (Python 3.10 or later):

- `mcpserver.protocol`: MCP message types and JSON-RPC 2.0 envelopes;
- `mcpserver.errors`: the exceptions a server reports, and their conversion
  into JSON-RPC error responses;
- `mcpserver.hooks`: callbacks run around request handling and session
  registration;
- `mcpserver.uritemplate`: URI templates that match concrete URIs and extract
  their variables;
- `mcpserver.pagination`: cursor-based paging over lists of named items.

## Installation

```
pip install mcpserver
```

## Protocol types

`mcpserver.protocol` defines:

- the constants `JSONRPC_VERSION`, `LATEST_PROTOCOL_VERSION` and
  `VALID_PROTOCOL_VERSIONS`;
- the JSON-RPC error codes `PARSE_ERROR`, `INVALID_REQUEST`,
  `METHOD_NOT_FOUND`, `INVALID_PARAMS`, `INTERNAL_ERROR` and
  `RESOURCE_NOT_FOUND`;
- the enums `Method` (`initialize`, `ping`, `tools/call`,
  `notifications/tools/list_changed`, and the rest) and `LoggingLevel`;
- dataclasses for the protocol objects: `Tool`, `Prompt`, `PromptArgument`,
  `Resource`, `ResourceTemplate`, `TextContent`, `TextResourceContents`,
  `PromptMessage`, `Implementation`, `ServerCapabilities`, and the results
  `InitializeResult`, `EmptyResult`, `ListToolsResult`, `CallToolResult`,
  `ListPromptsResult`, `GetPromptResult`, `ListResourcesResult`,
  `ListResourceTemplatesResult` and `ReadResourceResult`.

`Request.from_message(data)` builds a request from a decoded JSON-RPC object.
It raises `TypeError` when `params` is present but is not an object.

`JSONRPCResponse`, `JSONRPCError` and `JSONRPCNotification` each have a
`to_dict()` method that returns a plain dict ready for `json.dumps`.
`to_jsonable(value)` does the same for any protocol object. Field names come
out in camelCase, fields set to `None` are dropped, and empty optional fields
are left out.

```python
from mcpserver.protocol import create_response, text_result

create_response(1, text_result("hello")).to_dict()
# {'jsonrpc': '2.0', 'id': 1,
#  'result': {'content': [{'text': 'hello', 'type': 'text'}]}}
```

`create_error_response(request_id, code, message)` builds a `JSONRPCError`.

## Errors

Every error is a subclass of `MCPError`. The subclasses are:

- `UnsupportedError`
- `ToolNotFoundError`
- `PromptNotFoundError`
- `ResourceNotFoundError`
- `SessionExistsError`
- `SessionNotFoundError`
- `SessionNotInitializedError`
- `SessionDoesNotSupportToolsError`
- `SessionDoesNotSupportLoggingError`
- `NotificationNotInitializedError`
- `NotificationChannelBlockedError`

`UnparsableMessageError(raw_message, method, error)` describes a request body
that could not be decoded. `RequestError(request_id, code, error)` ties an
error to a request id and a JSON-RPC code. Its `to_jsonrpc_error()` method
returns the matching `JSONRPCError`, whose message is the text of the wrapped
error. In both classes the wrapped error is kept as `__cause__`.

## Hooks

```python
from mcpserver.hooks import Hooks
from mcpserver.protocol import Method

hooks = Hooks()
hooks.add_before_any(lambda ctx, request_id, method, request: ...)
hooks.add_before(Method.PING, lambda ctx, request_id, request: ...)
hooks.add_after(Method.PING, lambda ctx, request_id, request, result: ...)
hooks.add_on_error(lambda ctx, request_id, method, message, err: ...)
```

Other registration methods are `add_on_success`,
`add_on_request_initialization`, `add_on_register_session` and
`add_on_unregister_session`.

Code that handles requests fires the hooks with these methods:

- `before`, `after` and `error`. The general hooks run first, then the hooks
  registered for that method.
- `request_initialization`. An exception raised by any of its hooks rejects
  the request.
- `register_session` and `unregister_session`.

`has_error_hooks()` tells whether any error hook is registered.

## URI templates

```python
from mcpserver.uritemplate import URITemplate

template = URITemplate("test://{a}/test-resource{/b*}")
template.matches("test://something/test-resource/a/b/c")  # True
template.match("test://something/test-resource/a/b/c")
# {'a': ['something'], 'b': ['a', 'b', 'c']}
```

`match` returns `None` when the URI does not fit the template.

The constructor raises `ValueError` for a malformed template: unbalanced
braces, an empty expression, a reserved operator, or a bad variable name or
prefix length.

`raw`, `regex` and `variable_names` expose the template text, the compiled
pattern and the names of its variables.

## Pagination

```python
from mcpserver.pagination import list_by_pagination

page, next_cursor = list_by_pagination(tools, "", limit=2)
more, next_cursor = list_by_pagination(tools, next_cursor, limit=2)
```

The items must already be sorted by their `name`. A page starts after the
item named by the cursor.

The next cursor is empty when there is no limit or when the page came out
shorter than the limit.

Cursors are base64-encoded item names. `encode_cursor` and `decode_cursor`
convert between the two forms, and `decode_cursor` raises `ValueError` on
invalid base64.

## What this package does not do

This package gives you the types and helpers. It does not:

- dispatch raw JSON-RPC messages to handlers;
- keep registries of tools, prompts or resources;
- track client sessions or deliver notifications to them;
- provide a transport such as stdio or HTTP.

You write those parts, using the pieces above.

## Running the tests

```
pip install -e ".[test]"
pytest
```