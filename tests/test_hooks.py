import pytest

from mcpserver.hooks import Hooks
from mcpserver.protocol import EmptyResult, Method, Request


def test_before_runs_general_then_specific():
    calls = []
    hooks = Hooks()
    hooks.add_before(Method.PING, lambda ctx, rid, req: calls.append(("ping", rid, req)))
    hooks.add_before_any(lambda ctx, rid, m, req: calls.append(("any", rid, m, req)))
    request = Request(method="ping")
    hooks.before("ctx", 2, Method.PING, request)
    assert calls == [("any", 2, Method.PING, request), ("ping", 2, request)]


def test_before_specific_only_for_its_method():
    calls = []
    hooks = Hooks()
    hooks.add_before(Method.TOOLS_LIST, lambda ctx, rid, req: calls.append(rid))
    hooks.before(None, 1, Method.PING, Request(method="ping"))
    hooks.before(None, 3, Method.TOOLS_LIST, Request(method="tools/list"))
    assert calls == [3]


def test_method_given_as_string_is_normalised():
    seen = []
    hooks = Hooks()
    hooks.add_before("ping", lambda ctx, rid, req: seen.append("specific"))
    hooks.add_before_any(lambda ctx, rid, m, req: seen.append(m))
    hooks.before(None, 1, "ping", None)
    assert seen == [Method.PING, "specific"]


def test_after_passes_request_and_result():
    calls = []
    hooks = Hooks()
    hooks.add_on_success(lambda ctx, rid, m, req, res: calls.append(("success", m, res)))
    hooks.add_after(Method.PING, lambda ctx, rid, req, res: calls.append(("after", req, res)))
    request = Request(method="ping")
    result = EmptyResult()
    hooks.after(None, 2, Method.PING, request, result)
    assert calls == [("success", Method.PING, result), ("after", request, result)]


def test_error_hooks_receive_error():
    errors = []
    hooks = Hooks()
    assert hooks.has_error_hooks() is False
    hooks.add_on_error(lambda ctx, rid, m, msg, err: errors.append((rid, m, msg, err)))
    assert hooks.has_error_hooks() is True
    failure = RuntimeError("boom")
    hooks.error(None, 4, Method.TOOLS_CALL, {"name": "x"}, failure)
    assert errors == [(4, Method.TOOLS_CALL, {"name": "x"}, failure)]


def test_error_with_unknown_method_keeps_string():
    methods = []
    hooks = Hooks()
    hooks.add_on_error(lambda ctx, rid, m, msg, err: methods.append(m))
    hooks.error(None, None, "notification", {}, RuntimeError())
    assert methods == ["notification"]


def test_request_initialization_runs_every_hook():
    seen = []
    hooks = Hooks()
    hooks.add_on_request_initialization(lambda ctx, rid, msg: seen.append((rid, msg)))
    hooks.add_on_request_initialization(lambda ctx, rid, msg: seen.append(rid))
    hooks.request_initialization(None, 7, b"{}")
    assert seen == [(7, b"{}"), 7]


def test_request_initialization_failure_stops_chain():
    seen = []

    def reject(ctx, rid, msg):
        raise PermissionError("rejected")

    hooks = Hooks()
    hooks.add_on_request_initialization(reject)
    hooks.add_on_request_initialization(lambda ctx, rid, msg: seen.append(rid))
    with pytest.raises(PermissionError, match="rejected"):
        hooks.request_initialization(None, 1, b"{}")
    assert seen == []


def test_session_hooks():
    registered = []
    unregistered = []
    hooks = Hooks()
    hooks.add_on_register_session(lambda ctx, s: registered.append((ctx, s)))
    hooks.add_on_unregister_session(lambda ctx, s: unregistered.append((ctx, s)))
    hooks.register_session("ctx", "session-a")
    hooks.unregister_session("ctx2", "session-a")
    assert registered == [("ctx", "session-a")]
    assert unregistered == [("ctx2", "session-a")]