"""Callbacks run around request handling and session lifecycle."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from .protocol import Method

BeforeAnyHook = Callable[[Any, Any, Any, Any], None]
OnSuccessHook = Callable[[Any, Any, Any, Any, Any], None]
OnErrorHook = Callable[[Any, Any, Any, Any, BaseException], None]
RequestInitializationHook = Callable[[Any, Any, Any], None]
BeforeHook = Callable[[Any, Any, Any], None]
AfterHook = Callable[[Any, Any, Any, Any], None]
SessionHook = Callable[[Any, Any], None]


def _method_key(method: Method | str) -> str:
    return method.value if isinstance(method, Method) else str(method)


def _as_method(method: Method | str) -> Method | str:
    try:
        return Method(_method_key(method))
    except ValueError:
        return method


@dataclass
class Hooks:
    """Registered callbacks; general ones run before method-specific ones."""

    before_any: list[BeforeAnyHook] = field(default_factory=list)
    on_success: list[OnSuccessHook] = field(default_factory=list)
    on_error: list[OnErrorHook] = field(default_factory=list)
    on_request_initialization: list[RequestInitializationHook] = field(
        default_factory=list
    )
    on_register_session: list[SessionHook] = field(default_factory=list)
    on_unregister_session: list[SessionHook] = field(default_factory=list)
    _before: dict[str, list[BeforeHook]] = field(
        default_factory=dict, init=False, repr=False
    )
    _after: dict[str, list[AfterHook]] = field(
        default_factory=dict, init=False, repr=False
    )

    def add_before_any(self, hook: BeforeAnyHook) -> None:
        self.before_any.append(hook)

    def add_on_success(self, hook: OnSuccessHook) -> None:
        self.on_success.append(hook)

    def add_on_error(self, hook: OnErrorHook) -> None:
        self.on_error.append(hook)

    def add_on_request_initialization(self, hook: RequestInitializationHook) -> None:
        self.on_request_initialization.append(hook)

    def add_before(self, method: Method | str, hook: BeforeHook) -> None:
        """Run ``hook(context, request_id, request)`` before one method."""
        self._before.setdefault(_method_key(method), []).append(hook)

    def add_after(self, method: Method | str, hook: AfterHook) -> None:
        """Run ``hook(context, request_id, request, result)`` after one method."""
        self._after.setdefault(_method_key(method), []).append(hook)

    def add_on_register_session(self, hook: SessionHook) -> None:
        self.on_register_session.append(hook)

    def add_on_unregister_session(self, hook: SessionHook) -> None:
        self.on_unregister_session.append(hook)

    def request_initialization(self, context: Any, request_id: Any, message: Any) -> None:
        """Run initialization hooks; the first one that raises rejects the request."""
        for hook in self.on_request_initialization:
            hook(context, request_id, message)

    def before(
        self, context: Any, request_id: Any, method: Method | str, request: Any
    ) -> None:
        method = _as_method(method)
        for hook in self.before_any:
            hook(context, request_id, method, request)
        for hook in self._before.get(_method_key(method), ()):
            hook(context, request_id, request)

    def after(
        self,
        context: Any,
        request_id: Any,
        method: Method | str,
        request: Any,
        result: Any,
    ) -> None:
        method = _as_method(method)
        for hook in self.on_success:
            hook(context, request_id, method, request, result)
        for hook in self._after.get(_method_key(method), ()):
            hook(context, request_id, request, result)

    def error(
        self,
        context: Any,
        request_id: Any,
        method: Method | str,
        message: Any,
        err: BaseException,
    ) -> None:
        method = _as_method(method)
        for hook in self.on_error:
            hook(context, request_id, method, message, err)

    def register_session(self, context: Any, session: Any) -> None:
        for hook in self.on_register_session:
            hook(context, session)

    def unregister_session(self, context: Any, session: Any) -> None:
        for hook in self.on_unregister_session:
            hook(context, session)

    def has_error_hooks(self) -> bool:
        return bool(self.on_error)