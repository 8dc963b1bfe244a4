from __future__ import annotations

import dataclasses
import functools
import inspect
import types
from typing import Any, Callable, Iterable, Optional, Sequence, Tuple

from proxymock.engine.control import MockControl
from proxymock.engine.mock import MockEngine
from proxymock.settings import MockSettings, load_settings

from .signature import PLUMBING, MethodSignature, collect_methods


class MockProxy:
    """Base class of every generated proxy."""

    def __init__(self, engine: MockEngine) -> None:
        self._proxymock_engine = engine

    def __repr__(self) -> str:
        return f"<{type(self).__name__} at {id(self):#x}>"


def _dispatcher(signature: MethodSignature) -> Callable[..., Any]:
    def method(self: MockProxy, *args: Any, **kwargs: Any) -> Any:
        record = signature.bind(args, kwargs)
        return self._proxymock_engine.handle(record, signature, self)

    # keep the interface's name, docs and signature; its __dict__ would carry
    # __isabstractmethod__ over
    return functools.update_wrapper(method, signature.function, updated=())


def _is_interface(klass: type) -> bool:
    if klass in PLUMBING:
        return False
    if getattr(klass, "_is_protocol", False):
        return True
    return inspect.isabstract(klass)


def _most_derived(interfaces: Sequence[type]) -> Tuple[type, ...]:
    return tuple(
        interface
        for interface in interfaces
        if not any(other is not interface and interface in other.__mro__ for other in interfaces)
    )


def interfaces_for_object(obj: Any) -> Tuple[type, ...]:
    """Abstract base classes and protocols implemented by ``obj``'s class.

    Includes those inherited through superclasses, in MRO order. The class of
    ``obj`` itself is never reported.
    """
    return tuple(klass for klass in type(obj).__mro__[1:] if _is_interface(klass))


def append_interfaces(first: Iterable[type], second: Iterable[type]) -> Tuple[type, ...]:
    return tuple(dict.fromkeys((*first, *second)))


def create_proxy(interfaces: Iterable[type], engine: MockEngine) -> Any:
    """Instantiate a class implementing ``interfaces`` that routes every call to ``engine``."""
    interfaces = tuple(interfaces)
    if not interfaces:
        raise TypeError("a proxy needs at least one interface")
    for interface in interfaces:
        if not isinstance(interface, type):
            raise TypeError(f"interfaces must be classes, got {interface!r}")

    methods = collect_methods(interfaces)
    namespace = {name: _dispatcher(signature) for name, signature in methods.items()}
    bases = (MockProxy, *_most_derived(interfaces))
    proxy_class = types.new_class(
        f"{interfaces[0].__name__}Proxy",
        bases,
        exec_body=lambda ns: ns.update(namespace),
    )
    # abstract properties are not intercepted; they must not block instantiation
    proxy_class.__abstractmethods__ = frozenset()
    return proxy_class(engine)


def _engine(target: Any, debug: Optional[bool], settings: Optional[MockSettings]) -> MockEngine:
    settings = settings if settings is not None else load_settings()
    if debug is not None:
        settings = dataclasses.replace(settings, debug=debug)
    return MockEngine.from_settings(settings, target)


def create_mock(
    *interfaces: type,
    debug: Optional[bool] = None,
    settings: Optional[MockSettings] = None,
) -> Any:
    """A proxy for ``interfaces`` that answers with stubs or typed defaults."""
    if not interfaces:
        raise TypeError("create_mock() needs at least one interface")
    engine = _engine(None, debug, settings)
    return create_proxy(append_interfaces(interfaces, (MockControl,)), engine)


def create_spy(
    collaborator: Any,
    *extra_interfaces: type,
    debug: Optional[bool] = None,
    settings: Optional[MockSettings] = None,
) -> Any:
    """A proxy that records calls and forwards unstubbed ones to ``collaborator``."""
    interfaces = append_interfaces(interfaces_for_object(collaborator), extra_interfaces)
    if not interfaces:
        raise TypeError(f"{type(collaborator).__name__} implements no interfaces to mock")
    engine = _engine(collaborator, debug, settings)
    return create_proxy(append_interfaces(interfaces, (MockControl,)), engine)


def get_mock(proxy: Any) -> MockEngine:
    if not isinstance(proxy, MockProxy):
        raise TypeError(f"not a mock proxy: {proxy!r}")
    return proxy._proxymock_engine


__all__ = [
    "MockProxy",
    "append_interfaces",
    "create_mock",
    "create_proxy",
    "create_spy",
    "get_mock",
    "interfaces_for_object",
]
