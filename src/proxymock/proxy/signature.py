from __future__ import annotations

import inspect
import logging
import typing
from abc import ABC
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Tuple

from proxymock.invocation.record import InvocationRecord

logger = logging.getLogger(__name__)

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)

# bases every interface shares; never searched for methods
PLUMBING: frozenset[type] = frozenset({object, ABC, typing.Protocol, typing.Generic})  # type: ignore[arg-type]


@dataclass(frozen=True)
class MethodSignature:
    """Shape of one interface method as seen by the dispatcher."""

    name: str
    owner: type
    function: Callable[..., Any]
    parameters: Tuple[str, ...]
    parameter_types: Tuple[Any, ...]
    keyword_names: Tuple[str, ...]
    return_type: Any
    signature: inspect.Signature

    @classmethod
    def from_function(
        cls, name: str, function: Callable[..., Any], owner: type
    ) -> "MethodSignature":
        signature = inspect.signature(function)
        # drop self
        parameters = list(signature.parameters.values())[1:]
        for parameter in parameters:
            if parameter.kind in _VARIADIC:
                raise TypeError(
                    f"{owner.__qualname__}.{name}: variadic parameter "
                    f"{parameter.name!r} cannot be mocked"
                )
        try:
            hints = typing.get_type_hints(function)
        except (NameError, TypeError) as exc:
            logger.warning(
                "annotations of %s.%s could not be resolved, recording untyped: %s",
                owner.__qualname__,
                name,
                exc,
            )
            hints = {}
        return cls(
            name=name,
            owner=owner,
            function=function,
            parameters=tuple(p.name for p in parameters),
            parameter_types=tuple(hints.get(p.name) for p in parameters),
            keyword_names=tuple(
                p.name for p in parameters if p.kind is inspect.Parameter.KEYWORD_ONLY
            ),
            return_type=hints.get("return", Any),
            signature=signature,
        )

    def bind(self, args: Tuple[Any, ...], kwargs: Mapping[str, Any]) -> InvocationRecord:
        """Record a call, applying defaults the way Python would."""
        bound = self.signature.bind(None, *args, **kwargs)
        bound.apply_defaults()
        values = tuple(bound.arguments[name] for name in self.parameters)
        return InvocationRecord(self.name, self.parameter_types, values, self.keyword_names)


def collect_methods(interfaces: Iterable[type]) -> dict[str, MethodSignature]:
    methods: dict[str, MethodSignature] = {}
    for interface in interfaces:
        for klass in interface.__mro__:
            if klass in PLUMBING:
                continue
            for name, attribute in vars(klass).items():
                if name.startswith("_") or name in methods:
                    continue
                if inspect.isfunction(attribute):
                    methods[name] = MethodSignature.from_function(name, attribute, klass)
    return methods


__all__ = ["MethodSignature", "PLUMBING", "collect_methods"]
