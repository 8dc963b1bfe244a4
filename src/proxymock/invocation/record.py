from __future__ import annotations

import inspect
import typing
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence, Tuple

from proxymock.common.equality import are_equal

from .constraints import ParameterConstraint

TypeList = Optional[Tuple[Any, ...]]
ValueList = Optional[Tuple[Any, ...]]


class InvocationConstructionError(ValueError):
    pass


class MemberNotFoundError(AttributeError):
    pass


def type_name(parameter_type: Any) -> str:
    if isinstance(parameter_type, type):
        if parameter_type.__module__ == "builtins":
            return parameter_type.__qualname__
        return f"{parameter_type.__module__}.{parameter_type.__qualname__}"
    return repr(parameter_type)


def values_equal(value: Any, other: Any) -> bool:
    if isinstance(value, ParameterConstraint) and isinstance(other, ParameterConstraint):
        return bool(value == other)
    if isinstance(value, ParameterConstraint):
        return value.is_within(other)
    if isinstance(other, ParameterConstraint):
        return other.is_within(value)
    return are_equal(value, other)


def _sequences_equal(
    items: Optional[Sequence[Any]],
    other_items: Optional[Sequence[Any]],
    element_equal: Callable[[Any, Any], bool],
) -> bool:
    # absent means "no constraint", which is the same as zero parameters
    if items is None and other_items is None:
        return True
    if items is None:
        return len(other_items) == 0  # type: ignore[arg-type]
    if other_items is None:
        return len(items) == 0
    if len(items) != len(other_items):
        return False
    return all(element_equal(a, b) for a, b in zip(items, other_items))


def _has_values(values: ValueList) -> bool:
    return values is not None and len(values) != 0


def _unconstrained(parameter_type: Any) -> bool:
    # a type variable stands for whatever the implementation binds it to
    return parameter_type is None or isinstance(parameter_type, typing.TypeVar)


def _resolved_hints(member: Any) -> dict[str, Any]:
    try:
        return typing.get_type_hints(member)
    except (NameError, TypeError, AttributeError):
        return {}


@dataclass(frozen=True, eq=False)
class InvocationRecord:
    """One method call: a name plus ordered parameter types and values.

    Records are produced by a proxy for every intercepted call and written by
    tests to describe the calls they expect. Two comparisons exist:

    * ``matches`` is the fuzzy check used by the engine's queries. A record
      without parameter values matches any call of the same name and types.
    * ``==`` is strict. A record with values never equals one without.
    """

    name: str
    parameter_types: TypeList = None
    parameter_values: ValueList = None
    # trailing parameters that are passed by keyword when forwarding
    keyword_names: Tuple[str, ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvocationConstructionError("name must be a non-empty string")
        if self.parameter_types is not None:
            object.__setattr__(self, "parameter_types", tuple(self.parameter_types))
        if self.parameter_values is not None:
            object.__setattr__(self, "parameter_values", tuple(self.parameter_values))
        object.__setattr__(self, "keyword_names", tuple(self.keyword_names))
        if len(self.keyword_names) > len(self.parameter_types or ()):
            raise InvocationConstructionError("more keyword names than parameters")

    @classmethod
    def from_values(cls, name: str, values: Optional[Sequence[Any]]) -> "InvocationRecord":
        """Build a record whose parameter types are taken from ``type(value)``.

        The type of ``None`` cannot be told apart from a missing argument, so a
        ``None`` value fails construction; pass explicit types instead.
        """
        if values is None:
            return cls(name)
        types = []
        for position, value in enumerate(values):
            if value is None:
                raise InvocationConstructionError(
                    f"cannot derive the type of parameter {position} of {name!r} from None"
                )
            types.append(type(value))
        return cls(name, tuple(types), tuple(values))

    @classmethod
    def from_value(cls, name: str, value: Any) -> "InvocationRecord":
        return cls.from_values(name, [value])

    @classmethod
    def single(
        cls, name: str, parameter_type: Any = None, value: Any = None
    ) -> "InvocationRecord":
        """Shortcut for setters and other one-argument calls."""
        return cls(
            name,
            None if parameter_type is None else (parameter_type,),
            None if value is None else (value,),
        )

    def matches(self, other: Optional["InvocationRecord"]) -> bool:
        if other is None:
            return False
        if other.name != self.name:
            return False
        if not _sequences_equal(self.parameter_types, other.parameter_types, are_equal):
            return False
        if _has_values(self.parameter_values) and _has_values(other.parameter_values):
            if not _sequences_equal(self.parameter_values, other.parameter_values, values_equal):
                return False
        return True

    def equals(self, other: Any) -> bool:
        if not isinstance(other, InvocationRecord):
            return False
        if other.name != self.name:
            return False
        if not _sequences_equal(self.parameter_types, other.parameter_types, are_equal):
            return False
        return _sequences_equal(self.parameter_values, other.parameter_values, values_equal)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvocationRecord):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.name, len(self.parameter_types or ())))

    def __str__(self) -> str:
        values = self.parameter_values
        entries: list[str] = []
        for position, parameter_type in enumerate(self.parameter_types or ()):
            if parameter_type is None:
                continue
            if values is None or position >= len(values):
                entries.append(type_name(parameter_type))
            else:
                entries.append(f"{type_name(parameter_type)}<{values[position]}>")
        return f"{self.name}({', '.join(entries)})"

    def _split(self, items: Sequence[Any]) -> Tuple[Tuple[Any, ...], dict[str, Any]]:
        cut = len(items) - len(self.keyword_names)
        return tuple(items[:cut]), dict(zip(self.keyword_names, items[cut:]))

    def forward(self, target: Any) -> Any:
        """Call the matching method on ``target`` with this record's values.

        Whatever the target raises propagates unchanged.
        """
        member = self.resolve(target)
        args, kwargs = self._split(self.parameter_values or ())
        return member(*args, **kwargs)

    def resolve(self, target: Any) -> Callable[..., Any]:
        member = getattr(target, self.name, None)
        if member is None or not callable(member):
            raise MemberNotFoundError(f"{type(target).__name__} has no member {self}")
        if not self._accepts(member):
            raise MemberNotFoundError(
                f"{type(target).__name__}.{self.name} does not accept {self}"
            )
        return member

    def _accepts(self, member: Callable[..., Any]) -> bool:
        types = self.parameter_types or ()
        try:
            signature = inspect.signature(member)
        except (TypeError, ValueError):
            # builtins without an introspectable signature
            return True
        args, kwargs = self._split([None] * len(types))
        try:
            bound = signature.bind(*args, **kwargs)
        except TypeError:
            return False
        positional_types, keyword_types = self._split(types)
        expected = dict(zip(bound.arguments, positional_types))
        expected.update(keyword_types)
        hints = _resolved_hints(member)
        for name, parameter_type in expected.items():
            hint = hints.get(name)
            if _unconstrained(hint) or _unconstrained(parameter_type):
                continue
            if not are_equal(hint, parameter_type):
                return False
        return True


__all__ = [
    "InvocationConstructionError",
    "InvocationRecord",
    "MemberNotFoundError",
    "type_name",
    "values_equal",
]
