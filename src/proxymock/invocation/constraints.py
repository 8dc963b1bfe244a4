from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from proxymock.common.equality import are_equal


class ParameterConstraint(ABC):
    """Predicate over a single parameter value.

    A constraint placed in an expectation record's parameter values is
    compared with ``is_within`` instead of ``==`` when the record is matched
    against the ledger.
    """

    @abstractmethod
    def is_within(self, parameter: Any) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class EqualTo(ParameterConstraint):
    expected: Any

    def is_within(self, parameter: Any) -> bool:
        return are_equal(self.expected, parameter)

    def __str__(self) -> str:
        return f"equal_to({self.expected!r})"


@dataclass(frozen=True)
class NotNull(ParameterConstraint):
    def is_within(self, parameter: Any) -> bool:
        return parameter is not None

    def __str__(self) -> str:
        return "not_null()"


@dataclass(frozen=True)
class IsNull(ParameterConstraint):
    def is_within(self, parameter: Any) -> bool:
        return parameter is None

    def __str__(self) -> str:
        return "is_null()"


__all__ = ["EqualTo", "IsNull", "NotNull", "ParameterConstraint"]
