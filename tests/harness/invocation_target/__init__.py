"""Collaborators the mock tests stand proxies in front of."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from proxymock import Char


class InvocationTargetInterface(ABC):
    @abstractmethod
    def invoke(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def invoke_with(self, text: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def echo(self, value: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def fail(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def chain(self) -> "InvocationTargetInterface":
        raise NotImplementedError

    @abstractmethod
    def boolean_value(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def int_value(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def float_value(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def complex_value(self) -> complex:
        raise NotImplementedError

    @abstractmethod
    def char_value(self) -> Char:
        raise NotImplementedError

    @abstractmethod
    def text_value(self) -> str:
        raise NotImplementedError


@dataclass
class InvocationTarget(InvocationTargetInterface):
    """Real implementation; remembers what it was asked to do."""

    calls: list[str] = field(default_factory=list)

    def invoke(self) -> None:
        self.calls.append("invoke")

    def invoke_with(self, text: str) -> None:
        self.calls.append(f"invoke_with:{text}")

    def echo(self, value: int) -> int:
        self.calls.append(f"echo:{value}")
        return value

    def fail(self) -> None:
        raise RuntimeError("This is an error!")

    def chain(self) -> "InvocationTargetInterface":
        self.calls.append("chain")
        return self

    def boolean_value(self) -> bool:
        return False

    def int_value(self) -> int:
        return 1

    def float_value(self) -> float:
        return 1.0

    def complex_value(self) -> complex:
        return 1j

    def char_value(self) -> Char:
        return Char("a")

    def text_value(self) -> str:
        return "text"

    def reset(self) -> None:
        self.calls.clear()


@runtime_checkable
class Stream(Protocol):
    def open(self, path: str) -> None: ...

    def read(self, size: int = -1) -> str: ...

    def close(self) -> None: ...


class Auditor(ABC):
    @abstractmethod
    def audit(self, entry: str) -> bool:
        raise NotImplementedError


class AuditedTarget(InvocationTarget, Auditor):
    def audit(self, entry: str) -> bool:
        self.calls.append(f"audit:{entry}")
        return True
