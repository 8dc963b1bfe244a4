from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Tuple

from proxymock.invocation.record import InvocationRecord


class MockControl(ABC):
    """Test-facing surface of a mock.

    Every proxy implements this next to its mocked interfaces. Calls made
    through it run directly on the engine and are never recorded.
    """

    @abstractmethod
    def add_return_value(self, value: Any) -> None:
        raise NotImplementedError

    @abstractmethod
    def add_return_values(self, values: Sequence[Any]) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_invocations(self) -> Tuple[InvocationRecord, ...]:
        raise NotImplementedError

    @abstractmethod
    def assert_invoked(self, expectation: InvocationRecord, index: Optional[int] = None) -> None:
        raise NotImplementedError

    @abstractmethod
    def assert_not_invoked(self, expectation: InvocationRecord) -> None:
        raise NotImplementedError

    @abstractmethod
    def assert_invoked_last(self, expectation: InvocationRecord) -> None:
        raise NotImplementedError

    @abstractmethod
    def assert_invoked_before(self, first: InvocationRecord, last: InvocationRecord) -> None:
        raise NotImplementedError

    @abstractmethod
    def invoked(self, expectation: InvocationRecord, index: Optional[int] = None) -> bool:
        raise NotImplementedError

    @abstractmethod
    def invoked_last(self, expectation: InvocationRecord) -> bool:
        raise NotImplementedError

    @abstractmethod
    def invoked_before(self, first: InvocationRecord, last: InvocationRecord) -> bool:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError


__all__ = ["MockControl"]
