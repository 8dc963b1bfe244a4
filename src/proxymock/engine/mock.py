from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Sequence, Tuple

from proxymock.invocation.record import InvocationRecord
from proxymock.settings import MockSettings

from .control import MockControl
from .defaults import default_for, returns_value

if TYPE_CHECKING:
    from proxymock.proxy.signature import MethodSignature

logger = logging.getLogger(__name__)


class MockAssertionError(AssertionError):
    pass


class MockEngine(MockControl):
    """Call ledger and dispatcher behind a proxy.

    Every call on the mocked interfaces is appended to the ledger and then
    answered by, in order of precedence:

    1. the oldest queued stub value, unless the method is annotated ``-> None``;
    2. the forward target, if one was given;
    3. the typed default for the method's return annotation.

    Calls on the ``MockControl`` surface run directly on the engine and are
    not recorded.

    An engine is not thread-safe. One call must be fully handled before the
    next one starts, so drive a mock from a single thread.
    """

    def __init__(
        self,
        target: Any = None,
        *,
        debug: bool = False,
        log_level: int = logging.INFO,
    ) -> None:
        self._target = target
        self._debug = debug
        self._log_level = log_level
        self._invocations: list[InvocationRecord] = []
        self._return_values: list[Any] = []

    @classmethod
    def from_settings(cls, settings: MockSettings, target: Any = None) -> "MockEngine":
        return cls(target, debug=settings.debug, log_level=settings.level)

    @property
    def target(self) -> Any:
        return self._target

    @property
    def debug(self) -> bool:
        return self._debug

    def handle(
        self,
        record: InvocationRecord,
        signature: Optional["MethodSignature"] = None,
        proxy: Any = None,
    ) -> Any:
        if self._debug:
            logger.log(self._log_level, "invoked: %s", record)

        if signature is not None and signature.owner is MockControl:
            return record.forward(self)

        self._invocations.append(record)

        return_type = Any if signature is None else signature.return_type
        if self._return_values and returns_value(return_type):
            return self._return_values.pop(0)

        if self._target is not None:
            result = self._forward(record, signature, proxy)
            if proxy is not None and result is self._target:
                return proxy
            return result

        return default_for(return_type)

    def _forward(
        self,
        record: InvocationRecord,
        signature: Optional["MethodSignature"],
        proxy: Any,
    ) -> Any:
        if isinstance(self._target, MockEngine):
            return self._target.handle(record, signature, proxy)
        return record.forward(self._target)

    def add_return_value(self, value: Any) -> None:
        self._return_values.append(value)

    def add_return_values(self, values: Sequence[Any]) -> None:
        for value in values:
            self.add_return_value(value)

    def get_invocations(self) -> Tuple[InvocationRecord, ...]:
        return tuple(self._invocations)

    def assert_invoked(self, expectation: InvocationRecord, index: Optional[int] = None) -> None:
        if index is None:
            if not self.invoked(expectation):
                raise MockAssertionError(f"Method not invoked: {expectation}")
            return
        if index < 0 or index >= len(self._invocations):
            raise MockAssertionError(
                f"Only {len(self._invocations)} methods invoked. Index was {index}"
            )
        if not self.invoked(expectation, index):
            raise MockAssertionError(f"Method invoked at index {index} was not: {expectation}")

    def assert_not_invoked(self, expectation: InvocationRecord) -> None:
        if self.invoked(expectation):
            raise MockAssertionError(f"Method was invoked: {expectation}")

    def assert_invoked_last(self, expectation: InvocationRecord) -> None:
        if not self._invocations:
            raise MockAssertionError("No methods invoked")
        if not self.invoked_last(expectation):
            raise MockAssertionError(
                f"Last method invoked was not: {expectation}\n"
                f"Last method invoked was: {self._invocations[-1]}"
            )

    def assert_invoked_before(self, first: InvocationRecord, last: InvocationRecord) -> None:
        if not self.invoked_before(first, last):
            raise MockAssertionError(
                f"The first method passed was not invoked before the second: {first}, {last}"
            )

    def invoked(self, expectation: InvocationRecord, index: Optional[int] = None) -> bool:
        if index is None:
            return any(expectation.matches(invocation) for invocation in self._invocations)
        if index < 0 or index >= len(self._invocations):
            return False
        return expectation.matches(self._invocations[index])

    def invoked_last(self, expectation: InvocationRecord) -> bool:
        if not self._invocations:
            return False
        return expectation.matches(self._invocations[-1])

    def invoked_before(self, first: InvocationRecord, last: InvocationRecord) -> bool:
        # the last occurrence of each side decides
        index_first = -1
        index_last = -1
        for index, invocation in enumerate(self._invocations):
            if first.matches(invocation):
                index_first = index
            if last.matches(invocation):
                index_last = index
        return index_first > -1 and index_last > -1 and index_first < index_last

    def clear(self) -> None:
        self._invocations.clear()
        self._return_values.clear()


__all__ = ["MockAssertionError", "MockEngine"]
