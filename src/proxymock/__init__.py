"""Record-and-verify mock objects for abstract interfaces."""

from .engine import Char, MockAssertionError, MockControl, MockEngine
from .invocation import (
    EqualTo,
    InvocationConstructionError,
    InvocationRecord,
    IsNull,
    MemberNotFoundError,
    NotNull,
    ParameterConstraint,
)
from .proxy import create_mock, create_proxy, create_spy, get_mock, interfaces_for_object
from .settings import MockSettings, load_settings

__all__ = [
    "Char",
    "EqualTo",
    "InvocationConstructionError",
    "InvocationRecord",
    "IsNull",
    "MemberNotFoundError",
    "MockAssertionError",
    "MockControl",
    "MockEngine",
    "MockSettings",
    "NotNull",
    "ParameterConstraint",
    "create_mock",
    "create_proxy",
    "create_spy",
    "get_mock",
    "interfaces_for_object",
    "load_settings",
]
