from .factory import (
    MockProxy,
    append_interfaces,
    create_mock,
    create_proxy,
    create_spy,
    get_mock,
    interfaces_for_object,
)
from .signature import MethodSignature, collect_methods

__all__ = [
    "MethodSignature",
    "MockProxy",
    "append_interfaces",
    "collect_methods",
    "create_mock",
    "create_proxy",
    "create_spy",
    "get_mock",
    "interfaces_for_object",
]
