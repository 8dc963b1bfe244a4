from .constraints import EqualTo, IsNull, NotNull, ParameterConstraint
from .record import InvocationConstructionError, InvocationRecord, MemberNotFoundError

__all__ = [
    "EqualTo",
    "InvocationConstructionError",
    "InvocationRecord",
    "IsNull",
    "MemberNotFoundError",
    "NotNull",
    "ParameterConstraint",
]
