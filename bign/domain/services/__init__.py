from .precision_service import (
    PrecisionPolicy,
    PrecisionService,
    get_policy,
    policy_scope,
    reset_policy,
    set_policy,
)

__all__ = [
    "PrecisionPolicy",
    "PrecisionService",
    "get_policy",
    "policy_scope",
    "reset_policy",
    "set_policy",
]
