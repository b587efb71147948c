"""Observability operations – logged, timed and traced units of work."""
from mp_diagnostics.observability.operations.activity import TRACER_NAME, ActivityScope, SpanActivity
from mp_diagnostics.observability.operations.initiator import (
    ActivityScopeInitiator,
    OperationScopeInitiator,
    activity,
    operation,
)
from mp_diagnostics.observability.operations.scope import (
    CALLER,
    OperationScope,
    ScopeActivity,
    ScopeMessage,
    caller_name,
)

__all__ = [
    "CALLER",
    "TRACER_NAME",
    "ActivityScope",
    "ActivityScopeInitiator",
    "OperationScope",
    "OperationScopeInitiator",
    "ScopeActivity",
    "ScopeMessage",
    "SpanActivity",
    "activity",
    "caller_name",
    "operation",
]
