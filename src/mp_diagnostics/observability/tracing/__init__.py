"""Observability tracing – OpenTelemetry span helpers."""
from mp_diagnostics.observability.tracing.activities import (
    activity_id,
    fill_letters_and_digits,
    get_status_code,
    root_operation_guid,
    root_operation_id,
    set_status_if_unset,
    set_telemetry_tags,
    short_trace_id,
    synthesize_guid,
)

__all__ = [
    "activity_id",
    "fill_letters_and_digits",
    "get_status_code",
    "root_operation_guid",
    "root_operation_id",
    "set_status_if_unset",
    "set_telemetry_tags",
    "short_trace_id",
    "synthesize_guid",
]
