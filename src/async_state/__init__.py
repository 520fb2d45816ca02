from .adt import (
    STATUSES,
    AsyncState,
    Error,
    Initial,
    Loading,
    Refetch,
    Success,
    make_error_state,
    make_initial_state,
    make_loading_state,
    make_refetch_state,
    make_success_state,
    render,
    to_dict,
)

__all__ = [
    "STATUSES",
    "AsyncState",
    "Error",
    "Initial",
    "Loading",
    "Refetch",
    "Success",
    "make_error_state",
    "make_initial_state",
    "make_loading_state",
    "make_refetch_state",
    "make_success_state",
    "render",
    "to_dict",
]
