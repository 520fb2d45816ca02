# filename: async_state/adt.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Generic, Optional, TypeVar, Union

T = TypeVar("T")  # payload type
E = TypeVar("E")  # error type

STATUSES = ("initial", "loading", "success", "error", "refetch")


@dataclass(frozen=True)
class Success(Generic[T]):
    # Payload is authoritative; there is no error field at all
    status: ClassVar[str] = "success"
    data: T


@dataclass(frozen=True)
class Error(Generic[E, T]):
    # May keep the last known payload next to the error
    status: ClassVar[str] = "error"
    error: E
    data: Optional[T] = None


@dataclass(frozen=True)
class Loading(Generic[T, E]):
    status: ClassVar[str] = "loading"
    data: Optional[T] = None
    error: Optional[E] = None


@dataclass(frozen=True)
class Refetch(Generic[T, E]):
    # In flight again after a previous load, not the first one
    status: ClassVar[str] = "refetch"
    data: Optional[T] = None
    error: Optional[E] = None


@dataclass(frozen=True)
class Initial(Generic[T, E]):
    # Nothing requested yet; fields may hold seed values
    status: ClassVar[str] = "initial"
    data: Optional[T] = None
    error: Optional[E] = None


AsyncState = Union[Success[T], Error[E, T], Loading[T, E], Refetch[T, E], Initial[T, E]]


def make_success_state(data: T) -> Success[T]:
    return Success(data)


def make_error_state(error: E, data: Optional[T] = None) -> Error[E, T]:
    return Error(error, data)


def make_loading_state(data: Optional[T] = None, error: Optional[E] = None) -> Loading[T, E]:
    return Loading(data, error)


def make_refetch_state(data: Optional[T] = None, error: Optional[E] = None) -> Refetch[T, E]:
    return Refetch(data, error)


def make_initial_state(data: Optional[T] = None, error: Optional[E] = None) -> Initial[T, E]:
    return Initial(data, error)


def to_dict(state: AsyncState[T, E]) -> Dict[str, Any]:
    """Structural view of a state.

    Required fields are always present; optional ones are left out when None.
    """
    out: Dict[str, Any] = {}
    match state:
        case Success(data=d):
            out["data"] = d
        case Error(error=e, data=d):
            out["error"] = e
            if d is not None:
                out["data"] = d
        case (
            Loading(data=d, error=e)
            | Refetch(data=d, error=e)
            | Initial(data=d, error=e)
        ):
            out.update((k, v) for k, v in (("data", d), ("error", e)) if v is not None)
        case _:
            raise TypeError(f"Unknown state variant: {type(state).__name__}")
    return {"status": state.status, **out}


def _stale(data: Any, error: Any) -> str:
    parts = []
    if data is not None:
        parts.append(f"data={data!r}")
    if error is not None:
        parts.append(f"error={error!r}")
    return f" ({', '.join(parts)})" if parts else ""


def render(state: AsyncState[T, E]) -> str:
    match state:
        case Initial(data=d, error=e):
            return "Initial" + _stale(d, e)
        case Loading(data=d, error=e):
            return "Loading…" + _stale(d, e)
        case Refetch(data=d, error=e):
            return "Refetching…" + _stale(d, e)
        case Success(data=d):
            return f"Success: {d!r}"
        case Error(error=e, data=d):
            return f"Error: {e!r}" + _stale(d, None)
        case _:
            raise TypeError("Unknown state variant")
