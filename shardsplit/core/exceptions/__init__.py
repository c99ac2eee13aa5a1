"""Exception types for shardsplit."""

from .splitting import BackendQueryError, InvalidSplitRequestError, SplitError

__all__ = [
    "BackendQueryError",
    "InvalidSplitRequestError",
    "SplitError",
]
