"""Split computation exceptions.

Only backend failures and invalid requests surface to callers. Degenerate
statistics and imbalance warnings are handled internally and reported, never
raised.
"""


class SplitError(Exception):
    """Base exception for split computation errors."""

    pass


class BackendQueryError(SplitError):
    """Raised when a stats or count query against a shard fails.

    This occurs when:
    - The shard is unreachable or the request times out
    - The backend rejects the filter (malformed query, unknown field)
    - The response body cannot be decoded

    The whole split computation for the shard is aborted; no partial result
    is returned and no retry is attempted at this layer.
    """

    def __init__(self, message: str, shard_url: str | None = None) -> None:
        super().__init__(message)
        self.shard_url = shard_url


class InvalidSplitRequestError(SplitError, ValueError):
    """Raised for invalid split arguments (split count, unknown field type)."""

    pass
