"""
Error taxonomy for the fetch / lookup / resolve layers.

Each layer wraps the error below it with its own context (url, rank) and
chains it via ``raise ... from``, so ``__cause__`` walks back to the
transport or decode failure that started it.
"""
from enum import Enum
from typing import Optional


class TierCutError(Exception):
    """Base class for every error raised by this package."""


class FetchErrorKind(str, Enum):
    BAD_STATUS = "bad_status"
    RETRIES_EXHAUSTED = "retries_exhausted"
    DECODE_ERROR = "decode_error"


class FetchError(TierCutError):
    def __init__(
        self,
        kind: FetchErrorKind,
        url: str,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        self.kind = kind
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class ClientErrorKind(str, Enum):
    UPSTREAM = "upstream"
    EMPTY_RESULT = "empty_result"


class ClientError(TierCutError):
    def __init__(self, kind: ClientErrorKind, message: str, rank: Optional[int] = None):
        self.kind = kind
        self.rank = rank
        super().__init__(message)


class ResolveErrorKind(str, Enum):
    TOTALS_UNAVAILABLE = "totals_unavailable"
    LOOKUP_FAILED = "lookup_failed"


class ResolveError(TierCutError):
    def __init__(self, kind: ResolveErrorKind, message: str, rank: Optional[int] = None):
        self.kind = kind
        self.rank = rank
        super().__init__(message)

    @property
    def root_cause(self) -> BaseException:
        """Innermost chained exception, or self when nothing is chained."""
        err: BaseException = self
        while err.__cause__ is not None:
            err = err.__cause__
        return err
