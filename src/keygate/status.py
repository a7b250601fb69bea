"""Operation status returned by the store, and its HTTP translation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus

logger = logging.getLogger("keygate.status")


class StatusCode(Enum):
    SUCCESS = "success"
    CREATED = "created"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    NOT_ALLOWED = "not_allowed"
    NOT_ACCEPTABLE = "not_acceptable"
    TIMEOUT = "timeout"
    CONFLICT = "conflict"
    GONE = "gone"
    UNSUPPORTED = "unsupported"
    INTERNAL_ERROR = "internal_error"
    NOT_IMPLEMENTED = "not_implemented"
    NO_SERVICE = "no_service"
    UNDEFINED = "undefined"


_SUCCESS_CODES = frozenset({StatusCode.SUCCESS, StatusCode.CREATED})

# Only these kinds reach the API with their own code; the rest are 500.
_HTTP_CODES = {
    StatusCode.BAD_REQUEST: HTTPStatus.BAD_REQUEST,
    StatusCode.CONFLICT: HTTPStatus.CONFLICT,
    StatusCode.NOT_ACCEPTABLE: HTTPStatus.NOT_ACCEPTABLE,
    StatusCode.NOT_FOUND: HTTPStatus.NOT_FOUND,
}


@dataclass(frozen=True)
class Status:
    """Outcome of a store operation."""

    code: StatusCode
    description: str = ""

    @property
    def is_success(self) -> bool:
        return self.code in _SUCCESS_CODES


class StatusError(Exception):
    """Raised by routes when the store reports a failed status."""

    def __init__(self, status: Status):
        super().__init__(status.description or status.code.value)
        self.status = status


def translate_failure_status(status: Status | StatusCode) -> int:
    """Convert a failed store status into the HTTP code returned to callers.

    Passing a successful status is a caller bug and trips an assertion.
    """
    if isinstance(status, StatusCode):
        status = Status(status)
    assert not status.is_success, f"not a failure status: {status.code.value}"

    logger.debug(
        "Exception code - %s, description - %s",
        status.code.value,
        status.description,
    )
    return int(_HTTP_CODES.get(status.code, HTTPStatus.INTERNAL_SERVER_ERROR))
