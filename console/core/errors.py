from typing import Optional

from fastapi import HTTPException, status


UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class ConsoleError(Exception):
    """Base error for everything a console view can show the user.

    Every failure reaching a view carries a single human readable message,
    whether it came from the network, the remote service or client-side
    validation.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ApiError(ConsoleError):
    """Transport failure or a non-2xx answer from the remote service."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DraftValidationError(ConsoleError):
    pass


class StatusTransitionError(ConsoleError):
    pass


class ShipmentTargetError(ConsoleError):
    pass


def to_http_exception(err: ConsoleError) -> HTTPException:
    if isinstance(err, DraftValidationError):
        code = 422
    elif isinstance(err, (StatusTransitionError, ShipmentTargetError)):
        code = status.HTTP_409_CONFLICT
    elif isinstance(err, ApiError) and err.status_code and 400 <= err.status_code < 500:
        # remote rejections (404, 409 stale version, 400) keep their status
        code = err.status_code
    else:
        code = status.HTTP_502_BAD_GATEWAY
    return HTTPException(status_code=code, detail=err.message)
