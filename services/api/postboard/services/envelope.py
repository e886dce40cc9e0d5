"""Response envelope constructors.

Pure helpers: the only inputs besides the arguments are the wall clock and a
fresh UUID per call.
"""

import time
from typing import TypeVar
from uuid import uuid4

from postboard.schemas.common import ApiResponse

T = TypeVar("T")


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def create_success_response(data: T) -> ApiResponse[T]:
    """Wrap data in a successful envelope."""
    return ApiResponse(
        success=True,
        data=data,
        timestamp=_now_ms(),
        request_id=str(uuid4()),
    )


def create_error_response(message: str, status_code: int = 400) -> ApiResponse:
    """Build a failed envelope carrying `message`.

    Args:
        message: Human-readable error, serialized as `error`.
        status_code: HTTP status hint for the route (not serialized).
    """
    return ApiResponse(
        success=False,
        timestamp=_now_ms(),
        request_id=str(uuid4()),
        error=message,
        status_code=status_code,
    )
