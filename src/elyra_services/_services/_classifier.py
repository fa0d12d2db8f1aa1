"""Maps a response status and its decode outcome onto an ``Outcome``."""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from ..models.outcome import Empty, Failure, Outcome, Success
from ..models.response import ResponseMetadata

T = TypeVar("T")

HTTP_NO_CONTENT = 204
HTTP_NOT_FOUND = 404
HTTP_METHOD_NOT_ALLOWED = 405
HTTP_CONFLICT = 409


@dataclass(frozen=True)
class Decoded(Generic[T]):
    value: T


@dataclass(frozen=True)
class DecodeFailed:
    reason: BaseException


DecodeResult = Union[Decoded[T], DecodeFailed]


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


def classify(
    status_code: int,
    decoded: DecodeResult[T],
    *,
    request_path: str,
    metadata: Optional[Callable[[], ResponseMetadata]] = None,
) -> Outcome[T]:
    """Settle a response into exactly one outcome.

    Precedence, status code first:

    - 405 is always ``Empty``, whatever the body.
    - A decoded body is a ``Success`` on 2xx and the server's error detail
      (``Failure(body)``) on any other status, 404 and 409 included.
    - An undecodable 404 or 409 fails with the response metadata and the
      requested path.
    - An undecodable 204 is ``Empty``.
    - Any other undecodable body fails with the decode reason.

    Args:
        status_code: HTTP status of the response.
        decoded: Result of decoding the body.
        request_path: The relative path that was requested.
        metadata: Builds the response metadata for 404/409 failures. When
            omitted only the status code and path are recorded.
    """
    if status_code == HTTP_METHOD_NOT_ALLOWED:
        return Empty()

    if isinstance(decoded, Decoded):
        if is_success_status(status_code):
            return Success(decoded.value)
        return Failure(decoded.value)

    if status_code in (HTTP_NOT_FOUND, HTTP_CONFLICT):
        return Failure(_not_found_detail(status_code, request_path, metadata))

    if status_code == HTTP_NO_CONTENT:
        return Empty()

    return Failure(decoded.reason)


def _not_found_detail(
    status_code: int,
    request_path: str,
    metadata: Optional[Callable[[], ResponseMetadata]],
) -> Any:
    if metadata is None:
        return ResponseMetadata(status_code=status_code, request_path=request_path)
    return metadata().model_copy(update={"request_path": request_path})
