from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar, Union

from .errors import RequestFailedError

ElyraResource = Dict[str, Any]

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """The server answered with a 2xx status and a decodable body."""

    payload: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.payload


@dataclass(frozen=True)
class Empty:
    """No content: a 204 without a body, or any 405."""

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_empty(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> None:
        return None


@dataclass(frozen=True)
class Failure:
    """The request failed.

    ``error`` is the decoded server error body, a ``ResponseMetadata`` for an
    undecodable 404/409, or the ``TransportError``/``DecodeError`` raised
    while talking to the server.
    """

    error: Any

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> Optional[Any]:
        raise RequestFailedError(self.error)


Outcome = Union[Success[T], Empty, Failure]
