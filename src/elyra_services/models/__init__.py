from .errors import (
    DecodeError,
    RequestFailedError,
    SettingsMissingError,
    TransportError,
)
from .outcome import ElyraResource, Empty, Failure, Outcome, Success
from .response import ResponseMetadata

__all__ = [
    "DecodeError",
    "ElyraResource",
    "Empty",
    "Failure",
    "Outcome",
    "RequestFailedError",
    "ResponseMetadata",
    "SettingsMissingError",
    "Success",
    "TransportError",
]
