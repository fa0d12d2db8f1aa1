"""Client for the Elyra server extension REST API."""

from ._config import (
    EnvSettingsResolver,
    ServerSettings,
    SettingsResolver,
    StaticSettingsResolver,
)
from ._progress import ConsoleProgress, ProgressHandle
from ._services import RequestHandler
from ._transport import HttpxTransport, RawResponse, Transport
from ._utils import DecodeAs, HttpMethod, RequestSpec, url_join
from .models import (
    DecodeError,
    ElyraResource,
    Empty,
    Failure,
    Outcome,
    RequestFailedError,
    ResponseMetadata,
    SettingsMissingError,
    Success,
    TransportError,
)

__all__ = [
    "ConsoleProgress",
    "DecodeAs",
    "DecodeError",
    "ElyraResource",
    "Empty",
    "EnvSettingsResolver",
    "Failure",
    "HttpMethod",
    "HttpxTransport",
    "Outcome",
    "ProgressHandle",
    "RawResponse",
    "RequestFailedError",
    "RequestHandler",
    "RequestSpec",
    "ResponseMetadata",
    "ServerSettings",
    "SettingsMissingError",
    "SettingsResolver",
    "StaticSettingsResolver",
    "Success",
    "Transport",
    "TransportError",
    "url_join",
]
