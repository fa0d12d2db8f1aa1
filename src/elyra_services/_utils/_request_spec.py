from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Union


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class DecodeAs(str, Enum):
    """Which body decode operation a request uses. Never inferred from headers."""

    JSON = "json"
    TEXT = "text"
    BLOB = "blob"


@dataclass(frozen=True)
class RequestSpec:
    """Encapsulates a single request to the server.

    The path is relative to the server base URL. The method is mandatory: a
    spec without one is a programming error and fails at construction time,
    before any I/O happens.
    """

    path: str
    method: Union[HttpMethod, str]
    body: Any | None = None
    decode_as: Union[DecodeAs, str] = DecodeAs.JSON
    headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("A request path is required")
        if not self.method:
            raise ValueError(f"A request method is required for '{self.path}'")

        try:
            method = HttpMethod(self.method.upper())
        except (AttributeError, ValueError):
            raise ValueError(
                f"Unsupported request method '{self.method}' for '{self.path}'"
            ) from None

        try:
            decode_as = DecodeAs(self.decode_as.lower())
        except (AttributeError, ValueError):
            raise ValueError(
                f"Unsupported decode type '{self.decode_as}' for '{self.path}'"
            ) from None

        # frozen dataclass, normalise through object.__setattr__
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "decode_as", decode_as)
        object.__setattr__(self, "headers", dict(self.headers))

    @classmethod
    def from_options(cls, path: str, options: Mapping[str, Any]) -> "RequestSpec":
        """Build a spec from a fetch-style options mapping.

        Accepts ``method``, ``body``, ``headers`` and ``type`` (or
        ``decode_as``) keys.
        """
        if not options.get("method"):
            raise ValueError(f"A request method is required for '{path}'")

        return cls(
            path=path,
            method=options["method"],
            body=options.get("body"),
            decode_as=options.get("decode_as", options.get("type", DecodeAs.JSON)),
            headers=dict(options.get("headers") or {}),
        )
