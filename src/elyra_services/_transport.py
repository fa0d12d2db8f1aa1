"""HTTP transport used by the request handler.

The transport only moves bytes: it returns as soon as the response status
and headers are available and leaves body decoding to the caller.
"""

import json
import logging
from typing import Any, Mapping, Optional, Protocol, Union

import httpx

from ._config import ServerSettings
from ._utils._request_spec import DecodeAs
from .models.errors import DecodeError, TransportError

logger = logging.getLogger(__name__)

Body = Union[bytes, str, None]


class RawResponse(Protocol):
    status_code: int

    @property
    def reason_phrase(self) -> Optional[str]: ...

    @property
    def url(self) -> Optional[str]: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    async def json(self) -> Any: ...

    async def text(self) -> str: ...

    async def blob(self) -> bytes: ...

    async def aclose(self) -> None: ...


class Transport(Protocol):
    async def execute(
        self,
        url: str,
        *,
        method: str,
        body: Body = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> RawResponse: ...


class HttpxRawResponse:
    """Wraps a streamed ``httpx.Response`` whose body has not been read yet."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response
        self.status_code = response.status_code

    @property
    def reason_phrase(self) -> Optional[str]:
        return self._response.reason_phrase or None

    @property
    def url(self) -> Optional[str]:
        return str(self._response.url)

    @property
    def headers(self) -> Mapping[str, str]:
        return dict(self._response.headers)

    async def _read(self, decode_as: DecodeAs) -> bytes:
        try:
            return await self._response.aread()
        except httpx.HTTPError as e:
            raise DecodeError(decode_as.value, e) from e

    async def json(self) -> Any:
        content = await self._read(DecodeAs.JSON)
        try:
            return json.loads(content)
        except (ValueError, RecursionError) as e:
            raise DecodeError(DecodeAs.JSON.value, e) from e

    async def text(self) -> str:
        await self._read(DecodeAs.TEXT)
        try:
            return self._response.text
        except (LookupError, ValueError) as e:
            raise DecodeError(DecodeAs.TEXT.value, e) from e

    async def blob(self) -> bytes:
        return await self._read(DecodeAs.BLOB)

    async def aclose(self) -> None:
        await self._response.aclose()


class HttpxTransport:
    """Transport backed by an ``httpx.AsyncClient``.

    Timeouts, TLS verification and redirects come from the server settings;
    the transport itself never retries.
    """

    def __init__(
        self,
        settings: ServerSettings,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=settings.timeout,
            verify=settings.verify_ssl,
            follow_redirects=settings.follow_redirects,
        )

    async def execute(
        self,
        url: str,
        *,
        method: str,
        body: Body = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> HttpxRawResponse:
        try:
            request = self._client.build_request(
                method, url, content=body, headers=httpx.Headers(headers)
            )
            response = await self._client.send(request, stream=True)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(e, url=url) from e

        logger.debug(f"Response: {response.status_code} {method} {url}")
        return HttpxRawResponse(response)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
