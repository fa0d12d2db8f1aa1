import json
from logging import getLogger
from typing import Any, Mapping, Optional, Union

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .._config import EnvSettingsResolver, ServerSettings, SettingsResolver
from .._progress import ProgressHandle
from .._transport import Body, HttpxTransport, RawResponse, Transport
from .._utils._request_spec import DecodeAs, HttpMethod, RequestSpec
from .._utils._url import url_join
from .._utils.constants import HEADER_CONTENT_TYPE, LOGGER_NAME
from ..models.errors import DecodeError, TransportError
from ..models.outcome import Failure, Outcome
from ..models.response import ResponseMetadata
from ._classifier import (
    Decoded,
    DecodeFailed,
    DecodeResult,
    classify,
    is_success_status,
)


class RequestHandler:
    """Makes requests to the server hosting the Elyra extension.

    Every call settles to exactly one ``Outcome``: ``Success`` with the
    decoded payload, ``Empty`` for no-content answers, or ``Failure`` with
    the error detail. Server and network errors never raise; presenting
    them to the user is up to the caller.

    If a progress handle is given, it is shown right before the request is
    sent and hidden as soon as the response status is known, before the body
    is decoded.

    Examples:
        ```python
        async with RequestHandler() as handler:
            outcome = await handler.get("elyra/metadata/runtimes")
            if outcome.is_success:
                print(outcome.payload)
        ```
    """

    def __init__(
        self,
        settings_resolver: Optional[SettingsResolver] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._settings_resolver = settings_resolver or EnvSettingsResolver()
        self._transport = transport
        self._owns_transport = transport is None

    async def get(
        self,
        request_path: str,
        progress: Optional[ProgressHandle] = None,
        *,
        model: Any = None,
        decode_as: Union[DecodeAs, str] = DecodeAs.JSON,
    ) -> Outcome[Any]:
        """Make a GET request to the server.

        Args:
            request_path: Path appended to the server base URL.
            progress: Indicator displayed while waiting for the response.
            model: Optional type the decoded payload is validated against.
            decode_as: How to decode the response body.

        Returns:
            Outcome: The settled outcome of the request.
        """
        spec = RequestSpec(
            path=request_path, method=HttpMethod.GET, decode_as=decode_as
        )
        return await self.dispatch(request_path, spec, progress, model=model)

    async def post(
        self,
        request_path: str,
        body: Any,
        progress: Optional[ProgressHandle] = None,
        *,
        model: Any = None,
        decode_as: Union[DecodeAs, str] = DecodeAs.JSON,
    ) -> Outcome[Any]:
        """Make a POST request to the server.

        Args:
            request_path: Path appended to the server base URL.
            body: Request body. Bytes and strings are sent as they are, other
                values are serialized to JSON.
            progress: Indicator displayed while waiting for the response.
            model: Optional type the decoded payload is validated against.
            decode_as: How to decode the response body.

        Returns:
            Outcome: The settled outcome of the request.
        """
        spec = RequestSpec(
            path=request_path, method=HttpMethod.POST, body=body, decode_as=decode_as
        )
        return await self.dispatch(request_path, spec, progress, model=model)

    async def put(
        self,
        request_path: str,
        body: Any,
        progress: Optional[ProgressHandle] = None,
        *,
        model: Any = None,
        decode_as: Union[DecodeAs, str] = DecodeAs.JSON,
    ) -> Outcome[Any]:
        """Make a PUT request to the server.

        See ``post`` for the arguments.
        """
        spec = RequestSpec(
            path=request_path, method=HttpMethod.PUT, body=body, decode_as=decode_as
        )
        return await self.dispatch(request_path, spec, progress, model=model)

    async def delete(
        self,
        request_path: str,
        progress: Optional[ProgressHandle] = None,
        *,
        model: Any = None,
        decode_as: Union[DecodeAs, str] = DecodeAs.JSON,
    ) -> Outcome[Any]:
        """Make a DELETE request to the server.

        See ``get`` for the arguments.
        """
        spec = RequestSpec(
            path=request_path, method=HttpMethod.DELETE, decode_as=decode_as
        )
        return await self.dispatch(request_path, spec, progress, model=model)

    async def dispatch(
        self,
        request_path: str,
        spec: Union[RequestSpec, Mapping[str, Any]],
        progress: Optional[ProgressHandle] = None,
        *,
        model: Any = None,
    ) -> Outcome[Any]:
        """Make a request to the server.

        Args:
            request_path: Path appended to the server base URL.
            spec: The request to make, or a mapping with at least a
                ``method`` key (plus optional ``body``, ``headers`` and
                ``type``).
            progress: Indicator displayed while waiting for the response.
            model: Optional type the decoded payload is validated against.

        Returns:
            Outcome: The settled outcome of the request.

        Raises:
            ValueError: If the request has no method, or if the path of
                ``spec`` differs from ``request_path``. Raised before any I/O.
        """
        if not isinstance(spec, RequestSpec):
            spec = RequestSpec.from_options(request_path, spec)
        elif spec.path != request_path:
            raise ValueError(
                f"Request path '{request_path}' does not match '{spec.path}'"
            )

        settings = self._settings_resolver.resolve()
        transport = self._get_transport(settings)

        request_url = url_join(settings.base_url, request_path)
        body, body_headers = self._encode_body(spec.body)
        # header names are case-insensitive, later sources replace earlier ones
        headers = httpx.Headers(settings.request_headers)
        headers.update(body_headers)
        headers.update(spec.headers)

        self._logger.debug(f"Sending a {spec.method.value} request to {request_url}")
        self._logger.debug(f"HEADERS: {dict(headers)}")

        if progress is not None:
            progress.acquire()

        try:
            response = await transport.execute(
                request_url,
                method=spec.method.value,
                body=body,
                headers=headers,
            )
        except TransportError as e:
            self._logger.error(f"Request to {request_url} failed: {e.inner}")
            return Failure(e)
        finally:
            # hide the indicator once the status is known, before decoding
            if progress is not None:
                progress.release()

        try:
            decoded = await self._decode(response, spec.decode_as, model)
        finally:
            await response.aclose()

        outcome = classify(
            response.status_code,
            decoded,
            request_path=request_path,
            metadata=lambda: self._metadata(response, request_path),
        )
        self._logger.debug(
            f"Response: {response.status_code} {spec.method.value} {request_url} "
            f"-> {type(outcome).__name__}"
        )
        return outcome

    async def _decode(
        self, response: RawResponse, decode_as: DecodeAs, model: Any
    ) -> DecodeResult[Any]:
        try:
            value = await getattr(response, decode_as.value)()
        except DecodeError as e:
            return DecodeFailed(e)

        if model is None or not is_success_status(response.status_code):
            return Decoded(value)

        try:
            return Decoded(TypeAdapter(model).validate_python(value))
        except ValidationError as e:
            return DecodeFailed(DecodeError(decode_as.value, e))

    def _encode_body(self, body: Any) -> tuple[Body, dict[str, str]]:
        if body is None or isinstance(body, (bytes, str)):
            return body, {}
        if isinstance(body, BaseModel):
            content = body.model_dump_json(by_alias=True, exclude_none=True)
        else:
            content = json.dumps(body)
        return content, {HEADER_CONTENT_TYPE: "application/json"}

    def _metadata(self, response: RawResponse, request_path: str) -> ResponseMetadata:
        return ResponseMetadata(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            url=response.url,
            headers=dict(response.headers),
            request_path=request_path,
        )

    def _get_transport(self, settings: ServerSettings) -> Transport:
        if self._transport is None:
            self._transport = HttpxTransport(settings)
        return self._transport

    async def aclose(self) -> None:
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.aclose()
            self._transport = None

    async def __aenter__(self) -> "RequestHandler":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
