from typing import Any, Optional


class SettingsMissingError(Exception):
    def __init__(
        self,
        message="Server URL not configured. Set the JUPYTER_SERVER_URL environment variable or provide the settings explicitly.",
    ):
        self.message = message
        super().__init__(self.message)


class TransportError(Exception):
    """Raised when a request never reached the server or never came back.

    Wraps the transport-level reason (connection refused, DNS failure, abort,
    transport timeout) in ``inner``.
    """

    def __init__(self, inner: BaseException, url: Optional[str] = None):
        self.inner = inner
        self.url = url
        self.message = f"Request to {url} failed: {inner}" if url else str(inner)
        super().__init__(self.message)


class DecodeError(Exception):
    """Raised when a response body cannot be decoded as requested."""

    def __init__(self, decode_as: str, inner: BaseException):
        self.decode_as = decode_as
        self.inner = inner
        self.message = f"Unable to decode response body as {decode_as}: {inner}"
        super().__init__(self.message)


class RequestFailedError(Exception):
    """Raised when unwrapping a failed outcome.

    ``error`` holds the failure detail exactly as the dispatcher produced it:
    the decoded server error body, the response metadata of an undecodable
    404/409, or the transport/decode exception.
    """

    def __init__(self, error: Any):
        self.error = error
        self.message = f"Server request failed: {error}"
        super().__init__(self.message)

    @property
    def status_code(self) -> Optional[int]:
        return getattr(self.error, "status_code", None)
