import sys
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

import pytest

# Ensure local source package (src/elyra_services) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from elyra_services import (  # noqa: E402
    DecodeError,
    ServerSettings,
    StaticSettingsResolver,
    TransportError,
)

_UNSET = object()


class FakeResponse:
    """Raw response whose decode operations succeed or fail on demand."""

    def __init__(
        self,
        status_code: int,
        body: Any = _UNSET,
        reason_phrase: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        self.status_code = status_code
        self._body = body
        self._reason_phrase = reason_phrase
        self._headers = headers or {}
        self.decode_calls: list[str] = []
        self.closed = False

    @property
    def reason_phrase(self) -> Optional[str]:
        return self._reason_phrase

    @property
    def url(self) -> Optional[str]:
        return None

    @property
    def headers(self) -> Mapping[str, str]:
        return self._headers

    def _decode(self, decode_as: str) -> Any:
        self.decode_calls.append(decode_as)
        if self._body is _UNSET:
            raise DecodeError(decode_as, ValueError("Unexpected end of JSON input"))
        return self._body

    async def json(self) -> Any:
        return self._decode("json")

    async def text(self) -> str:
        return self._decode("text")

    async def blob(self) -> bytes:
        return self._decode("blob")

    async def aclose(self) -> None:
        self.closed = True


class FakeTransport:
    """Records calls and answers with a canned response or transport error."""

    def __init__(
        self,
        response: Optional[FakeResponse] = None,
        error: Optional[BaseException] = None,
        on_execute: Optional[Callable[[], None]] = None,
    ) -> None:
        self.response = response
        self.error = error
        self.on_execute = on_execute
        self.calls: list[dict[str, Any]] = []

    async def execute(
        self,
        url: str,
        *,
        method: str,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> FakeResponse:
        self.calls.append(
            {"url": url, "method": method, "body": body, "headers": headers}
        )
        if self.on_execute is not None:
            self.on_execute()
        if self.error is not None:
            raise TransportError(self.error, url=url)
        assert self.response is not None
        return self.response


class RecordingProgress:
    """Progress handle recording the order of events."""

    def __init__(self, events: Optional[list[str]] = None) -> None:
        self.events = events if events is not None else []

    def acquire(self) -> None:
        self.events.append("acquire")

    def release(self) -> None:
        self.events.append("release")


@pytest.fixture
def base_url() -> str:
    return "http://localhost:8888/lab/"


@pytest.fixture
def token() -> str:
    return "secret-token"


@pytest.fixture
def settings(base_url: str, token: str) -> ServerSettings:
    return ServerSettings(base_url=base_url, token=token)


@pytest.fixture
def settings_resolver(settings: ServerSettings) -> StaticSettingsResolver:
    return StaticSettingsResolver(settings)


@pytest.fixture
def make_response() -> Callable[..., FakeResponse]:
    return FakeResponse


@pytest.fixture
def make_transport() -> Callable[..., FakeTransport]:
    return FakeTransport


@pytest.fixture
def progress() -> RecordingProgress:
    return RecordingProgress()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("JUPYTER_SERVER_URL", raising=False)
    monkeypatch.delenv("ELYRA_SERVER_URL", raising=False)
    monkeypatch.delenv("JUPYTER_TOKEN", raising=False)
    monkeypatch.delenv("ELYRA_REQUEST_TIMEOUT", raising=False)
    monkeypatch.delenv("ELYRA_VERIFY_SSL", raising=False)
