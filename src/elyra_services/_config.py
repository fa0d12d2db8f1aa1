import os
from functools import cached_property
from typing import Optional, Protocol

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ._utils.constants import (
    DEFAULT_TIMEOUT,
    ENV_ELYRA_SERVER_URL,
    ENV_REQUEST_TIMEOUT,
    ENV_SERVER_TOKEN,
    ENV_SERVER_URL,
    ENV_VERIFY_SSL,
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
)
from .models.errors import SettingsMissingError


class ServerSettings(BaseModel):
    base_url: str
    token: Optional[str] = None
    default_headers: dict[str, str] = Field(default_factory=dict)
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    follow_redirects: bool = True

    @property
    def request_headers(self) -> dict[str, str]:
        headers = {HEADER_ACCEPT: "application/json"}
        if self.token:
            headers[HEADER_AUTHORIZATION] = f"token {self.token}"
        return {**headers, **self.default_headers}


class SettingsResolver(Protocol):
    def resolve(self) -> ServerSettings: ...


class StaticSettingsResolver:
    """Resolves to settings provided up front."""

    def __init__(self, settings: ServerSettings) -> None:
        self._settings = settings

    def resolve(self) -> ServerSettings:
        return self._settings


class EnvSettingsResolver:
    """Resolves server settings from the environment.

    A ``.env`` file in the working directory is loaded first; variables
    already present in the environment take precedence over it. The result
    is computed once per resolver.
    """

    def __init__(self, dotenv_path: Optional[str] = None) -> None:
        self._dotenv_path = dotenv_path

    def resolve(self) -> ServerSettings:
        return self._settings

    @cached_property
    def _settings(self) -> ServerSettings:
        load_dotenv(self._dotenv_path, override=False)

        base_url = os.getenv(ENV_SERVER_URL) or os.getenv(ENV_ELYRA_SERVER_URL)
        if not base_url:
            raise SettingsMissingError()

        timeout = os.getenv(ENV_REQUEST_TIMEOUT)
        verify_ssl = os.getenv(ENV_VERIFY_SSL, "true").strip().lower()

        return ServerSettings(
            base_url=base_url,
            token=os.getenv(ENV_SERVER_TOKEN) or None,
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
            verify_ssl=verify_ssl not in ("0", "false", "no", "off"),
        )
