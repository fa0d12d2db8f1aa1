"""Long-running request indicators."""

import logging
from typing import Optional, Protocol

from rich.console import Console
from rich.status import Status

from ._utils.constants import DEFAULT_PROGRESS_MESSAGE

logger = logging.getLogger(__name__)


class ProgressHandle(Protocol):
    """Shown while waiting for a server response.

    ``acquire`` is called right before the request is sent and ``release`` as
    soon as the response status and headers are available.
    """

    def acquire(self) -> None: ...

    def release(self) -> None: ...


class ConsoleProgress:
    """Displays a console spinner while a request is in flight.

    Both operations are idempotent, so one instance can be shared by
    several concurrent requests.
    """

    def __init__(
        self,
        message: str = DEFAULT_PROGRESS_MESSAGE,
        console: Optional[Console] = None,
    ) -> None:
        self.message = message
        self.console = console or Console(stderr=True)
        self._status: Optional[Status] = None

    @property
    def active(self) -> bool:
        return self._status is not None

    def acquire(self) -> None:
        if self._status is not None:
            return
        self._status = self.console.status(self.message)
        self._status.start()
        logger.debug(f"Progress shown: {self.message}")

    def release(self) -> None:
        if self._status is None:
            return
        self._status.stop()
        self._status = None
        logger.debug(f"Progress hidden: {self.message}")
