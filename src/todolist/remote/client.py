# src/todolist/remote/client.py

from __future__ import annotations

import logging

import httpx

from ..config import Settings
from ..core.errors import NetworkError
from ..tasks.task_models import ServerTasks

logger = logging.getLogger(__name__)

TODOS_PATH = "/todos"


def _make_timeout(connect_s: float, read_s: float) -> httpx.Timeout:
    return httpx.Timeout(connect=connect_s, read=read_s, write=10.0, pool=connect_s)


class HttpTaskSource:
    """
    Remote task source over HTTP (`GET <base_url>/todos`).

    Every failure surfaces as NetworkError:
    - transport problems and timeouts
    - non-2xx responses
    - bodies that are not the expected JSON envelope

    A client can be injected (tests use httpx.MockTransport); otherwise a
    short-lived AsyncClient is created per call.
    """

    def __init__(
        self,
        base_url: str,
        *,
        connect_timeout: float = 5.0,
        read_timeout: float = 15.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        base_url = (base_url or "").strip().rstrip("/")
        if not base_url:
            raise ValueError("Remote base URL is not set. Set TODO_REMOTE_BASE_URL in your .env.")
        self._base_url = base_url
        self._timeout = _make_timeout(connect_timeout, read_timeout)
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> HttpTaskSource:
        return cls(
            settings.remote_base_url,
            connect_timeout=settings.remote_connect_timeout,
            read_timeout=settings.remote_read_timeout,
        )

    @property
    def url(self) -> str:
        return f"{self._base_url}{TODOS_PATH}"

    async def fetch_tasks(self) -> ServerTasks:
        if self._client is not None:
            return await self._fetch(self._client)
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await self._fetch(client)

    async def _fetch(self, client: httpx.AsyncClient) -> ServerTasks:
        url = self.url
        logger.info("Fetching tasks from %s", url)
        try:
            resp = await client.get(url, timeout=self._timeout)
            resp.raise_for_status()
        except httpx.TimeoutException as e:
            raise NetworkError(f"request timed out: {url}") from e
        except httpx.HTTPStatusError as e:
            raise NetworkError(f"HTTP {e.response.status_code} from {url}") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"request failed: {e.__class__.__name__}") from e

        try:
            payload = resp.json()
        except ValueError as e:
            raise NetworkError(f"invalid JSON from {url}") from e

        try:
            server_tasks = ServerTasks.from_dict(payload)
        except (TypeError, ValueError) as e:
            raise NetworkError(f"unexpected payload from {url}: {e}") from e

        logger.debug(
            "Fetched %d tasks (total=%s skip=%s limit=%s)",
            len(server_tasks.tasks),
            server_tasks.total,
            server_tasks.skip,
            server_tasks.limit,
        )
        return server_tasks
