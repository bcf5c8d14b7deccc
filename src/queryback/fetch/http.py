"""HTTP style sheet fetcher wrapping httpx."""
from __future__ import annotations

import logging

import httpx

from queryback.config import QuerybackConfig
from queryback.errors import FetchError

logger = logging.getLogger(__name__)


class HttpStyleFetcher:
    """Thin wrapper around :mod:`httpx` that maps failures into :class:`FetchError`.

    One client is shared by every fetch; ``httpx.Client`` is safe to use
    from the aggregator's worker threads.
    """

    def __init__(
        self,
        config: QuerybackConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        cfg = config or QuerybackConfig()
        self._client = httpx.Client(
            headers={"User-Agent": cfg.user_agent, "Accept": "text/css,*/*;q=0.1"},
            timeout=httpx.Timeout(cfg.fetch_timeout),
            follow_redirects=True,
            transport=transport,
        )

    def fetch(self, locator: str) -> str:
        """GET *locator* and return the body text.

        Raises :class:`FetchError` on non-2xx status or transport failure.
        """
        try:
            resp = self._client.get(locator)
        except httpx.TimeoutException as exc:
            raise FetchError(f"Timed out fetching {locator}", locator=locator, cause=exc) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Could not fetch {locator}: {exc}", locator=locator, cause=exc) from exc

        if resp.status_code >= 300:
            raise FetchError(
                f"Fetching {locator} returned HTTP {resp.status_code}",
                locator=locator,
                status_code=resp.status_code,
            )
        logger.debug("Fetched %s (%d bytes)", locator, len(resp.content))
        return resp.text

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()

    def __enter__(self) -> HttpStyleFetcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
