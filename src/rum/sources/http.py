"""HTTP client wrapper around httpx."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from rum.errors import NetworkError, NotFoundError, ParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    """Fetched HTTP response."""

    text: str

    def json(self) -> Any:
        """Decode the body as JSON, raising :class:`ParseError` if it is not."""
        try:
            return json.loads(self.text)
        except ValueError as exc:
            raise ParseError(f"Malformed JSON response: {exc}", cause=exc) from exc


class HttpClient:
    """Thin wrapper around :mod:`httpx` that maps errors into rum exceptions.

    No retries: a failed request surfaces immediately for the style being
    processed.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            transport=transport,
        )

    def get(self, url: str) -> HttpResponse:
        """Send a GET request and return the response.

        Raises :class:`NotFoundError` on 404 and :class:`NetworkError` on any
        other non-2xx status or transport failure. A URL httpx cannot parse
        raises :class:`ParseError`.
        """
        logger.debug("GET %s", url)
        try:
            resp = self._client.get(url)
        except httpx.InvalidURL as exc:
            raise ParseError(f"Invalid URL {url!r}: {exc}", cause=exc) from exc
        except httpx.TimeoutException as exc:
            raise NetworkError(f"Request to {url} timed out", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(f"Request to {url} failed: {exc}", cause=exc) from exc

        if resp.status_code == 404:
            raise NotFoundError(f"{url} not found")
        if resp.status_code >= 300:
            raise NetworkError(
                f"Request to {url} failed with status {resp.status_code}",
                status_code=resp.status_code,
            )
        return HttpResponse(text=resp.text)

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
