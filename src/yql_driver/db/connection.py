"""Connection factory for the YQL driver."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from yql_driver.config import get_timeout
from yql_driver.db.descriptor import parse_descriptor
from yql_driver.db.yql_backend import YQLConnection

if TYPE_CHECKING:
    from yql_driver.auth.pin import PinPrompt

logger = logging.getLogger(__name__)


def open_connection(
    dsn: str,
    *,
    http_client: httpx.Client,
    pin_prompt: PinPrompt | None = None,
) -> YQLConnection:
    """Open a connection configured by the descriptor ``dsn``.

    The caller owns ``http_client`` and closes it. Public and signed requests
    both go through it. Credentials are not checked here; a bad key or
    secret only fails when a query runs.
    """
    descriptor = parse_descriptor(dsn)
    logger.debug(
        "Opening YQL connection (secure=%s, env=%r)", descriptor.is_secure, descriptor.env
    )
    return YQLConnection(http_client, descriptor, pin_prompt=pin_prompt)


class YQLDriver:
    """Opens YQL connections that share one HTTP client.

    An injected client stays owned by the caller. Without one the driver
    creates a client on first use and closes it in close().
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        *,
        pin_prompt: PinPrompt | None = None,
    ) -> None:
        """Initialize with an optional HTTP client and PIN prompt."""
        self._http = http_client
        self._owns_http = False
        self._pin_prompt = pin_prompt

    def open(self, dsn: str) -> YQLConnection:
        """Open a connection configured by ``dsn``."""
        return open_connection(
            dsn,
            http_client=self._get_client(),
            pin_prompt=self._pin_prompt,
        )

    def _get_client(self) -> httpx.Client:
        if self._http is None:
            self._http = httpx.Client(timeout=get_timeout())
            self._owns_http = True
        return self._http

    def close(self) -> None:
        """Close the HTTP client if the driver created it."""
        if self._http is not None and self._owns_http:
            self._http.close()
            self._http = None
            self._owns_http = False
