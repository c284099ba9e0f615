"""OAuth 1.0a signed requests against the YQL service.

Every ``get()`` runs the complete three-legged exchange: request token,
user authorization (PIN), access token, then one signed request. Tokens
are never cached between calls. All four steps go through the caller's
``httpx.Client``.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import TYPE_CHECKING
from urllib.parse import parse_qsl

import httpx
from authlib.oauth1 import ClientAuth

from yql_driver.config import get_access_token_url, get_authorize_url, get_request_token_url
from yql_driver.errors import OAuthTokenError

if TYPE_CHECKING:
    from yql_driver.auth.pin import PinPrompt

logger = logging.getLogger(__name__)

# Out-of-band callback: the provider shows the verifier to the user.
_OOB_CALLBACK = "oob"


class OAuth1Signer(httpx.Auth):
    """httpx auth adding an OAuth 1.0a ``Authorization`` header (HMAC-SHA1)."""

    requires_request_body = True

    def __init__(
        self,
        key: str,
        secret: str,
        *,
        token: str | None = None,
        token_secret: str | None = None,
        verifier: str | None = None,
        callback: str | None = None,
    ) -> None:
        """Initialize with consumer credentials and the current token, if any."""
        self._client_auth = ClientAuth(
            key,
            secret,
            token=token,
            token_secret=token_secret,
            redirect_uri=callback,
            verifier=verifier,
        )

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        _, headers, _ = self._client_auth.prepare(
            request.method, str(request.url), {}, request.content
        )
        request.headers["Authorization"] = headers["Authorization"]
        yield request


class OAuthSession:
    """Performs PIN-authorized, OAuth-signed GET requests."""

    def __init__(
        self,
        key: str,
        secret: str,
        pin_prompt: PinPrompt,
        http_client: httpx.Client,
    ) -> None:
        """Initialize with consumer credentials, a PIN prompt and the HTTP client."""
        self._key = key
        self._secret = secret
        self._pin_prompt = pin_prompt
        self._http = http_client

    def get(self, url: str, params: dict[str, str]) -> httpx.Response:
        """Authorize interactively, then send one signed GET to ``url``."""
        request_token = self._fetch_token(
            get_request_token_url(),
            OAuth1Signer(self._key, self._secret, callback=_OOB_CALLBACK),
        )
        authorization_url = httpx.URL(get_authorize_url()).copy_merge_params(
            {"oauth_token": request_token["oauth_token"]}
        )
        logger.info("Waiting for OAuth PIN")
        pin = self._pin_prompt(str(authorization_url))

        access_token = self._fetch_token(
            get_access_token_url(),
            OAuth1Signer(
                self._key,
                self._secret,
                token=request_token["oauth_token"],
                token_secret=request_token["oauth_token_secret"],
                verifier=pin,
            ),
        )
        logger.debug("OAuth access token obtained")

        auth = OAuth1Signer(
            self._key,
            self._secret,
            token=access_token["oauth_token"],
            token_secret=access_token["oauth_token_secret"],
        )
        return self._http.get(url, params=params, auth=auth)

    def _fetch_token(self, url: str, auth: OAuth1Signer) -> dict[str, str]:
        resp = self._http.post(url, auth=auth)
        resp.raise_for_status()
        token = dict(parse_qsl(resp.text))
        if "oauth_token" not in token or "oauth_token_secret" not in token:
            raise OAuthTokenError(f"No OAuth token in response from {url}: {resp.text[:200]!r}")
        return token
