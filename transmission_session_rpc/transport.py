"""
Session-aware transport for the Transmission RPC protocol.

Transmission rejects any request without a valid X-Transmission-Session-Id
header with HTTP 409, returning the id it expects in the same header. The
transport caches that id and replays the request, so callers never see the
challenge. The cached id is shared by every call made through the same
transport and is replaced whenever the daemon issues a new one (for example
after a restart).

Basic authentication is weak without HTTPS and should not be used on
public networks.
"""

import base64
from typing import Any, Dict, Optional

import httpx

from .config import Config
from .errors import SessionRetriesExhausted, Unauthorized
from .logger import logger
from .models import RpcRequest, RpcResponse


SESSION_HEADER = "X-Transmission-Session-Id"

TRANSMISSION_URL = Config.TRANSMISSION_URL
TRANSMISSION_USERNAME = Config.TRANSMISSION_USERNAME
TRANSMISSION_PASSWORD = Config.TRANSMISSION_PASSWORD
TRANSMISSION_TIMEOUT = Config.TRANSMISSION_TIMEOUT
MAX_SESSION_RETRIES = Config.MAX_SESSION_RETRIES


def basic_auth(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


class SessionTransport:
    def __init__(
        self,
        url: str = TRANSMISSION_URL,
        username: str = TRANSMISSION_USERNAME,
        password: str = TRANSMISSION_PASSWORD,
        timeout: float = TRANSMISSION_TIMEOUT,
        max_session_retries: int = MAX_SESSION_RETRIES,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        endpoint = httpx.URL(url)
        if endpoint.scheme not in ("http", "https"):
            raise ValueError(f"Unsupported RPC url scheme: {url}")

        self._url = str(endpoint)
        self._authorization = basic_auth(username or "", password or "")
        self.max_session_retries = max_session_retries
        self.session_id: Optional[str] = None

        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    @property
    def url(self) -> str:
        return self._url

    async def __aenter__(self) -> "SessionTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    def reset_session(self) -> None:
        """Forget the cached session id; the next call starts a new handshake."""
        self.session_id = None

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": self._authorization,
        }
        if self.session_id is not None:
            headers[SESSION_HEADER] = self.session_id
        return headers

    async def invoke(self, method: str, arguments: Optional[Dict[str, Any]] = None) -> RpcResponse:
        """
        Call a remote method and return the decoded response.

        Session challenges (409) are answered by storing the issued id and
        resending the request, up to max_session_retries times.

        Raises:
            Unauthorized: the daemon rejected the credentials (401)
            SessionRetriesExhausted: the daemon kept answering 409
            DecodeError: the response body is not an RPC response
            httpx.HTTPError: network failure or any other HTTP status
        """
        if not method or not isinstance(method, str):
            raise ValueError("RPC method name must be a non-empty string")

        body = RpcRequest(method, arguments).to_json()
        challenges = 0

        while True:
            logger.debug(f"RPC {method} -> {self._url}")
            response = await self._client.post(self._url, content=body, headers=self._headers())

            if response.status_code == 409:
                session_id = response.headers.get(SESSION_HEADER)
                if not session_id:
                    response.raise_for_status()

                challenges += 1
                if challenges > self.max_session_retries:
                    raise SessionRetriesExhausted(method, challenges)

                logger.debug(f"Session challenge on {method}, retrying with new session id")
                self.session_id = session_id
                continue

            if response.status_code == 401:
                logger.warning(f"RPC server at {self._url} rejected credentials")
                raise Unauthorized(response=response)

            response.raise_for_status()
            return RpcResponse.from_json(response.content)
