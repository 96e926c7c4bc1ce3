import json

import httpx
import pytest
import pytest_asyncio

from transmission_session_rpc.client import TransmissionClient
from transmission_session_rpc.transport import SESSION_HEADER, SessionTransport


RPC_URL = "http://localhost:9091/transmission/rpc"


class FakeDaemon:
    """
    Scripted Transmission daemon behind an httpx.MockTransport.

    Each queued reply is either an httpx.Response or an exception instance to
    raise. Every request received is recorded along with its decoded body.
    """

    def __init__(self):
        self.replies = []
        self.requests = []

    def challenge(self, session_id="abc123"):
        self.replies.append(httpx.Response(409, headers={SESSION_HEADER: session_id}))

    def reply(self, result="success", arguments=None, status=200):
        body = {"result": result}
        if arguments is not None:
            body["arguments"] = arguments
        self.replies.append(httpx.Response(status, json=body))

    def reply_raw(self, status=200, content=b"", headers=None):
        self.replies.append(httpx.Response(status, content=content, headers=headers))

    def fail(self, exc):
        self.replies.append(exc)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def body(self, index=-1):
        return json.loads(self.requests[index].content)

    def session_header(self, index=-1):
        return self.requests[index].headers.get(SESSION_HEADER)


@pytest.fixture
def daemon():
    return FakeDaemon()


@pytest_asyncio.fixture
async def http_client(daemon):
    async with httpx.AsyncClient(transport=httpx.MockTransport(daemon.handler)) as client:
        yield client


@pytest.fixture
def transport(http_client):
    return SessionTransport(RPC_URL, "admin", "secret", http_client=http_client)


@pytest.fixture
def transmission_client(transport):
    return TransmissionClient(transport=transport)
