"""
Transmission Session RPC - async client for the Transmission daemon.

Exposes the daemon's JSON-RPC control surface as method calls and handles
the X-Transmission-Session-Id handshake transparently.
"""

from .client import TransmissionClient
from .config import Config
from .errors import DecodeError, SessionRetriesExhausted, TransmissionError, TransportError, Unauthorized
from .models import RpcRequest, RpcResponse, RpcResult
from .transport import SessionTransport

__version__ = "0.1.0"
__all__ = [
    "TransmissionClient",
    "SessionTransport",
    "Config",
    "RpcRequest",
    "RpcResponse",
    "RpcResult",
    "TransmissionError",
    "Unauthorized",
    "DecodeError",
    "SessionRetriesExhausted",
    "TransportError",
]
