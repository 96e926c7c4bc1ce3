"""
Value objects exchanged with the Transmission RPC server.

RpcRequest and RpcResponse mirror the wire envelopes. RpcResult is what the
client facade hands back to callers: either success with the response
arguments, or failure with the raw result string reported by the daemon.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import DecodeError


SUCCESS = "success"


@dataclass(frozen=True)
class RpcRequest:
    method: str
    arguments: Optional[Dict[str, Any]] = None

    def to_json(self) -> str:
        payload: Dict[str, Any] = {"method": self.method}
        if self.arguments is not None:
            payload["arguments"] = self.arguments
        return json.dumps(payload)


@dataclass(frozen=True)
class RpcResponse:
    result: str
    arguments: Dict[str, Any] = field(default_factory=dict)
    tag: Optional[int] = None

    @classmethod
    def from_json(cls, body: bytes) -> "RpcResponse":
        """
        Decode a response body.

        Raises DecodeError if the body is not JSON, is not an object, or
        carries no string "result" field.
        """
        try:
            data = json.loads(body)
        except (ValueError, UnicodeDecodeError) as e:
            raise DecodeError(f"Invalid JSON in RPC response: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError("RPC response is not a JSON object")

        result = data.get("result")
        if not isinstance(result, str):
            raise DecodeError("RPC response is missing a 'result' string")

        arguments = data.get("arguments")
        if arguments is None:
            arguments = {}
        elif not isinstance(arguments, dict):
            raise DecodeError("RPC response 'arguments' is not an object")

        return cls(result=result, arguments=arguments, tag=data.get("tag"))

    @property
    def ok(self) -> bool:
        return self.result == SUCCESS


@dataclass(frozen=True)
class RpcResult:
    """Outcome of a facade call: success with data, or failure with a reason."""
    ok: bool
    arguments: Optional[Dict[str, Any]] = None
    reason: Optional[str] = None

    @classmethod
    def from_response(cls, response: RpcResponse) -> "RpcResult":
        if response.ok:
            return cls(ok=True, arguments=response.arguments)
        return cls(ok=False, reason=response.result)

    @property
    def value(self):
        """Response arguments on success, the raw result string otherwise."""
        return self.arguments if self.ok else self.reason

    def __bool__(self) -> bool:
        return self.ok
