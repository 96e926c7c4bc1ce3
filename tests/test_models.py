import importlib
import json

import pytest

from transmission_session_rpc import config as config_module
from transmission_session_rpc.errors import DecodeError
from transmission_session_rpc.models import RpcRequest, RpcResponse, RpcResult


class TestRpcResponse:

    def test_success(self):
        response = RpcResponse.from_json(b'{"result": "success", "arguments": {"torrents": []}, "tag": 7}')
        assert response.ok
        assert response.arguments == {"torrents": []}
        assert response.tag == 7

    def test_failure_without_arguments(self):
        response = RpcResponse.from_json(b'{"result": "no such torrent"}')
        assert not response.ok
        assert response.arguments == {}

    @pytest.mark.parametrize("body", [
        b"",
        b"not json",
        b"[1, 2]",
        b'{"result": 1}',
        b'{"result": "success", "arguments": []}',
        b"\xff\xfe",
    ])
    def test_malformed(self, body):
        with pytest.raises(DecodeError):
            RpcResponse.from_json(body)

    def test_decode_error_is_value_error(self):
        with pytest.raises(ValueError):
            RpcResponse.from_json(b"{")


class TestRpcRequest:

    def test_envelope(self):
        request = RpcRequest("torrent-get", {"ids": 0})
        assert json.loads(request.to_json()) == {"method": "torrent-get", "arguments": {"ids": 0}}

    def test_empty_arguments_are_sent(self):
        assert json.loads(RpcRequest("session-set", {}).to_json()) == {"method": "session-set", "arguments": {}}


class TestRpcResult:

    def test_from_failed_response(self):
        result = RpcResult.from_response(RpcResponse(result="duplicate torrent"))
        assert result == RpcResult(ok=False, reason="duplicate torrent")


class TestConfig:

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TRANSMISSION_URL", "http://nas:9091/transmission/rpc")
        monkeypatch.setenv("MAX_SESSION_RETRIES", "2")
        monkeypatch.setenv("VERBOSE", "true")
        try:
            module = importlib.reload(config_module)
            assert module.Config.TRANSMISSION_URL == "http://nas:9091/transmission/rpc"
            assert module.Config.MAX_SESSION_RETRIES == 2
            assert module.Config.VERBOSE is True
        finally:
            monkeypatch.undo()
            importlib.reload(config_module)

    def test_debug_sets_default_log_level(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        try:
            module = importlib.reload(config_module)
            assert module.Config.DEBUG is True
            assert module.Config.LOG_LEVEL == "DEBUG"
        finally:
            monkeypatch.undo()
            importlib.reload(config_module)
