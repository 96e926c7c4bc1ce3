"""
Transmission RPC client.

Provides the TransmissionClient class, one async method per RPC method of
the Transmission daemon. Every call returns an RpcResult: ok with the
response arguments, or not ok with the raw result string the daemon
reported. Transport problems (bad credentials, network, malformed
responses) are raised as exceptions.

Usage:
    from transmission_session_rpc import TransmissionClient

    async with TransmissionClient("http://localhost:9091/transmission/rpc", "user", "pass") as client:
        result = await client.get_torrents()
        if result.ok:
            torrents = result.arguments["torrents"]

Full RPC documentation at:
https://github.com/transmission/transmission/blob/main/docs/rpc-spec.md
"""

import asyncio
import base64
from typing import Any, Dict, List, Optional, Union

from .config import Config
from .logger import logger
from .models import RpcResult
from .transport import SessionTransport


TRANSMISSION_URL = Config.TRANSMISSION_URL
TRANSMISSION_USERNAME = Config.TRANSMISSION_USERNAME
TRANSMISSION_PASSWORD = Config.TRANSMISSION_PASSWORD

DEFAULT_TORRENT_FIELDS = ["id", "name", "status", "downloadedEver", "uploadedEver"]

# int, list of ids or hash strings, or "recently-active"
Ids = Union[int, str, List[Union[int, str]]]


def _read_file(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


class TransmissionClient:
    def __init__(
        self,
        url: str = TRANSMISSION_URL,
        username: str = TRANSMISSION_USERNAME,
        password: str = TRANSMISSION_PASSWORD,
        transport: Optional[SessionTransport] = None,
        **transport_options,
    ):
        self.transport = transport or SessionTransport(url, username, password, **transport_options)

    async def __aenter__(self) -> "TransmissionClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self.transport.aclose()

    @property
    def session_id(self) -> Optional[str]:
        return self.transport.session_id

    async def _call(self, method: str, arguments: Optional[Dict[str, Any]] = None) -> RpcResult:
        response = await self.transport.invoke(method, arguments)
        result = RpcResult.from_response(response)
        if not result.ok:
            logger.debug(f"RPC {method} reported: {result.reason}")
        return result

    @staticmethod
    def _ids(ids: Optional[Ids]) -> Optional[Dict[str, Any]]:
        return None if ids is None else {"ids": ids}

    async def check_connection(self) -> bool:
        """Test if the connection to Transmission is working."""
        try:
            return (await self.session_stats()).ok
        except Exception as e:
            logger.error(f"Failed to connect to Transmission at {self.transport.url}: {e}")
            return False

    # -------------------------------------------------------------------------
    # Torrent Actions
    # -------------------------------------------------------------------------

    async def start_torrents(self, ids: Optional[Ids] = None) -> RpcResult:
        """Start torrents. Without ids, every torrent is started."""
        return await self._call("torrent-start", self._ids(ids))

    async def start_now_torrents(self, ids: Optional[Ids] = None) -> RpcResult:
        """Start torrents, bypassing the download queue."""
        return await self._call("torrent-start-now", self._ids(ids))

    async def stop_torrents(self, ids: Optional[Ids] = None) -> RpcResult:
        return await self._call("torrent-stop", self._ids(ids))

    async def verify_torrents(self, ids: Optional[Ids] = None) -> RpcResult:
        return await self._call("torrent-verify", self._ids(ids))

    async def reannounce_torrents(self, ids: Optional[Ids] = None) -> RpcResult:
        return await self._call("torrent-reannounce", self._ids(ids))

    # -------------------------------------------------------------------------
    # Torrent Mutators and Accessors
    # -------------------------------------------------------------------------

    async def set_torrents(self, fields: Dict[str, Any]) -> RpcResult:
        """
        Change torrent fields.

        Args:
            fields: Field values including the target ids,
                e.g. {"ids": [1, 2], "uploadLimited": True}
        """
        return await self._call("torrent-set", fields)

    async def get_torrents(self, ids: Ids = 0, fields: Optional[List[str]] = None) -> RpcResult:
        """
        Fetch torrent fields.

        Args:
            ids: Torrent ids; 0 selects all torrents
            fields: Field names, defaults to DEFAULT_TORRENT_FIELDS

        Returns:
            RpcResult whose arguments hold a "torrents" list
        """
        if fields is None:
            fields = list(DEFAULT_TORRENT_FIELDS)
        return await self._call("torrent-get", {"fields": fields, "ids": ids})

    async def add_torrent(self, keys: Dict[str, Any]) -> RpcResult:
        """
        Add a torrent.

        Args:
            keys: Must contain "filename" (path, URL or magnet link) or
                "metainfo" (base64-encoded .torrent content), plus any
                optional torrent-add keys such as "paused" or "download-dir"
        """
        if "filename" not in keys and "metainfo" not in keys:
            raise ValueError("torrent-add requires 'filename' or 'metainfo'")
        return await self._call("torrent-add", keys)

    async def add_torrent_file(self, path: str, **keys) -> RpcResult:
        """Add a torrent from a local .torrent file, read in a worker thread."""
        content = await asyncio.to_thread(_read_file, path)
        keys["metainfo"] = base64.b64encode(content).decode("ascii")
        return await self.add_torrent(keys)

    async def remove_torrent(self, keys: Dict[str, Any]) -> RpcResult:
        """Remove torrents, e.g. {"ids": [1, 2], "delete-local-data": False}."""
        return await self._call("torrent-remove", keys)

    async def move_torrent(self, keys: Dict[str, Any]) -> RpcResult:
        """
        Set a new location for torrents.

        Data is moved when "move" is true, otherwise Transmission looks for
        the files in the new location.
        """
        return await self._call("torrent-set-location", keys)

    async def rename_torrent(self, keys: Dict[str, Any]) -> RpcResult:
        """Rename a file or folder of one torrent: {"ids": 1, "path": ..., "name": ...}."""
        return await self._call("torrent-rename-path", keys)

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    async def set_session(self, keys: Dict[str, Any]) -> RpcResult:
        return await self._call("session-set", keys)

    async def get_session(self, fields: Optional[List[str]] = None) -> RpcResult:
        """Fetch session settings; all of them when fields is None."""
        return await self._call("session-get", None if fields is None else {"fields": fields})

    async def session_stats(self) -> RpcResult:
        return await self._call("session-stats")

    async def blocklist_update(self) -> RpcResult:
        return await self._call("blocklist-update")

    async def port_test(self) -> RpcResult:
        """Check whether the incoming peer port is reachable from outside."""
        return await self._call("port-test")

    async def disconnect(self) -> RpcResult:
        """Ask the daemon to shut down and forget the cached session id."""
        result = await self._call("session-close")
        self.transport.reset_session()
        return result

    # -------------------------------------------------------------------------
    # Queue
    # -------------------------------------------------------------------------

    async def queue_move_top(self, ids: Ids) -> RpcResult:
        return await self._call("queue-move-top", {"ids": ids})

    async def queue_move_up(self, ids: Ids) -> RpcResult:
        return await self._call("queue-move-up", {"ids": ids})

    async def queue_move_down(self, ids: Ids) -> RpcResult:
        return await self._call("queue-move-down", {"ids": ids})

    async def queue_move_bottom(self, ids: Ids) -> RpcResult:
        return await self._call("queue-move-bottom", {"ids": ids})

    # -------------------------------------------------------------------------
    # Misc
    # -------------------------------------------------------------------------

    async def free_space(self, path: str) -> RpcResult:
        """Free space in bytes of the directory at path on the daemon's host."""
        return await self._call("free-space", {"path": path})

    # Bandwidth groups require Transmission 4.0+
    async def group_set(self, keys: Dict[str, Any]) -> RpcResult:
        return await self._call("group-set", keys)

    async def group_get(self, group: Optional[Union[str, List[str]]] = None) -> RpcResult:
        return await self._call("group-get", None if group is None else {"group": group})
