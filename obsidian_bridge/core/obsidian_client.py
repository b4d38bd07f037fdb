"""Async client for the Obsidian Local REST API.

Every remote fault (transport error, non-2xx status, undecodable body) is
logged and collapsed to a sentinel: an empty list, ``None`` or ``False``.
Nothing in this module raises on I/O failure.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta, timezone
from typing import Optional
from urllib.parse import quote

import httpx

from obsidian_bridge.config import BridgeSettings
from obsidian_bridge.constants import DEFAULT_RECENT_DAYS, DEFAULT_RECENT_LIMIT
from obsidian_bridge.data_models import FileMetadata
from obsidian_bridge.models import NoteContentResponse, VaultListResponse

logger = logging.getLogger(__name__)

_REMOTE_ERRORS = (httpx.HTTPError, ValueError)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def vault_endpoint(path: Optional[str] = None) -> str:
    """Build the REST endpoint for a vault-relative path.

    Args:
        path: Vault-relative file or folder path. ``None`` or an empty path
            addresses the vault root.

    Returns:
        ``/vault/`` for the root, otherwise ``/vault/{path}/`` with each
        segment percent-encoded.

    Examples:
        >>> vault_endpoint()
        '/vault/'
        >>> vault_endpoint("Daily Notes/today.md")
        '/vault/Daily%20Notes/today.md/'
    """
    cleaned = (path or "").strip().strip("/")
    if not cleaned:
        return "/vault/"
    return f"/vault/{quote(cleaned, safe='/')}/"


class ObsidianClient:
    """Typed wrapper over the vault endpoints of the Local REST API.

    Owns its ``httpx.AsyncClient``; use it as an async context manager::

        async with ObsidianClient(settings) as client:
            files = await client.list_files()
    """

    def __init__(
        self,
        settings: BridgeSettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._clock = clock
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> ObsidianClient:
        self._client = httpx.AsyncClient(
            base_url=self._settings.base_url,
            headers={"Authorization": f"Bearer {self._settings.api_key}"},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            msg = "ObsidianClient must be used as an async context manager"
            raise RuntimeError(msg)
        return self._client

    # ==========================================================================
    # READ OPERATIONS
    # ==========================================================================

    async def list_files(self, path: Optional[str] = None) -> list[str]:
        """List files and folders at the vault root or inside ``path``.

        Folders are reported with a trailing ``/``. Returns an empty list on
        any failure.
        """
        endpoint = vault_endpoint(path)
        try:
            response = await self._http().get(endpoint)
            response.raise_for_status()
            listing = VaultListResponse.model_validate(response.json())
        except _REMOTE_ERRORS as exc:
            logger.warning("Failed to list files at path '%s': %s", path or "", exc)
            return []
        return listing.files

    async def get_file_content(self, path: str) -> Optional[str]:
        """Fetch the raw content of a file, or ``None`` if it cannot be read."""
        endpoint = vault_endpoint(path)
        try:
            response = await self._http().get(endpoint)
            if response.status_code == httpx.codes.NOT_FOUND:
                logger.info("File not found: '%s'", path)
                return None
            response.raise_for_status()
            note = NoteContentResponse.model_validate(response.json())
        except _REMOTE_ERRORS as exc:
            logger.warning("Failed to read file '%s': %s", path, exc)
            return None
        return note.content

    async def get_batch_file_contents(self, paths: Iterable[str]) -> dict[str, str]:
        """Read several files one after another.

        Paths that cannot be read are left out of the result. The mapping
        keeps the order in which paths were first given.
        """
        contents: dict[str, str] = {}
        for path in paths:
            if path in contents:
                continue
            content = await self.get_file_content(path)
            if content is not None:
                contents[path] = content
        return contents

    async def get_recent_changes(
        self,
        limit: int = DEFAULT_RECENT_LIMIT,
        days: int = DEFAULT_RECENT_DAYS,
    ) -> list[FileMetadata]:
        """Report the first ``limit`` entries of the root listing as recent changes.

        The REST API does not expose modification times, so the timestamps are
        synthetic: entry ``i`` is stamped ``i`` days before now. ``days`` is
        accepted for API compatibility; without real timestamps it filters nothing.
        """
        files = await self.list_files()
        now = self._clock()
        changes: list[FileMetadata] = []
        for offset, path in enumerate(files[:max(limit, 0)]):
            stamp = (now - timedelta(days=offset)).isoformat()
            changes.append(FileMetadata(path=path, modified=stamp, created=stamp))
        return changes

    # ==========================================================================
    # WRITE OPERATIONS
    # ==========================================================================

    async def create_file(self, path: str, content: str) -> bool:
        """Create (or overwrite) a file with ``PUT``. ``True`` on a 2xx reply."""
        return await self._write("PUT", path, content)

    async def update_file(self, path: str, content: str) -> bool:
        """Update a file with ``POST``. ``True`` on a 2xx reply."""
        return await self._write("POST", path, content)

    async def _write(self, method: str, path: str, content: str) -> bool:
        endpoint = vault_endpoint(path)
        try:
            response = await self._http().request(
                method,
                endpoint,
                content=content.encode("utf-8"),
                headers={"Content-Type": "text/plain; charset=utf-8"},
            )
        except httpx.HTTPError as exc:
            logger.warning("%s of file '%s' failed: %s", method, path, exc)
            return False

        if not response.is_success:
            logger.warning(
                "%s of file '%s' returned HTTP %s", method, path, response.status_code
            )
            return False
        return True
