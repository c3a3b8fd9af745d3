"""Asynchronous filesystem primitives used by the store engine."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    """Operations the store engine needs from storage."""

    async def exists(self, path: Path) -> bool:
        ...

    async def ensure_dir(self, path: Path) -> None:
        ...

    async def read_text(self, path: Path) -> str:
        ...

    async def write_text(self, path: Path, content: str) -> None:
        ...


class LocalFileSystem:
    """:class:`FileSystem` backed by :mod:`pathlib`.

    Each blocking call runs in a worker thread via :func:`asyncio.to_thread`.
    ``OSError`` from the underlying call propagates unchanged. Undecodable
    bytes are read as U+FFFD so they surface as malformed JSON.
    """

    encoding = "utf-8"

    async def exists(self, path: Path) -> bool:
        return await asyncio.to_thread(path.exists)

    async def ensure_dir(self, path: Path) -> None:
        logger.debug("Ensuring directory %s", path)
        await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)

    async def read_text(self, path: Path) -> str:
        return await asyncio.to_thread(path.read_text, encoding=self.encoding, errors="replace")

    async def write_text(self, path: Path, content: str) -> None:
        await asyncio.to_thread(path.write_text, content, encoding=self.encoding)
