"""Asynchronous JSON file access for the Sözler data directory."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

import aiofiles
import chardet

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StorageError(Exception):
    """Raised when a data file cannot be read or decoded."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class JsonStore:
    """Reads UTF-8 (or detected-encoding) JSON files without blocking the loop.

    Relative paths are resolved against ``base_dir`` when one is given.

    Args:
        base_dir: Optional directory that relative paths are resolved against.
    """

    def __init__(self, base_dir: str | Path | None = None) -> None:
        self._base_dir = Path(base_dir) if base_dir else None

    def resolve(self, path: str | Path) -> Path:
        candidate = Path(path)
        if self._base_dir is not None and not candidate.is_absolute():
            return self._base_dir / candidate
        return candidate

    async def read_file(self, path: str | Path) -> bytes:
        """Read raw bytes from a file.

        Raises:
            StorageError: If the file is missing or unreadable.
        """
        full_path = self.resolve(path)
        try:
            async with aiofiles.open(full_path, mode="rb") as f:
                return await f.read()
        except OSError as exc:
            raise StorageError(full_path, exc.strerror or str(exc)) from exc

    async def read_text(self, path: str | Path) -> str:
        """Read a file as text.

        Tries UTF-8 first, then uses chardet for fallback detection.
        """
        raw_bytes = await self.read_file(path)
        try:
            return raw_bytes.decode("utf-8")
        except UnicodeDecodeError:
            pass

        detected = chardet.detect(raw_bytes)
        encoding = detected.get("encoding") or "utf-8"
        confidence = detected.get("confidence", 0)

        if confidence < 0.7:
            logger.warning(
                "Low confidence encoding detection for %s: %s (%.0f%%)",
                self.resolve(path),
                encoding,
                confidence * 100,
            )

        try:
            return raw_bytes.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            return raw_bytes.decode("utf-8", errors="replace")

    async def read_json(self, path: str | Path) -> Any:
        """Read and parse a JSON file.

        Raises:
            StorageError: If the file is missing, unreadable or not valid JSON.
        """
        text = await self.read_text(path)
        try:
            return json.loads(text)
        except ValueError as exc:
            raise StorageError(self.resolve(path), f"invalid JSON: {exc}") from exc

    async def load_or_default(self, path: str | Path, default: T) -> Any | T:
        """Read a JSON file, returning ``default`` on any storage failure.

        The failure is logged, never raised.
        """
        try:
            return await self.read_json(path)
        except StorageError as exc:
            logger.warning("Could not load %s: %s", exc.path, exc.reason)
            return default
