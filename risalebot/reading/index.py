"""Content index: table of contents, page map and lazily loaded chapter files."""

import bisect
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from pydantic import ValidationError

from risalebot.config import ReadingConfig, StorageConfig
from risalebot.models.page import ChapterFile, InterludeFile
from risalebot.models.toc import (
    ChapterEntry,
    InterludeEntry,
    PageMapEntry,
    TocEntry,
    page_map_entry_from_dict,
    toc_entry_from_dict,
)
from risalebot.storage.json_store import JsonStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Chapter number to file name inside the sozler directory
CHAPTER_FILES: dict[int, str] = {
    1: "01-birinci-soz.json",
    2: "02-ikinci-soz.json",
    3: "03-ucuncu-soz.json",
    4: "04-dorduncu-soz.json",
    5: "05-besinci-soz.json",
    6: "06-altinci-soz.json",
    7: "07-yedinci-soz.json",
    8: "08-sekizinci-soz.json",
    9: "09-dokuzuncu-soz.json",
    10: "10-onuncu-soz.json",
    11: "11-on-birinci-soz.json",
    12: "12-on-ikinci-soz.json",
    13: "13-on-ucuncu-soz.json",
    14: "14-on-dorduncu-soz.json",
    15: "15-on-besinci-soz.json",
    16: "16-on-altinci-soz.json",
    17: "17-on-yedinci-soz.json",
    18: "18-on-sekizinci-soz.json",
    19: "19-on-dokuzuncu-soz.json",
    20: "20-yirminci-soz.json",
    21: "21-yirmi-birinci-soz.json",
    22: "22-yirmi-ikinci-soz.json",
    23: "23-yirmi-ucuncu-soz.json",
    24: "24-yirmi-dorduncu-soz.json",
    25: "25-yirmi-besinci-soz.json",
    26: "26-yirmi-altinci-soz.json",
    27: "27-yirmi-yedinci-soz.json",
    28: "28-yirmi-sekizinci-soz.json",
    29: "29-yirmi-dokuzuncu-soz.json",
    30: "30-otuzuncu-soz.json",
    31: "31-otuz-birinci-soz.json",
    32: "32-otuz-ikinci-soz.json",
    33: "33-otuz-ucuncu-soz.json",
}


class ContentIndex:
    """Read-only lookups over the Sözler corpus.

    The TOC, page map, dictionary and every chapter or interlude file are
    loaded on first use and kept for the lifetime of the instance. Two
    concurrent first accesses may both load the same file; both assign the
    same result. Failed loads are not cached.

    Args:
        store: JSON file reader.
        storage: Locations of the data files.
        reading: Reading settings (fallback page count).
    """

    def __init__(
        self,
        store: JsonStore,
        storage: StorageConfig | None = None,
        reading: ReadingConfig | None = None,
    ) -> None:
        self._store = store
        self._storage = storage or StorageConfig()
        self._reading = reading or ReadingConfig()

        self._toc: list[TocEntry] | None = None
        self._page_map: dict[str, PageMapEntry] | None = None
        self._sorted_ids: list[int] | None = None
        self._dictionary: dict[str, str] | None = None
        self._chapters: dict[int, ChapterFile] = {}
        self._interludes: dict[str, InterludeFile] = {}

    async def _load(self, path: Path, parse: Callable[[Any], T]) -> T | None:
        """Load and validate one data file; None on any failure."""
        data = await self._store.load_or_default(path, None)
        if data is None:
            return None
        try:
            return parse(data)
        except (ValidationError, AttributeError, TypeError, ValueError):
            logger.exception("Malformed data in %s", path)
            return None

    # ── Table of contents ─────────────────────────────────────────────────

    async def get_toc(self) -> list[TocEntry]:
        """Return TOC entries in global page order; empty if unavailable."""
        if self._toc is not None:
            return self._toc

        toc = await self._load(self._storage.toc_path, _parse_toc)
        if toc is None:
            return []

        logger.debug("Loaded TOC with %d entries", len(toc))
        self._toc = toc
        return toc

    async def is_valid_chapter_no(self, soz_no: int) -> bool:
        return await self.get_chapter_info(soz_no) is not None

    async def get_chapter_info(self, soz_no: int) -> ChapterEntry | None:
        for entry in await self.get_toc():
            if isinstance(entry, ChapterEntry) and entry.soz_no == soz_no:
                return entry
        return None

    async def get_next_chapter_entry(self, soz_no: int) -> ChapterEntry | None:
        """Return the chapter that follows ``soz_no`` in TOC order.

        Interludes between the two chapters are skipped.
        """
        toc = await self.get_toc()
        found = False
        for entry in toc:
            if not isinstance(entry, ChapterEntry):
                continue
            if found:
                return entry
            found = entry.soz_no == soz_no
        return None

    async def find_interlude_entry(self, slug: str) -> InterludeEntry | None:
        """Find an interlude by exact slug, else by hyphenated suffix.

        ``lemeat`` matches an entry slugged ``sozler-lemeat``; when several
        entries share the suffix the first in TOC order wins.
        """
        interludes = [
            entry for entry in await self.get_toc() if isinstance(entry, InterludeEntry)
        ]
        for entry in interludes:
            if entry.slug == slug:
                return entry
        for entry in interludes:
            if entry.slug.endswith(f"-{slug}"):
                return entry
        return None

    # ── Page map ──────────────────────────────────────────────────────────

    async def get_page_map(self) -> dict[str, PageMapEntry]:
        """Return the global id → location map; empty if unavailable."""
        if self._page_map is not None:
            return self._page_map

        page_map = await self._load(self._storage.page_map_path, _parse_page_map)
        if page_map is None:
            return {}

        logger.debug("Loaded page map with %d entries", len(page_map))
        self._page_map = page_map
        self._sorted_ids = sorted(int(key) for key in page_map)
        return page_map

    async def _global_ids(self) -> list[int]:
        await self.get_page_map()
        return self._sorted_ids or []

    async def get_total_page_count(self) -> int:
        """Return the highest populated global id.

        Falls back to the configured page count when the map is empty.
        """
        ids = await self._global_ids()
        if not ids:
            return self._reading.fallback_page_count
        return ids[-1]

    async def find_next_available_global_id(self, after_id: int) -> int | None:
        """Smallest populated global id strictly greater than ``after_id``."""
        ids = await self._global_ids()
        position = bisect.bisect_right(ids, after_id)
        if position < len(ids):
            return ids[position]
        return None

    async def find_previous_available_global_id(self, before_id: int) -> int | None:
        """Largest populated global id strictly less than ``before_id``."""
        ids = await self._global_ids()
        position = bisect.bisect_left(ids, before_id)
        if position > 0:
            return ids[position - 1]
        return None

    # ── Content files ─────────────────────────────────────────────────────

    async def get_chapter(self, soz_no: int) -> ChapterFile | None:
        """Load a chapter file; None for unknown chapters or failed reads."""
        if soz_no in self._chapters:
            return self._chapters[soz_no]

        filename = CHAPTER_FILES.get(soz_no)
        if filename is None:
            return None

        chapter = await self._load(
            Path(self._storage.sozler_dir) / filename, ChapterFile.model_validate
        )
        if chapter is None:
            return None

        self._chapters[soz_no] = chapter
        return chapter

    async def get_interlude(self, entry: InterludeEntry) -> InterludeFile | None:
        """Load the file backing an interlude TOC entry."""
        if entry.slug in self._interludes:
            return self._interludes[entry.slug]

        interlude = await self._load(
            Path(self._storage.sozler_dir) / f"{entry.slug}.json",
            InterludeFile.model_validate,
        )
        if interlude is None:
            return None

        self._interludes[entry.slug] = interlude
        return interlude

    async def get_dictionary(self) -> dict[str, str]:
        """Return the word → meaning dictionary; empty if unavailable."""
        if self._dictionary is not None:
            return self._dictionary

        dictionary = await self._load(self._storage.dictionary_path, _parse_dictionary)
        if dictionary is None:
            return {}

        self._dictionary = dictionary
        return dictionary


def _parse_toc(data: Any) -> list[TocEntry]:
    items = data.get("items", []) if isinstance(data, dict) else data
    return [toc_entry_from_dict(item) for item in items or []]


def _parse_page_map(data: Any) -> dict[str, PageMapEntry]:
    """Parse the page map, skipping entries that are not usable."""
    page_map: dict[str, PageMapEntry] = {}
    for key, value in dict(data).items():
        try:
            int(key)
            page_map[str(key)] = page_map_entry_from_dict(value)
        except (ValidationError, AttributeError, TypeError, ValueError):
            logger.warning("Skipping malformed page map entry %r", key)
    return page_map


def _parse_dictionary(data: Any) -> dict[str, str]:
    return {str(word): str(meaning) for word, meaning in dict(data).items()}
