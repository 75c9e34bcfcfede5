"""Shared fixtures: small Sözler corpora written to a temporary directory."""

import json
import random
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from risalebot.config import ReadingConfig, StorageConfig
from risalebot.reading.handler import ReadingHandler
from risalebot.reading.index import CHAPTER_FILES, ContentIndex
from risalebot.reading.navigation import NavigationCalculator
from risalebot.reading.resolver import PageResolver
from risalebot.storage.json_store import JsonStore

CorpusWriter = Callable[..., Path]


class CountingStore(JsonStore):
    """JsonStore that records every file it reads."""

    def __init__(self) -> None:
        super().__init__()
        self.reads: list[Path] = []

    async def read_file(self, path: str | Path) -> bytes:
        self.reads.append(Path(path))
        return await super().read_file(path)

    def count(self, name: str) -> int:
        return sum(1 for path in self.reads if path.name == name)


def make_page(global_id: int, page_index: int, soz_no: int = 0, **extra: Any) -> dict:
    label = f"Sayfa {global_id}"
    page = {
        "globalId": global_id,
        "pageIndex": page_index,
        "sozNo": soz_no,
        "url": f"https://example.org/sozler/{global_id}",
        "text_open": f"{label} metni [anlamlı]",
        "text_closed": f"{label} metni",
        "footnotes": [],
    }
    page.update(extra)
    return page


def chapter_entry(soz_no: int, title: str, start: int, end: int, **extra: Any) -> dict:
    entry = {
        "sozNo": soz_no,
        "title": f"{soz_no}. {title}",
        "slug": f"soz-{soz_no}",
        "range": {"startId": start, "endId": end, "count": end - start + 1},
    }
    entry.update(extra)
    return entry


def interlude_entry(
    slug: str,
    title: str,
    start: int,
    end: int,
    after_soz: int | None = None,
    before_soz: int | None = None,
    **extra: Any,
) -> dict:
    entry = {
        "type": "interlude",
        "title": title,
        "slug": slug,
        "range": {"startId": start, "endId": end, "count": end - start + 1},
        "afterSoz": after_soz,
        "beforeSoz": before_soz,
    }
    entry.update(extra)
    return entry


def _write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


@pytest.fixture
def make_corpus(tmp_path: Path) -> CorpusWriter:
    """Return a function that writes a corpus and returns its data directory."""

    def write(
        toc: list[dict] | None = None,
        page_map: dict[str, dict] | None = None,
        chapters: dict[int, list[dict]] | None = None,
        interludes: dict[str, list[dict]] | None = None,
        dictionary: dict[str, str] | None = None,
        root: Path | None = None,
    ) -> Path:
        data_dir = root or tmp_path / "risale"
        if toc is not None:
            _write_json(data_dir / "index" / "toc.json", {"items": toc})
        if page_map is not None:
            _write_json(data_dir / "index" / "page-map.json", page_map)
        if dictionary is not None:
            _write_json(data_dir / "index" / "dictionary.json", dictionary)
        for soz_no, pages in (chapters or {}).items():
            _write_json(
                data_dir / "sozler" / CHAPTER_FILES[soz_no],
                {"sozNo": soz_no, "title": f"{soz_no}. Söz", "pages": pages},
            )
        for slug, pages in (interludes or {}).items():
            _write_json(data_dir / "sozler" / f"{slug}.json", {"slug": slug, "pages": pages})
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    return write


@pytest.fixture
def corpus_dir(make_corpus: CorpusWriter) -> Path:
    """Three chapters, two interludes and a gap at global ids 5-6.

    Global order: Söz 1 (1-2), Lemeât (3-4), Söz 2 (7), Konferans (8),
    Söz 3 (9-10).
    """
    toc = [
        chapter_entry(
            1,
            "Birinci Söz",
            1,
            2,
            subheadings=[
                {
                    "title": "Bismillah",
                    "pageIndex": 1,
                    "subheadings": [{"title": "Birinci Nokta", "pageIndex": 2}],
                }
            ],
        ),
        interlude_entry("sozler-lemeat", "Lemeât", 3, 4, after_soz=1, before_soz=2),
        chapter_entry(2, "İkinci Söz", 7, 7),
        interlude_entry("konferans", "Konferans", 8, 8),
        chapter_entry(3, "Üçüncü Söz", 9, 10),
    ]
    page_map = {
        "1": {"sozNo": 1, "slug": "soz-1", "pageIndex": 1, "url": "u1"},
        "2": {"sozNo": 1, "slug": "soz-1", "pageIndex": 2, "url": "u2"},
        "3": {"type": "interlude", "slug": "sozler-lemeat", "pageIndex": 1,
              "title": "Lemeât", "afterSoz": 1, "beforeSoz": 2},
        "4": {"type": "interlude", "slug": "sozler-lemeat", "pageIndex": 2,
              "title": "Lemeât", "afterSoz": 1, "beforeSoz": 2},
        "7": {"sozNo": 2, "slug": "soz-2", "pageIndex": 1, "url": "u7"},
        "8": {"type": "interlude", "slug": "konferans", "pageIndex": 1,
              "title": "Konferans", "afterSoz": None, "beforeSoz": None},
        "9": {"sozNo": 3, "slug": "soz-3", "pageIndex": 1, "url": "u9"},
        "10": {"sozNo": 3, "slug": "soz-3", "pageIndex": 2, "url": "u10"},
    }
    chapters = {
        1: [
            make_page(
                1,
                1,
                1,
                footnotes=[{"n": 1, "text": "Birinci dipnot"}],
                dictionary=[{"word": "hayır", "meaning": "iyilik"}],
            ),
            make_page(2, 2, 1),
        ],
        2: [make_page(7, 1, 2)],
        3: [make_page(9, 1, 3), make_page(10, 2, 3)],
    }
    interludes = {
        "sozler-lemeat": [make_page(3, 1), make_page(4, 2)],
        "konferans": [make_page(8, 1)],
    }
    dictionary = {"âlem": "dünya", "hikmet": "gizli sebep", "nur": "ışık", "sabır": "dayanma"}
    return make_corpus(
        toc=toc,
        page_map=page_map,
        chapters=chapters,
        interludes=interludes,
        dictionary=dictionary,
    )


@pytest.fixture
def storage_config(corpus_dir: Path) -> StorageConfig:
    return StorageConfig().with_data_dir(corpus_dir)


@pytest.fixture
def store() -> CountingStore:
    return CountingStore()


@pytest.fixture
def index(store: CountingStore, storage_config: StorageConfig) -> ContentIndex:
    return ContentIndex(store, storage_config, ReadingConfig())


@pytest.fixture
def resolver(index: ContentIndex) -> PageResolver:
    return PageResolver(index)


@pytest.fixture
def navigator(index: ContentIndex) -> NavigationCalculator:
    return NavigationCalculator(index)


@pytest.fixture
def handler(index: ContentIndex) -> ReadingHandler:
    return ReadingHandler(index, ReadingConfig(), rng=random.Random(7))


@pytest.fixture
def linear_index(make_corpus: CorpusWriter, tmp_path: Path) -> ContentIndex:
    """Chapters 1 (ids 1-2), 2 (id 3) and 3 (ids 4-5) with a full page map."""
    toc = [
        chapter_entry(1, "Birinci Söz", 1, 2),
        chapter_entry(2, "İkinci Söz", 3, 3),
        chapter_entry(3, "Üçüncü Söz", 4, 5),
    ]
    locations = [(1, 1), (1, 2), (2, 1), (3, 1), (3, 2)]
    page_map = {
        str(global_id): {"sozNo": soz_no, "pageIndex": page_index}
        for global_id, (soz_no, page_index) in enumerate(locations, start=1)
    }
    chapters = {
        1: [make_page(1, 1, 1), make_page(2, 2, 1)],
        2: [make_page(3, 1, 2)],
        3: [make_page(4, 1, 3), make_page(5, 2, 3)],
    }
    data_dir = make_corpus(
        toc=toc, page_map=page_map, chapters=chapters, root=tmp_path / "linear"
    )
    return ContentIndex(JsonStore(), StorageConfig().with_data_dir(data_dir))
