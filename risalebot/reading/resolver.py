"""Page resolver: turns chapter, interlude and global addresses into pages."""

import logging

from risalebot.models.command import MeaningMode
from risalebot.models.page import ChapterPage, InterludePage, Page, PageResult
from risalebot.models.toc import InterludeLocation
from risalebot.reading.index import ContentIndex

logger = logging.getLogger(__name__)


def _texts_for_mode(page: Page, meaning: MeaningMode) -> dict[str, str]:
    """Expose only the requested text variant.

    Open mode mirrors ``text_open`` into ``text_closed``; closed mode blanks
    ``text_open``.
    """
    if meaning == "closed":
        return {"text_open": "", "text_closed": page.text_closed}
    return {"text_open": page.text_open, "text_closed": page.text_open}


class PageResolver:
    """Fetches concrete pages through a ContentIndex.

    Every operation returns None instead of raising: unknown addresses and
    storage failures look the same to the caller.
    """

    def __init__(self, index: ContentIndex) -> None:
        self._index = index

    async def get_chapter_page(
        self, soz_no: int, page_index: int, meaning: MeaningMode = "open"
    ) -> ChapterPage | None:
        """Return page ``page_index`` of chapter ``soz_no``."""
        try:
            chapter = await self._index.get_chapter(soz_no)
            if chapter is None:
                return None

            page = next((p for p in chapter.pages if p.page_index == page_index), None)
            if page is None:
                return None

            return ChapterPage.model_validate({
                **page.model_dump(),
                **_texts_for_mode(page, meaning),
                "soz_no": soz_no,
                "page_index": page_index,
                "meaning": meaning,
                "scheme": "chapter",
            })
        except Exception:
            logger.exception("Error getting page %s from soz %s", page_index, soz_no)
            return None

    async def get_interlude_page(
        self, slug: str, page_index: int, meaning: MeaningMode = "open"
    ) -> InterludePage | None:
        """Return page ``page_index`` (1-based) of the interlude matching ``slug``."""
        try:
            entry = await self._index.find_interlude_entry(slug)
            if entry is None:
                logger.info("Interlude %r not found in TOC", slug)
                return None

            interlude = await self._index.get_interlude(entry)
            if interlude is None or not 1 <= page_index <= len(interlude.pages):
                return None

            page = interlude.pages[page_index - 1]
            return InterludePage.model_validate({
                **page.model_dump(),
                **_texts_for_mode(page, meaning),
                "soz_no": 0,
                "page_index": page_index,
                "meaning": meaning,
                "scheme": "interlude",
                "interlude_slug": entry.slug,
                "interlude_title": entry.title,
                "anchor_soz_no": entry.after_soz,
            })
        except Exception:
            logger.exception("Error getting interlude %s page %s", slug, page_index)
            return None

    async def get_global_page(
        self, global_id: int, meaning: MeaningMode = "open"
    ) -> PageResult | None:
        """Return the page stored under a global Sözler page id."""
        try:
            entry = (await self._index.get_page_map()).get(str(global_id))
            if entry is None:
                return None

            page: PageResult | None
            if isinstance(entry, InterludeLocation):
                page = await self.get_interlude_page(entry.slug, entry.page_index, meaning)
                if page is None:
                    return None
                return page.model_copy(update={
                    "global_id": global_id,
                    "scheme": "global",
                    "soz_no": entry.after_soz or 0,
                    "anchor_soz_no": entry.after_soz,
                    "interlude_title": entry.title or page.interlude_title,
                })

            page = await self.get_chapter_page(entry.soz_no, entry.page_index, meaning)
            if page is None:
                return None
            return page.model_copy(update={"global_id": global_id, "scheme": "global"})
        except Exception:
            logger.exception("Error getting Sözler page %s", global_id)
            return None
