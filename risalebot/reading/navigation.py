"""Next/previous page navigation across chapter and global page schemes."""

from risalebot.models.command import Command, SozCommand, SozlerPageCommand
from risalebot.models.page import PageResult
from risalebot.models.response import NavigationInfo
from risalebot.reading.index import ContentIndex


def _uses_global_scheme(page: PageResult) -> bool:
    return page.scheme != "chapter" and page.global_id is not None


class NavigationCalculator:
    """Computes navigation commands for a resolved page.

    In the global scheme the next id is looked up among populated page map
    keys. In the chapter scheme the global alternative is ``current + 1``
    and is only checked against the total page count, so it may point at a
    gap or at an interlude page.
    """

    def __init__(self, index: ContentIndex) -> None:
        self._index = index

    async def get_next_page_info(self, page: PageResult) -> NavigationInfo | None:
        """Return the next page command, or None at the end of the corpus."""
        if _uses_global_scheme(page):
            next_id = await self._index.find_next_available_global_id(page.global_id)
            if next_id is None:
                return None
            return NavigationInfo(
                command=SozlerPageCommand(sozler_page_id=next_id, show_meaning=page.meaning),
                description=f"Sözler Kitabı {next_id}. sayfasını açar",
            )

        chapter = await self._index.get_chapter_info(page.soz_no)
        if chapter is None:
            return None

        current_id = page.global_id
        if current_id is None:
            current_id = chapter.range.start_id + (page.page_index - 1)
        total_pages = await self._index.get_total_page_count()

        if page.page_index < chapter.range.count:
            next_page_no = page.page_index + 1
            return NavigationInfo(
                command=SozCommand(
                    soz_no=page.soz_no, page_no=next_page_no, show_meaning=page.meaning
                ),
                description=f"{page.soz_no}. Söz {next_page_no}. sayfasını açar",
                global_command=self._global_candidate(current_id + 1, total_pages, page),
            )

        next_chapter = await self._index.get_next_chapter_entry(page.soz_no)
        if next_chapter is None:
            return None

        return NavigationInfo(
            command=SozCommand(
                soz_no=next_chapter.soz_no, page_no=1, show_meaning=page.meaning
            ),
            description=f"{next_chapter.soz_no}. Söz 1. sayfasını açar",
            global_command=self._global_candidate(current_id + 1, total_pages, page),
        )

    async def get_previous_page_info(self, page: PageResult) -> NavigationInfo | None:
        """Return the previous page in the global scheme.

        Chapter-scheme pages return None; their previous page is simply
        ``page_index - 1`` of the same chapter.
        """
        if not _uses_global_scheme(page):
            return None

        previous_id = await self._index.find_previous_available_global_id(page.global_id)
        if previous_id is None:
            return None
        return NavigationInfo(
            command=SozlerPageCommand(sozler_page_id=previous_id, show_meaning=page.meaning),
            description=f"Sözler Kitabı {previous_id}. sayfasını açar",
        )

    @staticmethod
    def _global_candidate(
        candidate_id: int, total_pages: int, page: PageResult
    ) -> Command | None:
        if candidate_id > total_pages:
            return None
        return SozlerPageCommand(sozler_page_id=candidate_id, show_meaning=page.meaning)
