"""Reading pipeline: command → page → navigation → rendered response."""

import logging
import random

from risalebot.config import AppConfig, ReadingConfig
from risalebot.models.command import (
    Command,
    HelpCommand,
    InterludeCommand,
    KelimeCommand,
    SozCommand,
    SozlerPageCommand,
    TocCommand,
)
from risalebot.models.page import PageResult
from risalebot.models.response import NavigationInfo, RenderedResponse
from risalebot.reading.index import ContentIndex
from risalebot.reading.navigation import NavigationCalculator
from risalebot.reading.parser import parse_command
from risalebot.reading.renderer import ResponseRenderer
from risalebot.reading.resolver import PageResolver
from risalebot.storage.json_store import JsonStore

logger = logging.getLogger(__name__)


class ReadingHandler:
    """Answers Risale reading commands.

    No exception escapes ``handle_command``; every path ends in a Turkish
    message for the user.

    Args:
        index: Content index shared by the resolver and the navigator.
        config: Reading settings.
        rng: Random source for word selection.
    """

    def __init__(
        self,
        index: ContentIndex,
        config: ReadingConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config or ReadingConfig()
        self._index = index
        self._resolver = PageResolver(index)
        self._navigator = NavigationCalculator(index)
        self._renderer = ResponseRenderer(self._config)
        self._rng = rng or random.Random()

    @classmethod
    def from_config(cls, config: AppConfig) -> "ReadingHandler":
        """Build the full pipeline from application configuration."""
        index = ContentIndex(JsonStore(), config.storage, config.reading)
        return cls(index, config.reading)

    @property
    def index(self) -> ContentIndex:
        return self._index

    @property
    def resolver(self) -> PageResolver:
        return self._resolver

    @property
    def navigator(self) -> NavigationCalculator:
        return self._navigator

    async def handle_text(self, text: str) -> RenderedResponse:
        """Parse a raw message and answer it."""
        return await self.handle_command(parse_command(text))

    async def handle_command(self, command: Command) -> RenderedResponse:
        """Resolve a parsed command into a rendered response."""
        try:
            if isinstance(command, HelpCommand):
                return self._renderer.render_help()
            if isinstance(command, TocCommand):
                return self._renderer.render_toc(await self._index.get_toc())
            if isinstance(command, KelimeCommand):
                return await self._handle_words()
            if isinstance(command, SozCommand):
                return await self._handle_soz(command)
            if isinstance(command, SozlerPageCommand):
                return await self._handle_sozler_page(command)
            if isinstance(command, InterludeCommand):
                return await self._handle_interlude(command)
            return self._renderer.render_help()
        except Exception:
            logger.exception("Error handling risale command %r", command)
            return self._renderer.render_error()

    async def _handle_words(self) -> RenderedResponse:
        dictionary = await self._index.get_dictionary()
        count = min(self._config.default_words_count, len(dictionary))
        selected = self._rng.sample(sorted(dictionary.items()), count)
        return self._renderer.render_words(selected)

    async def _handle_soz(self, command: SozCommand) -> RenderedResponse:
        chapter = await self._index.get_chapter_info(command.soz_no)
        if chapter is None:
            return self._renderer.render_error(
                self._renderer.chapter_not_found(command.soz_no)
            )

        page = await self._resolver.get_chapter_page(
            command.soz_no, command.page_no, command.show_meaning
        )
        if page is None:
            if not 1 <= command.page_no <= chapter.range.count:
                return self._renderer.render_error(
                    self._renderer.chapter_page_not_found(
                        command.soz_no, command.page_no, chapter.range.count
                    )
                )
            return self._renderer.render_error(self._renderer.page_not_found())

        return await self._render_page(page)

    async def _handle_sozler_page(self, command: SozlerPageCommand) -> RenderedResponse:
        page_id = command.sozler_page_id
        total_pages = await self._index.get_total_page_count()
        if not 1 <= page_id <= total_pages:
            return self._renderer.render_error(
                self._renderer.global_page_out_of_range(page_id, total_pages)
            )

        page = await self._resolver.get_global_page(page_id, command.show_meaning)
        if page is None:
            return self._renderer.render_error(self._renderer.global_page_not_found(page_id))

        return await self._render_page(page)

    async def _handle_interlude(self, command: InterludeCommand) -> RenderedResponse:
        page = await self._resolver.get_interlude_page(
            command.slug, command.page_no, command.show_meaning
        )
        if page is None:
            return self._renderer.render_error(
                self._renderer.interlude_not_found(command.slug, command.page_no)
            )
        return await self._render_page(page)

    async def _render_page(self, page: PageResult) -> RenderedResponse:
        next_info = await self._navigator.get_next_page_info(page)
        previous_info = await self._previous_page_info(page)
        return self._renderer.render_page(page, next_info, previous_info)

    async def _previous_page_info(self, page: PageResult) -> NavigationInfo | None:
        if page.scheme == "chapter":
            # Chapter pages are contiguous, so the previous page is index - 1
            if page.page_index <= 1:
                return None
            previous_no = page.page_index - 1
            return NavigationInfo(
                command=SozCommand(
                    soz_no=page.soz_no, page_no=previous_no, show_meaning=page.meaning
                ),
                description=f"{page.soz_no}. Söz {previous_no}. sayfasını açar",
            )
        return await self._navigator.get_previous_page_info(page)
