"""Tests for the command parser."""

import pytest

from risalebot.models.command import (
    HelpCommand,
    InterludeCommand,
    KelimeCommand,
    SozCommand,
    SozlerPageCommand,
    TocCommand,
)
from risalebot.reading.parser import COMMAND_PATTERNS, format_command, parse_command


class TestPatternOrder:
    def test_priority_order(self) -> None:
        assert [pattern.name for pattern in COMMAND_PATTERNS] == [
            "help",
            "toc",
            "kelime",
            "soz_page",
            "soz_closed",
            "soz",
            "sozler_page",
            "interlude",
        ]

    def test_page_qualified_wins_over_chapter_only(self) -> None:
        # The chapter-only pattern also matches this text
        command = parse_command("risale söz 18 sayfa 3")
        assert command == SozCommand(soz_no=18, page_no=3, show_meaning="open")

    def test_closed_chapter_wins_over_chapter_only(self) -> None:
        assert parse_command("risale söz 18 kapalı") == SozCommand(
            soz_no=18, page_no=1, show_meaning="closed"
        )

    def test_keywords_win_over_interlude_slug(self) -> None:
        assert parse_command("risale kelimeler") == KelimeCommand()
        assert parse_command("risale liste") == TocCommand()


class TestHelp:
    @pytest.mark.parametrize("text", ["risale", "/risale", "RİSALE", "Risale", " risale "])
    def test_help_variants(self, text: str) -> None:
        assert parse_command(text) == HelpCommand()

    @pytest.mark.parametrize("text", ["", "merhaba", "risale sözler", "risale sayfa 421"])
    def test_unrecognized_falls_back_to_help(self, text: str) -> None:
        assert parse_command(text) == HelpCommand()


class TestTocAndWords:
    @pytest.mark.parametrize(
        "text", ["risale içindekiler", "/risaleicindekiler", "RİSALE LİSTE", "risale liste"]
    )
    def test_toc(self, text: str) -> None:
        assert parse_command(text) == TocCommand()

    @pytest.mark.parametrize(
        "text",
        ["risale kelime", "risale kelimeler", "/risalekelime", "/risalekelimeler", "RİSALE KELİME"],
    )
    def test_kelime(self, text: str) -> None:
        assert parse_command(text) == KelimeCommand()


class TestSozCommands:
    def test_natural_form_with_page_and_closed(self) -> None:
        assert parse_command("risale sözler 9 sayfa 3 kapalı") == SozCommand(
            soz_no=9, page_no=3, show_meaning="closed"
        )

    def test_concatenated_form_matches_natural_form(self) -> None:
        natural = parse_command("risale sözler 9 sayfa 3 kapalı")
        assert parse_command("/risalesozler9sayfa3kapali") == natural
        assert parse_command("/risalesozler 9 sayfa 3 kapali") == natural

    def test_chapter_only_defaults(self) -> None:
        assert parse_command("risale sözler 9") == SozCommand(
            soz_no=9, page_no=1, show_meaning="open"
        )

    @pytest.mark.parametrize("keyword", ["söz", "sözler", "sözleri"])
    def test_keyword_family(self, keyword: str) -> None:
        assert parse_command(f"risale {keyword} 7 sayfa 2") == SozCommand(soz_no=7, page_no=2)

    def test_no_bounds_check(self) -> None:
        assert parse_command("risale söz 99 sayfa 0") == SozCommand(soz_no=99, page_no=0)

    def test_open_is_default(self) -> None:
        command = parse_command("risale söz 3 sayfa 2")
        assert command.show_meaning == "open"  # type: ignore[union-attr]


class TestSozlerPageCommands:
    def test_natural_form(self) -> None:
        assert parse_command("risale sözler sayfa 385") == SozlerPageCommand(sozler_page_id=385)

    def test_closed(self) -> None:
        assert parse_command("risale sözler sayfa 385 kapalı") == SozlerPageCommand(
            sozler_page_id=385, show_meaning="closed"
        )

    def test_concatenated_form(self) -> None:
        assert parse_command("/risalesozlersayfa385kapali") == SozlerPageCommand(
            sozler_page_id=385, show_meaning="closed"
        )


class TestInterludeCommands:
    def test_natural_form(self) -> None:
        assert parse_command("risale lemeat sayfa 2") == InterludeCommand(slug="lemeat", page_no=2)

    def test_hyphenated_slug_closed(self) -> None:
        assert parse_command("risale sozler-lemeat sayfa 2 kapalı") == InterludeCommand(
            slug="sozler-lemeat", page_no=2, show_meaning="closed"
        )

    def test_concatenated_form(self) -> None:
        assert parse_command("/risalekonferanssayfa3kapali") == InterludeCommand(
            slug="konferans", page_no=3, show_meaning="closed"
        )

    def test_word_keyword_with_page_is_interlude(self) -> None:
        assert parse_command("risale kelime sayfa 2") == InterludeCommand(
            slug="kelime", page_no=2
        )

    def test_missing_page_is_help(self) -> None:
        assert parse_command("risale konferans") == HelpCommand()


class TestFormatCommand:
    @pytest.mark.parametrize(
        "command",
        [
            HelpCommand(),
            TocCommand(),
            KelimeCommand(),
            SozCommand(soz_no=9, page_no=3),
            SozCommand(soz_no=9, page_no=3, show_meaning="closed"),
            SozlerPageCommand(sozler_page_id=385),
            SozlerPageCommand(sozler_page_id=385, show_meaning="closed"),
            InterludeCommand(slug="sozler-lemeat", page_no=2, show_meaning="closed"),
        ],
    )
    def test_formatted_commands_parse_back(self, command: object) -> None:
        assert parse_command(format_command(command)) == command  # type: ignore[arg-type]

    def test_slash_forms(self) -> None:
        assert format_command(SozCommand(soz_no=2)) == "/risalesozler 2 sayfa 1"
        assert format_command(SozlerPageCommand(sozler_page_id=7)) == "/risalesozlersayfa 7"

    def test_unknown_command(self) -> None:
        with pytest.raises(ValueError):
            format_command(object())  # type: ignore[arg-type]
