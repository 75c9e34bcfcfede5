"""Command parser for Risale reading requests.

Free-form text is normalized and tested against ``COMMAND_PATTERNS`` in
order; the first matching pattern builds the command. Page-qualified
chapter patterns come before the chapter-only pattern, and the interlude
pattern is tried last because any slug-like token matches it.
"""

import logging
import re
from collections.abc import Callable
from typing import NamedTuple

from risalebot.models.command import (
    Command,
    HelpCommand,
    InterludeCommand,
    KelimeCommand,
    MeaningMode,
    SozCommand,
    SozlerPageCommand,
    TocCommand,
)
from risalebot.reading.text import normalize_text

logger = logging.getLogger(__name__)

# "risale soz", "risale sozler", "risale sozleri" and the concatenated forms
_SOZ_KEYWORD = r"risale\s*(?:sozleri|sozler|soz)"

CLOSED_TOKEN = "kapali"


class CommandPattern(NamedTuple):
    """A named pattern and the builder that turns its match into a command."""

    name: str
    regex: re.Pattern[str]
    build: Callable[[re.Match[str]], Command]


def _meaning(token: str | None) -> MeaningMode:
    return "closed" if token == CLOSED_TOKEN else "open"


def _build_interlude(match: re.Match[str]) -> Command:
    slug = match.group(1) or match.group(4)
    page_no = match.group(2) or match.group(5)
    closed = match.group(3) or match.group(6)
    return InterludeCommand(slug=slug, page_no=int(page_no), show_meaning=_meaning(closed))


COMMAND_PATTERNS: tuple[CommandPattern, ...] = (
    CommandPattern(
        "help",
        re.compile(r"^risale$"),
        lambda m: HelpCommand(),
    ),
    CommandPattern(
        "toc",
        re.compile(r"^risale\s*(?:icindekiler|liste)$"),
        lambda m: TocCommand(),
    ),
    CommandPattern(
        "kelime",
        re.compile(r"^risale\s*kelime(?:ler)?$"),
        lambda m: KelimeCommand(),
    ),
    CommandPattern(
        "soz_page",
        re.compile(_SOZ_KEYWORD + r"\s*(\d+)\s*sayfa\s*(\d+)(?:\s*(kapali))?"),
        lambda m: SozCommand(
            soz_no=int(m.group(1)),
            page_no=int(m.group(2)),
            show_meaning=_meaning(m.group(3)),
        ),
    ),
    CommandPattern(
        "soz_closed",
        re.compile(_SOZ_KEYWORD + r"\s*(\d+)\s*(kapali)"),
        lambda m: SozCommand(soz_no=int(m.group(1)), page_no=1, show_meaning="closed"),
    ),
    CommandPattern(
        "soz",
        re.compile(_SOZ_KEYWORD + r"\s*(\d+)"),
        lambda m: SozCommand(soz_no=int(m.group(1)), page_no=1, show_meaning="open"),
    ),
    CommandPattern(
        "sozler_page",
        re.compile(_SOZ_KEYWORD + r"\s*sayfa\s*(\d+)(?:\s*(kapali))?"),
        lambda m: SozlerPageCommand(
            sozler_page_id=int(m.group(1)),
            show_meaning=_meaning(m.group(2)),
        ),
    ),
    CommandPattern(
        "interlude",
        re.compile(
            r"^risale\s+([a-z0-9-]+)\s+sayfa\s+(\d+)(?:\s+(kapali))?$"
            r"|^risale([a-z0-9-]+)sayfa(\d+)(kapali)?$"
        ),
        _build_interlude,
    ),
)


def parse_command(text: str) -> Command:
    """Parse a user message into a reading command.

    Never raises; text that matches no pattern becomes a help command.
    Numbers are not range-checked here.

    Args:
        text: Raw message text (slash or natural-language form).

    Returns:
        The first matching command, or HelpCommand.
    """
    normalized = normalize_text(text)

    for pattern in COMMAND_PATTERNS:
        match = pattern.regex.search(normalized)
        if match:
            logger.debug("Matched %r as %s", normalized, pattern.name)
            return pattern.build(match)

    return HelpCommand()


def format_command(command: Command) -> str:
    """Render a command as the canonical slash string users can send back.

    Raises:
        ValueError: If the command type is unknown.
    """
    suffix = f" {CLOSED_TOKEN}" if getattr(command, "show_meaning", "open") == "closed" else ""

    if isinstance(command, HelpCommand):
        return "/risale"
    if isinstance(command, TocCommand):
        return "/risaleicindekiler"
    if isinstance(command, KelimeCommand):
        return "/risalekelimeler"
    if isinstance(command, SozCommand):
        return f"/risalesozler {command.soz_no} sayfa {command.page_no}{suffix}"
    if isinstance(command, SozlerPageCommand):
        return f"/risalesozlersayfa {command.sozler_page_id}{suffix}"
    if isinstance(command, InterludeCommand):
        return f"/risale {command.slug} sayfa {command.page_no}{suffix}"
    raise ValueError(f"Unknown command type: {type(command).__name__}")
