"""Risale reading engine: parsing, indexing, resolution, navigation, rendering."""

from risalebot.reading.handler import ReadingHandler
from risalebot.reading.index import CHAPTER_FILES, ContentIndex
from risalebot.reading.navigation import NavigationCalculator
from risalebot.reading.parser import COMMAND_PATTERNS, format_command, parse_command
from risalebot.reading.renderer import ResponseRenderer
from risalebot.reading.resolver import PageResolver
from risalebot.reading.text import normalize_text, sanitize_whatsapp

__all__ = [
    "CHAPTER_FILES",
    "COMMAND_PATTERNS",
    "ContentIndex",
    "NavigationCalculator",
    "PageResolver",
    "ReadingHandler",
    "ResponseRenderer",
    "format_command",
    "normalize_text",
    "parse_command",
    "sanitize_whatsapp",
]
