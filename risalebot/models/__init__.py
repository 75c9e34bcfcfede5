"""Data models for the Risale reading bot."""

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
from risalebot.models.page import (
    AddressingScheme,
    ChapterFile,
    ChapterPage,
    DictionaryEntry,
    Footnote,
    InterludeFile,
    InterludePage,
    Page,
    PageResult,
)
from risalebot.models.response import Button, NavigationInfo, RenderedResponse
from risalebot.models.toc import (
    ChapterEntry,
    ChapterLocation,
    InterludeEntry,
    InterludeLocation,
    PageMapEntry,
    PageRange,
    SubHeading,
    TocEntry,
    page_map_entry_from_dict,
    toc_entry_from_dict,
)

__all__ = [
    "AddressingScheme",
    "Button",
    "ChapterEntry",
    "ChapterFile",
    "ChapterLocation",
    "ChapterPage",
    "Command",
    "DictionaryEntry",
    "Footnote",
    "HelpCommand",
    "InterludeCommand",
    "InterludeEntry",
    "InterludeFile",
    "InterludeLocation",
    "InterludePage",
    "KelimeCommand",
    "MeaningMode",
    "NavigationInfo",
    "Page",
    "PageMapEntry",
    "PageRange",
    "PageResult",
    "RenderedResponse",
    "SozCommand",
    "SozlerPageCommand",
    "SubHeading",
    "TocCommand",
    "TocEntry",
    "page_map_entry_from_dict",
    "toc_entry_from_dict",
]
