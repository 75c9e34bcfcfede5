"""Table of contents and page map models."""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _IndexModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class PageRange(_IndexModel):
    """Global page range covered by a chapter or interlude."""

    start_id: int = Field(alias="startId")
    end_id: int = Field(alias="endId")
    count: int


class SubHeading(_IndexModel):
    """A heading inside a chapter or interlude.

    ``page_index`` is local to the owning unit; subheadings nest recursively.
    """

    title: str
    page_index: int = Field(default=1, alias="pageIndex")
    subheadings: list[SubHeading] = Field(default_factory=list)


class ChapterEntry(_IndexModel):
    """TOC summary of a numbered Söz."""

    type: Literal["soz"] = "soz"
    soz_no: int = Field(alias="sozNo")
    title: str
    slug: str = ""
    range: PageRange
    subheadings: list[SubHeading] = Field(default_factory=list)


class InterludeEntry(_IndexModel):
    """TOC summary of an interlude placed between or around chapters.

    Both anchors are None for independent sections.
    """

    type: Literal["interlude"] = "interlude"
    title: str
    slug: str
    range: PageRange
    before_soz: int | None = Field(default=None, alias="beforeSoz")
    after_soz: int | None = Field(default=None, alias="afterSoz")
    subheadings: list[SubHeading] = Field(default_factory=list)


TocEntry = Union[ChapterEntry, InterludeEntry]


class ChapterLocation(_IndexModel):
    """Page map entry pointing into a chapter file."""

    soz_no: int = Field(alias="sozNo")
    slug: str = ""
    page_index: int = Field(alias="pageIndex")
    url: str = ""


class InterludeLocation(_IndexModel):
    """Page map entry pointing into an interlude file."""

    type: Literal["interlude"] = "interlude"
    slug: str
    page_index: int = Field(alias="pageIndex")
    url: str = ""
    title: str = ""
    after_soz: int | None = Field(default=None, alias="afterSoz")
    before_soz: int | None = Field(default=None, alias="beforeSoz")


PageMapEntry = Union[ChapterLocation, InterludeLocation]


def _without_type(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if key != "type"}


def toc_entry_from_dict(data: dict[str, Any]) -> TocEntry:
    """Build a TOC entry, choosing the variant from the ``type`` key.

    Chapter entries are stored without a ``type`` key.

    Raises:
        pydantic.ValidationError: If the entry is malformed.
    """
    if data.get("type") == "interlude":
        return InterludeEntry.model_validate(data)
    return ChapterEntry.model_validate(_without_type(data))


def page_map_entry_from_dict(data: dict[str, Any]) -> PageMapEntry:
    """Build a page map entry, choosing the variant from the ``type`` key."""
    if data.get("type") == "interlude":
        return InterludeLocation.model_validate(data)
    return ChapterLocation.model_validate(_without_type(data))
