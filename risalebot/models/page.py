"""Page content models: stored pages, chapter/interlude files and resolved pages."""

from typing import Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from risalebot.models.command import MeaningMode
from risalebot.models.toc import PageRange

# How a page was addressed by the user
AddressingScheme = Literal["chapter", "global", "interlude"]


class Footnote(BaseModel):
    """A footnote attached to a page."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    marker: str = Field(alias="n")
    text: str

    @field_validator("marker", mode="before")
    @classmethod
    def _marker_to_str(cls, value: object) -> str:
        return str(value)


class DictionaryEntry(BaseModel):
    """A word and its meaning, scoped to one page."""

    model_config = ConfigDict(frozen=True)

    word: str
    meaning: str


class Page(BaseModel):
    """A single page as stored in a chapter or interlude file.

    ``text_open`` carries the inline meaning annotations, ``text_closed`` is
    the same text with annotations stripped.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    global_id: int | None = Field(
        default=None,
        validation_alias=AliasChoices("global_id", "globalId", "sozlerId"),
    )
    page_index: int = Field(default=1, alias="pageIndex")
    soz_no: int = Field(default=0, alias="sozNo")  # 0 for interludes
    url: str = ""
    text_open: str = ""
    text_closed: str = ""
    footnotes: list[Footnote] = Field(default_factory=list)
    dictionary: list[DictionaryEntry] = Field(default_factory=list)


class ChapterFile(BaseModel):
    """Contents of one ``NN-<name>-soz.json`` file."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    soz_no: int = Field(alias="sozNo")
    title: str = ""
    slug: str = ""
    range: PageRange | None = None
    pages: list[Page] = Field(default_factory=list)


class InterludeFile(BaseModel):
    """Contents of one ``<slug>.json`` interlude file."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    slug: str = ""
    pages: list[Page] = Field(default_factory=list)


class ChapterPage(Page):
    """A resolved page belonging to a numbered Söz."""

    kind: Literal["chapter"] = "chapter"
    meaning: MeaningMode = "open"
    scheme: AddressingScheme = "chapter"


class InterludePage(Page):
    """A resolved page belonging to an interlude section.

    ``anchor_soz_no`` is the chapter the interlude follows, None when the
    section stands on its own.
    """

    kind: Literal["interlude"] = "interlude"
    meaning: MeaningMode = "open"
    scheme: AddressingScheme = "interlude"
    interlude_slug: str
    interlude_title: str = ""
    anchor_soz_no: int | None = None


PageResult = Union[ChapterPage, InterludePage]
