"""Structured reading commands produced by the command parser."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

MeaningMode = Literal["open", "closed"]


class _CommandBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class HelpCommand(_CommandBase):
    """Show the reading help text."""

    type: Literal["help"] = "help"


class TocCommand(_CommandBase):
    """Show the table of contents."""

    type: Literal["toc"] = "toc"


class KelimeCommand(_CommandBase):
    """Show random words from the Sözler dictionary."""

    type: Literal["kelime"] = "kelime"


class SozCommand(_CommandBase):
    """Open a page of a chapter by its local page number."""

    type: Literal["soz"] = "soz"
    soz_no: int = Field(alias="sozNo")
    page_no: int = Field(default=1, alias="pageNo")
    show_meaning: MeaningMode = Field(default="open", alias="showMeaning")


class SozlerPageCommand(_CommandBase):
    """Open a page by its global Sözler page number."""

    type: Literal["sozlerPage"] = "sozlerPage"
    sozler_page_id: int = Field(alias="sozlerPageId")
    show_meaning: MeaningMode = Field(default="open", alias="showMeaning")


class InterludeCommand(_CommandBase):
    """Open a page of an interlude section by slug."""

    type: Literal["interlude"] = "interlude"
    slug: str
    page_no: int = Field(default=1, alias="pageNo")
    show_meaning: MeaningMode = Field(default="open", alias="showMeaning")


Command = Annotated[
    Union[
        HelpCommand,
        TocCommand,
        KelimeCommand,
        SozCommand,
        SozlerPageCommand,
        InterludeCommand,
    ],
    Field(discriminator="type"),
]
