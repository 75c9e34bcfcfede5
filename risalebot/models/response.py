"""Models returned to the message delivery layer."""

from pydantic import BaseModel, Field

from risalebot.models.command import Command


class NavigationInfo(BaseModel):
    """Where the reader can go from the current page.

    ``global_command`` is an optional shortcut in the global page scheme; it
    is computed arithmetically and may point at an unpopulated page id.
    """

    command: Command
    description: str
    global_command: Command | None = None


class Button(BaseModel):
    """An interactive reply button. ``id`` is the command it sends back."""

    id: str
    title: str


class RenderedResponse(BaseModel):
    """Display text plus optional buttons and navigation commands."""

    text: str
    buttons: list[Button] = Field(default_factory=list)
    nav_commands: dict[str, str] = Field(default_factory=dict)
