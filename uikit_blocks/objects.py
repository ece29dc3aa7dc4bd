"""
Composition Objects: Text and option objects shared by blocks and elements.

Text objects wrap displayed text and tell the renderer whether it is plain
text or markdown. Option objects describe the choices offered by overflow
menus and select elements.
"""

from typing import Annotated, Literal, Union
from pydantic import BaseModel, ConfigDict, Field


class TextObjectType:
    """Discriminant values for text objects."""
    PLAINTEXT = "plain_text"
    MARKDOWN = "mrkdwn"


class UIKitModel(BaseModel):
    """Base for every UI kit record: wire aliases, no unknown fields."""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


# =============================================================================
# Text Objects
# =============================================================================

class PlainTextObject(UIKitModel):
    """Plain text, optionally rendering emoji shortcodes."""
    type: Literal["plain_text"] = TextObjectType.PLAINTEXT
    text: str = Field(..., description="Displayed text")
    emoji: bool = Field(False, description="Render :emoji: shortcodes")


class MarkdownTextObject(UIKitModel):
    """Markdown-formatted text."""
    type: Literal["mrkdwn"] = TextObjectType.MARKDOWN
    text: str = Field(..., description="Markdown source")


TextObject = Annotated[
    Union[PlainTextObject, MarkdownTextObject],
    Field(discriminator="type")
]


# =============================================================================
# Option Objects
# =============================================================================

class OptionObject(UIKitModel):
    """A single choice in an overflow menu or select element."""
    text: TextObject
    value: str = Field(..., description="Value reported back when chosen")
