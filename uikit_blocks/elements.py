"""
Block Elements: Interactive and display leaves nested inside blocks.

Interactive and input elements (button, overflow menu, plain text input,
static select, multi static select) carry an ``actionId`` that the interaction
dispatcher uses to correlate a user action with the element that produced it.
Image and code editor elements are display-only and never carry one.
"""

from typing import Annotated, List, Literal, Optional, Union
from pydantic import Field

from .objects import MarkdownTextObject, OptionObject, PlainTextObject, TextObject, UIKitModel


class BlockElementType:
    """Discriminant values for block elements."""
    BUTTON = "button"
    IMAGE = "image"
    OVERFLOW_MENU = "overflow"
    PLAIN_TEXT_INPUT = "plain_text_input"
    STATIC_SELECT = "static_select"
    MULTI_STATIC_SELECT = "multi_static_select"
    CODE_EDITOR = "code_editor"


ButtonStyle = Literal["primary", "danger"]


class ActionableElement(UIKitModel):
    """Base for elements that report user interactions."""
    action_id: str = Field(..., alias="actionId", description="Correlates interactions with this element")


# =============================================================================
# Interactive Elements
# =============================================================================

class ButtonElement(ActionableElement):
    type: Literal["button"] = BlockElementType.BUTTON
    text: TextObject
    value: Optional[str] = None
    url: Optional[str] = None
    style: Optional[ButtonStyle] = None


class OverflowMenuElement(ActionableElement):
    type: Literal["overflow"] = BlockElementType.OVERFLOW_MENU
    options: List[OptionObject]


# =============================================================================
# Input Elements
# =============================================================================

class PlainTextInputElement(ActionableElement):
    type: Literal["plain_text_input"] = BlockElementType.PLAIN_TEXT_INPUT
    placeholder: Optional[PlainTextObject] = None
    initial_value: Optional[str] = Field(None, alias="initialValue")
    multiline: Optional[bool] = None


class StaticSelectElement(ActionableElement):
    type: Literal["static_select"] = BlockElementType.STATIC_SELECT
    placeholder: PlainTextObject
    options: List[OptionObject]
    initial_value: Optional[str] = Field(None, alias="initialValue")


class MultiStaticSelectElement(ActionableElement):
    type: Literal["multi_static_select"] = BlockElementType.MULTI_STATIC_SELECT
    placeholder: PlainTextObject
    options: List[OptionObject]
    initial_value: Optional[List[str]] = Field(None, alias="initialValue")


# =============================================================================
# Display Elements
# =============================================================================

class ImageElement(UIKitModel):
    type: Literal["image"] = BlockElementType.IMAGE
    image_url: str = Field(..., alias="imageUrl")
    alt_text: str = Field(..., alias="altText")


class CodeEditorElement(UIKitModel):
    type: Literal["code_editor"] = BlockElementType.CODE_EDITOR
    language: Optional[str] = None
    initial_value: Optional[str] = Field(None, alias="initialValue")
    placeholder: Optional[PlainTextObject] = None


# =============================================================================
# Element Unions
# =============================================================================

BlockElement = Annotated[
    Union[
        ButtonElement,
        ImageElement,
        OverflowMenuElement,
        PlainTextInputElement,
        StaticSelectElement,
        MultiStaticSelectElement,
        CodeEditorElement,
    ],
    Field(discriminator="type")
]

ContextElement = Annotated[
    Union[PlainTextObject, MarkdownTextObject, ImageElement],
    Field(discriminator="type")
]
