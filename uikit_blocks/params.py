"""
Builder Parameters: Caller-facing input shapes for each block and element.

Each block parameter model is its block variant minus the ``type``
discriminant, which the builder supplies. Each element parameter model is its
element variant minus ``type``; actionable elements keep ``action_id`` as an
optional override of the generated identifier.
"""

from typing import List, Optional
from pydantic import Field

from .elements import BlockElement, ButtonStyle, CodeEditorElement, ContextElement
from .objects import OptionObject, PlainTextObject, TextObject, UIKitModel


# =============================================================================
# Block Parameters
# =============================================================================

class BaseBlockParam(UIKitModel):
    # app_id is accepted but always replaced by the builder's own
    app_id: Optional[str] = Field(None, alias="appId")
    block_id: Optional[str] = Field(None, alias="blockId")


class SectionBlockParam(BaseBlockParam):
    text: TextObject
    accessory: Optional[BlockElement] = None
    fields: Optional[List[TextObject]] = None


class ImageBlockParam(BaseBlockParam):
    image_url: str = Field(..., alias="imageUrl")
    alt_text: str = Field(..., alias="altText")
    title: Optional[PlainTextObject] = None


class ActionsBlockParam(BaseBlockParam):
    elements: List[BlockElement]


class ContextBlockParam(BaseBlockParam):
    elements: List[ContextElement]


class InputBlockParam(BaseBlockParam):
    label: PlainTextObject
    element: BlockElement
    optional: Optional[bool] = None


class CodeEditorBlockParam(BaseBlockParam):
    element: CodeEditorElement
    label: Optional[PlainTextObject] = None


# =============================================================================
# Element Parameters
# =============================================================================

class ActionableElementParam(UIKitModel):
    action_id: Optional[str] = Field(None, alias="actionId")


class ButtonElementParam(ActionableElementParam):
    text: TextObject
    value: Optional[str] = None
    url: Optional[str] = None
    style: Optional[ButtonStyle] = None


class OverflowMenuElementParam(ActionableElementParam):
    options: List[OptionObject]


class PlainTextInputElementParam(ActionableElementParam):
    placeholder: Optional[PlainTextObject] = None
    initial_value: Optional[str] = Field(None, alias="initialValue")
    multiline: Optional[bool] = None


class StaticSelectElementParam(ActionableElementParam):
    placeholder: PlainTextObject
    options: List[OptionObject]
    initial_value: Optional[str] = Field(None, alias="initialValue")


class MultiStaticSelectElementParam(ActionableElementParam):
    placeholder: PlainTextObject
    options: List[OptionObject]
    initial_value: Optional[List[str]] = Field(None, alias="initialValue")


class ImageElementParam(UIKitModel):
    image_url: str = Field(..., alias="imageUrl")
    alt_text: str = Field(..., alias="altText")


class CodeEditorElementParam(UIKitModel):
    language: Optional[str] = None
    initial_value: Optional[str] = Field(None, alias="initialValue")
    placeholder: Optional[PlainTextObject] = None
