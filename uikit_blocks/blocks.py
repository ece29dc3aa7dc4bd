"""
Blocks: Top-level layout units of a UI kit document.

Every block carries the owning app's ``appId`` and a ``blockId`` that is
unique within its document. Both are assigned by ``BlockBuilder`` when the
block is added; they are optional here so that parsed documents and builder
inputs can omit them.

The conditional block is the only recursive variant: its ``render`` field is
itself a block sequence, shown only when the ``when`` filters match.
"""

from typing import Annotated, List, Literal, Optional, Union
from pydantic import Field

from .elements import BlockElement, CodeEditorElement, ContextElement
from .objects import PlainTextObject, TextObject, UIKitModel


class BlockType:
    """Discriminant values for blocks."""
    SECTION = "section"
    DIVIDER = "divider"
    IMAGE = "image"
    ACTIONS = "actions"
    CONTEXT = "context"
    INPUT = "input"
    CONDITIONAL = "conditional"
    CODE_EDITOR = "code_editor"


class ConditionalBlockFiltersEngine:
    """Engines a conditional block can be restricted to."""
    ROCKETCHAT = "rocket.chat"
    LIVECHAT = "livechat"


# =============================================================================
# Base Block
# =============================================================================

class BaseBlock(UIKitModel):
    """Fields shared by every block variant."""
    app_id: Optional[str] = Field(None, alias="appId", description="Owning app, set by the builder")
    block_id: Optional[str] = Field(None, alias="blockId", description="Unique within the document")


# =============================================================================
# Block Variants
# =============================================================================

class SectionBlock(BaseBlock):
    type: Literal["section"] = BlockType.SECTION
    text: TextObject
    accessory: Optional[BlockElement] = None
    fields: Optional[List[TextObject]] = None


class DividerBlock(BaseBlock):
    type: Literal["divider"] = BlockType.DIVIDER


class ImageBlock(BaseBlock):
    type: Literal["image"] = BlockType.IMAGE
    image_url: str = Field(..., alias="imageUrl")
    alt_text: str = Field(..., alias="altText")
    title: Optional[PlainTextObject] = None


class ActionsBlock(BaseBlock):
    type: Literal["actions"] = BlockType.ACTIONS
    elements: List[BlockElement]


class ContextBlock(BaseBlock):
    type: Literal["context"] = BlockType.CONTEXT
    elements: List[ContextElement]


class InputBlock(BaseBlock):
    type: Literal["input"] = BlockType.INPUT
    label: PlainTextObject
    element: BlockElement
    optional: Optional[bool] = None


class ConditionalBlockFilters(UIKitModel):
    """Condition under which a conditional block's nested tree is shown."""
    engine: Optional[List[Literal["rocket.chat", "livechat"]]] = None


class ConditionalBlock(BaseBlock):
    type: Literal["conditional"] = BlockType.CONDITIONAL
    render: List["Block"]
    when: Optional[ConditionalBlockFilters] = None


class CodeEditorBlock(BaseBlock):
    type: Literal["code_editor"] = BlockType.CODE_EDITOR
    element: CodeEditorElement
    label: Optional[PlainTextObject] = None


Block = Annotated[
    Union[
        SectionBlock,
        DividerBlock,
        ImageBlock,
        ActionsBlock,
        ContextBlock,
        InputBlock,
        ConditionalBlock,
        CodeEditorBlock,
    ],
    Field(discriminator="type")
]

ConditionalBlock.model_rebuild()
