"""
Block Builder: Fluent assembly of UI kit block documents.

This module provides the BlockBuilder class that accumulates an ordered
sequence of blocks for one owning app, so callers never hand-construct the
tagged union tree.

Key Features:
- One ``add_*_block`` method per block variant, chainable
- One ``new_*`` factory per element and text object variant
- ``appId`` stamped on every block, ``blockId``/``actionId`` generated when absent
- Conditional blocks nesting another builder or a raw block sequence
- Pluggable identifier generator for deterministic tests
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Type, TypeVar, Union
import logging

from pydantic import BaseModel

from .blocks import (
    ActionsBlock,
    BaseBlock,
    Block,
    CodeEditorBlock,
    ConditionalBlock,
    ConditionalBlockFilters,
    ContextBlock,
    DividerBlock,
    ImageBlock,
    InputBlock,
    SectionBlock,
)
from .elements import (
    ButtonElement,
    CodeEditorElement,
    ImageElement,
    MultiStaticSelectElement,
    OverflowMenuElement,
    PlainTextInputElement,
    StaticSelectElement,
)
from .ids import IdGenerator, make_id_generator
from .objects import MarkdownTextObject, PlainTextObject
from .params import (
    ActionableElementParam,
    ActionsBlockParam,
    ButtonElementParam,
    CodeEditorBlockParam,
    CodeEditorElementParam,
    ContextBlockParam,
    ImageBlockParam,
    ImageElementParam,
    InputBlockParam,
    MultiStaticSelectElementParam,
    OverflowMenuElementParam,
    PlainTextInputElementParam,
    SectionBlockParam,
    StaticSelectElementParam,
)

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=BaseModel)
E = TypeVar("E", bound=BaseModel)

ParamInput = Union[BaseModel, Mapping[str, Any]]


def _coerce(param_cls: Type[P], info: ParamInput) -> P:
    """
    Accept a parameter model as-is, validate anything else into one.

    A built variant model (e.g. a ``SectionBlock`` from ``parse_blocks``) is
    accepted too: its fields minus ``type`` become the parameters.
    """
    if isinstance(info, param_cls):
        return info
    if isinstance(info, BaseModel):
        info = {name: value for name, value in _fields_of(info).items() if name != "type"}
    return param_cls.model_validate(info)


def _fields_of(param: BaseModel) -> Dict[str, Any]:
    """Shallow field values that were supplied, keeping nested models intact."""
    return {name: value for name, value in param if value is not None}


class BlockBuilder:
    """
    Accumulates an ordered block sequence for one owning app.

    Each ``add_*_block`` call appends exactly one block and returns the
    builder. ``get_blocks`` returns the live list, not a copy.

    Example:
        >>> builder = BlockBuilder("app-1")
        >>> _ = builder.add_divider_block().add_section_block(
        ...     {"text": builder.new_plain_text_object("hi")}
        ... )
        >>> [block.type for block in builder.get_blocks()]
        ['divider', 'section']
        >>> builder.get_blocks()[1].app_id
        'app-1'
    """

    def __init__(self, app_id: str, id_generator: Optional[IdGenerator] = None):
        """
        Initialize an empty builder.

        Args:
            app_id: Owning app identifier stamped on every added block
            id_generator: Source of block and action ids. Defaults to the
                UUID generator selected by ``BuilderSettings.id_version``.
        """
        self.app_id = app_id
        self.id_generator = id_generator or make_id_generator()
        self.blocks: List[Block] = []

    # =========================================================================
    # Blocks
    # =========================================================================

    def add_section_block(self, block: Union[SectionBlockParam, Mapping[str, Any]]) -> "BlockBuilder":
        param = _coerce(SectionBlockParam, block)
        self._add_block(SectionBlock(**_fields_of(param)))
        return self

    def add_image_block(self, block: Union[ImageBlockParam, Mapping[str, Any]]) -> "BlockBuilder":
        param = _coerce(ImageBlockParam, block)
        self._add_block(ImageBlock(**_fields_of(param)))
        return self

    def add_divider_block(self) -> "BlockBuilder":
        self._add_block(DividerBlock())
        return self

    def add_actions_block(self, block: Union[ActionsBlockParam, Mapping[str, Any]]) -> "BlockBuilder":
        param = _coerce(ActionsBlockParam, block)
        self._add_block(ActionsBlock(**_fields_of(param)))
        return self

    def add_context_block(self, block: Union[ContextBlockParam, Mapping[str, Any]]) -> "BlockBuilder":
        param = _coerce(ContextBlockParam, block)
        self._add_block(ContextBlock(**_fields_of(param)))
        return self

    def add_input_block(self, block: Union[InputBlockParam, Mapping[str, Any]]) -> "BlockBuilder":
        param = _coerce(InputBlockParam, block)
        self._add_block(InputBlock(**_fields_of(param)))
        return self

    def add_conditional_block(
        self,
        inner_blocks: Union["BlockBuilder", Sequence[Block]],
        condition: Optional[Union[ConditionalBlockFilters, Mapping[str, Any]]] = None,
    ) -> "BlockBuilder":
        """
        Append a block whose nested tree renders only when ``condition`` holds.

        Args:
            inner_blocks: Another builder (its blocks are read now) or a block sequence
            condition: Filters for the nested tree; omitted means always shown

        Returns:
            This builder
        """
        if isinstance(inner_blocks, BlockBuilder):
            render = inner_blocks.get_blocks()
        else:
            render = list(inner_blocks)

        if condition is not None:
            condition = _coerce(ConditionalBlockFilters, condition)

        self._add_block(ConditionalBlock(render=render, when=condition))
        return self

    def add_code_editor_block(self, block: Union[CodeEditorBlockParam, Mapping[str, Any]]) -> "BlockBuilder":
        param = _coerce(CodeEditorBlockParam, block)
        self._add_block(CodeEditorBlock(**_fields_of(param)))
        return self

    def get_blocks(self) -> List[Block]:
        """Return the accumulated blocks in insertion order (live list)."""
        return self.blocks

    # =========================================================================
    # Text Objects
    # =========================================================================

    def new_plain_text_object(self, text: str, emoji: bool = False) -> PlainTextObject:
        return PlainTextObject(text=text, emoji=emoji)

    def new_markdown_text_object(self, text: str) -> MarkdownTextObject:
        return MarkdownTextObject(text=text)

    # =========================================================================
    # Elements
    # =========================================================================

    def new_button_element(self, info: Union[ButtonElementParam, Mapping[str, Any]]) -> ButtonElement:
        return self._new_actionable_element(ButtonElement, _coerce(ButtonElementParam, info))

    def new_image_element(self, info: Union[ImageElementParam, Mapping[str, Any]]) -> ImageElement:
        param = _coerce(ImageElementParam, info)
        return ImageElement(**_fields_of(param))

    def new_overflow_menu_element(
        self, info: Union[OverflowMenuElementParam, Mapping[str, Any]]
    ) -> OverflowMenuElement:
        return self._new_actionable_element(OverflowMenuElement, _coerce(OverflowMenuElementParam, info))

    def new_plain_text_input_element(
        self, info: Union[PlainTextInputElementParam, Mapping[str, Any]]
    ) -> PlainTextInputElement:
        return self._new_actionable_element(PlainTextInputElement, _coerce(PlainTextInputElementParam, info))

    def new_static_select_element(
        self, info: Union[StaticSelectElementParam, Mapping[str, Any]]
    ) -> StaticSelectElement:
        return self._new_actionable_element(StaticSelectElement, _coerce(StaticSelectElementParam, info))

    def new_multi_static_select_element(
        self, info: Union[MultiStaticSelectElementParam, Mapping[str, Any]]
    ) -> MultiStaticSelectElement:
        return self._new_actionable_element(
            MultiStaticSelectElement, _coerce(MultiStaticSelectElementParam, info)
        )

    def new_code_editor_element(
        self, info: Union[CodeEditorElementParam, Mapping[str, Any]]
    ) -> CodeEditorElement:
        param = _coerce(CodeEditorElementParam, info)
        return CodeEditorElement(**_fields_of(param))

    # =========================================================================
    # Internals
    # =========================================================================

    def _new_actionable_element(self, element_cls: Type[E], param: ActionableElementParam) -> E:
        fields = _fields_of(param)
        if not fields.get("action_id"):
            fields["action_id"] = self._generate_action_id()
        return element_cls(**fields)

    def _add_block(self, block: BaseBlock) -> None:
        if not block.block_id:
            block.block_id = self._generate_block_id()

        block.app_id = self.app_id

        self.blocks.append(block)
        logger.debug("Added %s block %s for app %s", block.type, block.block_id, self.app_id)

    def _generate_block_id(self) -> str:
        return self.id_generator()

    def _generate_action_id(self) -> str:
        action_id = self.id_generator()
        logger.debug("Generated action id %s", action_id)
        return action_id
