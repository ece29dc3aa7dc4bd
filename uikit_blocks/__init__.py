"""UI kit blocks: typed block documents and a fluent builder for them."""

from .blocks import (
    ActionsBlock,
    Block,
    BlockType,
    CodeEditorBlock,
    ConditionalBlock,
    ConditionalBlockFilters,
    ConditionalBlockFiltersEngine,
    ContextBlock,
    DividerBlock,
    ImageBlock,
    InputBlock,
    SectionBlock,
)
from .builder import BlockBuilder
from .config import BuilderSettings, get_settings
from .elements import (
    BlockElement,
    BlockElementType,
    ButtonElement,
    CodeEditorElement,
    ImageElement,
    MultiStaticSelectElement,
    OverflowMenuElement,
    PlainTextInputElement,
    StaticSelectElement,
)
from .errors import BlockParseError, InvalidSettingsError, UIKitError
from .ids import IdGenerator, make_id_generator, uuid1_generator, uuid4_generator
from .logging_config import setup_logging
from .objects import MarkdownTextObject, OptionObject, PlainTextObject, TextObject, TextObjectType
from .serialization import block_to_dict, blocks_to_dicts, collect_action_ids, iter_blocks, parse_blocks

__all__ = [
    "BlockBuilder",
    "Block",
    "BlockType",
    "SectionBlock",
    "DividerBlock",
    "ImageBlock",
    "ActionsBlock",
    "ContextBlock",
    "InputBlock",
    "ConditionalBlock",
    "ConditionalBlockFilters",
    "ConditionalBlockFiltersEngine",
    "CodeEditorBlock",
    "BlockElement",
    "BlockElementType",
    "ButtonElement",
    "ImageElement",
    "OverflowMenuElement",
    "PlainTextInputElement",
    "StaticSelectElement",
    "MultiStaticSelectElement",
    "CodeEditorElement",
    "TextObject",
    "TextObjectType",
    "PlainTextObject",
    "MarkdownTextObject",
    "OptionObject",
    "IdGenerator",
    "make_id_generator",
    "uuid1_generator",
    "uuid4_generator",
    "BuilderSettings",
    "get_settings",
    "setup_logging",
    "UIKitError",
    "BlockParseError",
    "InvalidSettingsError",
    "block_to_dict",
    "blocks_to_dicts",
    "parse_blocks",
    "iter_blocks",
    "collect_action_ids",
]
