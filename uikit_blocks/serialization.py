"""
Serialization: Wire dicts in and out, and walking block trees.

Blocks dump by alias (``appId``, ``blockId``, ``actionId`` ...) with unset
optional fields omitted, so each dict carries exactly the fields of its
variant. Conditional blocks nest without a depth limit, so tree walks use an
explicit stack rather than recursion.
"""

from typing import Any, Dict, Iterable, Iterator, List, Union
import json
import logging

from pydantic import TypeAdapter, ValidationError

from .blocks import ActionsBlock, Block, ConditionalBlock, InputBlock, SectionBlock
from .errors import BlockParseError

logger = logging.getLogger(__name__)

_block_list_adapter = TypeAdapter(List[Block])


# =============================================================================
# Dumping
# =============================================================================

def _dump_shallow(block: Block) -> Dict[str, Any]:
    # render trees are filled in by block_to_dict, never by pydantic-core
    exclude = {"render"} if isinstance(block, ConditionalBlock) else None
    return block.model_dump(mode="json", by_alias=True, exclude_none=True, exclude=exclude)


def block_to_dict(block: Block) -> Dict[str, Any]:
    """
    Dump one block, nested elements and render trees included, to a wire dict.

    pydantic-core's serializer gives up a few hundred levels down, so each
    block is dumped without its ``render`` tree and the trees are rebuilt
    with an explicit stack.
    """
    root = _dump_shallow(block)
    stack = [(block, root)]
    while stack:
        current, dumped = stack.pop()
        if not isinstance(current, ConditionalBlock):
            continue

        children = []
        for child in current.render:
            child_dict = _dump_shallow(child)
            children.append(child_dict)
            stack.append((child, child_dict))
        dumped["render"] = children
    return root


def blocks_to_dicts(blocks: Iterable[Block]) -> List[Dict[str, Any]]:
    return [block_to_dict(block) for block in blocks]


# =============================================================================
# Parsing
# =============================================================================

def parse_blocks(data: Union[str, List[Dict[str, Any]]]) -> List[Block]:
    """
    Validate wire data back into typed blocks.

    Args:
        data: A JSON array string, or an already decoded list of block dicts

    Returns:
        Typed blocks in document order

    Raises:
        BlockParseError: If the JSON is malformed or any block fails validation

    Example:
        >>> blocks = parse_blocks('[{"type": "divider", "blockId": "b1"}]')
        >>> blocks[0].block_id
        'b1'
    """
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise BlockParseError(f"Invalid block JSON: {e}") from e

    try:
        return _block_list_adapter.validate_python(data)
    except ValidationError as e:
        logger.warning(f"Rejected block payload with {e.error_count()} validation error(s)")
        raise BlockParseError("Block payload failed validation", errors=e.errors()) from e


# =============================================================================
# Traversal
# =============================================================================

def iter_blocks(blocks: Iterable[Block]) -> Iterator[Block]:
    """
    Yield every block in a tree, depth-first and pre-order.

    Conditional blocks are yielded before the blocks of their ``render`` tree.
    """
    stack = list(reversed(list(blocks)))
    while stack:
        block = stack.pop()
        yield block
        if isinstance(block, ConditionalBlock):
            stack.extend(reversed(block.render))


def collect_action_ids(blocks: Iterable[Block]) -> List[str]:
    """Action ids of every actionable element reachable in a tree, in walk order."""
    action_ids = []
    for block in iter_blocks(blocks):
        if isinstance(block, SectionBlock):
            elements = [block.accessory] if block.accessory else []
        elif isinstance(block, ActionsBlock):
            elements = block.elements
        elif isinstance(block, InputBlock):
            elements = [block.element]
        else:
            continue

        for element in elements:
            action_id = getattr(element, "action_id", None)
            if action_id:
                action_ids.append(action_id)
    return action_ids
