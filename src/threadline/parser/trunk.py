"""Reconstruct the visible trunk of a conversation node graph.

A conversation's ``mapping`` is an id-keyed table of nodes whose ``parent``
and ``children`` fields are ids into that same table. Alternate branches
(edits, regenerations) hang off the trunk as siblings; only the first child
carrying a message is followed.
"""

import logging
from typing import Dict, List, Any, Optional

from ..models import Conversation, Message
from .content import extract_message_text, message_role
from .metadata import extract_conversation_metadata

logger = logging.getLogger(__name__)


def find_root_nodes(mapping: Dict[str, Any]) -> List[str]:
    """Find node ids with no parent, in mapping order."""
    root_nodes = []
    for node_id, node in mapping.items():
        if isinstance(node, dict) and node.get('parent') is None:
            root_nodes.append(node_id)
    return root_nodes


def find_root_node(mapping: Dict[str, Any]) -> Optional[str]:
    """Pick the root of the mapping.

    When several nodes claim to be the root, the first in archive key order
    wins. ``json`` preserves that order, so the choice is deterministic.
    """
    root_nodes = find_root_nodes(mapping)
    if len(root_nodes) > 1:
        logger.debug(f"Multiple root nodes {root_nodes}, using {root_nodes[0]}")
    return root_nodes[0] if root_nodes else None


def next_trunk_node(mapping: Dict[str, Any], node: Dict[str, Any]) -> Optional[str]:
    """Return the first child id present in the mapping and carrying a message."""
    children = node.get('children')
    if not isinstance(children, list):
        return None
    for child_id in children:
        if not isinstance(child_id, str):
            continue
        child = mapping.get(child_id)
        if isinstance(child, dict) and child.get('message') is not None:
            return child_id
    return None


def walk_trunk(mapping: Dict[str, Any], root_id: str) -> List[Message]:
    """Collect trunk messages starting at ``root_id``.

    Iterative so that very long conversations cannot exhaust the stack.
    """
    messages = []
    visited = set()
    node_id = root_id

    while node_id is not None:
        if node_id in visited:
            logger.warning(f"Cycle detected at node {node_id}, stopping walk")
            break
        visited.add(node_id)
        node = mapping[node_id]

        message = node.get('message')
        text = extract_message_text(message)
        if text is not None:
            messages.append(Message(
                id=message.get('id'),
                author=message_role(message),
                content=text,
                timestamp=message.get('create_time'),
            ))

        node_id = next_trunk_node(mapping, node)

    return messages


def parse_conversation(data: Dict[str, Any]) -> Optional[Conversation]:
    """Reduce one raw conversation to its trunk.

    Returns None when the conversation contributes nothing: no mapping, no
    root node, or no eligible message on the trunk.
    """
    metadata = extract_conversation_metadata(data)
    conversation_id = metadata['id']

    mapping = data.get('mapping')
    if not isinstance(mapping, dict) or not mapping:
        logger.debug(f"Conversation {conversation_id} has no mapping")
        return None

    root_id = find_root_node(mapping)
    if root_id is None:
        logger.debug(f"Conversation {conversation_id} has no root node")
        return None

    messages = walk_trunk(mapping, root_id)
    if not messages:
        logger.debug(f"Conversation {conversation_id} has no trunk messages")
        return None

    return Conversation(
        id=conversation_id,
        title=metadata['title'],
        create_time=metadata['create_time'],
        messages=tuple(messages),
    )
