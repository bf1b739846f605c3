"""Shared builders for raw conversation export fixtures."""

import pytest


def make_node(node_id, parent=None, children=(), role=None, parts=None, create_time=None):
    """Build a raw mapping node; ``role=None`` gives a node without a message."""
    node = {'id': node_id, 'parent': parent, 'children': list(children)}
    if role is not None:
        message = {
            'id': f"msg-{node_id}",
            'author': {'role': role},
            'create_time': create_time,
        }
        if parts is not None:
            message['content'] = {'content_type': 'text', 'parts': list(parts)}
        node['message'] = message
    return node


def make_chain(conversation_id, turns, title="Test chat", create_time=1700000000.0):
    """Build a single-branch conversation: an empty root followed by ``turns``.

    ``turns`` is a list of ``(role, text)`` pairs.
    """
    ids = ['root'] + [f"n{i}" for i in range(1, len(turns) + 1)]
    mapping = {}
    for index, node_id in enumerate(ids):
        parent = ids[index - 1] if index else None
        children = [ids[index + 1]] if index + 1 < len(ids) else []
        if index == 0:
            mapping[node_id] = make_node(node_id, parent, children)
        else:
            role, text = turns[index - 1]
            mapping[node_id] = make_node(
                node_id, parent, children, role=role, parts=[text],
                create_time=create_time + index
            )
    return {
        'id': conversation_id,
        'title': title,
        'create_time': create_time,
        'mapping': mapping,
    }


@pytest.fixture
def node():
    return make_node


@pytest.fixture
def chain():
    return make_chain


@pytest.fixture
def hello_conversation():
    return make_chain('conv-hello', [('user', 'Hello'), ('assistant', 'Hi there')])
