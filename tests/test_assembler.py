import pytest

from threadline.exceptions import ArchiveFormatError
from threadline.parser import assemble_conversations, assemble_with_report


def test_keeps_order_and_drops_empty_conversations(chain):
    archive = [
        chain('first', [('user', 'one')]),
        chain('system-only', [('system', 'setup')]),
        {'id': 'no-mapping', 'title': 'x', 'create_time': 1.0},
        chain('second', [('user', 'two')]),
    ]
    conversations = assemble_conversations(archive)
    assert [c.id for c in conversations] == ['first', 'second']


def test_report_counts_dropped_conversations(chain):
    archive = [chain('a', [('user', 'x')]), chain('b', [('system', 'y')])]
    conversations, dropped = assemble_with_report(archive)
    assert len(conversations) == 1
    assert dropped == 1


def test_empty_archive_yields_empty_list():
    assert assemble_conversations([]) == []


def test_archive_must_be_a_list(chain):
    with pytest.raises(ArchiveFormatError, match="must be a list"):
        assemble_conversations(chain('a', [('user', 'x')]))


def test_archive_entries_must_be_objects(chain):
    with pytest.raises(ArchiveFormatError, match="entry 1"):
        assemble_conversations([chain('a', [('user', 'x')]), "not a conversation"])


def test_malformed_children_do_not_abort_batch(chain, node):
    broken = {
        'id': 'broken', 'title': 't', 'create_time': 1.0,
        'mapping': {
            'root': node('root', children=[['x'], 'u']),
            'u': node('u', parent='root', role='user', parts=['hi']),
        },
    }
    bad_children = chain('bad', [('user', 'x')])
    bad_children['mapping']['root']['children'] = 3

    conversations = assemble_conversations([broken, bad_children, chain('ok', [('user', 'fine')])])

    assert [c.id for c in conversations] == ['broken', 'ok']
