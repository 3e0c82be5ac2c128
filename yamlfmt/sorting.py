"""Ordering of the documents of a stream.

Documents are ranked by kind, then metadata.namespace, then metadata.name.
At every tier a document that has the field sorts before one that does not,
two documents with the field compare by its raw string value, and two
documents without it fall through to the next tier. Ties keep their input
order.
"""

from yamlfmt.nodes import ScalarNode
from yamlfmt.path import find

SORT_FIELDS = (
    ('kind', ('kind',)),
    ('namespace', ('metadata', 'namespace')),
    ('name', ('metadata', 'name')),
)


def field_value(document, path):
    """Return the scalar value at path, or None if there is none.

    A path that resolves to a mapping or a sequence is treated as missing.
    """
    node = find(document, path)
    if not isinstance(node, ScalarNode):
        return None
    return node.value


def document_key(document):
    key = []
    for _, path in SORT_FIELDS:
        value = field_value(document, path)
        if value is None:
            key.append((1, ''))
        else:
            key.append((0, value))
    return tuple(key)


def sort_documents(documents):
    """Return a new list holding documents in canonical order."""
    return sorted(documents, key=document_key)


def compare_documents(a, b):
    """Three-way comparison of two documents, for use with cmp_to_key()."""
    for _, path in SORT_FIELDS:
        value_a = field_value(a, path)
        value_b = field_value(b, path)
        if value_a is None and value_b is None:
            continue
        if value_b is None:
            return -1
        if value_a is None:
            return 1
        if value_a != value_b:
            return -1 if value_a < value_b else 1
    return 0
