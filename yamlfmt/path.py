"""Path resolution over the node tree.

A path is an ordered list of string segments. Mapping nodes consume a
segment as a key, sequence nodes consume it as a decimal index; documents
and aliases are stepped through without consuming anything.
"""

import re

from yamlfmt.error import (
    MalformedMapping,
    PathError,
    MalformedDocument,
    InvalidIndex,
    IndexOutOfRange,
    KeyNotFound,
    PathTooDeep,
)
from yamlfmt.nodes import (
    DocumentNode,
    SequenceNode,
    MappingNode,
    ScalarNode,
    AliasNode,
)

_INDEX_REGEXP = re.compile(r'^[0-9]+$')


def split_path(text):
    """Split a dotted path such as ``metadata.name`` into segments."""
    if not text:
        return []
    return text.split('.')


def join_path(path):
    """Inverse of split_path()."""
    return '.'.join(path)


def _step_through(node, path):
    if isinstance(node, DocumentNode):
        if len(node.children) != 1:
            raise MalformedDocument(
                "expected one child for document node, got %d"
                % len(node.children), node.start_mark, path)
        return node.children[0]
    return node.target


def resolve(root, path):
    """Walk from root along path and return the node found there.

    Raises a PathError subclass when the walk cannot complete.
    """
    if isinstance(path, str):
        path = split_path(path)
    path = list(path)
    node = root
    i = 0
    while i < len(path):
        segment = path[i]
        if isinstance(node, (DocumentNode, AliasNode)):
            node = _step_through(node, path)
        elif isinstance(node, SequenceNode):
            if not _INDEX_REGEXP.match(segment):
                raise InvalidIndex(
                    "expected a sequence index, got %r" % segment,
                    node.start_mark, path, segment)
            index = int(segment)
            if index >= len(node.children):
                raise IndexOutOfRange(
                    "sequence index %d out of range (length %d)"
                    % (index, len(node.children)),
                    node.start_mark, path, segment)
            node = node.children[index]
            i += 1
        elif isinstance(node, MappingNode):
            mapping = {}
            for key, value in node.pairs():
                mapping[key.value] = value
            if segment not in mapping:
                raise KeyNotFound(
                    "key %r not in mapping" % segment,
                    node.start_mark, path, segment)
            node = mapping[segment]
            i += 1
        elif isinstance(node, ScalarNode):
            raise PathTooDeep(
                "reached a scalar with %d path segment(s) left"
                % (len(path) - i), node.start_mark, path, segment)
        else:
            raise TypeError("cannot resolve a path through %r" % (node,))
    while isinstance(node, (DocumentNode, AliasNode)):
        node = _step_through(node, path)
    return node


def find(root, path):
    """Like resolve(), but return None when the path does not resolve.

    A malformed mapping on the way is treated as unresolvable too.
    """
    try:
        return resolve(root, path)
    except (PathError, MalformedMapping):
        return None
