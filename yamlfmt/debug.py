"""Diagnostic dump of the node tree."""

import sys

from yamlfmt.nodes import Style
from yamlfmt.path import join_path

_STYLE_NAMES = (
    (Style.TAGGED, 'TaggedStyle'),
    (Style.DOUBLE_QUOTED, 'DoubleQuotedStyle'),
    (Style.SINGLE_QUOTED, 'SingleQuotedStyle'),
    (Style.LITERAL, 'LiteralStyle'),
    (Style.FOLDED, 'FoldedStyle'),
    (Style.FLOW, 'FlowStyle'),
)


def describe_node(node, path, depth):
    """Return a one-line description of node at path."""
    parts = ['  ' * depth + 'Node .' + join_path(path) + ':',
             node.tag or '', node.value,
             node.kind.capitalize() + 'Node']
    for flag, name in _STYLE_NAMES:
        if flag in node.style:
            parts.append(name)
    return ' '.join(parts)


def print_node(node, path, depth, file=None):
    if file is None:
        file = sys.stderr
    print(describe_node(node, path, depth), file=file)
