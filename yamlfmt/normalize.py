"""Canonical form of a document tree.

normalize() walks a tree once, sorting every mapping by key and dropping the
quoting and flow hints, so that equal documents serialize to equal text.
Sequence order is never changed.
"""

from yamlfmt.nodes import COSMETIC_STYLES, MappingNode, SequenceNode


def strip_style(node):
    """Clear the quoting and flow flags of node, keeping all others."""
    node.style.difference_update(COSMETIC_STYLES)


def sort_pairs(pairs):
    # Keys compare by raw value only; duplicates keep their relative order.
    return sorted(pairs, key=lambda pair: pair[0].value)


def normalize(node, visit=None):
    """Bring the tree under node into canonical form, in place.

    visit, if given, is called as visit(node, path, depth) for every node
    before it is normalized. path is the list of keys and indices leading to
    the node.
    """
    _normalize(node, [], 0, visit)


def _normalize(node, path, depth, visit):
    if visit is not None:
        visit(node, path, depth)
    strip_style(node)

    if isinstance(node, SequenceNode):
        for index, child in enumerate(node.children):
            _normalize(child, path + [str(index)], depth + 1, visit)
    elif isinstance(node, MappingNode):
        pairs = sort_pairs(node.pairs())
        node.set_pairs(pairs)
        for key, value in pairs:
            _normalize(key, path, depth + 1, visit)
            _normalize(value, path + [key.value], depth + 1, visit)
    else:
        for child in node.children:
            _normalize(child, path, depth + 1, visit)
