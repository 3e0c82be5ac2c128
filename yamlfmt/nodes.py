"""Node classes for the yamlfmt document tree.

The tree mirrors PyYAML's node graph with two differences: mappings keep a
flattened key, value, key, value list in ``children``, and repeated
references are explicit AliasNode objects instead of shared nodes.
"""

import enum

from yamlfmt.error import MalformedMapping


class Style(enum.Enum):
    """Presentation hints carried by a node."""
    SINGLE_QUOTED = 'single-quoted'
    DOUBLE_QUOTED = 'double-quoted'
    LITERAL = 'literal'
    FOLDED = 'folded'
    FLOW = 'flow'
    TAGGED = 'tagged'


# Styles that normalization removes.
COSMETIC_STYLES = frozenset({
    Style.SINGLE_QUOTED,
    Style.DOUBLE_QUOTED,
    Style.FLOW,
})


class Node:
    """Base class for YAML nodes."""
    id = None

    def __init__(self, tag=None, value='', children=None, style=None,
                 start_mark=None, end_mark=None):
        self.tag = tag
        self.value = value
        self.children = list(children) if children is not None else []
        self.style = set(style) if style is not None else set()
        self.start_mark = start_mark
        self.end_mark = end_mark

    @property
    def kind(self):
        return self.id

    def __repr__(self):
        if self.children:
            return '%s(tag=%r, children=%d)' % (
                self.__class__.__name__, self.tag, len(self.children))
        return '%s(tag=%r, value=%r)' % (
            self.__class__.__name__, self.tag, self.value)


class DocumentNode(Node):
    """Top-level document; holds exactly one root value."""
    id = 'document'

    def __init__(self, root=None, start_mark=None, end_mark=None):
        children = [root] if root is not None else []
        super().__init__(None, '', children, None, start_mark, end_mark)

    @property
    def root(self):
        if len(self.children) != 1:
            return None
        return self.children[0]


class ScalarNode(Node):
    """Scalar node (strings, numbers, etc.)."""
    id = 'scalar'

    def __init__(self, tag, value, style=None, start_mark=None, end_mark=None):
        super().__init__(tag, value, None, style, start_mark, end_mark)


class SequenceNode(Node):
    """Sequence node (lists/arrays)."""
    id = 'sequence'


class MappingNode(Node):
    """Mapping node (dicts/objects).

    ``children`` alternates key and value nodes.
    """
    id = 'mapping'

    def pairs(self):
        """Return the children as a list of (key, value) tuples."""
        children = self.children
        if len(children) % 2 != 0:
            raise MalformedMapping(
                "mapping expected an even number of nodes, got %d"
                % len(children), self.start_mark)
        return [(children[i], children[i + 1])
                for i in range(0, len(children), 2)]

    def set_pairs(self, pairs):
        """Replace the children with the flattened (key, value) tuples."""
        children = []
        for key, value in pairs:
            children.append(key)
            children.append(value)
        self.children = children


class AliasNode(Node):
    """Reference to another node of the same document."""
    id = 'alias'

    def __init__(self, target, start_mark=None, end_mark=None):
        super().__init__(None, '', None, None, start_mark, end_mark)
        self.target = target

    def __repr__(self):
        return 'AliasNode(target=%r)' % (self.target,)
