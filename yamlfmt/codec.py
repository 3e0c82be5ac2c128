"""PyYAML adapter for the yamlfmt node tree.

compose_all() parses a stream with PyYAML's composer and converts each
document to the yamlfmt node classes; serialize_all() converts them back and
lets PyYAML's serializer write the text.

PyYAML resolves aliases into shared node objects. On the way in, the first
occurrence of a shared node is converted normally and every later occurrence
becomes an AliasNode. On the way out, an AliasNode maps back to the same
PyYAML node, and the serializer assigns fresh anchors.
"""

import yaml
from yaml.resolver import Resolver

from yamlfmt.config import DEFAULT_INDENT, DEFAULT_WIDTH
from yamlfmt.error import MalformedDocument
from yamlfmt.nodes import (
    Style,
    DocumentNode,
    ScalarNode,
    SequenceNode,
    MappingNode,
    AliasNode,
)

_SCALAR_STYLES = {
    '"': Style.DOUBLE_QUOTED,
    "'": Style.SINGLE_QUOTED,
    '|': Style.LITERAL,
    '>': Style.FOLDED,
}

# Checked in order when more than one flag is set.
_STYLE_CHARS = (
    (Style.DOUBLE_QUOTED, '"'),
    (Style.SINGLE_QUOTED, "'"),
    (Style.LITERAL, '|'),
    (Style.FOLDED, '>'),
)

_resolver = Resolver()


class IndentDumper(yaml.SafeDumper):
    """SafeDumper that indents block sequences nested in mappings."""

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)


def _implicit_tags(value):
    return (_resolver.resolve(yaml.ScalarNode, value, (True, False)),
            _resolver.resolve(yaml.ScalarNode, value, (False, True)))


def from_yaml_node(node, converted=None):
    """Convert a PyYAML node graph to a yamlfmt tree.

    converted maps id() of already converted PyYAML nodes to their yamlfmt
    counterparts; it is shared across one document.
    """
    if converted is None:
        converted = {}
    seen = converted.get(id(node))
    if seen is not None:
        return AliasNode(seen, node.start_mark, node.end_mark)

    if isinstance(node, yaml.ScalarNode):
        style = set()
        if node.style in _SCALAR_STYLES:
            style.add(_SCALAR_STYLES[node.style])
        if node.tag not in _implicit_tags(node.value):
            style.add(Style.TAGGED)
        result = ScalarNode(node.tag, node.value, style,
                            node.start_mark, node.end_mark)
        converted[id(node)] = result
        return result

    if isinstance(node, yaml.SequenceNode):
        result = SequenceNode(node.tag, start_mark=node.start_mark,
                              end_mark=node.end_mark)
        default_tag = Resolver.DEFAULT_SEQUENCE_TAG
    elif isinstance(node, yaml.MappingNode):
        result = MappingNode(node.tag, start_mark=node.start_mark,
                             end_mark=node.end_mark)
        default_tag = Resolver.DEFAULT_MAPPING_TAG
    else:
        raise TypeError("unexpected PyYAML node %r" % (node,))

    if node.flow_style:
        result.style.add(Style.FLOW)
    if node.tag != default_tag:
        result.style.add(Style.TAGGED)

    # Register before descending; anchored collections may contain themselves.
    converted[id(node)] = result
    if isinstance(node, yaml.SequenceNode):
        for item in node.value:
            result.children.append(from_yaml_node(item, converted))
    else:
        for key, value in node.value:
            result.children.append(from_yaml_node(key, converted))
            result.children.append(from_yaml_node(value, converted))
    return result


def _scalar_style(node):
    for flag, char in _STYLE_CHARS:
        if flag in node.style:
            return char
    return None


def to_yaml_node(node, converted=None):
    """Convert a yamlfmt tree back to a PyYAML node graph."""
    if converted is None:
        converted = {}
    if isinstance(node, AliasNode):
        return to_yaml_node(node.target, converted)
    if isinstance(node, DocumentNode):
        if len(node.children) != 1:
            raise MalformedDocument(
                "expected one child for document node, got %d"
                % len(node.children), node.start_mark)
        return to_yaml_node(node.children[0], converted)

    done = converted.get(id(node))
    if done is not None:
        return done

    if isinstance(node, ScalarNode):
        tag = node.tag
        if tag is None:
            tag = _implicit_tags(node.value)[0]
        result = yaml.ScalarNode(tag, node.value,
                                 style=_scalar_style(node))
        converted[id(node)] = result
        return result

    flow_style = Style.FLOW in node.style
    if isinstance(node, SequenceNode):
        result = yaml.SequenceNode(
            node.tag or Resolver.DEFAULT_SEQUENCE_TAG, [],
            flow_style=flow_style)
        converted[id(node)] = result
        for child in node.children:
            result.value.append(to_yaml_node(child, converted))
    elif isinstance(node, MappingNode):
        result = yaml.MappingNode(
            node.tag or Resolver.DEFAULT_MAPPING_TAG, [],
            flow_style=flow_style)
        converted[id(node)] = result
        for key, value in node.pairs():
            result.value.append((to_yaml_node(key, converted),
                                 to_yaml_node(value, converted)))
    else:
        raise TypeError("unexpected node %r" % (node,))
    return result


def compose_all(stream):
    """Parse every document of stream into a list of DocumentNode."""
    documents = []
    for root in yaml.compose_all(stream, Loader=yaml.SafeLoader):
        documents.append(DocumentNode(from_yaml_node(root, {}),
                                      root.start_mark, root.end_mark))
    return documents


def serialize_all(documents, stream=None, indent=DEFAULT_INDENT,
                  width=DEFAULT_WIDTH):
    """Serialize documents to stream, or return the text if stream is None."""
    nodes = [to_yaml_node(document, {}) for document in documents]
    return yaml.serialize_all(nodes, stream, Dumper=IndentDumper,
                              indent=indent, width=width,
                              allow_unicode=True)
