"""
yamlfmt - canonical formatting for YAML streams

Reorders the documents of a stream by kind, metadata.namespace and
metadata.name, sorts the keys of every mapping, and drops quoting and flow
style wherever plain block style is legal. Semantically identical streams
come out byte for byte identical, which makes the output stable under
version control and usable as a pre-commit formatter.

Key features:
- Stable document ordering for Kubernetes-style manifests
- Recursive key sorting; sequence order is never touched
- Literal and folded block scalars and explicit tags are kept
- PyYAML does the parsing and the writing

Example:
    >>> import yamlfmt
    >>> print(yamlfmt.format_stream("b: 'x'\\na: [1, 2]\\n"), end='')
    a:
      - 1
      - 2
    b: x
"""

from yamlfmt.codec import compose_all, serialize_all
from yamlfmt.config import FormatOptions, options_from_env
from yamlfmt.error import (
    YamlfmtError,
    ConfigError,
    MarkedYamlfmtError,
    MalformedMapping,
    PathError,
    MalformedDocument,
    InvalidIndex,
    IndexOutOfRange,
    KeyNotFound,
    PathTooDeep,
)
from yamlfmt.formatter import format_file, format_stream
from yamlfmt.nodes import (
    Style,
    Node,
    DocumentNode,
    ScalarNode,
    SequenceNode,
    MappingNode,
    AliasNode,
)
from yamlfmt.normalize import normalize
from yamlfmt.path import find, resolve, split_path, join_path
from yamlfmt.sorting import compare_documents, sort_documents


__version__ = "0.1.0"

__all__ = [
    "compose_all",
    "serialize_all",
    "sort_documents",
    "compare_documents",
    "normalize",
    "resolve",
    "find",
    "split_path",
    "join_path",
    "format_stream",
    "format_file",
    "FormatOptions",
    "options_from_env",
    "Style",
    "Node",
    "DocumentNode",
    "ScalarNode",
    "SequenceNode",
    "MappingNode",
    "AliasNode",
    "YamlfmtError",
    "ConfigError",
    "MarkedYamlfmtError",
    "MalformedMapping",
    "PathError",
    "MalformedDocument",
    "InvalidIndex",
    "IndexOutOfRange",
    "KeyNotFound",
    "PathTooDeep",
]
