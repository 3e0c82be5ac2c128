"""Error classes for yamlfmt.

Provides YamlfmtError and the marked errors raised by the path resolver and
the tree normalizer. Codec failures are PyYAML's own YAMLError subclasses and
are not wrapped.
"""


class YamlfmtError(Exception):
    """Base exception for yamlfmt errors."""
    pass


class ConfigError(YamlfmtError):
    """Invalid formatting options."""
    pass


class MarkedYamlfmtError(YamlfmtError):
    """Error pointing at a node of the input stream.

    Attributes:
        problem: Description of the problem
        problem_mark: PyYAML Mark of the offending node, or None for trees
            that were not built from text
    """

    def __init__(self, problem=None, problem_mark=None):
        super().__init__(problem)
        self.problem = problem
        self.problem_mark = problem_mark

    def __str__(self):
        lines = []
        if self.problem is not None:
            lines.append(self.problem)
        if self.problem_mark is not None:
            lines.append(str(self.problem_mark))
        return '\n'.join(lines)


class MalformedMapping(MarkedYamlfmtError):
    """Mapping whose flattened children cannot be split into pairs."""
    pass


class PathError(MarkedYamlfmtError):
    """A path could not be resolved.

    Attributes:
        path: The full path being resolved
        segment: The segment that failed, or None
    """

    def __init__(self, problem=None, problem_mark=None, path=None, segment=None):
        super().__init__(problem, problem_mark)
        self.path = list(path) if path is not None else []
        self.segment = segment


class MalformedDocument(PathError):
    pass


class InvalidIndex(PathError):
    pass


class IndexOutOfRange(PathError):
    pass


class KeyNotFound(PathError):
    pass


class PathTooDeep(PathError):
    pass
