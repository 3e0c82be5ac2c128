"""Formatting options.

Defaults can be overridden through the environment:

- YAMLFMT_INDENT=N : indentation width (2..9)
- YAMLFMT_WIDTH=N  : preferred line width before long scalars are folded
- YAMLFMT_DEBUG=1  : dump every visited node to stderr while normalizing
"""

import os

from yamlfmt.error import ConfigError

DEFAULT_INDENT = 2
# Wide enough that PyYAML never folds plain scalars in practice.
DEFAULT_WIDTH = 4096


class FormatOptions:
    """Options for one formatting run."""

    def __init__(self, indent=DEFAULT_INDENT, width=DEFAULT_WIDTH,
                 debug=False, overwrite=False):
        self.indent = indent
        self.width = width
        self.debug = debug
        self.overwrite = overwrite

    def validate(self):
        # PyYAML silently falls back to 2 outside this range.
        if not 2 <= self.indent <= 9:
            raise ConfigError("indent must be between 2 and 9, got %d"
                              % self.indent)
        if self.width <= 0:
            raise ConfigError("width must be positive, got %d" % self.width)
        return self

    def __repr__(self):
        return ('FormatOptions(indent=%r, width=%r, debug=%r, overwrite=%r)'
                % (self.indent, self.width, self.debug, self.overwrite))


def _int_from_env(environ, name, default):
    value = environ.get(name)
    if value is None or value == '':
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError("%s must be an integer, got %r" % (name, value))


def options_from_env(environ=None):
    """Build FormatOptions from YAMLFMT_* environment variables."""
    if environ is None:
        environ = os.environ
    return FormatOptions(
        indent=_int_from_env(environ, 'YAMLFMT_INDENT', DEFAULT_INDENT),
        width=_int_from_env(environ, 'YAMLFMT_WIDTH', DEFAULT_WIDTH),
        debug=environ.get('YAMLFMT_DEBUG') == '1',
    )
