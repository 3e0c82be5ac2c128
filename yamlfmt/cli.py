"""yamlfmt command line.

Usage:
    yamlfmt [-w] [--indent N] [--width N] [-d] [FILE ...]

Without files the stream is read from stdin and written to stdout.
"""

import argparse
import sys

import yaml

from yamlfmt.config import options_from_env
from yamlfmt.error import YamlfmtError
from yamlfmt.formatter import format_file, format_stream


def build_parser(defaults):
    parser = argparse.ArgumentParser(
        prog='yamlfmt',
        description='Sort YAML documents and mapping keys into a '
                    'canonical, diff-friendly form.')
    parser.add_argument('files', nargs='*', metavar='FILE',
                        help='YAML files to format (default: stdin)')
    parser.add_argument('-w', dest='overwrite', action='store_true',
                        help='overwrite the input files; ignored when reading '
                             'stdin, which always goes to stdout')
    parser.add_argument('--indent', type=int, default=defaults.indent,
                        help='indentation width (default: %(default)s)')
    parser.add_argument('--width', type=int, default=defaults.width,
                        help='preferred line width (default: %(default)s)')
    parser.add_argument('-d', dest='debug', action='store_true',
                        default=defaults.debug,
                        help='show debug output on stderr')
    return parser


def main(argv=None):
    try:
        options = options_from_env()
    except YamlfmtError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    args = build_parser(options).parse_args(argv)
    options.indent = args.indent
    options.width = args.width
    options.debug = args.debug
    options.overwrite = args.overwrite

    try:
        options.validate()
        if args.files:
            for path in args.files:
                format_file(path, options)
        else:
            sys.stdout.write(format_stream(sys.stdin.read(), options))
    except (yaml.YAMLError, YamlfmtError) as e:
        print(f"Error: Failed formatting YAML stream: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
