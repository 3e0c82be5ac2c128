"""The formatting pipeline: compose, sort, normalize, serialize."""

import os
import shutil
import sys
import tempfile

from yamlfmt.codec import compose_all, serialize_all
from yamlfmt.config import FormatOptions
from yamlfmt.debug import print_node
from yamlfmt.normalize import normalize
from yamlfmt.sorting import sort_documents


def format_stream(stream, options=None):
    """Return the canonical text of a YAML stream.

    Args:
        stream: YAML text, bytes or a file-like object
        options: FormatOptions, defaults used when None

    Returns:
        The formatted stream as a string
    """
    if options is None:
        options = FormatOptions()
    options.validate()

    documents = sort_documents(compose_all(stream))
    visit = print_node if options.debug else None
    for document in documents:
        normalize(document, visit=visit)
    return serialize_all(documents, indent=options.indent,
                         width=options.width)


def _replace_file(path, data):
    # Write next to the target and rename, so a failed write never
    # leaves a truncated file behind.
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(prefix='.yamlfmt-', dir=directory)
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
        shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except BaseException:
        os.unlink(tmp_path)
        raise


def format_file(path, options=None, out=None):
    """Format the YAML file at path.

    The file is read as bytes and PyYAML detects its encoding (UTF-8,
    UTF-16 or a BOM); undecodable input raises yaml.reader.ReaderError.
    Output is always UTF-8.

    With options.overwrite the file is replaced when its content changes;
    otherwise the formatted text is written to out (stdout by default).

    Returns:
        True if the formatted output differs from the file content
    """
    if options is None:
        options = FormatOptions()

    with open(path, 'rb') as f:
        original = f.read()

    formatted = format_stream(original, options)
    data = formatted.encode('utf-8')
    changed = data != original

    if options.overwrite:
        if changed:
            _replace_file(path, data)
    else:
        if out is None:
            out = sys.stdout
        out.write(formatted)
    return changed
