#!/usr/bin/env python3
"""
Setup script for yamlfmt.

Installs the yamlfmt package and the ``yamlfmt`` console script.

Environment variables read at runtime (not at build time):
- YAMLFMT_INDENT=N : default indentation width
- YAMLFMT_WIDTH=N  : default preferred line width
- YAMLFMT_DEBUG=1  : dump the node tree to stderr while formatting
"""

import os
from setuptools import setup


def read_version():
    """Read __version__ from the package without importing it."""
    init_path = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                             'yamlfmt', '__init__.py')
    with open(init_path, encoding='utf-8') as f:
        for line in f:
            if line.startswith('__version__'):
                return line.split('=', 1)[1].strip().strip('"\'')
    raise RuntimeError("Cannot find __version__ in %s" % init_path)


setup(
    name='yamlfmt',
    version=read_version(),
    description='Canonical, diff-friendly formatting for YAML streams',
    python_requires='>=3.8',
    packages=['yamlfmt'],
    package_data={'yamlfmt': ['__init__.pyi']},
    install_requires=[
        'PyYAML>=5.1',
    ],
    extras_require={
        'test': ['pytest', 'ruamel.yaml'],
    },
    entry_points={
        'console_scripts': [
            'yamlfmt = yamlfmt.cli:main',
        ],
    },
)
