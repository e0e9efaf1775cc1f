"""
LineBASIC - data
Resources for the command-line front end

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

from importlib import resources


def read_usage():
    """Usage text shown by --help."""
    return resources.files(__package__).joinpath('USAGE.txt').read_text(encoding='utf-8')
