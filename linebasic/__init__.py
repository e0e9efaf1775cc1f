"""
LineBASIC - line-numbered BASIC interpreter

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

from .basic import __version__
from .basic import NAME, VERSION, AUTHOR, COPYRIGHT
from .basic import Session
from .main import main
