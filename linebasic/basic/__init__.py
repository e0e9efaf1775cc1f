"""
LineBASIC - line-numbered BASIC interpreter

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

from .data import NAME, VERSION, AUTHOR, COPYRIGHT
from .api import Session, SessionInfo
from .base.error import *

__version__ = VERSION
