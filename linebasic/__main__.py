"""
LineBASIC - line-numbered BASIC interpreter

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

import sys

from .main import main

sys.exit(main())
