"""
LineBASIC - base
Shared definitions for the engine

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""
