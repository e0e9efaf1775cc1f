"""
LineBASIC - values.py
Number literals and number representation

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

import math
import unicodedata
from decimal import Decimal

from .base import error


# characters of a number literal
DIGITS = u'0123456789'
NUMBER_CHARS = DIGITS + u'.'

# decimal notation is used for magnitudes in this range, scientific outside
DECIMAL_MIN = 1e-3
DECIMAL_MAX = 1e7

# trimming removes space and control characters only, not e.g. no-break space
TRIM_CHARS = u''.join(chr(_c) for _c in range(0x21))

# control characters counted as whitespace
CONTROL_SPACE = u'\t\n\x0b\x0c\r\x1c\x1d\x1e\x1f'
# separators not counted as whitespace
NO_BREAK_SPACE = u'\xa0\u2007\u202f'


def is_letter(c):
    """Check if a character can be part of a variable name."""
    return c.isalpha()


def is_space(c):
    """Check if a character is whitespace between tokens."""
    if c in CONTROL_SPACE:
        return True
    return c not in NO_BREAK_SPACE and unicodedata.category(c) in (u'Zs', u'Zl', u'Zp')


def trim(text):
    """Remove leading and trailing spaces and control characters."""
    return text.strip(TRIM_CHARS)


def from_str(text):
    """Convert a run of digits and decimal points to a float."""
    try:
        return float(text)
    except ValueError:
        raise error.InvalidNumber(text)


def to_repr(value):
    """Represent a float as text, e.g. 14.0, 1.5E-5, Infinity."""
    if math.isnan(value):
        return u'NaN'
    if math.isinf(value):
        return u'Infinity' if value > 0 else u'-Infinity'
    if value == 0:
        return u'-0.0' if math.copysign(1., value) < 0 else u'0.0'
    if DECIMAL_MIN <= abs(value) < DECIMAL_MAX:
        # repr does not switch to exponents in this range
        return repr(value)
    # shortest round-trip digits, normalised to one digit before the point
    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    exponent += len(digits) - 1
    mantissa = u''.join(str(_d) for _d in digits)
    return u'%s%s.%sE%d' % (u'-' if sign else u'', mantissa[0], mantissa[1:] or u'0', exponent)
