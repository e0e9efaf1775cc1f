"""
LineBASIC - scalars.py
Scalar variable management

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

from .base import error
from . import values


class Scalars(object):
    """Scalar variables: a flat mapping of names to floats."""

    def __init__(self):
        """Initialise scalars."""
        self.clear()

    def __contains__(self, varname):
        """Check if a scalar has been defined."""
        return varname in self._vars

    def __iter__(self):
        """Return an iterable over all scalar names."""
        return iter(self._vars)

    def __len__(self):
        """Number of defined scalars."""
        return len(self._vars)

    def __repr__(self):
        """Debugging representation of variable dictionary."""
        return '\n'.join(
            '%s: %s' % (_name, values.to_repr(_value))
            for _name, _value in self._vars.items()
        )

    def clear(self):
        """Clear scalar variables."""
        self._vars = {}

    def set(self, name, value):
        """Assign a value to a variable, creating it if needed."""
        self._vars[name] = float(value)

    def get(self, name):
        """Retrieve the value of a scalar variable."""
        try:
            return self._vars[name]
        except KeyError:
            raise error.UndefinedVariable(name)
