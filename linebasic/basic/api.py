"""
LineBASIC - api.py
Session API

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

from . import implementation
from .interpreter import MAX_STEPS
from .program import get_matcher


class Session(object):
    """Public API to BASIC session."""

    def __init__(self, max_steps=MAX_STEPS, label_match=u'prefix'):
        """Set up session object."""
        # fail early on unknown strategy names
        get_matcher(label_match)
        self._kwargs = dict(max_steps=max_steps, label_match=label_match)
        self._impl = None

    def __enter__(self):
        """Context guard."""
        return self

    def __exit__(self, ex_type, ex_val, tb):
        """Context guard."""
        self.close()

    def start(self):
        """Start the session."""
        if not self._impl:
            self._impl = implementation.Implementation(**self._kwargs)
            return True
        return False

    def load(self, source):
        """Load program source text, replacing the current program."""
        self.start()
        self._impl.load(source)

    def run(self):
        """Run the loaded program; errors are reported in the output."""
        self.start()
        self._impl.run()

    def get_output(self):
        """Get the output of the last run."""
        self.start()
        return self._impl.output.getvalue()

    def clear_variables(self):
        """Clear all variables and the output."""
        self.start()
        self._impl.clear_variables()

    def execute(self, source):
        """Load and run a program, return its output."""
        self.load(source)
        self.run()
        return self.get_output()

    def evaluate(self, expression):
        """Evaluate a BASIC expression."""
        self.start()
        return self._impl.evaluate(expression)

    def set_variable(self, name, value):
        """Set a variable in memory."""
        self.start()
        self._impl.set_variable(name, value)

    def get_variable(self, name):
        """Get a variable in memory."""
        self.start()
        return self._impl.get_variable(name)

    def close(self):
        """Close the session."""
        self._impl = None

    @property
    def info(self):
        """Get a session information object."""
        self.start()
        return SessionInfo(self)

    def set_hook(self, step_function):
        """Set function to be called on interpreter step."""
        self.start()
        self._impl.interpreter.step = step_function


class SessionInfo(object):
    """Retrieve information about current session."""

    def __init__(self, session):
        """Initialise the SessionInfo object."""
        self._impl = session._impl

    def repr_scalars(self):
        """Get a representation of all scalars."""
        return repr(self._impl.scalars)

    def repr_program(self):
        """Get a listing of the program with storage indices."""
        return repr(self._impl.program)

    @property
    def current_line(self):
        """Storage index of the line to be executed next."""
        return self._impl.interpreter.cursor

    @property
    def steps(self):
        """Number of lines executed since the program was loaded."""
        return self._impl.interpreter.steps
