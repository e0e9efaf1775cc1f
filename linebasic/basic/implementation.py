"""
LineBASIC - implementation.py
Top-level implementation of an interpreter session

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

from . import expressions
from . import interpreter
from . import output
from . import program
from . import scalars
from . import statements


class Implementation(object):
    """Interpreter session, implementation class."""

    def __init__(self, max_steps=interpreter.MAX_STEPS, label_match=u'prefix'):
        """Initialise the interpreter session."""
        # variable store
        self.scalars = scalars.Scalars()
        # program text and output records
        self.program = program.Program(label_match)
        self.output = output.OutputBuffer()
        # parsers
        self.expression_parser = expressions.ExpressionParser(self.scalars)
        self.parser = statements.Parser(self.scalars, self.output, self.expression_parser)
        self.interpreter = interpreter.Interpreter(
            self.program, self.parser, self.output, max_steps
        )
        self.parser.init_callbacks(self.interpreter)

    def load(self, text):
        """Replace the program and reset execution state. Variables are kept."""
        self.program.load(text)
        self.interpreter.reset()
        self.output.clear()

    def run(self):
        """Run the loaded program."""
        self.interpreter.run()

    def clear_variables(self):
        """Clear variables and output; the program is kept."""
        self.scalars.clear()
        self.output.clear()

    def evaluate(self, expression):
        """Evaluate an expression; raise EvaluationError on failure."""
        evaluation = self.expression_parser.evaluate(expression)
        if evaluation.error:
            raise evaluation.error
        return evaluation.value

    def set_variable(self, name, value):
        """Set a variable in memory."""
        self.scalars.set(name, value)

    def get_variable(self, name):
        """Get a variable in memory."""
        return self.scalars.get(name)
