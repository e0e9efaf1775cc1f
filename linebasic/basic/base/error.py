"""
LineBASIC - error.py
Error messages and exceptions

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""


class BASICError(Exception):
    """Runtime error, reported as a line of program output."""

    message = u'Unprintable error'

    def __str__(self):
        """Message text."""
        return self.get_message()

    def __repr__(self):
        """String representation of exception."""
        return u'%s(%s)' % (type(self).__name__, u', '.join(repr(_a) for _a in self.args))

    def get_message(self):
        """Error message as written to the output."""
        return self.message % self.args if self.args else self.message


##############################################################################
# statement errors

class UnsupportedStatement(BASICError):
    """Line matches none of the recognised statements."""
    message = u'Error: Unsupported statement: %s'


class MissingEquals(BASICError):
    """Assignment without equals sign."""
    message = u"Error: No '=' found in expression."


class MissingGoto(BASICError):
    """IF without GOTO clause."""
    message = u"Error: 'if' statement missing 'goto'"


class LineNotFound(BASICError):
    """GOTO target label not in program."""
    message = u"Error: 'goto' target line not found: %s"


class InfiniteLoop(BASICError):
    """Step ceiling reached; the run is halted."""
    message = u'Error: Program stopped due to potential infinite loop'


class PrintError(BASICError):
    """PRINT expression could not be evaluated."""
    message = u'Error evaluating print expression: %s'


class AssignmentError(BASICError):
    """Right-hand side of an assignment could not be evaluated."""

    message = u'Error evaluating expression for %s: %s'

    def __init__(self, name, cause):
        """Initialise error for variable name and evaluation error."""
        BASICError.__init__(self, name, cause)
        self.name = name
        self.cause = cause


class ConditionError(BASICError):
    """IF condition could not be evaluated."""
    message = u"Error evaluating 'if' condition: %s"


##############################################################################
# evaluation errors

class EvaluationError(BASICError, ValueError):
    """Expression or condition could not be evaluated."""
    message = u'Invalid expression'


class UndefinedVariable(EvaluationError):
    """Variable read before it was assigned."""

    message = u'Undefined variable: %s'

    def __init__(self, name):
        """Initialise error for variable name."""
        EvaluationError.__init__(self, name)
        self.name = name


class InvalidFactor(EvaluationError):
    """No number, variable or parenthesis where a factor is expected."""

    message = u'Invalid factor at position: %d'

    def __init__(self, pos):
        """Initialise error for offset in expression text."""
        EvaluationError.__init__(self, pos)
        self.pos = pos


class InvalidNumber(EvaluationError):
    """Digit and point run is not a valid number."""
    message = u'Invalid number: %s'


class InvalidCondition(EvaluationError):
    """Condition has no comparison operator."""
    message = u'Invalid condition: %s'


class ExpressionTooComplex(EvaluationError):
    """Expression nested too deeply to evaluate."""
    message = u'Expression too complex'
