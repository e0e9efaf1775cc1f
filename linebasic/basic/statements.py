"""
LineBASIC - statements.py
Statement parser

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

import logging

from .base import error
from . import values


# keywords
PRINT = u'print'
IF = u'if'
GOTO = u'goto'
END = u'end'


class Parser(object):
    """BASIC statement parser."""

    def __init__(self, scalars, output, expression_parser):
        """Initialise statement context."""
        self._scalars = scalars
        self._output = output
        self.expression_parser = expression_parser
        # to be set by init_callbacks
        self._interpreter = None

    def init_callbacks(self, interpreter):
        """Attach the interpreter, which executes jumps."""
        self._interpreter = interpreter

    def parse_statement(self, line):
        """Parse and execute a single statement (comment and label removed)."""
        logging.debug(u'Processing: %s', line)
        if line.startswith(PRINT):
            self.print_(values.trim(line[len(PRINT):]))
        elif u'=' in line and GOTO not in line:
            # implicit LET
            self.let_(line)
        elif line.startswith(IF):
            self.if_(values.trim(line[len(IF):]))
        elif line.startswith(GOTO):
            self._interpreter.goto_(values.trim(line[len(GOTO):]))
        elif line == END:
            self._interpreter.end_()
        else:
            raise error.UnsupportedStatement(line)

    def print_(self, args):
        """PRINT: output the value of an expression."""
        evaluation = self.expression_parser.evaluate(args)
        if evaluation.error:
            raise error.PrintError(evaluation.error)
        result = values.to_repr(evaluation.value)
        logging.debug(u'Print result: %s', result)
        self._output.write_line(result)

    def let_(self, args):
        """LET: assign the value of an expression to a variable."""
        # spaces are not significant in assignments
        args = args.replace(u' ', u'')
        eq_pos = args.find(u'=')
        if eq_pos == -1:
            raise error.MissingEquals()
        name, expr = args[:eq_pos], args[eq_pos+1:]
        evaluation = self.expression_parser.evaluate(expr)
        if evaluation.error:
            raise error.AssignmentError(name, evaluation.error)
        self._scalars.set(name, evaluation.value)
        logging.debug(u'Assigned %s = %s', name, evaluation.value)
        self._output.write_line(u'%s = %s' % (name, values.to_repr(evaluation.value)))

    def if_(self, args):
        """IF: jump to a line if a condition holds."""
        # IF (condition) GOTO target
        if args.startswith(u'(') and u')' in args:
            close_pos = args.find(u')')
            condition = values.trim(args[1:close_pos])
            clause = values.trim(args[close_pos+1:])
            if clause.startswith(GOTO):
                args = u'%s %s' % (condition, clause)
        goto_pos = args.find(GOTO)
        if goto_pos == -1:
            raise error.MissingGoto()
        condition = values.trim(args[:goto_pos])
        target = values.trim(args[goto_pos+len(GOTO):])
        evaluation = self.expression_parser.evaluate_condition(condition)
        if evaluation.error:
            raise error.ConditionError(evaluation.error)
        if evaluation.value:
            logging.debug(u'Condition met, jumping to line %s', target)
            # an unknown target is ignored here, unlike with GOTO
            self._interpreter.jump(target, err=None)
        else:
            logging.debug(u'Condition not met, continuing to next line')
