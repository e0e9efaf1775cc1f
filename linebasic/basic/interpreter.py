"""
LineBASIC - interpreter.py
BASIC interpreter

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

import logging

from .base import error
from .program import strip_line


# maximum number of lines executed in a run
MAX_STEPS = 100


class Interpreter(object):
    """BASIC interpreter."""

    def __init__(self, program, parser, output, max_steps=MAX_STEPS):
        """Initialise interpreter."""
        self._program = program
        self._output = output
        # statement syntax parser
        self.parser = parser
        self.max_steps = max_steps
        self.reset()
        # additional operations on program step (debugging)
        self.step = lambda index, line: None

    def reset(self):
        """Move the pointer to the first line and reset the step counter."""
        self.cursor = 0
        self.steps = 0

    def run(self):
        """Execute program lines from the pointer until the end or the step ceiling."""
        logging.debug(u'Running program')
        while self.cursor < len(self._program):
            if self.steps >= self.max_steps:
                logging.warning(u'Program stopped after %d steps', self.steps)
                self.trap_error(error.InfiniteLoop())
                break
            line = self._program[self.cursor]
            logging.debug(u'Processing line %d: %s', self.cursor + 1, line)
            self.step(self.cursor, line)
            self.execute(line)
            self.cursor += 1
            self.steps += 1
        logging.debug(u'Program finished running')

    def execute(self, line):
        """Execute a single program line."""
        statement = strip_line(line)
        if not statement:
            logging.debug(u'Skipping empty line or comment-only line')
            return
        try:
            self.parser.parse_statement(statement)
        except error.BASICError as e:
            self.trap_error(e)

    def trap_error(self, e):
        """Report an error in the program output."""
        message = e.get_message()
        logging.debug(message)
        self._output.write_line(message)

    ###########################################################################
    # jumps

    def jump(self, target, err=error.LineNotFound):
        """Move the pointer to the line with the given label."""
        index = self._program.find_line(target)
        if index is None:
            if err:
                raise err(target)
            return
        logging.debug(u'Jumping to line %s (index %d)', target, index)
        # pointer advances after the statement
        self.cursor = index - 1

    def goto_(self, args):
        """GOTO: jump to line label."""
        self.jump(args)

    def end_(self):
        """END: stop the program."""
        logging.debug(u'End of program encountered')
        # pointer advances past the last line after the statement
        self.cursor = len(self._program) - 1
