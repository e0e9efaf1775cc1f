"""
LineBASIC test.interpreter
unit tests for the interpreter loop

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

from linebasic.basic.base import error
from linebasic.basic.implementation import Implementation
from tests.unit.utils import TestCase, run_tests


class InterpreterTest(TestCase):
    """Unit tests for Interpreter."""

    tag = u'interpreter'

    def test_empty_lines_count(self):
        """Empty and comment-only lines use up steps."""
        impl = Implementation(max_steps=2)
        impl.load(u'\n// nothing\nprint 1')
        impl.run()
        assert impl.output.get_lines() == [
            u'Error: Program stopped due to potential infinite loop'
        ]
        assert impl.interpreter.cursor == 2
        assert impl.interpreter.steps == 2

    def test_zero_steps(self):
        """Step ceiling of zero stops any nonempty program at once."""
        impl = Implementation(max_steps=0)
        impl.load(u'print 1')
        impl.run()
        assert impl.output.get_lines() == [
            u'Error: Program stopped due to potential infinite loop'
        ]
        # an empty program just ends
        impl.load(u'')
        impl.run()
        assert impl.output.get_lines() == []

    def test_jump(self):
        """Jump leaves the pointer just before the target."""
        impl = Implementation()
        impl.load(u'10 print 1\n20 print 2\n30 print 3')
        impl.interpreter.jump(u'30')
        assert impl.interpreter.cursor == 1
        impl.interpreter.jump(u'10')
        assert impl.interpreter.cursor == -1

    def test_jump_not_found(self):
        """Jump to an unknown label raises or is ignored."""
        impl = Implementation()
        impl.load(u'10 print 1')
        with self.assertRaises(error.LineNotFound) as cm:
            impl.interpreter.jump(u'40')
        assert cm.exception.get_message() == u"Error: 'goto' target line not found: 40"
        impl.interpreter.jump(u'40', err=None)
        assert impl.interpreter.cursor == 0

    def test_end(self):
        """End leaves the pointer on the last line."""
        impl = Implementation()
        impl.load(u'end\nprint 1\nprint 2')
        impl.interpreter.end_()
        assert impl.interpreter.cursor == 2

    def test_execute_traps_errors(self):
        """Statement errors are written to the output."""
        impl = Implementation()
        impl.interpreter.execute(u'10 goto 20')
        impl.interpreter.execute(u'wibble')
        assert impl.output.get_lines() == [
            u"Error: 'goto' target line not found: 20",
            u'Error: Unsupported statement: wibble',
        ]


if __name__ == '__main__':
    run_tests()
