"""
LineBASIC test.values
unit tests for number representation, variables and output

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

from linebasic.basic import values
from linebasic.basic.base import error
from linebasic.basic.output import OutputBuffer
from linebasic.basic.scalars import Scalars
from tests.unit.utils import TestCase, run_tests


class ValuesTest(TestCase):
    """Unit tests for values."""

    tag = u'values'

    def test_to_repr_decimal(self):
        """Moderate magnitudes are shown in decimal notation."""
        assert values.to_repr(14.) == u'14.0'
        assert values.to_repr(-2.5) == u'-2.5'
        assert values.to_repr(0.001) == u'0.001'
        assert values.to_repr(9999999.) == u'9999999.0'
        assert values.to_repr(0.1 + 0.2) == u'0.30000000000000004'

    def test_to_repr_scientific(self):
        """Large and small magnitudes are shown in scientific notation."""
        assert values.to_repr(1e7) == u'1.0E7'
        assert values.to_repr(12345678.) == u'1.2345678E7'
        assert values.to_repr(-1e10) == u'-1.0E10'
        assert values.to_repr(0.0001) == u'1.0E-4'
        assert values.to_repr(1.5e-5) == u'1.5E-5'
        assert values.to_repr(1e100) == u'1.0E100'

    def test_to_repr_special(self):
        """Zeros, infinities and NaN."""
        assert values.to_repr(0.) == u'0.0'
        assert values.to_repr(-0.) == u'-0.0'
        assert values.to_repr(float('inf')) == u'Infinity'
        assert values.to_repr(float('-inf')) == u'-Infinity'
        assert values.to_repr(float('nan')) == u'NaN'

    def test_from_str(self):
        """Number literals."""
        assert values.from_str(u'12') == 12.
        assert values.from_str(u'1.25') == 1.25
        with self.assertRaises(error.InvalidNumber):
            values.from_str(u'1..2')

    def test_is_letter(self):
        """Letters make variable names."""
        assert values.is_letter(u'a')
        assert values.is_letter(u'Z')
        assert not values.is_letter(u'1')
        assert not values.is_letter(u'_')

    def test_trim(self):
        """Trimming removes space and control characters only."""
        assert values.trim(u' \t1 \r\n') == u'1'
        assert values.trim(u'\x001\x1f') == u'1'
        assert values.trim(u'\xa01\xa0') == u'\xa01\xa0'
        assert values.trim(u'\u20031') == u'\u20031'

    def test_is_space(self):
        """Whitespace excludes no-break spaces."""
        assert values.is_space(u' ')
        assert values.is_space(u'\t')
        assert values.is_space(u'\x1f')
        assert values.is_space(u'\u2003')
        assert not values.is_space(u'\xa0')
        assert not values.is_space(u'\u202f')
        assert not values.is_space(u'\x00')
        assert not values.is_space(u'a')


class ScalarsTest(TestCase):
    """Unit tests for the variable store."""

    tag = u'scalars'

    def test_set_get(self):
        """Values are stored as floats."""
        scalars = Scalars()
        scalars.set(u'a', 1)
        assert scalars.get(u'a') == 1.
        assert isinstance(scalars.get(u'a'), float)
        assert u'a' in scalars
        assert u'A' not in scalars
        assert list(scalars) == [u'a']
        assert len(scalars) == 1

    def test_undefined(self):
        """Reading an unassigned name is an error, not zero."""
        scalars = Scalars()
        with self.assertRaises(error.UndefinedVariable) as cm:
            scalars.get(u'b')
        assert cm.exception.name == u'b'

    def test_clear(self):
        """Clearing removes all variables."""
        scalars = Scalars()
        scalars.set(u'a', 1)
        scalars.set(u'b', 2)
        scalars.clear()
        assert len(scalars) == 0
        assert u'a' not in scalars

    def test_repr(self):
        """Test Scalars.__repr__."""
        scalars = Scalars()
        scalars.set(u'a', 1)
        scalars.set(u'big', 1e20)
        assert repr(scalars) == u'a: 1.0\nbig: 1.0E20'


class OutputTest(TestCase):
    """Unit tests for the output buffer."""

    tag = u'output'

    def test_write(self):
        """Records are terminated by line breaks."""
        output = OutputBuffer()
        assert output.getvalue() == u''
        output.write_line(u'one')
        output.write_line(u'')
        output.write_line(u'three')
        assert output.getvalue() == u'one\n\nthree\n'
        assert output.get_lines() == [u'one', u'', u'three']
        assert len(output) == 11

    def test_clear(self):
        """Clearing discards all records."""
        output = OutputBuffer()
        output.write_line(u'one')
        output.clear()
        assert output.getvalue() == u''
        assert output.get_lines() == []


if __name__ == '__main__':
    run_tests()
