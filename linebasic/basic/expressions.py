"""
LineBASIC - expressions.py
Expression parser

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

from collections import namedtuple
import logging
import math
import operator

from .base import error
from . import values


# result of an evaluation: value is None if error is set
Evaluation = namedtuple('Evaluation', ['value', 'error'])

# comparison operators, in the order the condition is scanned for them
# note that = is found before >= and <= can be
COMPARISONS = (
    (u'=', operator.eq),
    (u'>', operator.gt),
    (u'<', operator.lt),
    (u'>=', operator.ge),
    (u'<=', operator.le),
)


def divide(left, right):
    """Floating-point division; zero divisors give infinity or NaN."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return float('nan')
        # the sign of the zero counts: 1/-0 is -Infinity
        return math.copysign(float('inf'), left) * math.copysign(1., right)
    return left / right


# additive and multiplicative operators
SUMS = {u'+': operator.add, u'-': operator.sub}
PRODUCTS = {u'*': operator.mul, u'/': divide}


class ParseCursor(object):
    """Position in the text of a single expression."""

    __slots__ = ('pos',)

    def __init__(self, pos=0):
        """Start at given offset."""
        self.pos = pos


class ExpressionParser(object):
    """Recursive-descent expression parser and evaluator."""

    def __init__(self, scalars):
        """Initialise parser on variable store."""
        self._scalars = scalars

    def evaluate(self, expr):
        """Evaluate an arithmetic expression; returns an Evaluation."""
        try:
            return Evaluation(self.parse(expr), None)
        except error.EvaluationError as e:
            logging.debug(u'Could not evaluate `%s`: %s', expr, e)
            return Evaluation(None, e)

    def evaluate_condition(self, condition):
        """Evaluate a comparison; returns an Evaluation with a bool value."""
        try:
            return Evaluation(self.parse_condition(condition), None)
        except error.EvaluationError as e:
            logging.debug(u'Could not evaluate condition `%s`: %s', condition, e)
            return Evaluation(None, e)

    def parse(self, expr):
        """Evaluate an arithmetic expression; raises EvaluationError."""
        try:
            return self._parse_expression(expr, ParseCursor())
        except RecursionError:
            raise error.ExpressionTooComplex()

    def parse_condition(self, condition):
        """Evaluate a comparison; raises EvaluationError."""
        logging.debug(u'Evaluating condition: %s', condition)
        for symbol, compare in COMPARISONS:
            op_pos = condition.find(symbol)
            if op_pos != -1:
                left = values.trim(condition[:op_pos])
                right = values.trim(condition[op_pos+len(symbol):])
                return compare(self._parse_operand(left), self._parse_operand(right))
        raise error.InvalidCondition(condition)

    def _parse_operand(self, operand):
        """Read a comparison operand as a variable if defined, otherwise as expression."""
        if operand in self._scalars:
            return self._scalars.get(operand)
        return self.parse(operand)

    def _parse_expression(self, expr, ins):
        """Parse a sum or difference of terms."""
        result = self._parse_term(expr, ins)
        while ins.pos < len(expr) and expr[ins.pos] in SUMS:
            op = SUMS[expr[ins.pos]]
            ins.pos += 1
            result = op(result, self._parse_term(expr, ins))
        return result

    def _parse_term(self, expr, ins):
        """Parse a product or quotient of factors."""
        result = self._parse_factor(expr, ins)
        while ins.pos < len(expr) and expr[ins.pos] in PRODUCTS:
            op = PRODUCTS[expr[ins.pos]]
            ins.pos += 1
            result = op(result, self._parse_factor(expr, ins))
        return result

    def _parse_factor(self, expr, ins):
        """Parse a number, a variable or a bracketed expression."""
        # whitespace is only skipped here, not around operators
        while ins.pos < len(expr) and values.is_space(expr[ins.pos]):
            ins.pos += 1
        if ins.pos >= len(expr):
            raise error.InvalidFactor(ins.pos)
        c = expr[ins.pos]
        if c == u'(':
            ins.pos += 1
            result = self._parse_expression(expr, ins)
            # closing bracket is optional
            if ins.pos < len(expr) and expr[ins.pos] == u')':
                ins.pos += 1
            return result
        elif c in values.NUMBER_CHARS:
            start = ins.pos
            while ins.pos < len(expr) and expr[ins.pos] in values.NUMBER_CHARS:
                ins.pos += 1
            return values.from_str(expr[start:ins.pos])
        elif values.is_letter(c):
            start = ins.pos
            while ins.pos < len(expr) and values.is_letter(expr[ins.pos]):
                ins.pos += 1
            return self._scalars.get(expr[start:ins.pos])
        raise error.InvalidFactor(ins.pos)
