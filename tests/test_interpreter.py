import unittest
from prattcalc.frontend.expression import *
from prattcalc.frontend.parser import parse_source
from prattcalc.interpreter import *
from prattcalc.errors import *

class TestEvaluate(unittest.TestCase):
    def test_digits(self):
        for n in range(10):
            self.assertEqual(evaluate(parse_source(str(n))), n)

    def test_left_associativity(self):
        self.assertEqual(interpret('2-1-1'), 0)
        self.assertEqual(interpret('8/2/2'), 2)

    def test_precedence(self):
        self.assertEqual(interpret('1+2*3'), 7)
        self.assertEqual(interpret('2*3+1'), 7)
        self.assertEqual(interpret('9-4/2*3'), 3)

    def test_unary(self):
        self.assertEqual(interpret('-3+5'), 2)
        self.assertEqual(interpret('+3'), 3)
        self.assertEqual(interpret('--3'), 3)
        self.assertEqual(interpret('2*-3'), -6)

    def test_division_truncates(self):
        self.assertEqual(interpret('7/2'), 3)
        self.assertEqual(interpret('-7/2'), -3)
        self.assertEqual(interpret('7/-2'), -3)
        self.assertEqual(interpret('-7/-2'), 3)

    def test_division_by_zero(self):
        with self.assertRaises(DivisionByZeroError) as ctx:
            interpret('5/0')
        self.assertEqual(ctx.exception.error_code, ErrorCode.DIVISION_BY_ZERO)
        with self.assertRaises(DivisionByZeroError):
            interpret('1/-0')

    def test_pure(self):
        tree = parse_source('9-2*3+-1')
        self.assertEqual(evaluate(tree), 2)
        self.assertEqual(evaluate(tree), evaluate(tree))

    def test_invariant_violation(self):
        with self.assertRaises(InternalInvariantViolationError):
            evaluate('1+2')
        with self.assertRaises(InternalInvariantViolationError):
            evaluate(UnaryOp('*', Literal(1)))
        with self.assertRaises(InternalInvariantViolationError):
            evaluate(BinaryOp('%', Literal(1), Literal(2)))

    def test_long_chains(self):
        self.assertEqual(interpret('-' * 2000 + '1'), 1)
        self.assertEqual(interpret('-' * 2001 + '1'), -1)
        self.assertEqual(interpret('1-' * 3000 + '1'), -2999)
        self.assertEqual(interpret('2*' * 10 + '1'), 1024)

    def test_lenient_tokenizing(self):
        self.assertEqual(interpret('1 @ + @ 2\n'), 3)
