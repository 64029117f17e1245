'''
Four register RPN calculator.

The registers X, Y, Z and T of the classic HP calculators, a digit at a
time entry, and the arithmetic, power, logarithm and trigonometry keys.
There is no unbounded stack: pushing loses T, dropping copies T down.

Why another RPN calculator?

- Wanted the real four register behaviour, T duplication and all, rather
  than an unbounded dc-style stack.
- The keypad should be drivable by anything that can send a button label:
  a GUI, a terminal, a test.
'''

from .cli import CLI
from .keypad import Keypad
from .lexer import Lexer
from .stack import RegisterStack
from .ops import BinaryOp, UnaryOp, NilaryOp
from .util import RPNError, ParseError


__all__ = ('RegisterStack', 'Keypad', 'Lexer', 'CLI',
           'BinaryOp', 'UnaryOp', 'NilaryOp',
           'RPNError', 'ParseError')
