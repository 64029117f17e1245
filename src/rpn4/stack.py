'''
Four register stack, X Y Z T, like the HP calculators.

Numbers are keyed into the entry a digit at a time and pushed into X on
enter. Operations come in three arities:

- binary: merge Y and X into X and roll down the stack
- unary: replace X
- nilary: push a constant, rolling up the stack

One instance per calculator; nothing here locks.
'''

import regex

from .util import ParseError, wrap_user_errors
from .ops import BinaryOp, UnaryOp, NilaryOp


class RegisterStack:
    '''
    The registers and the pending entry text.
    '''

    DEFAULT_SEPARATOR = '.'

    def __init__(self, separator=None):
        '''
        Create a zeroed stack with an empty entry.

        :param separator: Decimal separator keyed into the entry.
        '''
        self.x = self.y = self.z = self.t = 0.0
        self.entry = ''
        self.separator = separator or type(self).DEFAULT_SEPARATOR
        # Optional sign, then digits with at most one separator somewhere.
        self._number = regex.compile(
            r'''
            [+-]?
            (?:
                \d+ (?: {sep} \d* )?
                |
                {sep} \d+
            )
            '''.format(sep=regex.escape(self.separator)),
            flags=regex.VERBOSE)

    @property
    def registers(self):
        '''
        X, Y, Z, T, in that order.
        '''
        return self.x, self.y, self.z, self.t

    def format(self, value):
        '''
        Format a register the way a display would: no trailing .0.
        '''
        text = repr(value)
        if text.endswith('.0'):
            text = text[:-2]
        return text.replace('.', self.separator)

    def stack_string(self):
        '''
        T, Z, Y, X then the entry, one per line.
        '''
        return '\n'.join([*map(self.format, (self.t, self.z, self.y, self.x)),
                          self.entry])

    __str__ = stack_string

    def set_x(self, value):
        self.x = float(value)

    def append_digit(self, digit):
        '''
        Add digit to the entry. Anything that isn't a digit is ignored.

        Signed text is ignored too, rather than taken as an integer: "-3"
        would put a sign in the middle of the entry.
        '''
        text = str(digit).strip()
        # No signs, no underscores, no fractions
        if not text.isdecimal():
            return
        try:
            value = int(text)
        except ValueError:
            # Past the int string conversion limit
            return
        self.entry += str(value)

    def append_separator(self):
        '''
        Add the decimal separator to the entry, unless it already has one.
        '''
        if self.separator not in self.entry:
            self.entry += self.separator

    def toggle_sign(self):
        '''
        Flip a leading sign, or prefix a minus if there isn't one.

        A leading - becomes +, not nothing.
        '''
        if self.entry[:1] == '+':
            self.entry = '-' + self.entry[1:]
        elif self.entry[:1] == '-':
            self.entry = '+' + self.entry[1:]
        else:
            self.entry = '-' + self.entry

    @wrap_user_errors('Cannot convert {1!r}', ParseError)
    def _parse(self, text):
        if not self._number.fullmatch(text):
            raise ValueError(text)
        return float(text.replace(self.separator, '.'))

    def commit(self):
        '''
        Push the entry into X and clear it. Does nothing if the entry is
        empty.

        Raises ParseError, leaving everything as it was, if the entry isn't
        a number.
        '''
        if self.entry:
            self.roll_push(self._parse(self.entry))
            self.entry = ''

    enter = commit

    def roll_push(self, value):
        '''
        Roll the stack up, putting value in X. T is lost.
        '''
        self.t, self.z, self.y, self.x = self.z, self.y, self.x, float(value)

    def roll_up(self):
        '''
        Rotate the stack up: T comes around into X.
        '''
        self.t, self.z, self.y, self.x = self.z, self.y, self.x, self.t

    def drop_replace_x(self, value):
        '''
        Replace X and roll the stack down. T stays, and is copied into Z.
        '''
        self.x, self.y, self.z = float(value), self.z, self.t

    def drop(self):
        '''
        Drop X and roll the stack down. T stays, and is copied into Z.
        '''
        self.x, self.y, self.z = self.y, self.z, self.t

    def apply_binary(self, op):
        '''
        Replace Y and X with Y op X, rolling down.
        '''
        op = BinaryOp.lookup(op)
        if op.implemented:
            self.drop_replace_x(op(self.y, self.x))

    def apply_unary(self, op):
        op = UnaryOp.lookup(op)
        if op.implemented:
            self.set_x(op(self.x))

    def apply_nilary(self, op):
        op = NilaryOp.lookup(op)
        if op.implemented:
            self.roll_push(op())

    def set_var(self, name):
        # TODO: Back with a name -> value mapping; storing X under name.
        pass

    def get_var(self, name):
        # TODO: Push the value stored under name.
        pass
