'''
Key presses, as lexed, applied to a register stack.
'''

from .stack import RegisterStack
from .ops import BinaryOp, UnaryOp, NilaryOp


class Keypad:
    '''
    The calculator's buttons.

    Operation keys terminate entry: whatever has been keyed in is entered
    before the operation runs, as on the real thing. The stack itself never
    enters anything on its own.
    '''

    def __init__(self, stack=None):
        self.stack = stack if stack is not None else RegisterStack()

    def feed(self, groups):
        '''
        Press one key.

        :param groups: Matched groups of one lexeme, as from
                       Lexer.matchedgroups.
        '''
        stack = self.stack
        if 'digit' in groups:
            stack.append_digit(groups['digit'])
        elif 'separator' in groups:
            stack.append_separator()
        elif 'sign' in groups:
            stack.toggle_sign()
        elif 'enter' in groups:
            stack.commit()
        elif 'operator' in groups:
            stack.commit()
            self.operate(groups['operator'])
        elif 'roll' in groups:
            stack.commit()
            stack.roll_up()
        elif 'drop' in groups:
            stack.commit()
            stack.drop()
        elif 'setvar' in groups:
            stack.commit()
            stack.set_var(groups['name'])
        elif 'getvar' in groups:
            stack.commit()
            stack.get_var(groups['name'])

    def operate(self, token):
        '''
        Apply whichever operation answers to token, if any.
        '''
        for cls, apply in [(BinaryOp, self.stack.apply_binary),
                           (UnaryOp, self.stack.apply_unary),
                           (NilaryOp, self.stack.apply_nilary)]:
            op = cls.lookup(token)
            if op is not cls.UNKNOWN:
                apply(op)
                return op
        return None
