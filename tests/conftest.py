from pytest import fixture

from rpn4.stack import RegisterStack
from rpn4.keypad import Keypad
from rpn4.lexer import Lexer


@fixture
def stack():
    return RegisterStack()


@fixture
def loaded(stack):
    '''
    A stack holding X, Y, Z, T = 1, 2, 3, 4.
    '''
    for value in 4, 3, 2, 1:
        stack.roll_push(value)
    assert stack.registers == (1, 2, 3, 4)
    return stack


@fixture
def press(stack):
    '''
    Return a function that types a line into a keypad on the stack fixture.
    '''
    keypad = Keypad(stack)
    lexer = Lexer()

    def press(line):
        for match in lexer.lex(line):
            keypad.feed(lexer.matchedgroups(match))
        return stack
    return press
