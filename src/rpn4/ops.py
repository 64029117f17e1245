'''
Operation tags for the register stack, and the tables that implement them.

Buttons hand us their label text ("÷", "x²", "π"); everything past this
module deals in enum members. Labels and names nobody knows about become the
UNKNOWN member of their enum, which the stack ignores.
'''

from enum import Enum
import operator
import math

from . import ieee


class Operation(Enum):
    '''
    Base for the operation enums.

    Looking up a member accepts the member itself, its canonical name (the
    value), or any of its display labels.
    '''

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return cls.UNKNOWN
        value = value.strip()
        for member in cls:
            if member.value == value:
                return member
        return LABELS[cls].get(value, cls.UNKNOWN)

    @classmethod
    def lookup(cls, token):
        return cls(token)

    @property
    def implemented(self):
        '''
        True if applying this operation does something to the registers.
        '''
        return self in IMPLEMENTATIONS[type(self)]

    def __call__(self, *args):
        return IMPLEMENTATIONS[type(self)][self](*args)


class BinaryOp(Operation):
    '''
    Consumes Y and X, in that order, leaving one result.
    '''
    ADD = 'add'
    SUBTRACT = 'subtract'
    MULTIPLY = 'multiply'
    DIVIDE = 'divide'
    POWER = 'power'
    ROOT = 'root'
    UNKNOWN = 'unknown'


class UnaryOp(Operation):
    '''
    Replaces X.
    '''
    SQUARE = 'square'
    SQRT = 'sqrt'
    LOG10 = 'log'
    LN = 'ln'
    EXP10 = 'exp10'
    EXP = 'exp'
    SIN = 'sin'
    # Not yet implemented; recognized, but inert.
    COS = 'cos'
    TAN = 'tan'
    ASIN = 'asin'
    ACOS = 'acos'
    ATAN = 'atan'
    UNKNOWN = 'unknown'


class NilaryOp(Operation):
    '''
    Pushes a constant.
    '''
    PI = 'pi'
    E = 'e'
    UNKNOWN = 'unknown'


# Display labels, as printed on the keys, and ASCII stand-ins for them.
LABELS = {
    BinaryOp: {
        '+': BinaryOp.ADD,
        '−': BinaryOp.SUBTRACT,
        '-': BinaryOp.SUBTRACT,
        '×': BinaryOp.MULTIPLY,
        '*': BinaryOp.MULTIPLY,
        '÷': BinaryOp.DIVIDE,
        '/': BinaryOp.DIVIDE,
        'yˣ': BinaryOp.POWER,
        '^': BinaryOp.POWER,
        'ˣ√y': BinaryOp.ROOT,
    },
    UnaryOp: {
        'x²': UnaryOp.SQUARE,
        '√x': UnaryOp.SQRT,
        'log x': UnaryOp.LOG10,
        'ln x': UnaryOp.LN,
        '10ˣ': UnaryOp.EXP10,
        'eˣ': UnaryOp.EXP,
        'sin⁻¹': UnaryOp.ASIN,
        'cos⁻¹': UnaryOp.ACOS,
        'tan⁻¹': UnaryOp.ATAN,
    },
    NilaryOp: {
        'π': NilaryOp.PI,
    },
}

# Y op X for binaries. Members missing from a table are inert.
IMPLEMENTATIONS = {
    BinaryOp: {
        BinaryOp.ADD: operator.__add__,
        BinaryOp.SUBTRACT: operator.__sub__,
        BinaryOp.MULTIPLY: operator.__mul__,
        BinaryOp.DIVIDE: ieee.divide,
        BinaryOp.POWER: ieee.power,
        BinaryOp.ROOT: ieee.root,
    },
    UnaryOp: {
        UnaryOp.SQUARE: ieee.square,
        UnaryOp.SQRT: ieee.sqrt,
        UnaryOp.LOG10: ieee.log10,
        UnaryOp.LN: ieee.log,
        UnaryOp.EXP10: ieee.exp10,
        UnaryOp.EXP: ieee.exp,
        UnaryOp.SIN: ieee.sin,
    },
    NilaryOp: {
        NilaryOp.PI: lambda: math.pi,
        NilaryOp.E: lambda: math.e,
    },
}


def tokens():
    '''
    Every name and label any operation answers to.
    '''
    names = set()
    for cls, labels in LABELS.items():
        names.update(member.value
                     for member
                     in cls
                     if member is not cls.UNKNOWN)
        names.update(labels)
    return names


__all__ = 'BinaryOp', 'UnaryOp', 'NilaryOp', 'tokens'
