'''
IEEE 754 flavoured wrappers around math.

math raises ValueError, OverflowError and ZeroDivisionError where the
hardware would happily give back inf or nan. A calculator shows the special
value instead, so these return it.
'''

import math


def _is_odd_integer(n):
    return math.isfinite(n) and float(n).is_integer() and int(n) % 2 == 1


def divide(left, right):
    try:
        return left / right
    except ZeroDivisionError:
        if math.isnan(left) or left == 0:
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


def power(base, exponent):
    '''
    pow() as in C: pow(0, -n) is infinite, pow(-b, 0.5) is nan, overflow
    is infinite.
    '''
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            if _is_odd_integer(exponent):
                # Keeps the sign of zero
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def root(base, degree):
    return power(base, divide(1.0, degree))


def square(x):
    return x * x


def sqrt(x):
    try:
        return math.sqrt(x)
    except ValueError:
        return math.nan


def _logarithm(f):
    def wrapped(x):
        try:
            return f(x)
        except ValueError:
            return -math.inf if x == 0 else math.nan
    wrapped.__doc__ = f.__doc__
    wrapped.__name__ = f.__name__
    return wrapped


log10 = _logarithm(math.log10)
log = _logarithm(math.log)


def exp(x):
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def exp10(x):
    return power(10.0, x)


def sin(x):
    try:
        return math.sin(x)
    except ValueError:
        # sin(±inf)
        return math.nan
