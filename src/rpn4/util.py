from functools import wraps


class RPNError(Exception):
    pass


class ParseError(RPNError):
    '''
    Entry text could not be converted to a number.
    '''


def wrap_user_errors(fmt, error=RPNError):
    '''
    Decorator that converts exceptions to the given RPNError subclass.

    Passes through RPNErrors. The message is formatted with the wrapped
    call's arguments, so {0} is self for methods.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
