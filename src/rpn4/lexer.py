from functools import reduce
import operator

import regex

from .util import RPNError
from . import ops


class Lexer:
    '''
    Lexer for keypad lines: each lexeme is one key press.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    DIGIT = r'\d'
    # Whichever the stack uses, both keys mean "decimal separator"
    SEPARATOR = r'[.,]'
    SIGN = r'[_±]'
    ENTER = r'enter|\s+'
    ROLL = r'R'
    DROP = r'D'
    # sto:a stores into a, rcl:a recalls it.
    SETVAR = r'sto:(?<name>\w+)'
    GETVAR = r'rcl:(?<name>\w+)'

    # Longest first, though POSIX matching should make that moot.
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape,
                                      sorted(ops.tokens(),
                                             key=len,
                                             reverse=True))) + r')'

    # All possible lexemes. POSIX: leftmost longest, so 10ˣ beats 1, and
    # enter beats e.
    LEXEME = r'(?<setvar>' + SETVAR + r')|' \
             r'(?<getvar>' + GETVAR + r')|' \
             r'(?<enter>' + ENTER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<digit>' + DIGIT + r')|' \
             r'(?<separator>' + SEPARATOR + r')|' \
             r'(?<sign>' + SIGN + r')|' \
             r'(?<roll>' + ROLL + r')|' \
             r'(?<drop>' + DROP + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.DOTALL,
                    regex.VERSION1},
                   0)

    def lex(self, line):
        '''
        Take a line and return all lexemes.

        Raises RPNError on the first bit of the line that isn't a key.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise RPNError("Couldn't lex {0}".format(line.strip()))

    def matchedgroups(self, match):
        '''
        Return the groups a lexeme matched, without the empty ones.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}

    def kind(self, match):
        '''
        Return the name of the key a lexeme stands for.
        '''
        groups = self.matchedgroups(match).keys() - {'name'}
        return next(iter(groups))
