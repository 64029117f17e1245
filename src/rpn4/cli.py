from os import isatty
from argparse import ArgumentParser, REMAINDER
import traceback
import sys

from prompt_toolkit import PromptSession

from .util import RPNError
from .stack import RegisterStack
from .keypad import Keypad
from .lexer import Lexer


class InteractiveInput:
    '''
    Lines typed at a prompt, with the registers in the bottom toolbar and
    the pending entry on the right.
    '''

    def __init__(self, prompt, stack):
        self.prompt = prompt
        self.stack = stack

    def toolbar(self):
        stack = self.stack
        return '  '.join('{}: {}'.format(name, stack.format(value))
                         for name, value
                         in zip('TZYX', reversed(stack.registers)))

    def __iter__(self):
        session = PromptSession(message=self.prompt,
                                vi_mode=True,
                                bottom_toolbar=self.toolbar,
                                rprompt=lambda: self.stack.entry)
        while True:
            try:
                yield session.prompt()
            except EOFError:
                return


class CLI:
    '''
    Command line interface to the four register calculator.

    Each line is a run of keys; the stack is printed after each.
    '''

    DEFAULT_PROMPT = '> '

    def dumper(self, lines):
        '''
        Dump the key each lexeme stands for.
        '''
        lexer = Lexer()
        print('<key>\t<repr(lexeme)>')
        for line in lines:
            for match in lexer.lex(line):
                print(lexer.kind(match),
                      repr(match.group(0)),
                      sep='\t')

    def executor(self, lines):
        '''
        Press every key of every line, showing the stack after each line.
        '''
        lexer = Lexer()
        for line in lines:
            try:
                for match in lexer.lex(line):
                    self.keypad.feed(lexer.matchedgroups(match))
            # Abort entire rest of line, makes sense anyway
            except RPNError as e:
                if self.args.verbose:
                    traceback.print_exc(file=sys.stderr)
                print(e.args[0], file=sys.stderr)
            print(self.keypad.stack.stack_string())

    def lines(self):
        '''
        Where keys come from: -e, a prompt on a terminal, or plain stdin.
        '''
        if self.args.expressions is not None:
            # -e 3 4 + is the one line "3 4 +"
            return [' '.join(self.args.expressions)]
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(self.args.prompt or self.DEFAULT_PROMPT,
                                    self.keypad.stack)
        return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        parser = ArgumentParser(
            description='Four register (X, Y, Z, T) RPN calculator')
        parser.add_argument('-v', '--verbose', action='store_true',
                            help='show tracebacks for bad keys')
        parser.add_argument('-s', '--separator',
                            default=RegisterStack.DEFAULT_SEPARATOR,
                            choices=['.', ','],
                            help='decimal separator on the display')
        parser.add_argument('-D', '--dump',
                            action='store_true',
                            help='print the key of each lexeme, run nothing')
        source = parser.add_mutually_exclusive_group()
        source.add_argument('-p', '--prompt',
                            help='prompt, even when not on a terminal')
        source.add_argument('-e', '--expression',
                            nargs=REMAINDER,
                            dest='expressions',
                            help='keys to press instead of reading stdin')
        self.argument_parser = parser

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        self.keypad = Keypad(RegisterStack(separator=self.args.separator))
        action = self.dumper if self.args.dump else self.executor
        try:
            action(self.lines())
        except KeyboardInterrupt:
            sys.exit(1)
