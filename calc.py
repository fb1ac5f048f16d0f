#!/usr/bin/env python3

import argparse as arg
import sys
from prattcalc.frontend.utils import tokenize, unrecognized_characters
from prattcalc.frontend.parser import parse_tokens
from prattcalc.frontend.expression import render
from prattcalc.interpreter import evaluate
from prattcalc.errors import CalcError, ErrorCode

def evaluate_line(line: str, args) -> int:
    if args.warn_unrecognized:
        for index, char in unrecognized_characters(line):
            print(f'Warning, {ErrorCode.UNRECOGNIZED_CHARACTER.value.lower()} {char!r} at {index}, ignored',
                  file=sys.stderr)

    tree = parse_tokens(tokenize(line))
    result = evaluate(tree)
    if args.tree:
        print(render(tree))
    return result

def repl(args):
    import readline
    try:
        while (src := input("expr: ")):
            try:
                print(evaluate_line(src, args))
            except CalcError as e:
                print(f'Error, {e}', file=sys.stderr)
    except EOFError:
        pass

def main(argv=None):
    parser = arg.ArgumentParser(
        prog='prattcalc',
        description='Evaluates single digit integer arithmetic read from stdin',
        epilog='Version 0.1.0')

    parser.add_argument('expression', nargs='?', default=None,
                        help='expression to evaluate instead of reading a line from stdin')
    parser.add_argument('-i', '--interactive', dest='interactive', action='store_true', default=False)
    parser.add_argument('-t', '--tree', dest='tree', action='store_true', default=False,
                        help='print the parsed expression tree before the result')
    parser.add_argument('-W', '--warn-unrecognized', dest='warn_unrecognized',
                        action='store_true', default=False,
                        help='report characters dropped by the tokenizer')
    args, extras = parser.parse_known_args(argv)

    # Expressions such as `-3+5` look like options to argparse
    if extras:
        if args.expression is not None or len(extras) > 1 or not extras[0].startswith('-'):
            parser.error('unrecognized arguments: ' + ' '.join(extras))
        args.expression = extras[0]

    if args.interactive:
        repl(args)
        return

    line = args.expression if args.expression is not None else sys.stdin.readline()

    try:
        result = evaluate_line(line, args)
    except CalcError as e:
        print(f'Error, {e}', file=sys.stderr)
        sys.exit(1)

    print(result)

if __name__ == '__main__':
    main()
