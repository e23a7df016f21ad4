import argparse
import logging
import sys
from typing import Optional

from calc.lexer import Lexer
from calc.parser import ASTParser
from calc.ast import ASTPrinter
from calc.evaluator import ASTEvaluator
from calc.genastdot import ASTVisualizer
from calc.exceptions import InterpreterError, ParserError


logger = logging.getLogger("calc.repl")


def run(text, show_tokens=False, show_ast=False, show_dot=False) -> Optional[int]:
    lexer = Lexer(text)
    tokens = lexer.get_tokens()
    if show_tokens:
        print(tokens)

    parser = ASTParser(tokens)
    program = parser.program()
    if show_ast:
        print(ASTPrinter().render(program))
    if show_dot:
        print(ASTVisualizer(program).gendot())
    if parser.errors:
        raise parser.errors[0]

    return ASTEvaluator().evaluate(program)


def main(argv=None) -> int:
    argparser = argparse.ArgumentParser(
        description="Evaluate an integer arithmetic expression."
    )
    argparser.add_argument(
        "text",
        nargs="?",
        default="-",
        help='Expression (in quotes): "6 + (7 * 8)". Reads stdin when omitted or "-"',
    )
    argparser.add_argument("--tokens", action="store_true", help="print the token list")
    argparser.add_argument("--ast", action="store_true", help="print the indented AST")
    argparser.add_argument("--dot", action="store_true", help="print the AST as DOT")
    argparser.add_argument("-v", "--verbose", action="store_true")
    args = argparser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    text = sys.stdin.readline().rstrip("\n") if args.text == "-" else args.text
    logger.debug("input %r", text)

    try:
        result = run(text, args.tokens, args.ast, args.dot)
    except ParserError as e:
        print(e.message, file=sys.stderr)
        return 1
    except InterpreterError as e:
        print(e.message, file=sys.stderr)
        return 2

    if result is not None:
        print(f"Result: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
