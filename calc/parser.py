import logging
from typing import List, Optional
from calc.tokenizer import Token, TokenTypes as TT, TextSpan
from calc.exceptions import ParserError
from calc.ast import (
    AST,
    BinaryOperator,
    BinaryOperatorKind,
    BinOp,
    ExpressionStatement,
    Num,
    Parenthesized,
    Program,
)


logger = logging.getLogger(__name__)

trivia_toks = (TT.WHITESPACE, TT.BAD)


class ASTParser:
    def __init__(self, tokens: List[Token]):
        self._tokens = list(tokens)
        if not self._tokens or self._tokens[-1].type != TT.EOF:
            end = self._tokens[-1].span.end if self._tokens and self._tokens[-1].span else 0
            self._tokens.append(Token(TT.EOF, span=TextSpan(end, "")))
        self._tok_idx = 0
        self._errors: List[ParserError] = []

    @property
    def errors(self) -> List[ParserError]:
        return self._errors

    @property
    def current_token(self) -> Token:
        self._skip_trivia()
        return self._peek()

    def _peek(self, offset=0) -> Token:
        """
        Past the end of the sequence this keeps returning the EOF token, so
        callers never need their own bounds checks.
        """
        if offset < 0:
            raise IndexError(
                f"{ASTParser.__name__}.{ASTParser._peek.__name__}() can only peek forward"
            )
        idx = min(self._tok_idx + offset, len(self._tokens) - 1)
        return self._tokens[idx]

    def _skip_trivia(self) -> None:
        while self._peek().type in trivia_toks:
            self._tok_idx += 1

    def _eat(self, type: TT) -> Token:
        token = self.current_token
        if token.type != type:
            raise ParserError(f"expected {type.name}, found {token.type.name}", token)
        self._tok_idx += 1
        return token

    def primary(self) -> AST:
        curr_token = self.current_token
        if curr_token.type == TT.INTEGER:
            self._eat(TT.INTEGER)
            return Num(curr_token)
        elif curr_token.type == TT.MINUS:
            # -x is parsed as 0 - x and binds only the following primary
            self._eat(TT.MINUS)
            zero = Token(TT.INTEGER, 0, TextSpan(curr_token.position or 0, ""))
            operand = self.primary()
            return BinOp(
                Num(zero), BinaryOperator(BinaryOperatorKind.MINUS, curr_token), operand
            )
        elif curr_token.type == TT.LPAREN:
            self._eat(TT.LPAREN)
            node = self.expr()
            self._eat(TT.RPAREN)
            return Parenthesized(node)

        raise ParserError(f"unexpected {curr_token.type.name}", curr_token)

    def expr(self, min_precedence: int = 0) -> AST:
        node = self.primary()
        op = BinaryOperator.from_token(self.current_token)
        # strictly greater keeps equal-precedence operators left-associative
        while op is not None and op.precedence > min_precedence:
            self._eat(op.token.type)
            right = self.expr(op.precedence)
            node = BinOp(node, op, right)
            op = BinaryOperator.from_token(self.current_token)
        return node

    def statement(self) -> ExpressionStatement:
        return ExpressionStatement(self.expr())

    def next_statement(self) -> Optional[ExpressionStatement]:
        if self._errors or self.current_token.type == TT.EOF:
            return None
        try:
            return self.statement()
        except RecursionError:
            e = ParserError("expression nested too deeply", self.current_token)
        except ParserError as error:
            e = error
        logger.warning(e.message)
        self._errors.append(e)
        return None

    def program(self) -> Program:
        program = Program()
        statement = self.next_statement()
        while statement is not None:
            program.add_statement(statement)
            statement = self.next_statement()
        return program
