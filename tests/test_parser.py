from pytest import raises
from calc.lexer import Lexer
from calc.tokenizer import Token, TokenTypes as TT
from calc.parser import ASTParser
from calc.ast import (
    BinaryOperator,
    BinaryOperatorKind as K,
    BinOp,
    ExpressionStatement,
    Num,
    Parenthesized,
    Program,
)
from calc.exceptions import ParserError


def num(value):
    return Num(Token(TT.INTEGER, value))


def binop(left, kind, right):
    token_type = {K.PLUS: TT.PLUS, K.MINUS: TT.MINUS, K.MULTIPLY: TT.MUL, K.DIVIDE: TT.DIV}
    return BinOp(left, BinaryOperator(kind, Token(token_type[kind])), right)


def parser_for(input):
    return ASTParser(Lexer(input).get_tokens())


def test__peek():
    parser = parser_for("42")
    with raises(IndexError):
        parser._peek(-1)
    assert parser._peek() == Token(TT.INTEGER, 42)
    assert parser._peek(1) == Token(TT.EOF)
    # clamped to the EOF sentinel
    assert parser._peek(42) == Token(TT.EOF)


def test_missing_eof_is_appended():
    parser = ASTParser([Token(TT.INTEGER, 1)])
    assert parser._peek(1) == Token(TT.EOF)
    assert parser.next_statement() == ExpressionStatement(num(1))
    assert parser.next_statement() is None


def test_current_token_skips_trivia():
    parser = parser_for("  $ ? 7")
    assert parser.current_token == Token(TT.INTEGER, 7)
    assert parser_for("1 $ + @ 2").statement() == ExpressionStatement(
        binop(num(1), K.PLUS, num(2))
    )


def test_primary():
    assert parser_for("42").primary() == num(42)
    assert parser_for("(42)").primary() == Parenthesized(num(42))
    assert parser_for("-42").primary() == binop(num(0), K.MINUS, num(42))
    assert parser_for("--42").primary() == binop(
        num(0), K.MINUS, binop(num(0), K.MINUS, num(42))
    )

    with raises(ParserError) as e:
        parser_for("  *").primary()
    assert e.value.position == 2
    assert e.value.token == Token(TT.MUL)


def test_expr():
    assert parser_for("39+3").expr() == binop(num(39), K.PLUS, num(3))

    assert parser_for("6 + (7 * 8)").expr() == binop(
        num(6), K.PLUS, Parenthesized(binop(num(7), K.MULTIPLY, num(8)))
    )


def test_precedence():
    assert parser_for("2 + 3 * 4").expr() == binop(
        num(2), K.PLUS, binop(num(3), K.MULTIPLY, num(4))
    )
    assert parser_for("2 * 3 + 4").expr() == binop(
        binop(num(2), K.MULTIPLY, num(3)), K.PLUS, num(4)
    )


def test_left_associativity():
    assert parser_for("10 - 3 - 2").expr() == binop(
        binop(num(10), K.MINUS, num(3)), K.MINUS, num(2)
    )
    assert parser_for("8 / 4 * 2").expr() == binop(
        binop(num(8), K.DIVIDE, num(4)), K.MULTIPLY, num(2)
    )


def test_unary_minus_binds_tightest():
    assert parser_for("-2 * 3").expr() == binop(
        binop(num(0), K.MINUS, num(2)), K.MULTIPLY, num(3)
    )
    assert parser_for("-(2 + 3)").expr() == binop(
        num(0), K.MINUS, Parenthesized(binop(num(2), K.PLUS, num(3)))
    )
    assert parser_for("(7 - 8) * -1").expr() == binop(
        Parenthesized(binop(num(7), K.MINUS, num(8))),
        K.MULTIPLY,
        binop(num(0), K.MINUS, num(1)),
    )


def test_operator_keeps_its_token():
    node = parser_for("1 + 2").expr()
    assert node.op.kind == K.PLUS
    assert node.token.position == 2
    assert node.op.precedence == 1


def test_next_statement():
    parser = parser_for("6 + (7 * 8)")
    statement = parser.next_statement()
    assert statement == ExpressionStatement(
        binop(num(6), K.PLUS, Parenthesized(binop(num(7), K.MULTIPLY, num(8))))
    )
    assert parser.next_statement() is None
    assert parser.next_statement() is None
    assert parser.errors == []


def test_multiple_statements():
    program = parser_for("1 + 2 3 (4)").program()
    assert program == Program(
        [
            ExpressionStatement(binop(num(1), K.PLUS, num(2))),
            ExpressionStatement(num(3)),
            ExpressionStatement(Parenthesized(num(4))),
        ]
    )


def test_empty_input():
    parser = parser_for("   ")
    assert parser.next_statement() is None
    assert parser.program() == Program()
    assert parser.errors == []


def test_unmatched_paren_stops_statements():
    parser = parser_for("(1 + 2")
    assert parser.next_statement() is None
    assert len(parser.errors) == 1
    error = parser.errors[0]
    assert isinstance(error, ParserError)
    assert error.position == 6
    assert "expected RPAREN" in error.message

    with raises(ParserError):
        parser_for("(1 + 2").statement()


def test_syntax_error_keeps_earlier_statements():
    parser = parser_for("1 2 + ) 3")
    program = parser.program()
    assert program == Program([ExpressionStatement(num(1))])
    assert len(parser.errors) == 1
    # no statements after the first error
    assert parser.next_statement() is None


def test_missing_right_operand():
    parser = parser_for("1 +")
    assert parser.next_statement() is None
    assert parser.errors[0].token == Token(TT.EOF)
    assert parser.errors[0].position == 3


def test_deep_nesting_is_a_syntax_error():
    for input in ("(" * 5000 + "1" + ")" * 5000, "-" * 5000 + "1"):
        parser = parser_for("2 " + input)
        assert parser.program() == Program([ExpressionStatement(num(2))])
        assert len(parser.errors) == 1
        assert "nested too deeply" in parser.errors[0].message
        assert parser.next_statement() is None
