from pytest import raises
from calc.lexer import Lexer
from calc.parser import ASTParser
from calc.tokenizer import Token, TokenTypes as TT
from calc.ast import BinaryOperatorKind, Num, Parenthesized
from calc.exceptions import InterpreterError
from calc.genastdot import ASTVisualizer, main, op_labels


def test_gendot():
    program = ASTParser(Lexer("1 + 2").get_tokens()).program()
    content = ASTVisualizer(program).gendot()
    assert content.startswith("digraph astgraph {")
    assert content.rstrip().endswith("}")
    assert '  node1 [label="Program"]\n' in content
    assert '  node2 [label="Stmt"]\n' in content
    assert '  node3 [label="+"]\n' in content
    assert '  node4 [label="1"]\n' in content
    assert '  node5 [label="2"]\n' in content
    for edge in ("node3 -> node4", "node3 -> node5", "node2 -> node3", "node1 -> node2"):
        assert edge in content


def test_gendot_parenthesized():
    program = ASTParser(Lexer("-(3)").get_tokens()).program()
    content = ASTVisualizer(program).gendot()
    assert '[label="-"]' in content
    assert '[label="( )"]' in content
    assert content.count("->") == 5


def test_main(capsys):
    main(["6 + (7 * 8)"])
    out = capsys.readouterr().out
    assert "digraph astgraph" in out
    assert '[label="*"]' in out


def test_gendot_deep_tree():
    node = Num(Token(TT.INTEGER, 1))
    for _ in range(0, 5000):
        node = Parenthesized(node)
    with raises(InterpreterError):
        ASTVisualizer(node).gendot()


def test_op_labels_cover_every_operator():
    assert set(op_labels) == set(BinaryOperatorKind)
