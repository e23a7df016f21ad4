###############################################################################
#  AST visualizer - generates a DOT file for Graphviz.                        #
#                                                                             #
#  To generate an image from the DOT file run $ dot -Tpng -o ast.png ast.dot  #
#                                                                             #
###############################################################################
import argparse
import textwrap
from typing import List, Dict

from calc.lexer import Lexer
from calc.parser import ASTParser
from calc.ast import (
    AST,
    ASTVisitor,
    BinaryOperatorKind,
    BinOp,
    ExpressionStatement,
    Num,
    Parenthesized,
    Program,
)
from calc.exceptions import InterpreterError


op_labels = {
    BinaryOperatorKind.PLUS: "+",
    BinaryOperatorKind.MINUS: "-",
    BinaryOperatorKind.MULTIPLY: "*",
    BinaryOperatorKind.DIVIDE: "/",
}


class ASTVisualizer(ASTVisitor):
    def __init__(self, root_node: AST):
        self.root_node = root_node
        self.ncount = 1
        self.dot_header = [
            textwrap.dedent(
                """\
        digraph astgraph {
          node [shape=circle, fontsize=12, fontname="Courier", height=.1];
          ranksep=.3;
          edge [arrowsize=.5]

        """
            )
        ]

        self.d: Dict[int, int] = {}
        self.dot_body: List[str] = []
        self.dot_footer = ["}"]

    def _add_node(self, node: AST, label: str) -> None:
        s = '  node{} [label="{}"]\n'.format(self.ncount, label)
        self.dot_body.append(s)
        self.d[id(node)] = self.ncount
        self.ncount += 1

    def _add_edge(self, parent: AST, child: AST) -> None:
        s = "  node{} -> node{}\n".format(self.d[id(parent)], self.d[id(child)])
        self.dot_body.append(s)

    def visit_Program(self, node: Program) -> None:
        self._add_node(node, "Program")
        for statement in node.statements:
            self.visit(statement)
            self._add_edge(node, statement)

    def visit_ExpressionStatement(self, node: ExpressionStatement) -> None:
        self._add_node(node, "Stmt")
        self.visit(node.expr)
        self._add_edge(node, node.expr)

    def visit_Num(self, node: Num) -> None:
        self._add_node(node, node.value)

    def visit_BinOp(self, node: BinOp) -> None:
        self._add_node(node, op_labels[node.op.kind])
        self.visit(node.left)
        self.visit(node.right)
        for child_node in (node.left, node.right):
            self._add_edge(node, child_node)

    def visit_Parenthesized(self, node: Parenthesized) -> None:
        self._add_node(node, "( )")
        self.visit(node.expr)
        self._add_edge(node, node.expr)

    def gendot(self):
        try:
            self.visit(self.root_node)
        except RecursionError as e:
            raise InterpreterError("expression nested too deeply") from e
        return "".join(self.dot_header + self.dot_body + self.dot_footer)


def main(argv=None):
    argparser = argparse.ArgumentParser(description="Generate an AST DOT file.")
    argparser.add_argument(
        "text", help='Arithmetic expression (in quotes): "1 + 2 * 3"'
    )
    args = argparser.parse_args(argv)
    text = args.text

    lexer = Lexer(text)
    tokens = lexer.get_tokens()
    parser = ASTParser(tokens)
    program = parser.program()
    viz = ASTVisualizer(program)
    content = viz.gendot()
    print(content)


if __name__ == "__main__":
    main()
