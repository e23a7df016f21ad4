from typing import Any, List, Optional
from abc import ABC, abstractmethod
from enum import Enum
from calc.tokenizer import Token, TokenTypes
from calc.exceptions import InterpreterError


class AST(object):
    def accept(self, visitor: "ASTVisitor") -> Any:
        return visitor.visit(self)

    def __str__(self):
        return "AST()"

    def __repr__(self):
        return str(self)


class Num(AST):
    def __init__(self, integer: Token):
        if integer.type not in (TokenTypes.INTEGER,):
            raise TypeError(f"invalid token type {integer.type} for {Num.__name__}")
        super().__init__()
        self._token = integer

    @property
    def token(self):
        return self._token

    @property
    def value(self) -> int:
        return self._token.value

    def __str__(self):
        return f"{Num.__name__}({self.value})"

    def __eq__(self, other):
        if type(self) != type(other):
            return False
        if self.token != other.token:
            return False
        return True


class BinaryOperatorKind(Enum):
    """
    Values are (label, precedence). A higher precedence binds tighter.
    """

    PLUS = ("Plus", 1)
    MINUS = ("Minus", 1)
    MULTIPLY = ("Multiply", 2)
    DIVIDE = ("Divide", 2)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def precedence(self) -> int:
        return self.value[1]


binary_op_kinds = {
    TokenTypes.PLUS: BinaryOperatorKind.PLUS,
    TokenTypes.MINUS: BinaryOperatorKind.MINUS,
    TokenTypes.MUL: BinaryOperatorKind.MULTIPLY,
    TokenTypes.DIV: BinaryOperatorKind.DIVIDE,
}


class BinaryOperator:
    def __init__(self, kind: BinaryOperatorKind, token: Token):
        if binary_op_kinds.get(token.type) is not kind:
            raise TypeError(f"invalid token type {token.type} for {kind}")
        self._kind = kind
        self._token = token

    @classmethod
    def from_token(cls, token: Token) -> Optional["BinaryOperator"]:
        kind = binary_op_kinds.get(token.type)
        if kind is None:
            return None
        return cls(kind, token)

    @property
    def kind(self):
        return self._kind

    @property
    def token(self):
        return self._token

    @property
    def precedence(self) -> int:
        return self._kind.precedence

    def __str__(self):
        return f"{BinaryOperator.__name__}({self._kind.label})"

    def __repr__(self):
        return str(self)

    def __eq__(self, other):
        if type(self) != type(other):
            return False
        return (self._kind, self._token) == (other.kind, other.token)


class BinOp(AST):
    def __init__(self, left: AST, op: BinaryOperator, right: AST):
        if left is None or right is None:
            raise TypeError(f"{BinOp.__name__} requires both operands")
        super().__init__()
        self._left, self._op, self._right = left, op, right

    @property
    def left(self):
        return self._left

    @property
    def op(self):
        return self._op

    @property
    def right(self):
        return self._right

    @property
    def token(self):
        return self._op.token

    def __str__(self):
        return f"{BinOp.__name__}({self._op.kind.label}, {self._left}, {self._right})"

    def __eq__(self, other):
        if type(self) != type(other):
            return False
        return (self._left, self._op, self._right) == (
            other.left,
            other.op,
            other.right,
        )


class Parenthesized(AST):
    def __init__(self, expr: AST):
        if expr is None:
            raise TypeError(f"{Parenthesized.__name__} requires an expression")
        super().__init__()
        self._expr = expr

    @property
    def expr(self):
        return self._expr

    def __str__(self):
        return f"{Parenthesized.__name__}({self._expr})"

    def __eq__(self, other):
        return type(self) == type(other) and self._expr == other.expr


class ExpressionStatement(AST):
    def __init__(self, expr: AST):
        super().__init__()
        self._expr = expr

    @property
    def expr(self):
        return self._expr

    def __str__(self):
        return f"{ExpressionStatement.__name__}({self._expr})"

    def __eq__(self, other):
        return type(self) == type(other) and self._expr == other.expr


class Program(AST):
    def __init__(self, statements: Optional[List[ExpressionStatement]] = None):
        super().__init__()
        self.statements: List[ExpressionStatement] = list(statements or [])

    def add_statement(self, statement: ExpressionStatement) -> None:
        self.statements.append(statement)

    def __str__(self):
        return f"{Program.__name__}({self.statements})"

    def __eq__(self, other):
        return type(self) == type(other) and self.statements == other.statements


class ASTVisitor(ABC):
    def visit(self, node: AST) -> Any:
        if type(node) is Program:
            return self.visit_Program(node)
        elif type(node) is ExpressionStatement:
            return self.visit_ExpressionStatement(node)
        elif type(node) is Num:
            return self.visit_Num(node)
        elif type(node) is BinOp:
            return self.visit_BinOp(node)
        elif type(node) is Parenthesized:
            return self.visit_Parenthesized(node)
        raise InterpreterError(f"no visit method for {type(node).__name__}")

    def visit_Program(self, node: Program) -> Any:
        result = None
        for statement in node.statements:
            result = self.visit(statement)
        return result

    @abstractmethod
    def visit_ExpressionStatement(self, node: ExpressionStatement) -> Any:
        ...

    @abstractmethod
    def visit_Num(self, node: Num) -> Any:
        ...

    @abstractmethod
    def visit_BinOp(self, node: BinOp) -> Any:
        ...

    @abstractmethod
    def visit_Parenthesized(self, node: Parenthesized) -> Any:
        ...


LEVEL_INDENT = 2


class ASTPrinter(ASTVisitor):
    """
    Renders a tree as indented text, one line per node or detail:

        Statement:
          Expression:
            Number: 42
    """

    def __init__(self):
        self._indent = 0
        self._lines: List[str] = []

    def render(self, node: AST) -> str:
        self._indent = 0
        self._lines = []
        try:
            self.visit(node)
        except RecursionError as e:
            raise InterpreterError("expression nested too deeply") from e
        return "\n".join(self._lines)

    def _print_with_indent(self, text: str) -> None:
        self._lines.append(" " * self._indent + text)

    def _visit_expression(self, node: AST) -> None:
        self._print_with_indent("Expression:")
        self._indent += LEVEL_INDENT
        self.visit(node)
        self._indent -= LEVEL_INDENT

    def visit_ExpressionStatement(self, node: ExpressionStatement) -> None:
        self._print_with_indent("Statement:")
        self._indent += LEVEL_INDENT
        self._visit_expression(node.expr)
        self._indent -= LEVEL_INDENT

    def visit_Num(self, node: Num) -> None:
        self._print_with_indent(f"Number: {node.value}")

    def visit_BinOp(self, node: BinOp) -> None:
        self._print_with_indent("Binary Expression:")
        self._indent += LEVEL_INDENT
        self._print_with_indent(f"Operator: {node.op.kind.label}")
        self._visit_expression(node.left)
        self._visit_expression(node.right)
        self._indent -= LEVEL_INDENT

    def visit_Parenthesized(self, node: Parenthesized) -> None:
        self._print_with_indent("Parenthesized Expression:")
        self._indent += LEVEL_INDENT
        self._visit_expression(node.expr)
        self._indent -= LEVEL_INDENT
