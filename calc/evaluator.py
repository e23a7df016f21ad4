import logging
from typing import Optional
from calc.ast import (
    ASTVisitor,
    BinaryOperatorKind,
    BinOp,
    ExpressionStatement,
    Num,
    Parenthesized,
    Program,
)
from calc.exceptions import DivisionByZeroError, IntegerOverflowError, InterpreterError


logger = logging.getLogger(__name__)

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def _check_range(value: int, node: BinOp) -> int:
    if not I64_MIN <= value <= I64_MAX:
        logger.debug("overflow evaluating %s", node)
        raise IntegerOverflowError(
            f"{node.op.kind.label} overflows a 64-bit integer at position {node.token.position}"
        )
    return value


def _truncating_div(left: int, right: int) -> int:
    # Python's // floors; integer division here truncates toward zero
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


class ASTEvaluator(ASTVisitor):
    def __init__(self):
        self.last_value: Optional[int] = None

    def evaluate(self, program: Program) -> Optional[int]:
        try:
            return self.visit(program)
        except RecursionError as e:
            raise InterpreterError("expression nested too deeply") from e

    def visit_Program(self, node: Program) -> Optional[int]:
        self.last_value = None
        for statement in node.statements:
            self.last_value = self.visit(statement)
        return self.last_value

    def visit_ExpressionStatement(self, node: ExpressionStatement) -> int:
        return self.visit(node.expr)

    def visit_Num(self, node: Num) -> int:
        return node.value

    def visit_BinOp(self, node: BinOp) -> int:
        left = self.visit(node.left)
        right = self.visit(node.right)
        kind = node.op.kind
        if kind == BinaryOperatorKind.PLUS:
            return _check_range(left + right, node)
        elif kind == BinaryOperatorKind.MINUS:
            return _check_range(left - right, node)
        elif kind == BinaryOperatorKind.MULTIPLY:
            return _check_range(left * right, node)
        elif kind == BinaryOperatorKind.DIVIDE:
            if right == 0:
                logger.debug("division by zero in %s", node)
                raise DivisionByZeroError(
                    f"division by zero at position {node.token.position}"
                )
            return _check_range(_truncating_div(left, right), node)

    def visit_Parenthesized(self, node: Parenthesized) -> int:
        return self.visit(node.expr)
