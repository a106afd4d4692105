"""AST-based expression evaluator for plural rule conditions.

This module provides safe evaluation of boolean expressions using Python's AST,
such as ``n % 10 == 1 and n % 100 != 11``. Only integer arithmetic, named
operands, comparisons and boolean operators are accepted.
"""

from __future__ import annotations

import ast
import functools
import operator as op
from typing import Callable, TypeVar, Type

from .types import OperandParam, OperandValue


_T = TypeVar('_T')

_ARITHMETIC: dict[Type[ast.operator], Callable[[OperandValue, OperandValue], OperandValue]] = {
    ast.Add: op.add,
    ast.Sub: op.sub,
    ast.Mult: op.mul,
    ast.FloorDiv: op.floordiv,
    ast.Mod: op.mod,
}

def _get_operator(op_type: Type[ast.cmpop]) -> Callable[[_T, _T], bool]:
    if op_type is ast.Gt:
        return op.gt
    if op_type is ast.GtE:
        return op.ge
    if op_type is ast.Lt:
        return op.lt
    if op_type is ast.LtE:
        return op.le
    if op_type is ast.Eq:
        return op.eq
    if op_type is ast.NotEq:
        return op.ne
    raise ValueError('unknown operator type')

class ASTExpressionEvaluator:
    """Evaluator for safe boolean expressions using Python AST."""

    @staticmethod
    @functools.lru_cache(maxsize=512)
    def parse(expression: str) -> ast.Expression | None:
        """Parse and cache the AST for a boolean expression.

        Args:
            expression: String expression to parse

        Returns:
            Parsed AST Expression or None if invalid syntax
        """
        try:
            node = ast.parse(expression, mode="eval")
            assert isinstance(node, ast.Expression)
            return node
        except (SyntaxError, AssertionError):
            return None

    @classmethod
    def is_valid(cls, expression: str) -> bool:
        """Whether an expression parses."""
        return cls.parse(expression) is not None

    @classmethod
    def evaluate(cls, expression: str, operands: OperandParam | None = None) -> bool:
        """Safely evaluate a boolean expression.

        Args:
            expression: Boolean expression string
            operands: Values of the names used in the expression

        Returns:
            Boolean result of evaluation, False if the expression is invalid
        """
        tree = cls.parse(expression)
        if tree is None:
            return False

        try:
            return cls._evaluate_node(tree.body, operands or {})
        except (ValueError, TypeError, ArithmeticError):
            return False

    @classmethod
    def _evaluate_node(cls, node: ast.expr, operands: OperandParam) -> bool:
        """Evaluate a parsed AST node representing a conditional expression.

        Args:
            node: AST expression node
            operands: Named operand values

        Returns:
            Boolean result

        Raises:
            ValueError: If node type is unsupported
        """
        if isinstance(node, ast.BoolOp):
            return cls._evaluate_bool_op(node, operands)

        if isinstance(node, ast.UnaryOp) and isinstance(node.op, ast.Not):
            return not cls._evaluate_node(node.operand, operands)

        if isinstance(node, ast.Compare):
            return cls._evaluate_compare(node, operands)

        if isinstance(node, ast.Constant) and isinstance(node.value, bool):
            return node.value

        raise ValueError(f"Unsupported node type: {type(node)}")

    @classmethod
    def _evaluate_bool_op(cls, node: ast.BoolOp, operands: OperandParam) -> bool:
        """Evaluate boolean operations (and/or)."""
        results = [cls._evaluate_node(value, operands) for value in node.values]

        if isinstance(node.op, ast.And):
            return all(results)
        if isinstance(node.op, ast.Or):
            return any(results)

        raise ValueError(f"Unsupported boolean operator: {type(node.op)}")

    @classmethod
    def _evaluate_compare(cls, node: ast.Compare, operands: OperandParam) -> bool:
        """Evaluate comparison operations.

        Membership tests take a literal tuple, list or set on the right:
        ``n % 100 in (12, 13, 14)``.

        Returns:
            Boolean result of comparison chain
        """
        left = cls._evaluate_operand(node.left, operands)

        for operator, comparator in zip(node.ops, node.comparators):
            if isinstance(operator, (ast.In, ast.NotIn)):
                members = cls._evaluate_members(comparator, operands)
                found = left in members
                if found != isinstance(operator, ast.In):
                    return False
                continue

            right = cls._evaluate_operand(comparator, operands)
            if not cls._apply_comparison(operator, left, right):
                return False
            left = right

        return True

    @classmethod
    def _evaluate_members(cls, node: ast.expr, operands: OperandParam) -> list[OperandValue]:
        if isinstance(node, (ast.Tuple, ast.List, ast.Set)):
            return [cls._evaluate_operand(element, operands) for element in node.elts]
        raise ValueError(f"Unsupported membership target: {type(node)}")

    @classmethod
    def _evaluate_operand(cls, node: ast.expr, operands: OperandParam) -> OperandValue:
        """Evaluate an operand within a conditional expression.

        Args:
            node: AST expression node
            operands: Named operand values

        Returns:
            Evaluated numeric value

        Raises:
            ValueError: If operand type is unsupported or a name is unknown
        """
        # Handle constants (literals)
        if isinstance(node, ast.Constant) and isinstance(node.value, (bool, int, float)):
            return node.value

        if isinstance(node, ast.Name):
            if node.id not in operands:
                raise ValueError(f"Unknown operand: {node.id}")
            return operands[node.id]

        # Handle unary operations (+/-)
        if isinstance(node, ast.UnaryOp) and isinstance(node.op, (ast.UAdd, ast.USub)):
            operand = cls._evaluate_operand(node.operand, operands)
            return operand if isinstance(node.op, ast.UAdd) else -operand

        if isinstance(node, ast.BinOp) and type(node.op) in _ARITHMETIC:
            left = cls._evaluate_operand(node.left, operands)
            right = cls._evaluate_operand(node.right, operands)
            return _ARITHMETIC[type(node.op)](left, right)

        raise ValueError(f"Unsupported operand type: {type(node)}")

    @staticmethod
    def _apply_comparison(operator: ast.cmpop, left: OperandValue, right: OperandValue) -> bool:
        """Apply a comparison operator between two values.

        Raises:
            ValueError: If comparison is invalid
        """
        if isinstance(operator, ast.Eq):
            return left == right
        if isinstance(operator, ast.NotEq):
            return left != right

        # Ordering comparisons
        if isinstance(operator, (ast.Gt, ast.GtE, ast.Lt, ast.LtE)):
            comparator = _get_operator(type(operator))
            return comparator(float(left), float(right))

        raise ValueError(f"Unsupported comparison operator: {type(operator)}")
