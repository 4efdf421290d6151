"""ZBasic syntax tree shapes and operator recognizers.

These are the structures a ZBasic parser builds from a token stream, following
the language grammar:

    Program   -> Statement*
    Statement -> if (BoolExpr) { Statement } [else { Statement }]
               | while (BoolExpr) { Statement }
               | Var = Expr;
    Expr      -> NumExpr | BoolExpr
    NumExpr   -> Float | Int | -NumExpr | NumExpr NumericOp NumExpr | (NumExpr)
    BoolExpr  -> Bool | !BoolExpr | BoolExpr BoolOp BoolExpr | (BoolExpr)

Only the shapes are defined here.  The operator recognizers are the one piece
of parsing a token stream supports directly: they consume an operator token
if, and only if, it is one of the operators they look for.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from zbasic.zbasic_token import ZBasicTokenType
from zbasic.zbasic_token_stream import ZBasicTokenStream
from zbasic.zbasic_variable import ZBasicVariable


class ZBasicNumericOp(Enum):
    """Binary numeric operators."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


class ZBasicBooleanOp(Enum):
    """Binary boolean operators."""
    AND = "&&"
    OR = "||"


class ZBasicNumericType(Enum):
    """Result type of a numeric expression."""
    INT = "int"
    FLOAT = "float"


@dataclass
class ZBasicNumericOperation:
    """A binary numeric operation."""
    op: ZBasicNumericOp
    a: 'ZBasicNumericExpression'
    b: 'ZBasicNumericExpression'


@dataclass
class ZBasicNumericExpression:
    """A numeric constant or operation, optionally negated."""
    value: ZBasicNumericOperation | int | float
    data_type: ZBasicNumericType
    inverted: bool = False


@dataclass
class ZBasicBooleanOperation:
    """A binary boolean operation."""
    op: ZBasicBooleanOp
    a: 'ZBasicBoolExpression'
    b: 'ZBasicBoolExpression'


@dataclass
class ZBasicBoolExpression:
    """A boolean constant or operation, optionally negated with '!'."""
    value: ZBasicBooleanOperation | bool
    inverted: bool = False


@dataclass
class ZBasicExpression:
    """Either a numeric or a boolean expression."""
    value: ZBasicNumericExpression | ZBasicBoolExpression


@dataclass
class ZBasicIfStatement:
    """Conditional statement with an optional else branch."""
    condition: ZBasicBoolExpression
    statement: 'ZBasicStatement'
    else_statement: 'ZBasicStatement | None' = None


@dataclass
class ZBasicWhileStatement:
    """Loop statement."""
    condition: ZBasicBoolExpression
    statement: 'ZBasicStatement'


@dataclass
class ZBasicVarStatement:
    """Assignment of an expression to a named variable."""
    name: str
    expr: ZBasicExpression


@dataclass
class ZBasicStatement:
    """A statement, linked to the statement that follows it."""
    data: ZBasicIfStatement | ZBasicWhileStatement | ZBasicVarStatement | ZBasicExpression
    next: 'ZBasicStatement | None' = None

    def chain(self) -> List['ZBasicStatement']:
        """Return this statement and every statement that follows it, in order."""
        statements: List[ZBasicStatement] = []
        current: ZBasicStatement | None = self
        while current is not None:
            statements.append(current)
            current = current.next

        return statements


@dataclass
class ZBasicProgram:
    """A complete program: its first statement and its variables."""
    main: ZBasicStatement | None = None
    variables: Dict[str, ZBasicVariable] = field(default_factory=dict)


def _parse_operator(stream: ZBasicTokenStream, symbols: Dict[str, Enum]) -> Enum | None:
    token = stream.peek()
    if token is None or token.type != ZBasicTokenType.OPERATOR:
        return None

    op = symbols.get(str(token.value))
    if op is not None:
        stream.pop()

    return op


_NUMERIC_OPS: Dict[str, Enum] = {op.value: op for op in ZBasicNumericOp}
_BOOLEAN_OPS: Dict[str, Enum] = {op.value: op for op in ZBasicBooleanOp}


def parse_numeric_op(stream: ZBasicTokenStream) -> ZBasicNumericOp | None:
    """
    Consume a numeric operator if one is next in the stream.

    Args:
        stream: The token stream to read from

    Returns:
        The operator, or None (without consuming anything) if the next token
        is not a numeric operator
    """
    op = _parse_operator(stream, _NUMERIC_OPS)
    assert op is None or isinstance(op, ZBasicNumericOp)
    return op


def parse_boolean_op(stream: ZBasicTokenStream) -> ZBasicBooleanOp | None:
    """
    Consume a boolean operator if one is next in the stream.

    Args:
        stream: The token stream to read from

    Returns:
        The operator, or None (without consuming anything) if the next token
        is not a boolean operator
    """
    op = _parse_operator(stream, _BOOLEAN_OPS)
    assert op is None or isinstance(op, ZBasicBooleanOp)
    return op
