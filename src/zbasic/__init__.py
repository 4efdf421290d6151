"""ZBasic lexical front end: segments source text and classifies it into tokens."""

# Main API
from zbasic.zbasic_tokenizer import ZBasicTokenizer, tokenize

# Exceptions
from zbasic.zbasic_error import (
    ZBasicError, ZBasicTokenError, ZBasicUnparsableFloatError, ZBasicUnparsableIntError,
    ZBasicUnrecognizedTokenError, ZBasicOperatorTableError
)

# Tokens
from zbasic.zbasic_token import (
    BOOLEAN_LITERALS, KEYWORDS, OPERATORS, ZBasicToken, ZBasicTokenType
)
from zbasic.zbasic_token_stream import ZBasicTokenStream

# Lower-level components
from zbasic.zbasic_segmenter import ZBasicSegmenter, validate_operator_table
from zbasic.zbasic_classifier import ZBasicClassifier

# Syntax tree shapes
from zbasic.zbasic_ast import (
    ZBasicBooleanOp, ZBasicBooleanOperation, ZBasicBoolExpression, ZBasicExpression, ZBasicIfStatement,
    ZBasicNumericExpression, ZBasicNumericOp, ZBasicNumericOperation, ZBasicNumericType, ZBasicProgram,
    ZBasicStatement, ZBasicVarStatement, ZBasicWhileStatement, parse_boolean_op, parse_numeric_op
)
from zbasic.zbasic_variable import ZBasicVariable, ZBasicVariableType


__all__ = [
    # Main API
    "ZBasicTokenizer", "tokenize",

    # Exceptions
    "ZBasicError", "ZBasicTokenError", "ZBasicUnparsableFloatError", "ZBasicUnparsableIntError",
    "ZBasicUnrecognizedTokenError", "ZBasicOperatorTableError",

    # Tokens
    "BOOLEAN_LITERALS", "KEYWORDS", "OPERATORS", "ZBasicToken", "ZBasicTokenType", "ZBasicTokenStream",

    # Lower-level components
    "ZBasicSegmenter", "validate_operator_table", "ZBasicClassifier",

    # Syntax tree shapes
    "ZBasicBooleanOp", "ZBasicBooleanOperation", "ZBasicBoolExpression", "ZBasicExpression",
    "ZBasicIfStatement", "ZBasicNumericExpression", "ZBasicNumericOp", "ZBasicNumericOperation",
    "ZBasicNumericType", "ZBasicProgram", "ZBasicStatement", "ZBasicVarStatement", "ZBasicWhileStatement",
    "parse_boolean_op", "parse_numeric_op",
    "ZBasicVariable", "ZBasicVariableType",
]
