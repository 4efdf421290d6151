"""Tests for ZBasic syntax tree shapes and operator recognizers."""

from zbasic import (
    ZBasicBooleanOp, ZBasicBooleanOperation, ZBasicBoolExpression, ZBasicExpression, ZBasicIfStatement,
    ZBasicNumericExpression, ZBasicNumericOp, ZBasicNumericType, ZBasicProgram, ZBasicStatement,
    ZBasicToken, ZBasicTokenType, ZBasicVariable, ZBasicVariableType, ZBasicVarStatement, ZBasicWhileStatement,
    parse_boolean_op, parse_numeric_op, tokenize
)


class TestZBasicOperatorRecognizers:
    """Test consuming operator tokens from a stream."""

    def test_numeric_ops(self):
        """Test every numeric operator is recognized and consumed."""
        stream = tokenize("+ - * /")
        assert parse_numeric_op(stream) == ZBasicNumericOp.ADD
        assert parse_numeric_op(stream) == ZBasicNumericOp.SUBTRACT
        assert parse_numeric_op(stream) == ZBasicNumericOp.MULTIPLY
        assert parse_numeric_op(stream) == ZBasicNumericOp.DIVIDE
        assert not stream.available()

    def test_boolean_ops(self):
        """Test every boolean operator is recognized and consumed."""
        stream = tokenize("&& ||")
        assert parse_boolean_op(stream) == ZBasicBooleanOp.AND
        assert parse_boolean_op(stream) == ZBasicBooleanOp.OR
        assert not stream.available()

    def test_other_operator_not_consumed(self):
        """Test that a non-matching operator leaves the stream where it was."""
        stream = tokenize("== +")
        assert parse_numeric_op(stream) is None
        assert parse_boolean_op(stream) is None
        assert stream.peek() == ZBasicToken(ZBasicTokenType.OPERATOR, "==")

    def test_non_operator_not_consumed(self):
        """Test that a token that isn't an operator is left alone."""
        stream = tokenize("x")
        assert parse_numeric_op(stream) is None
        assert stream.index == 0

    def test_exhausted_stream(self):
        """Test recognizers on an empty stream."""
        stream = tokenize("")
        assert parse_numeric_op(stream) is None
        assert parse_boolean_op(stream) is None

    def test_recognizers_in_sequence(self):
        """Test skipping operands by hand while recognizing operators."""
        stream = tokenize("1 + 2 && true")
        stream.pop()
        assert parse_boolean_op(stream) is None
        assert parse_numeric_op(stream) == ZBasicNumericOp.ADD
        stream.pop()
        assert parse_boolean_op(stream) == ZBasicBooleanOp.AND
        assert stream.pop() == ZBasicToken(ZBasicTokenType.BOOL, True)


class TestZBasicSyntaxTreeShapes:
    """Test building syntax trees by hand."""

    def test_assignment_program(self):
        """Test a program with a single assignment."""
        value = ZBasicNumericExpression(value=3, data_type=ZBasicNumericType.INT)
        statement = ZBasicStatement(ZBasicVarStatement("x", ZBasicExpression(value)))
        program = ZBasicProgram(
            main=statement,
            variables={"x": ZBasicVariable("x", ZBasicVariableType.INTEGER, 3)}
        )

        assert program.main is statement
        assert program.variables["x"].value == 3
        assert not value.inverted

    def test_statement_chain(self):
        """Test walking linked statements."""
        condition = ZBasicBoolExpression(
            ZBasicBooleanOperation(ZBasicBooleanOp.AND, ZBasicBoolExpression(True), ZBasicBoolExpression(False)),
            inverted=True
        )
        body = ZBasicStatement(ZBasicExpression(ZBasicBoolExpression(True)))
        loop = ZBasicStatement(ZBasicWhileStatement(condition, body))
        branch = ZBasicStatement(ZBasicIfStatement(condition, body), next=loop)

        assert branch.chain() == [branch, loop]
        assert body.chain() == [body]
        assert branch.data.else_statement is None

    def test_empty_program(self):
        """Test program defaults."""
        program = ZBasicProgram()
        assert program.main is None
        assert program.variables == {}
