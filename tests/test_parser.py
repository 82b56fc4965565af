import numpy as np
import pytest

from symbolic_expressions import (
  Notation, OpType, OperationNode, ConstantNode, ParseErrorKind, ParseOptions, StackParser,
  ExpressionParseError, UnbalancedParenthesesError, InsufficientOperandsError,
  InsufficientOperationsError, UnknownTokenError,
  tokenize, parse, parse_infix, parse_postfix, parse_prefix
)
from symbolic_expressions.expression_tree.parsing import parse_number


def test_tokenize_splits_brackets_and_whitespace():
  assert tokenize("(+ x  (* 2\ty))") == ['(', '+', 'x', '(', '*', '2', 'y', ')', ')']
  assert tokenize("   ") == []
  assert tokenize("x 2 *") == ['x', '2', '*']


@pytest.mark.parametrize("token, value", [
  ("12", 12), ("-3", -3), ("+4", 4), ("2.5", 2.5), (".5", 0.5), ("1e3", 1000.0),
])
def test_parse_number(token, value):
  parsed = parse_number(token)
  assert parsed == value
  assert type(parsed) is type(value)


@pytest.mark.parametrize("token", ["inf", "nan", "x", "+", "-", "1.2.3", "1_000", ""])
def test_parse_number_rejects(token):
  assert parse_number(token) is None


# Lenient parsing

def test_lenient_plain_form():
  assert parse_infix("x 2 * 3 +").evaluate(5) == 13


def test_lenient_postfix_without_brackets():
  assert parse_postfix("1 2 3 arithMean").evaluate() == 2


def test_lenient_ignores_unknown_tokens():
  assert parse_infix("x 2 * foo").evaluate(3) == 6
  assert parse_postfix("(x foo 2 *)").evaluate(3) == 6


def test_lenient_empty_input():
  assert parse_infix("") is None
  assert parse_prefix("( )") is None


def test_lenient_returns_bottom_of_stack():
  expr = parse_postfix("(1 2 +) 7")
  assert expr.evaluate() == 3


def test_lenient_drops_operation_without_operands():
  assert parse_infix("(negate)") is None
  assert parse_infix("(3 + )").evaluate() == 3


def test_lenient_prefix_ignores_operation_without_operands():
  expr = parse_prefix("(+ 1)")
  assert expr.root == ConstantNode(1)
  assert expr.evaluate() == 1
  assert parse_prefix("(arithMean)") is None


def test_lenient_postfix_ignores_operation_without_operands():
  assert parse_postfix("x +").evaluate(2) == 2
  assert parse_postfix("(x 2 *) (negate)").evaluate(3) == 6


def test_lenient_operands_stay_inside_their_group():
  # "+" cannot reach the 1 outside its brackets
  expr = parse_postfix("1 (2 +)")
  assert expr.root == ConstantNode(1)
  assert parse_prefix("(- (+ 2) 1)").evaluate() == 1


# Infix

def test_infix_binary_groups():
  assert parse_infix("(1 + 2)", strict=True).evaluate() == 3
  assert parse_infix("((x * 2) - (y / 4))", strict=True).evaluate(3, 8) == 4
  assert parse_infix("(x + (y * z))", strict=True).evaluate(1, 2, 3) == 7


def test_infix_named_operations():
  assert parse_infix("(negate x)", strict=True).evaluate(4) == -4
  assert parse_infix("(hypot 3 4)", strict=True).evaluate() == 25
  assert parse_infix("(1 + negate 2)", strict=True).evaluate() == -1
  assert parse_infix("(arithMean 1 2 (3 * 2))", strict=True).evaluate() == 3


def test_infix_chains_left_to_right():
  assert parse_infix("(1 - 2 - 3)").evaluate() == -4


def test_infix_reader_accepts_postfix_groups():
  assert parse_infix("((1 2 +) 3 *)", strict=True).evaluate() == 9


def test_infix_redundant_brackets_around_operation():
  assert parse_infix("((1 + 2))", strict=True).evaluate() == 3


def test_postfix_equals_infix():
  postfix = parse_postfix("(1 2 +)", strict=True)
  infix = parse_infix("(1 + 2)", strict=True)
  assert postfix == infix
  assert postfix.evaluate() == infix.evaluate() == 3
  assert postfix.prefix() == infix.prefix() == "(+ 1 2)"


# Postfix and prefix

def test_prefix_operand_order_restored():
  expr = parse_prefix("(- (/ x 2) 1)", strict=True)
  assert expr.prefix() == "(- (/ x 2) 1)"


def test_prefix_variadic_is_bounded_by_brackets():
  expr = parse_prefix("(+ (arithMean 1 2 3) (geomMean 2 8))", strict=True)
  assert expr.evaluate() == pytest.approx(6)
  assert expr.root.operands[0].op_type == OpType.ARITH_MEAN
  assert len(expr.root.operands[0].operands) == 3


def test_postfix_variadic_is_bounded_by_brackets():
  expr = parse_postfix("(10 (1 2 3 arithMean) -)", strict=True)
  assert expr.evaluate() == 8


def test_prefix_negative_product_geometric_mean():
  assert parse_prefix("(geomMean -2 8)", strict=True).evaluate() == pytest.approx(4)


def test_decimal_constants():
  assert parse_prefix("(* 0.5 x)", strict=True).evaluate(3) == 1.5


def test_parse_dispatch_and_options():
  assert parse("(* x 2)", Notation.PREFIX).evaluate(2) == 4
  assert parse("(x 2 *)", Notation.POSTFIX).evaluate(2) == 4
  root = StackParser(ParseOptions(Notation.PREFIX, strict=True)).parse(tokenize("(+ 1 2)"))
  assert root == OperationNode(OpType.ADD, ConstantNode(1), ConstantNode(2))
  assert float(root.evaluate(np.zeros(3))) == 3


# Strict errors

@pytest.mark.parametrize("parser", [parse_prefix, parse_infix])
def test_strict_rejects_missing_operand(parser):
  with pytest.raises(InsufficientOperandsError) as info:
    parser("(+ 1)", strict=True)
  assert info.value.kind == ParseErrorKind.INSUFFICIENT_OPERANDS
  assert info.value.required == 2
  assert "need 2" in info.value.message


def test_strict_postfix_missing_operand():
  with pytest.raises(InsufficientOperandsError):
    parse_postfix("(1 +)", strict=True)


@pytest.mark.parametrize("parser, text", [
  (parse_prefix, "(+ 1 2"),
  (parse_infix, "(+ 1 2"),
  (parse_postfix, "((1 2 +)"),
  (parse_infix, "(1 + 2))"),
  (parse_prefix, "(+ 1 2))"),
])
def test_strict_rejects_unbalanced(parser, text):
  with pytest.raises(UnbalancedParenthesesError) as info:
    parser(text, strict=True)
  assert info.value.kind == ParseErrorKind.UNBALANCED_PARENTHESES


@pytest.mark.parametrize("parser, text", [
  (parse_postfix, "(1 2 +) 3"),
  (parse_postfix, "()"),
  (parse_postfix, "((1 2 +))"),
  (parse_postfix, "1 2 +"),
  (parse_infix, "(x)"),
  (parse_infix, "(1 2 + 3)"),
  (parse_infix, "x y"),
  (parse_infix, ""),
])
def test_strict_rejects_missing_operations(parser, text):
  with pytest.raises(InsufficientOperationsError) as info:
    parser(text, strict=True)
  assert info.value.kind == ParseErrorKind.INSUFFICIENT_OPERATIONS


def test_strict_rejects_unknown_token():
  with pytest.raises(UnknownTokenError) as info:
    parse_prefix("(+ 1 w)", strict=True)
  assert info.value.token == 'w'
  assert info.value.message == "Unknown token: w"
  assert info.value.kind == ParseErrorKind.UNKNOWN_TOKEN


def test_parse_errors_are_value_errors():
  with pytest.raises(ValueError):
    parse_infix("(x ^ 2)", strict=True)
  assert issubclass(ExpressionParseError, ValueError)


def test_strict_accepts_single_leaf():
  assert parse_prefix("x", strict=True).evaluate(9) == 9
  assert parse_infix("42", strict=True).evaluate() == 42
