import numpy as np
import pytest

from symbolic_expressions import Expression, ConstantNode, VariableNode, OperationNode, OpType, Notation, parse


def op(op_type, *operands):
  return OperationNode(op_type, *operands)


x, y, z = VariableNode('x'), VariableNode('y'), VariableNode('z')

FIXED_ARITY_TREES = [
  x,
  ConstantNode(-4),
  op(OpType.ADD, x, ConstantNode(2)),
  op(OpType.SUB, op(OpType.NEGATE, x), op(OpType.MUL, ConstantNode(2), y)),
  op(OpType.DIV, op(OpType.HYPOT, x, y), op(OpType.HMEAN, z, ConstantNode(3))),
  op(OpType.NEGATE, op(OpType.NEGATE, op(OpType.ADD, x, op(OpType.MUL, y, z)))),
  op(OpType.MUL, op(OpType.ADD, x, y), op(OpType.SUB, z, op(OpType.DIV, x, ConstantNode(0.25)))),
]

VARIADIC_TREES = [
  op(OpType.ARITH_MEAN, x, y, z),
  op(OpType.ADD, op(OpType.GEOM_MEAN, x, ConstantNode(2)), op(OpType.HARM_MEAN, y, z, op(OpType.NEGATE, x))),
  op(OpType.HMEAN, op(OpType.ARITH_MEAN, x), op(OpType.GEOM_MEAN, op(OpType.MUL, x, y), z, ConstantNode(5))),
]

ALL_NOTATIONS = [Notation.PLAIN, Notation.INFIX, Notation.PREFIX, Notation.POSTFIX]
BRACKETED_NOTATIONS = [Notation.INFIX, Notation.PREFIX, Notation.POSTFIX]


@pytest.mark.parametrize("tree", FIXED_ARITY_TREES)
@pytest.mark.parametrize("notation", ALL_NOTATIONS)
def test_fixed_arity_round_trip(tree, notation):
  text = tree.render(notation)
  assert parse(text, notation).render(notation) == text
  assert parse(text, notation).root == tree


@pytest.mark.parametrize("tree", VARIADIC_TREES)
@pytest.mark.parametrize("notation", BRACKETED_NOTATIONS)
def test_variadic_round_trip(tree, notation):
  text = tree.render(notation)
  assert parse(text, notation).root == tree


@pytest.mark.parametrize("tree", FIXED_ARITY_TREES + VARIADIC_TREES)
@pytest.mark.parametrize("notation", BRACKETED_NOTATIONS)
def test_rendered_text_passes_strict_parsing(tree, notation):
  assert parse(tree.render(notation), notation, strict=True).root == tree


@pytest.mark.parametrize("notation", BRACKETED_NOTATIONS)
def test_derivative_round_trip_keeps_values(notation):
  expr = Expression(VARIADIC_TREES[2]).differentiate('x')
  reparsed = parse(expr.render(notation), notation, strict=True)
  point = (1.2, 0.8, 2.5)
  assert reparsed.evaluate(*point) == pytest.approx(expr.evaluate(*point))


def test_round_trip_preserves_values_on_batch():
  np.random.seed(0)
  X = np.random.uniform(0.5, 3.0, (50, 3))
  for tree in FIXED_ARITY_TREES:
    expr = Expression(tree)
    reparsed = parse(expr.prefix(), Notation.PREFIX, strict=True)
    np.testing.assert_allclose(reparsed.evaluate_batch(X), expr.evaluate_batch(X))
