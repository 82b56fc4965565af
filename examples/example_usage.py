import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from symbolic_expressions import (
  Notation, ExpressionParseError, LogLevel, configure_logging,
  parse_infix, parse_prefix, parse_postfix
)
from symbolic_expressions.expression_tree.utils import derivative_matches, describe


def show_notations(text):
  """Parse prefix text and print it in every notation"""
  expr = parse_prefix(text, strict=True)
  print(f"Input: {text}")
  for name, rendered in describe(expr).items():
    print(f"  {name:<8} {rendered}")
  return expr


def show_derivatives(expr, point):
  print(f"\nDerivatives of {expr.infix()} at {point}:")
  for var in ('x', 'y', 'z'):
    derivative = expr.differentiate(var)
    value = derivative.evaluate(*point)
    ok = derivative_matches(expr, var, point, derivative=derivative)
    print(f"  d/d{var} = {value:.6f}  (finite difference agrees: {ok})")


def show_batch(expr):
  np.random.seed(42)
  X = np.random.uniform(0.5, 2.0, (5, 3))
  print(f"\nBatch evaluation of {expr.infix()}:")
  for row, value in zip(X, expr.evaluate_batch(X)):
    print(f"  {np.round(row, 3)} -> {value:.6f}")


def show_errors():
  print("\nStrict parsing errors:")
  for parser, text in [(parse_prefix, "(+ 1)"), (parse_prefix, "(+ 1 2"),
                       (parse_postfix, "(1 2 +) 3"), (parse_infix, "(x ^ 2)")]:
    try:
      parser(text, strict=True)
    except ExpressionParseError as e:
      print(f"  {text!r:<14} {e.kind.value}: {e.message}")


if __name__ == "__main__":
  configure_logging(LogLevel.MINIMAL)

  expr = show_notations("(+ (* x (hypot y 2)) (arithMean x y z))")
  show_derivatives(expr, (1.5, 0.5, 2.0))
  show_batch(expr)

  same = parse_postfix("(1 2 +)", strict=True).root == parse_infix("(1 + 2)", strict=True).root
  print(f"\n'(1 2 +)' postfix equals '(1 + 2)' infix: {same}")
  print(f"Rendered back as {Notation.INFIX.value}: {parse_infix('(1 + 2)').infix()}")

  show_errors()
