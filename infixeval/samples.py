"""
Sample expressions with their expected (rounded) values.
"""
from infixeval.evaluator import Evaluator

SAMPLES = (
    ("-((6+4))* -(2+2) - -1", 41.0),
    ("6/5-4-45+3.08", -44.72),
    ("0.34+ -34/45-2", -2.41556),
    ("(0.03)*73-2", 0.19),
    ("(20-23 + -5 * (12 / (34 + 3) - 3))", 10.3784),
    ("-25 + 4 * -(32 - 45 / 5 - -6)", -141.0),
    ("0.0003101 - 34 * (4 + 5) / 23", -13.3040),
    ("1 + ((1 + 1) + 3) + 4 * 5 / 6 - 7", 2.33333),
    ("9 / 8/7 /6/5/4  /  3 /  2/1", 0.00022321),
    ("-( -(-( -(2+3*4)+2 )-1)+ 0)", 11.0),
)

# Expected values are rounded so comparison is relative.
TOLERANCE = 1e-4


def run_samples(evaluator=None):
    """
    Evaluates all samples.

    Yields:
        tuple: (index, expression, computed, expected)
    """
    evaluator = evaluator or Evaluator()
    for idx, (expression, expected) in enumerate(SAMPLES):
        yield idx, expression, evaluator.evaluate(expression), expected


def matches(computed, expected, tolerance=TOLERANCE):
    return abs(computed - expected) <= tolerance * max(abs(expected), 1e-12)
