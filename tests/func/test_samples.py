# -*- coding: utf-8 -*-
import pytest  # noqa
from infixeval import evaluate
from infixeval.samples import SAMPLES, run_samples, matches


@pytest.mark.parametrize("expression, expected", SAMPLES)
def test_sample(expression, expected):
    assert evaluate(expression) == pytest.approx(expected, rel=1e-4)


def test_run_samples():
    results = list(run_samples())

    assert len(results) == len(SAMPLES)
    for idx, expression, computed, expected in results:
        assert SAMPLES[idx] == (expression, expected)
        assert matches(computed, expected)


def test_matches():
    assert matches(0.000223214, 0.00022321)
    assert matches(41.0, 41.0)
    assert not matches(41.1, 41.0)
