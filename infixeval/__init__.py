# -*- coding: utf-8 -*-
# flake8: NOQA
from infixeval.evaluator import Evaluator, Result, evaluate, try_evaluate, \
    EXIT_FAULT
from infixeval.scanner import is_digit, is_operator, read_number
from infixeval.common import EvalContext, Location, pos_to_line_col
from infixeval.exceptions import EvaluationError, PreconditionError, \
    MalformedLiteralError, TrailingInputError, UnmatchedParenthesisError, \
    DivisionByZeroError

from .version import __version__
