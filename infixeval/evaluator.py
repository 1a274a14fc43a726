# -*- coding: utf-8 -*-
import io
import logging
from infixeval.common import EvalContext, Location, pos_to_line_col
from infixeval.exceptions import (EvaluationError, PreconditionError,
                                  MalformedLiteralError, TrailingInputError,
                                  UnmatchedParenthesisError,
                                  DivisionByZeroError)
from infixeval.scanner import read_number
from infixeval.termui import h_print, a_print, s_emph
from infixeval import termui


logger = logging.getLogger(__name__)

# Exit status used when the evaluator runs in hard-fail mode.
EXIT_FAULT = 3


class Evaluator(object):
    """Evaluates arithmetic expressions by recursive descent.

    Parsing and computation happen in a single pass over the input; no tokens
    or trees are built. The evaluator holds configuration only, all the state
    of an evaluation lives in an :class:`EvalContext` created per call, so
    a single instance may be shared between threads.
    """
    def __init__(self, ws=' ', allow_trailing=False, fail_hard=False,
                 debug=False, debug_colors=False):
        self.ws = ws
        self.allow_trailing = allow_trailing
        self.fail_hard = fail_hard
        self.debug = debug
        self.debug_colors = debug_colors

    def evaluate_file(self, file_name):
        """
        Evaluates the expression stored in the given file.
        Args:
            file_name(str): A file name.
        """
        with io.open(file_name, 'r', encoding='utf-8') as f:
            content = f.read()
        return self.evaluate(content.strip(), file_name=file_name)

    def evaluate(self, input_str, file_name=None):
        """
        Evaluates the given expression string.
        Args:
            input_str(str): An expression to evaluate.
            file_name(str): File name if applicable. Used in error reporting.

        Returns:
            float: The value of the expression.
        """
        try:
            return self._evaluate(input_str, file_name)
        except EvaluationError as e:
            if not self.fail_hard:
                raise
            logger.critical("Evaluation fault: %s", e.message)
            a_print("Fatal:", str(e), err=True)
            raise SystemExit(EXIT_FAULT) from e

    def _evaluate(self, input_str, file_name):
        if input_str is None or not input_str.strip(self.ws or None):
            raise PreconditionError("expression is empty")

        logger.debug("Evaluating %r", input_str)
        if self.debug:
            self._print(a_print, "*** EVALUATION STARTED", new_line=True)

        context = EvalContext(input_str, file_name=file_name)
        value = self._expression(context)

        if context.depth != 0:
            raise UnmatchedParenthesisError(
                Location(context),
                f"{context.depth} unclosed parenthesis group(s)",
                depth=context.depth)

        self._skipws(context)
        if not context.at_end:
            if context.current == ')':
                raise UnmatchedParenthesisError(
                    Location(context), "unmatched ')'")
            if not self.allow_trailing:
                raise TrailingInputError(Location(context),
                                         found=context.current)
            logger.debug("Ignoring trailing input at position %d",
                         context.position)

        if self.debug:
            self._print(a_print, "*** EVALUATION FINISHED", new_line=True)
            self._print(h_print, "Result:", value=value)
        logger.debug("Result of %r is %r", input_str, value)
        return value

    def _expression(self, context):
        """
        Addition and subtraction. Also the entry point for every
        parenthesized group.
        """
        first = self._term(context)
        while True:
            self._skipws(context)
            opr = context.current
            if opr != '+' and opr != '-':
                return first
            context.position += 1

            second = self._term(context)
            if self.debug:
                self._trace(context, f"{first} {opr} {second}")
            if opr == '+':
                first = first + second
            else:
                first = first - second

    def _term(self, context):
        """
        Multiplication and division. Operands are atoms.
        """
        first = self._atom(context)
        while True:
            self._skipws(context)
            opr = context.current
            if opr != '*' and opr != '/':
                return first
            context.position += 1

            self._skipws(context)
            divisor_position = context.position
            second = self._atom(context)
            if self.debug:
                self._trace(context, f"{first} {opr} {second}")
            if opr == '*':
                first = first * second
            else:
                if second == 0:
                    raise DivisionByZeroError(
                        Location(context, position=divisor_position))
                first = first / second

    def _atom(self, context):
        """
        A number or a parenthesized sub-expression, optionally negated.
        """
        self._skipws(context)

        negative = False
        if context.current == '-':
            negative = True
            context.position += 1

        if context.current == '(':
            context.position += 1
            context.depth += 1
            if self.debug:
                self._trace(context, "open group")

            value = self._expression(context)
            if context.current != ')':
                raise UnmatchedParenthesisError(
                    Location(context),
                    "missing ')'" if context.at_end
                    else f"unexpected character '{context.current}'",
                    depth=context.depth)

            context.position += 1
            context.depth -= 1
            if self.debug:
                self._trace(context, "close group", value)
        else:
            if context.at_end:
                raise MalformedLiteralError(Location(context))
            value, context.position = read_number(
                context.input_str, context.position, context.file_name)
            if self.debug:
                self._trace(context, "number", value)

        return -value if negative else value

    def _skipws(self, context):
        if self.ws:
            input_str = context.input_str
            in_len = len(input_str)
            while context.position < in_len \
                    and input_str[context.position] in self.ws:
                context.position += 1

    def _trace(self, context, message, value=None):
        self._print(h_print,
                    "{}:".format(pos_to_line_col(context.input_str,
                                                 context.position)),
                    message + (" -> " if value is not None else ""),
                    value=value, level=context.depth)

    def _print(self, printer, header, content="", value=None, **kwargs):
        """
        Debug output styled by this evaluator's `debug_colors`. The global
        `termui.colors` is restored afterwards.
        """
        colors = termui.colors
        termui.colors = self.debug_colors
        try:
            if value is not None:
                content += s_emph(repr(value))
            printer(header, content, **kwargs)
        finally:
            termui.colors = colors


class Result(object):
    """
    The outcome of :func:`try_evaluate`: either a value or an error.
    """
    __slots__ = ['value', 'error']

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    @property
    def ok(self):
        return self.error is None

    @property
    def error_kind(self):
        return self.error.kind if self.error is not None else None

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.value

    def __bool__(self):
        return self.ok

    def __repr__(self):
        if self.ok:
            return "<Result(value={!r})>".format(self.value)
        return "<Result(error={})>".format(self.error_kind)


def evaluate(expression, **kwargs):
    """
    Evaluates the expression and returns its value.

    Keyword arguments are passed to :class:`Evaluator`.
    """
    return Evaluator(**kwargs).evaluate(expression)


def try_evaluate(expression, **kwargs):
    """
    Evaluates the expression, reporting evaluation errors as data.

    Returns:
        Result: with `value` set on success or `error` set on failure.
    """
    try:
        return Result(value=Evaluator(**kwargs).evaluate(expression))
    except EvaluationError as e:
        return Result(error=e)
