#!/usr/bin/env python
import sys
import click
from infixeval import Evaluator, EvaluationError
from infixeval.samples import run_samples, matches
from infixeval.termui import prints, a_print, h_print
import infixeval.termui as t


@click.group()
@click.option('--debug', default=False, is_flag=True,
              help="Debug/trace output.")
@click.option('--no-colors', default=False, is_flag=True,
              help="Disable output coloring.")
@click.option('--allow-trailing', default=False, is_flag=True,
              help="Ignore input after a complete expression.")
@click.pass_context
def infixeval(ctx, debug, no_colors, allow_trailing):
    """
    Command line interface for evaluating arithmetic expressions.
    """
    ctx.obj = {'debug': debug, 'colors': not no_colors,
               'allow_trailing': allow_trailing}
    t.colors = not no_colors


def get_evaluator(ctx):
    return Evaluator(allow_trailing=ctx.obj['allow_trailing'],
                     debug=ctx.obj['debug'],
                     debug_colors=ctx.obj['colors'])


@infixeval.command(name='eval',
                   context_settings={'ignore_unknown_options': True})
@click.argument('expressions', nargs=-1)
@click.option('--input-file', '-f', type=click.Path(),
              help="File with the expression to evaluate")
@click.pass_context
def eval_(ctx, expressions, input_file):
    """
    Evaluates expressions. Expressions starting with a unary minus, e.g.
    `-5+3`, are accepted as arguments; `--` may be used before them too.
    """
    if not (input_file or expressions):
        prints('Expected either input_file or expression strings.')
        sys.exit(1)
    evaluator = get_evaluator(ctx)

    try:
        if input_file:
            h_print(f"{input_file} =", str(evaluator.evaluate_file(input_file)))
        for expression in expressions:
            h_print(f"{expression} =", str(evaluator.evaluate(expression)))
    except EvaluationError as e:
        a_print("Error:", str(e), err=True)
        sys.exit(1)


@infixeval.command()
@click.option('--check', default=False, is_flag=True,
              help="Fail if a computed value differs from the expected one.")
@click.pass_context
def samples(ctx, check):
    evaluator = get_evaluator(ctx)
    mismatches = 0
    for idx, expression, computed, expected in run_samples(evaluator):
        prints("Expression #%d: %s = %g = %g"
               % (idx, expression, computed, expected))
        if check and not matches(computed, expected):
            a_print("Mismatch:", f"#{idx} expected {expected:g}, "
                    f"got {computed:g}")
            mismatches += 1

    if mismatches:
        sys.exit(1)


if __name__ == '__main__':
    infixeval()
