from infixeval import Evaluator, try_evaluate


def main(debug=False):
    evaluator = Evaluator(debug=debug, debug_colors=True)

    input_str = "-25 + 4 * -(32 - 45 / 5 - -6)"

    res = evaluator.evaluate(input_str)

    assert res == -25 + 4 * -(32 - 45 / 5 - -6)
    print("Input:\n", input_str)
    print("Result = ", res)

    # Errors can be reported as data instead of raised.
    result = try_evaluate("(1 + 2) / (3 - 3)")
    assert not result.ok
    print("Error kind = ", result.error_kind)


if __name__ == "__main__":
    main(debug=True)
