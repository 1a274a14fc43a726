"""
Character classification and numeric literal reading.
"""
from infixeval.common import Location
from infixeval.exceptions import PreconditionError, MalformedLiteralError

OPERATORS = ('+', '-', '/', '*')

MAX_DIVISOR = 1e300


def is_digit(c):
    return '0' <= c <= '9' if c else False


def to_digit(c):
    return ord(c) - ord('0')


def is_operator(c):
    return c in OPERATORS if c else False


def read_number(input_str, position=0, file_name=None):
    """
    Reads a numeric literal starting at the given position.

    The literal is an optional `-` followed by a run of digits and at most
    one decimal point. A second decimal point ends the literal, e.g. for
    `12.3.5` the value is `12.3` and the end position is at the second `.`.

    Args:
        input_str(str): The expression text.
        position(int): Position of the first character of the literal.
        file_name(str): Used in error reporting.

    Returns:
        tuple: (value, end_position) where end_position is the position of
            the first character not consumed.

    Raises:
        PreconditionError: If the input is empty or the position is not
            inside the input.
        MalformedLiteralError: If no digit is found.
    """
    if not input_str:
        raise PreconditionError("no input to read a number from")
    in_len = len(input_str)
    if not 0 <= position < in_len:
        raise PreconditionError(
            f"position {position} outside of input of length {in_len}",
            Location(position=position, input_str=input_str,
                     file_name=file_name))

    start = position
    mantissa = 0.0
    fraction = 0.0
    divisor = 1.0
    sign = 1
    is_fraction = False
    digits = 0

    if input_str[position] == '-':
        sign = -1
        position += 1

    while position < in_len:
        c = input_str[position]
        if is_digit(c):
            digits += 1
            if is_fraction:
                # Digits past double precision are consumed but ignored.
                if divisor < MAX_DIVISOR:
                    fraction = fraction * 10 + to_digit(c)
                    divisor *= 10
            else:
                mantissa = mantissa * 10 + to_digit(c)
        elif c == '.':
            if is_fraction:
                # Second decimal point, e.g. 12.3.5
                #                                ^
                break
            is_fraction = True
        else:
            break
        position += 1

    if not digits:
        raise MalformedLiteralError(
            Location(position=start, input_str=input_str,
                     file_name=file_name),
            found=input_str[start])

    return sign * (mantissa + fraction / divisor), position
