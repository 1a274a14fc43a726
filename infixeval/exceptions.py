from typing import Optional, Tuple

from infixeval.common import Location
from infixeval.termui import s_attention as err
from infixeval.termui import s_header as _


class EvaluationError(Exception):
    kind: Optional[str] = None

    def __init__(self, location: Location,
                 message: str,
                 context_message: Optional[str] = None,
                 error_type: Optional[str] = None,
                 hint: Optional[str] = None):

        self.location = location
        self.hint = hint
        self.message = message
        self.context_message = context_message
        self.error_type = error_type or err(f"{self.kind} error")

        context = get_context(location, context_message) \
            if context_message else None
        hint = _(f"  hint: {hint}") if hint else None

        self.full_message = "\n".join(
            filter(None, [f"{self.error_type}: {message}", context, hint]))
        super().__init__(self.full_message)

    def __str__(self):
        return f"{self.location}: {self.full_message}"


def get_line_col_at_position(text: str, pos: int) -> Tuple[Optional[int],
                                                           Optional[int],
                                                           Optional[str],
                                                           Optional[str]]:
    lines = text.splitlines(keepends=True)

    if not lines or pos > len(text):
        return None, None, None, None

    # Special handling of EOF
    if pos == len(text):
        prev_line = lines[-2].rstrip('\n\r') if len(lines) > 1 else None
        return (len(lines) - 1, len(lines[-1].rstrip('\n\r')),
                lines[-1].rstrip('\n\r'), prev_line)

    current_pos = 0
    for lineidx, line in enumerate(lines):
        if current_pos <= pos < current_pos + len(line):
            prev_line = lines[lineidx-1].rstrip('\n\r') if lineidx > 0 else None
            return lineidx, pos - current_pos, line.rstrip('\n\r'), prev_line
        current_pos += len(line)
    return None, None, None, None


def get_indented_message(message: str, indent: int,
                         prefix: Optional[str] = None,
                         marker: Optional[str] = None) -> str:
    """
    Returns message where all lines are indented by `indent`.

    If optional `prefix` is given it is prepended to every line.
    """
    indent_str = (_(prefix) if prefix is not None else "") + " " * indent
    first_indent_str = (indent_str[:-len(marker) + 1] + err(marker)) \
        if marker is not None else None
    return "\n".join([f"{first_indent_str}{line}" if marker is not None and lineidx == 0
                      else f"{indent_str}{line}"
                      for lineidx, line in enumerate(message.splitlines())])


def get_context(location: Location, message: str) -> Optional[str]:
    context = None
    if location.input_str and location.start_position is not None:
        lineidx, colidx, line, prev_line = get_line_col_at_position(
            location.input_str, location.start_position)

        if lineidx is not None and colidx is not None:
            prev_line_context = _(f"{lineidx:>5} | ") + f"{prev_line}\n" \
                if prev_line else ""
            context = prev_line_context + \
                _(f"{lineidx+1:>5} | ") + f"{line}\n" \
                + get_indented_message(message, colidx + 4, "      |", "^^^ ")

    return context


class PreconditionError(EvaluationError):
    kind = "precondition"

    def __init__(self, message, location=None):
        super().__init__(location or Location(), message)


class MalformedLiteralError(EvaluationError):
    kind = "malformed-literal"

    def __init__(self, location, found=None):
        if location.is_eof():
            message = 'unexpected end of input'
        else:
            message = f"unexpected character '{found}'"
        super().__init__(location, message,
                         context_message=_('expected: ') + "number or '('")


class TrailingInputError(MalformedLiteralError):

    def __init__(self, location, found=None):
        EvaluationError.__init__(
            self, location, f"unexpected character '{found}'",
            context_message=_('expected: ') + 'operator or end of input',
            error_type=err("trailing input error"),
            hint="pass allow_trailing=True to ignore input after "
                 "a complete expression")


class UnmatchedParenthesisError(EvaluationError):
    kind = "unmatched-parenthesis"

    def __init__(self, location, message, depth=None):
        self.depth = depth
        super().__init__(location, message,
                         context_message=_('expected: ') +
                         ("')'" if depth else "operator or end of input"))


class DivisionByZeroError(EvaluationError):
    kind = "division-by-zero"

    def __init__(self, location):
        super().__init__(location, 'division by zero',
                         context_message='divisor evaluates to zero')
