from infixeval.termui import s_attention as _a


class EvalContext:
    """
    The state of a single top-level evaluation, threaded through every
    recursive parser call.

    Attributes:
    input_str(str): The expression text. Never modified.
    file_name(str): The name of the file the expression came from, if any.
    position(int): The cursor. Only ever advances.
    depth(int): The number of currently open parenthesis groups.
    """

    __slots__ = ['input_str', 'file_name', 'position', 'depth']

    def __init__(self, input_str, file_name=None):
        self.input_str = input_str
        self.file_name = file_name
        self.position = 0
        self.depth = 0

    @property
    def at_end(self):
        return self.position >= len(self.input_str)

    @property
    def current(self):
        """
        The character under the cursor or `None` at the end of input.
        """
        if self.position < len(self.input_str):
            return self.input_str[self.position]
        return None

    def __repr__(self):
        return "<EvalContext(pos={}, depth={})>".format(self.position,
                                                        self.depth)


class Location:
    """
    Represents a location of the error in the evaluated expression.

    Args:
    context(EvalContext): Evaluation context used to populate this object.
    position(int): Overrides the context position if given.

    Attributes:
    input_str: The expression being evaluated.
    file_name(str): The name (path) of the file this location refers to.
    start_position(int): The position in the input.
    line, column (int): The line/column calculated from the position and
        input_str.
    """

    __slots__ = ['start_position', 'input_str', 'file_name',
                 '_line', '_column']

    def __init__(self, context=None, position=None, input_str=None,
                 file_name=None):
        if context is not None:
            input_str = context.input_str
            file_name = file_name or context.file_name
            if position is None:
                position = context.position
        self.input_str = input_str
        self.file_name = file_name
        self.start_position = position

        # Evaluated lazily, only needed for error reporting.
        self._line = None
        self._column = None

    @property
    def line(self):
        if self._line is None:
            self.evaluate_line_col()
        return self._line

    @property
    def column(self):
        if self._column is None:
            self.evaluate_line_col()
        return self._column

    def evaluate_line_col(self):
        self._line, self._column = pos_to_line_col(
            self.input_str, self.start_position)

    def is_eof(self):
        return self.input_str is not None \
            and self.start_position is not None \
            and self.start_position >= len(self.input_str)

    def __str__(self):
        line, column = self.line, self.column
        if line is not None:
            return ('{}{}:{}:"{}"'
                    .format(f"{self.file_name}:"
                            if self.file_name else "",
                            line, column,
                            position_context(self.input_str,
                                             self.start_position)))
        if self.file_name:
            return _a(self.file_name)
        return "<Unknown location>"

    def __repr__(self):
        return str(self)


def position_context(input_str, position):
    """
    Returns position context string.
    """
    start = max(position-10, 0)
    c = str(input_str[start:position]) + _a(" **> ") \
        + str(input_str[position:position+10])
    return replace_newlines(c)


def replace_newlines(in_str):
    return in_str.replace("\n", "\\n")


def pos_to_line_col(input_str, position):
    """
    Returns position in the (line,column) form.
    """

    if position is None or not isinstance(input_str, str):
        return None, None

    line = input_str[: position].count('\n') + 1
    line_start_pos = input_str.rfind('\n', 0, position)
    column = position - line_start_pos - 1

    return line, column
