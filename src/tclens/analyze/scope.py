from __future__ import annotations

TAB_WIDTH = 2


def indent_width(raw_line: str) -> int:
    expanded = raw_line.replace("\t", " " * TAB_WIDTH)
    return len(expanded) - len(expanded.lstrip())


class IndentScopeTracker:
    """Loop and function scopes for indentation-delimited source.

    A loop scope ends at the first later line indented at or left of its
    header. The function scope ends at the first line strictly left of its
    ``def``.
    """

    def __init__(self) -> None:
        self._loops: list[int] = []
        self.function: str | None = None
        self._function_indent: int | None = None

    @property
    def loop_depth(self) -> int:
        return len(self._loops)

    def advance(self, indent: int) -> None:
        while self._loops and indent <= self._loops[-1]:
            self._loops.pop()
        if self.function is not None and indent < (self._function_indent or 0):
            self.function = None
            self._function_indent = None

    def enter_function(self, name: str, indent: int) -> None:
        self.function = name
        self._function_indent = indent

    def enter_loop(self, indent: int) -> int:
        self._loops.append(indent)
        return len(self._loops)


class BraceScopeTracker:
    """Loop and method scopes for brace-delimited source.

    Scopes record the brace depth after their header line and end once the
    running depth drops below it. A header that opens no block stays pending:
    a following lone ``{`` line adopts it, otherwise the first statement
    closed at the header's depth ends it. Unbalanced braces only skew the
    counts.
    """

    def __init__(self) -> None:
        self.depth = 0
        # (recorded depth, pending)
        self._loops: list[tuple[int, bool]] = []
        self.function: str | None = None
        self._function_depth: int | None = None
        self._function_pending = False

    @property
    def loop_depth(self) -> int:
        return len(self._loops)

    @staticmethod
    def opens_block(code: str) -> bool:
        return code.count("{") > code.count("}")

    def advance(self, code: str) -> None:
        self.depth += code.count("{") - code.count("}")
        if code == "{":
            self._adopt_block()
        while self._loops and self.depth < self._loops[-1][0]:
            self._loops.pop()
        if self.function is not None and self._function_depth is not None:
            if self.depth < self._function_depth:
                self.function = None
                self._function_depth = None
                self._function_pending = False

    def _adopt_block(self) -> None:
        if self._loops and self._loops[-1][1]:
            self._loops[-1] = (self.depth, False)
        elif self._function_pending:
            self._function_depth = self.depth
            self._function_pending = False

    def enter_function(self, name: str, opens_block: bool = True) -> None:
        self.function = name
        self._function_depth = self.depth
        self._function_pending = not opens_block

    def enter_loop(self, opens_block: bool = True) -> int:
        self._loops.append((self.depth, not opens_block))
        return len(self._loops)

    def end_statement(self, code: str) -> None:
        """Close pending loops whose single-statement body ended on this line."""
        if not code.endswith((";", "}")):
            return
        while self._loops and self._loops[-1][1] and self._loops[-1][0] == self.depth:
            self._loops.pop()
