from typing import List, Tuple


class ParseError(Exception):
    """The input does not match the grammar.

    ``labels`` lists the grammar productions that were being parsed at
    ``position``, innermost first.
    """

    def __init__(self, text: str, position: int, labels: List[str]):
        self.text = text
        self.position = position
        self.labels = list(labels)
        self.line, self.column = location(text, position)
        self.context = text[position:position + 20]
        if position + 20 < len(text):
            self.context += "..."
        expected = self.labels[0] if self.labels else "end of input"
        super().__init__(f"Syntax error, expected {expected} "
                         f"(at {self.line}:{self.column}): {self.context}")

    @property
    def expected(self) -> str:
        return self.labels[0] if self.labels else ""


def location(text: str, position: int) -> Tuple[int, int]:
    """1-based line and column of a character offset."""
    line = text.count("\n", 0, position) + 1
    column = position - (text.rfind("\n", 0, position) + 1) + 1
    return line, column
