"""Lexical layer and parser combinators.

Parsers are plain functions taking an :class:`Input` and returning the
parsed value, advancing ``Input.pos`` past what they consumed. A parser
that does not match raises :class:`Failure`; alternatives are tried in
order and a failed alternative is rewound to where it started, so the
first alternative that matches wins.

Token-level parsers are lexemes: they skip insignificant whitespace and
comments following the token.
"""

import re
import sys
from contextlib import contextmanager
from typing import Callable, List, NoReturn, Optional, Type, TypeVar

from pytptp.core.names import N, name_table

from .exception import ParseError


T = TypeVar("T")
Parser = Callable[["Input"], T]

LINE_COMMENT = "%"
BLOCK_COMMENT_START = "/*"
BLOCK_COMMENT_END = "*/"

_LOWER_WORD = re.compile(r"[a-z][A-Za-z0-9_]*")
_UPPER_WORD = re.compile(r"[A-Z][A-Za-z0-9_]*")
_DECIMAL = re.compile(r"[0-9]+")
_SCIENTIFIC = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
_WHITESPACE = re.compile(r"\s*")


class Failure(Exception):
    """Internal signal that a parser did not match at ``position``."""

    def __init__(self, position: int, label: str):
        self.position = position
        self.labels = [label]


class Input:
    """The text being parsed and the current position in it."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.furthest: Optional[Failure] = None

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos:self.pos + 1]

    def startswith(self, s: str) -> bool:
        return self.text.startswith(s, self.pos)

    def match(self, pattern) -> Optional[str]:
        """Consume and return the text matching a compiled regex, if any."""
        m = pattern.match(self.text, self.pos)
        if m is None or not m.group():
            return None
        self.pos = m.end()
        return m.group()

    def fail(self, label: str) -> NoReturn:
        failure = Failure(self.pos, label)
        if self.furthest is None or failure.position >= self.furthest.position:
            self.furthest = failure
        raise failure

    def error(self) -> ParseError:
        """The error describing the failure that got furthest into the text."""
        failure = self.furthest or Failure(self.pos, "input")
        return ParseError(self.text, failure.position, failure.labels)


# Combinators

def labeled(inp: Input, label: str, parser: Parser[T]) -> T:
    try:
        return parser(inp)
    except Failure as failure:
        failure.labels.append(label)
        raise


def choice(inp: Input, *alternatives: Parser[T]) -> T:
    """Ordered choice: the result of the first alternative that matches."""
    start = inp.pos
    last = None
    for alternative in alternatives:
        try:
            return alternative(inp)
        except Failure as failure:
            inp.pos = start
            last = failure
    raise last


def optional(inp: Input, parser: Parser[T], default=None):
    start = inp.pos
    try:
        return parser(inp)
    except Failure:
        inp.pos = start
        return default


def sep_by1(inp: Input, parser: Parser[T], separator: Parser) -> List[T]:
    items = [parser(inp)]
    while True:
        start = inp.pos
        try:
            separator(inp)
            items.append(parser(inp))
        except Failure:
            inp.pos = start
            return items


def sep_by(inp: Input, parser: Parser[T], separator: Parser) -> List[T]:
    return optional(inp, lambda i: sep_by1(i, parser, separator), [])


# Insignificant material

def skip_whitespace(inp: Input) -> None:
    """Skip whitespace interleaved with line and block comments."""
    while True:
        inp.match(_WHITESPACE)
        if inp.startswith(LINE_COMMENT):
            skip_line(inp)
        elif inp.startswith(BLOCK_COMMENT_START):
            end = inp.text.find(BLOCK_COMMENT_END, inp.pos + len(BLOCK_COMMENT_START))
            if end < 0:
                inp.fail("block comment")
            inp.pos = end + len(BLOCK_COMMENT_END)
        else:
            return


def skip_space(inp: Input) -> None:
    """Skip whitespace only, leaving comments in place."""
    inp.match(_WHITESPACE)


def skip_line(inp: Input) -> str:
    """Skip to the start of the next line, returning the skipped line."""
    end = inp.text.find("\n", inp.pos)
    if end < 0:
        end = len(inp.text)
    line = inp.text[inp.pos:end]
    inp.pos = min(end + 1, len(inp.text))
    return line


def lexeme(inp: Input, parser: Parser[T]) -> T:
    value = parser(inp)
    skip_whitespace(inp)
    return value


def end_of_input(inp: Input) -> None:
    if not inp.at_end():
        inp.fail("end of input")


RECURSION_PER_CHARACTER = 8
MAX_RECURSION_LIMIT = 20000


@contextmanager
def recursion_limit(text: str):
    """Raise the interpreter recursion limit in proportion to ``text``.

    Nesting depth is bounded by the length of the input, and each level
    of nesting costs a few frames.
    """
    previous = sys.getrecursionlimit()
    limit = min(previous + RECURSION_PER_CHARACTER * len(text), MAX_RECURSION_LIMIT)
    if limit > previous:
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


def run(parser: Parser[T], text: str, skip_leading: bool = True) -> T:
    """Apply a parser to the whole of ``text``.

    Leading whitespace and comments are skipped first unless
    ``skip_leading`` is false, for parsers that inspect them.

    Raises:
        ParseError: If the text does not match, or is nested too deeply
            to parse.
    """
    inp = Input(text)
    with recursion_limit(text):
        try:
            if skip_leading:
                skip_whitespace(inp)
            value = parser(inp)
            end_of_input(inp)
            return value
        except Failure:
            raise inp.error() from None
        except RecursionError:
            raise ParseError(text, inp.pos, ["less deeply nested input"]) from None


# Tokens

def _is_word_char(c: str) -> bool:
    return c.isascii() and (c.isalnum() or c == "_")


def _complete(inp: Input, s: str) -> bool:
    """Check that ``s`` at the current position is not the prefix of a longer word."""
    if not inp.startswith(s):
        return False
    after = inp.text[inp.pos + len(s):inp.pos + len(s) + 1]
    return not (after and _is_word_char(s[-1]) and _is_word_char(after))


def char(inp: Input, c: str) -> str:
    if not inp.startswith(c):
        inp.fail(f"character {c}")
    inp.pos += len(c)
    return c


def string(inp: Input, s: str) -> str:
    if not _complete(inp, s):
        inp.fail(f"string {s}")
    inp.pos += len(s)
    return s


def token(inp: Input, s: str) -> str:
    if not _complete(inp, s):
        inp.fail(f"token {s}")
    inp.pos += len(s)
    skip_whitespace(inp)
    return s


def op(inp: Input, c: str) -> str:
    if not inp.startswith(c):
        inp.fail(f"operator {c}")
    inp.pos += len(c)
    skip_whitespace(inp)
    return c


def comma(inp: Input, parser: Parser[T]) -> T:
    op(inp, ",")
    return parser(inp)


def maybe_comma(inp: Input, parser: Parser[T]) -> Optional[T]:
    """An optional comma-prefixed item."""
    return optional(inp, lambda i: comma(i, parser))


def parens(inp: Input, parser: Parser[T]) -> T:
    try:
        op(inp, "(")
        value = parser(inp)
        op(inp, ")")
    except Failure as failure:
        failure.labels.append("parens")
        raise
    return value


def optional_parens(inp: Input, parser: Parser[T]) -> T:
    """A parser that also accepts its input wrapped in redundant parentheses."""
    start = inp.pos
    try:
        return parser(inp)
    except Failure:
        inp.pos = start
        if not inp.startswith("("):
            raise
    return parens(inp, lambda i: optional_parens(i, parser))



def brackets(inp: Input, parser: Parser[T]) -> T:
    def p(i):
        op(i, "[")
        value = parser(i)
        op(i, "]")
        return value
    return labeled(inp, "brackets", p)


def bracket_list(inp: Input, parser: Parser[T]) -> List[T]:
    return labeled(inp, "bracket list",
                   lambda i: brackets(i, lambda j: sep_by(j, parser, lambda k: op(k, ","))))


def bracket_list1(inp: Input, parser: Parser[T]) -> List[T]:
    return labeled(inp, "bracket list 1",
                   lambda i: brackets(i, lambda j: sep_by1(j, parser, lambda k: op(k, ","))))


def named(inp: Input, cls: Type[N]) -> N:
    """The vocabulary member whose name is at the current position.

    Names are tried longest first and must match a whole token.
    """
    for name, member in name_table(cls):
        if _complete(inp, name):
            inp.pos += len(name)
            return member
    inp.fail(f"named {cls.__name__}")


def enum(inp: Input, cls: Type[N]) -> N:
    return lexeme(inp, lambda i: named(i, cls))


# Words

def lower_word(inp: Input) -> str:
    word = inp.match(_LOWER_WORD)
    if word is None:
        inp.fail("lower word")
    return word


def upper_word(inp: Input) -> str:
    word = inp.match(_UPPER_WORD)
    if word is None:
        inp.fail("upper word")
    return word


def quoted(inp: Input, quote: str) -> str:
    """A quoted string; only the quote and the backslash can be escaped."""
    start = inp.pos
    char(inp, quote)
    chars = []
    text = inp.text
    while True:
        c = text[inp.pos:inp.pos + 1]
        if c == quote:
            inp.pos += 1
            return "".join(chars)
        if c == "\\" and text[inp.pos + 1:inp.pos + 2] in (quote, "\\"):
            chars.append(text[inp.pos + 1])
            inp.pos += 2
        elif c and " " <= c <= "~":
            chars.append(c)
            inp.pos += 1
        else:
            inp.pos = start
            inp.fail(f"quoted {quote}")


# Numbers

def decimal(inp: Input) -> int:
    digits = inp.match(_DECIMAL)
    if digits is None:
        inp.fail("decimal")
    return int(digits)


def integer(inp: Input) -> int:
    return labeled(inp, "integer", lambda i: lexeme(i, decimal))


def signed(inp: Input, parser: Parser[int]) -> int:
    if inp.startswith("-"):
        inp.pos += 1
        return -parser(inp)
    if inp.startswith("+"):
        inp.pos += 1
    return parser(inp)


def scientific(inp: Input) -> str:
    """The text of a decimal literal with optional fraction and exponent."""
    literal = inp.match(_SCIENTIFIC)
    if literal is None:
        inp.fail("scientific")
    return literal
