"""Lexical analysis of zone file text into tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .bits import MASK64, add_overflow
from .errors import ZoneSyntaxError


class CharClass(Enum):
    """Lexical class of a single character."""

    CONTIGUOUS = "contiguous"
    BLANK = "blank"
    LINE_FEED = "line_feed"
    QUOTED = "quoted"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    COMMENT = "comment"


class TokenKind(Enum):
    """Kind of token produced by the scanner."""

    CONTIGUOUS = "contiguous"
    QUOTED = "quoted"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    LINE_FEED = "line_feed"


@dataclass(frozen=True)
class Token:
    """A token; text is raw, quoted tokens exclude the quotes.

    For line feeds, ``newlines`` counts the lines this line feed completes,
    including newlines embedded in tokens since the previous line feed.
    """

    kind: TokenKind
    text: str
    start: int
    end: int
    line: int
    newlines: int = 0


_CLASSES = {
    " ": CharClass.BLANK,
    "\t": CharClass.BLANK,
    "\r": CharClass.BLANK,
    "\n": CharClass.LINE_FEED,
    '"': CharClass.QUOTED,
    "(": CharClass.LEFT_PAREN,
    ")": CharClass.RIGHT_PAREN,
    ";": CharClass.COMMENT,
}


def classify(char: str) -> CharClass:
    """Return the lexical class of one character (null is contiguous)."""
    if len(char) != 1:
        raise ValueError("classify expects exactly one character")
    return _CLASSES.get(char, CharClass.CONTIGUOUS)


_EVEN_BITS = 0x5555555555555555


def find_escaped(backslash: int, is_escaped: int) -> tuple[int, int]:
    """Return (mask of escaped characters, escape carried into next block)."""
    backslash &= ~is_escaped & MASK64
    follows_escape = ((backslash << 1) | is_escaped) & MASK64
    odd_sequence_starts = backslash & ~_EVEN_BITS & ~follows_escape & MASK64
    overflow, sequences_on_even = add_overflow(odd_sequence_starts, backslash)
    invert_mask = (sequences_on_even << 1) & MASK64
    return (_EVEN_BITS ^ invert_mask) & follows_escape, int(overflow)


def find_delimiters(
    quotes: int, semicolons: int, newlines: int, in_quoted: int, in_comment: int
) -> tuple[int, int]:
    """Return (delimiting quotes, comment starts and ends) for a 64-bit block.

    ``in_quoted`` and ``in_comment`` are 0 or all ones, carried from the
    previous block.
    """
    if quotes & semicolons:
        raise ValueError("a character cannot be both a quote and a semicolon")

    def neg(value: int) -> int:
        return -value & MASK64

    starts = quotes | semicolons
    end = (newlines & in_comment) | (quotes & in_quoted)
    end &= neg(end)

    delimiters = end
    starts &= ~((in_comment | in_quoted) ^ ((neg(end) - end) & MASK64)) & MASK64

    while starts:
        start = neg(starts) & starts
        quote = quotes & start
        semicolon = semicolons & start
        end = (newlines & neg(semicolon)) | (quotes & ((neg(quote) - quote) & MASK64))
        end &= neg(end)
        delimiters |= end | start
        starts &= (neg(end) - end) & MASK64

    return delimiters & quotes, delimiters & ~quotes & MASK64


class _Mode(Enum):
    IDLE = "idle"
    CONTIGUOUS = "contiguous"
    QUOTED = "quoted"
    COMMENT = "comment"


class Scanner:
    """Incremental tokenizer; state carries over between chunks."""

    def __init__(self) -> None:
        self.line = 1
        self._mode = _Mode.IDLE
        self._escaped = False
        self._parts: list[str] = []
        self._start = 0
        self._start_line = 1
        self._offset = 0
        self._deferred = 0

    def scan(self, data: str) -> list[Token]:
        """Consume a chunk of text and return the tokens it completes."""
        tokens: list[Token] = []
        for position, char in enumerate(data, self._offset):
            self._feed(position, char, tokens)
        self._offset += len(data)
        return tokens

    def finish(self) -> list[Token]:
        """Signal end of input and return any token still open."""
        if self._mode is _Mode.QUOTED:
            raise ZoneSyntaxError("Unterminated quoted string")
        tokens: list[Token] = []
        if self._mode is _Mode.CONTIGUOUS:
            tokens.append(self._close(TokenKind.CONTIGUOUS, self._offset))
        self._mode = _Mode.IDLE
        self._escaped = False
        return tokens

    def _feed(self, position: int, char: str, tokens: list[Token]) -> None:
        mode = self._mode
        if mode is _Mode.CONTIGUOUS:
            if self._escaped:
                self._escaped = False
                self._append(char)
                return
            if classify(char) is CharClass.CONTIGUOUS:
                self._append(char)
                self._escaped = char == "\\"
                return
            tokens.append(self._close(TokenKind.CONTIGUOUS, position))
        elif mode is _Mode.QUOTED:
            if self._escaped:
                self._escaped = False
                self._append(char)
                return
            if char == '"':
                tokens.append(self._close(TokenKind.QUOTED, position + 1))
                return
            self._escaped = char == "\\"
            self._append(char)
            return
        elif mode is _Mode.COMMENT:
            if char != "\n":
                return
            self._mode = _Mode.IDLE
        self._dispatch(position, char, tokens)

    def _dispatch(self, position: int, char: str, tokens: list[Token]) -> None:
        kind = classify(char)
        if kind is CharClass.BLANK:
            return
        if kind is CharClass.CONTIGUOUS:
            self._open(_Mode.CONTIGUOUS, position)
            self._parts.append(char)
            self._escaped = char == "\\"
        elif kind is CharClass.LINE_FEED:
            tokens.append(
                Token(
                    TokenKind.LINE_FEED,
                    char,
                    position,
                    position + 1,
                    self.line,
                    1 + self._deferred,
                )
            )
            self._deferred = 0
            self.line += 1
        elif kind is CharClass.QUOTED:
            self._open(_Mode.QUOTED, position)
        elif kind is CharClass.LEFT_PAREN:
            tokens.append(Token(TokenKind.LEFT_PAREN, char, position, position + 1, self.line))
        elif kind is CharClass.RIGHT_PAREN:
            tokens.append(Token(TokenKind.RIGHT_PAREN, char, position, position + 1, self.line))
        else:
            self._mode = _Mode.COMMENT

    def _open(self, mode: _Mode, position: int) -> None:
        self._mode = mode
        self._start = position
        self._start_line = self.line
        self._parts = []
        self._escaped = False

    def _append(self, char: str) -> None:
        self._parts.append(char)
        if char == "\n":
            self._deferred += 1
            self.line += 1

    def _close(self, kind: TokenKind, end: int) -> Token:
        token = Token(kind, "".join(self._parts), self._start, end, self._start_line)
        self._parts = []
        self._mode = _Mode.IDLE
        self._escaped = False
        return token


def tokenize(text: str, block_size: int = 64) -> list[Token]:
    """Tokenize text, feeding the scanner in blocks of ``block_size``."""
    if block_size < 1:
        raise ValueError("block_size must be positive")
    scanner = Scanner()
    tokens: list[Token] = []
    for offset in range(0, len(text), block_size):
        tokens.extend(scanner.scan(text[offset:offset + block_size]))
    tokens.extend(scanner.finish())
    return tokens