"""Lexical scanner for a small logic-language: facts, rules, schemes and queries."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Kinds of token; the value is the name shown when a token is printed."""

    COMMA = "COMMA"
    PERIOD = "PERIOD"
    Q_MARK = "Q_MARK"
    LEFT_PAREN = "LEFT_PAREN"
    RIGHT_PAREN = "RIGHT_PAREN"
    COLON = "COLON"
    COLON_DASH = "COLON_DASH"
    MULTIPLY = "MULTIPLY"
    ADD = "ADD"
    SCHEMES = "SCHEMES"
    FACTS = "FACTS"
    RULES = "RULES"
    QUERIES = "QUERIES"
    ID = "ID"
    STRING = "STRING"
    COMMENT = "COMMENT"
    UNDEFINED = "UNDEFINED"
    END_OF_FILE = "EOF"


@dataclass(frozen=True)
class Token:
    """A scanned token with the line on which it starts."""

    kind: TokenType
    value: str
    line: int

    def __str__(self) -> str:
        return f'({self.kind.value},"{self.value}",{self.line})'


_PUNCTUATION = {
    ",": TokenType.COMMA,
    ".": TokenType.PERIOD,
    "?": TokenType.Q_MARK,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "*": TokenType.MULTIPLY,
    "+": TokenType.ADD,
}

_KEYWORDS = {
    "Rules": TokenType.RULES,
    "Queries": TokenType.QUERIES,
    "Facts": TokenType.FACTS,
    "Schemes": TokenType.SCHEMES,
}

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _is_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


class _Reader:
    """Character cursor over text; an empty string marks the end."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def get(self) -> str:
        if self._pos >= len(self._text):
            return ""
        char = self._text[self._pos]
        self._pos += 1
        return char

    def peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""


def _read_word(reader: _Reader, first: str, line: int) -> Token:
    chars = [first]
    while _is_alnum(reader.peek()):
        chars.append(reader.get())
    word = "".join(chars)
    return Token(_KEYWORDS.get(word, TokenType.ID), word, line)


def _read_string(reader: _Reader, line: int) -> Token:
    # Line breaks inside a string are kept but do not advance the line count.
    chars = ["'"]
    kind = TokenType.STRING
    while True:
        char = reader.get()
        if not char:
            kind = TokenType.UNDEFINED
            break
        if char == "'":
            if reader.peek() == "'":
                reader.get()
                chars.append("'")
                continue
            chars.append("'")
            break
        chars.append(char)
    return Token(kind, "".join(chars), line)


def _read_comment(reader: _Reader, line: int) -> tuple[Token, int]:
    """Read a comment after '#'; return the token and the line reached."""
    if reader.peek() == "|":
        reader.get()
        start = line
        chars = ["#|"]
        while True:
            char = reader.get()
            if not char:
                return Token(TokenType.UNDEFINED, "".join(chars), start), line
            if char == "\n":
                chars.append(char)
                line += 1
                continue
            if char == "|" and reader.peek() == "#":
                # The closing '#' is left in the input.
                chars.append("|#")
                return Token(TokenType.COMMENT, "".join(chars), start), line
            chars.append(char)

    chars = ["#"]
    while True:
        char = reader.get()
        if not char or char == "\n":
            return Token(TokenType.COMMENT, "".join(chars), line), line + 1
        chars.append(char)


def tokenize(text: str) -> list[Token]:
    """Scan text into tokens, ending with an end-of-file token."""
    reader = _Reader(text)
    tokens: list[Token] = []
    line = 1
    while True:
        char = reader.get()
        if not char:
            break
        if char == "\n":
            line += 1
        elif char in _PUNCTUATION:
            tokens.append(Token(_PUNCTUATION[char], char, line))
        elif char == ":":
            if reader.peek() == "-":
                reader.get()
                tokens.append(Token(TokenType.COLON_DASH, ":-", line))
            else:
                tokens.append(Token(TokenType.COLON, ":", line))
        elif _is_alpha(char):
            tokens.append(_read_word(reader, char, line))
        elif char in _WHITESPACE:
            continue
        elif char == "'":
            tokens.append(_read_string(reader, line))
        elif char == "#":
            token, line = _read_comment(reader, line)
            tokens.append(token)
        else:
            tokens.append(Token(TokenType.UNDEFINED, char, line))
    tokens.append(Token(TokenType.END_OF_FILE, "", line))
    return tokens


def format_tokens(tokens: list[Token]) -> str:
    """Render tokens one per line followed by the total count."""
    lines = [str(token) for token in tokens]
    lines.append(f"Total Tokens = {len(tokens)}")
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Scan the file named on the command line and print its tokens."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage is tokenizer filename.fileExtention", file=sys.stderr)
        return 1
    try:
        with open(args[0], encoding="latin-1") as handle:
            text = handle.read()
    except OSError as error:
        print(f"cannot read {args[0]}: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(format_tokens(tokenize(text)))
    return 0


if __name__ == "__main__":
    sys.exit(main())