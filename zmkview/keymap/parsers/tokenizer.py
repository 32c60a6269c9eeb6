"""Tokenizer for ZMK device tree keymap source."""

import re
from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Token types produced by the keymap tokenizer."""

    IDENTIFIER = "identifier"
    REFERENCE = "reference"
    NUMBER = "number"
    STRING = "string"
    LBRACE = "{"
    RBRACE = "}"
    ANGLE_OPEN = "<"
    ANGLE_CLOSE = ">"
    LPAREN = "("
    RPAREN = ")"
    SEMICOLON = ";"
    EQUALS = "="
    COMMA = ","
    COLON = ":"
    AT = "@"
    SLASH = "/"
    HASH = "#"
    COMMENT = "comment"
    OTHER = "other"
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """Single lexical token with its source position."""

    type: TokenType
    value: str
    line: int
    column: int
    raw: str = ""

    def __str__(self) -> str:
        return f"{self.type.value}({self.raw!r}) at {self.line}:{self.column}"


PUNCTUATION = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "<": TokenType.ANGLE_OPEN,
    ">": TokenType.ANGLE_CLOSE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ";": TokenType.SEMICOLON,
    "=": TokenType.EQUALS,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
    "@": TokenType.AT,
    "/": TokenType.SLASH,
    "#": TokenType.HASH,
}

IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_\-.+]*")
REFERENCE_RE = re.compile(r"&[A-Za-z_][A-Za-z0-9_]*")
NUMBER_RE = re.compile(r"0[xX][0-9A-Fa-f]+|\d+")


class Tokenizer:
    """Hand-written lexer tracking line and column of every token."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Convert the source text into tokens, always ending with EOF."""
        while self.pos < len(self.text):
            char = self.text[self.pos]

            if char.isspace():
                self._advance(1)
            elif self.text.startswith("/*", self.pos):
                end = self.text.find("*/", self.pos + 2)
                length = (end + 2 if end != -1 else len(self.text)) - self.pos
                self._emit(TokenType.COMMENT, length)
            elif self.text.startswith("//", self.pos):
                end = self.text.find("\n", self.pos)
                length = (end if end != -1 else len(self.text)) - self.pos
                self._emit(TokenType.COMMENT, length)
            elif char == '"':
                self._read_string()
            elif char == "&" and (match := REFERENCE_RE.match(self.text, self.pos)):
                name = match.group()
                self._emit(TokenType.REFERENCE, len(name), value=name[1:])
            elif match := NUMBER_RE.match(self.text, self.pos):
                # Digits glued to letters ("2u") read as a single identifier
                tail = IDENTIFIER_RE.match(self.text, match.end())
                if tail:
                    length = tail.end() - self.pos
                    self._emit(TokenType.IDENTIFIER, length)
                else:
                    self._emit(TokenType.NUMBER, len(match.group()))
            elif match := IDENTIFIER_RE.match(self.text, self.pos):
                self._emit(TokenType.IDENTIFIER, len(match.group()))
            elif char in PUNCTUATION:
                self._emit(PUNCTUATION[char], 1)
            else:
                self._emit(TokenType.OTHER, 1)

        self.tokens.append(Token(TokenType.EOF, "", self.line, self.column))
        return self.tokens

    def _read_string(self) -> None:
        index = self.pos + 1
        while index < len(self.text):
            if self.text[index] == "\\":
                index += 2
                continue
            if self.text[index] == '"':
                index += 1
                break
            index += 1
        length = min(index, len(self.text)) - self.pos
        raw = self.text[self.pos : self.pos + length]
        value = raw[1:-1] if len(raw) > 1 and raw.endswith('"') else raw[1:]
        self._emit(TokenType.STRING, length, value=value)

    def _emit(
        self, token_type: TokenType, length: int, value: str | None = None
    ) -> None:
        raw = self.text[self.pos : self.pos + length]
        self.tokens.append(
            Token(
                token_type,
                raw if value is None else value,
                self.line,
                self.column,
                raw,
            )
        )
        self._advance(length)

    def _advance(self, length: int) -> None:
        chunk = self.text[self.pos : self.pos + length]
        newlines = chunk.count("\n")
        if newlines:
            self.line += newlines
            self.column = len(chunk) - chunk.rfind("\n")
        else:
            self.column += length
        self.pos += length


def tokenize(text: str) -> list[Token]:
    """Tokenize keymap source text.

    Args:
        text: Device tree keymap source

    Returns:
        List of tokens terminated by an EOF token
    """
    return Tokenizer(text).tokenize()
