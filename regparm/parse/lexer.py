"""
Lexer for parameter files.

Converts parameter file text into a list of tokens with source locations.

    ID    letters, digits, '_' and '.', not starting with a digit
    STR   double-quoted; '\\"' does not end the string; token text keeps the quotes and backslashes
    NUM   decimal (optionally negative), 0x hex, or Verilog literal (40'h1f, 'd10)
    '='  '{'  '}'

'//' line comments and '/* */' block comments are skipped. Lexical errors are
collected rather than raised so that a whole file can be reported at once.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class TokenType(Enum):
    ID = "identifier"
    STR = "string"
    NUM = "number"
    EQ = "'='"
    LBRACE = "'{'"
    RBRACE = "'}'"
    EOF = "end of file"


@dataclass(frozen=True)
class Token:
    """
    A single token.

    Attributes:
        type: Type of token
        text: Source text of the token (strings keep their quotes)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    type: TokenType
    text: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.text!r}, {self.line}:{self.column})"


@dataclass(frozen=True)
class SyntaxIssue:
    line: int
    column: int
    message: str

    def __str__(self) -> str:
        return f"line {self.line}:{self.column} {self.message}"


_HEX_DIGITS = set("0123456789abcdefABCDEF_")
_RADIX_CHARS = set("bodhBODH")
_PUNCT = {"=": TokenType.EQ, "{": TokenType.LBRACE, "}": TokenType.RBRACE}


class Lexer:
    """Tokenizer for parameter file text."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[SyntaxIssue] = []

    def current_char(self) -> Optional[str]:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> Optional[str]:
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self) -> None:
        """Move to next character, updating line/column."""
        if self.pos < len(self.text):
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def error(self, message: str, line: int = None, column: int = None) -> None:
        self.errors.append(SyntaxIssue(
            line if line is not None else self.line,
            column if column is not None else self.column,
            message,
        ))

    def skip_line_comment(self) -> None:
        while self.current_char() is not None and self.current_char() != "\n":
            self.advance()

    def skip_block_comment(self) -> None:
        line, column = self.line, self.column
        self.advance()
        self.advance()
        while self.current_char() is not None:
            if self.current_char() == "*" and self.peek_char() == "/":
                self.advance()
                self.advance()
                return
            self.advance()
        self.error("unterminated block comment", line, column)

    def read_while(self, allowed) -> str:
        start = self.pos
        while self.current_char() is not None and allowed(self.current_char()):
            self.advance()
        return self.text[start:self.pos]

    def read_string(self) -> Optional[str]:
        """Read a quoted string, returning its text including the quotes."""
        line, column = self.line, self.column
        start = self.pos
        self.advance()

        while True:
            current = self.current_char()
            if current is None or current == "\n":
                self.error("unterminated string literal", line, column)
                return None
            if current == "\\" and self.peek_char() is not None:
                self.advance()
                self.advance()
                continue
            self.advance()
            if current == '"':
                return self.text[start:self.pos]

    def read_verilog_tail(self) -> str:
        """Read "'<radix><digits>" at the current position."""
        start = self.pos
        self.advance()
        if self.current_char() is None or self.current_char() not in _RADIX_CHARS:
            self.error("expected radix (b, o, d or h) after \"'\" in number")
            return self.text[start:self.pos]
        self.advance()
        self.read_while(lambda c: c in _HEX_DIGITS)
        return self.text[start:self.pos]

    def read_number(self) -> str:
        start = self.pos

        if self.current_char() == "'":
            self.read_verilog_tail()
            return self.text[start:self.pos]

        if self.current_char() == "-":
            self.advance()

        if self.current_char() == "0" and self.peek_char() in ("x", "X"):
            self.advance()
            self.advance()
            self.read_while(lambda c: c in _HEX_DIGITS)
            return self.text[start:self.pos]

        self.read_while(lambda c: c.isdigit() or c == "_")
        if self.current_char() == "'":
            self.read_verilog_tail()

        return self.text[start:self.pos]

    def emit(self, type_: TokenType, text: str, line: int, column: int) -> None:
        self.tokens.append(Token(type_, text, line, column))

    def tokenize(self) -> List[Token]:  # pylint: disable=too-many-branches
        """Tokenize the whole text. The list always ends with an EOF token."""
        while True:
            current = self.current_char()
            line, column = self.line, self.column

            if current is None:
                self.emit(TokenType.EOF, "", line, column)
                return self.tokens

            if current.isspace():
                self.advance()
            elif current == "/" and self.peek_char() == "/":
                self.skip_line_comment()
            elif current == "/" and self.peek_char() == "*":
                self.skip_block_comment()
            elif current in _PUNCT:
                self.advance()
                self.emit(_PUNCT[current], current, line, column)
            elif current == '"':
                text = self.read_string()
                if text is not None:
                    self.emit(TokenType.STR, text, line, column)
            elif current.isdigit() or current == "'" or (current == "-" and (self.peek_char() or "").isdigit()):
                self.emit(TokenType.NUM, self.read_number(), line, column)
            elif current.isalpha() or current == "_":
                text = self.read_while(lambda c: c.isalnum() or c in "_.")
                self.emit(TokenType.ID, text, line, column)
            else:
                self.error(f"unexpected character {current!r}")
                self.advance()


def tokenize(text: str) -> Tuple[List[Token], List[SyntaxIssue]]:
    """Convenience function to tokenize text."""
    lexer = Lexer(text)
    tokens = lexer.tokenize()
    return tokens, lexer.errors
