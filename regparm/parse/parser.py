"""
Parser for parameter files.

Turns a token list into a flat stream of ParseEvent records, one per
parameter assignment or annotation command:

    root        : (section | annotate_block)* EOF
    section     : 'global' block
                | 'input'  ('rdl' | 'jspec') block
                | 'output' ('systemverilog' | 'rdl' | 'jspec' | 'reglist' | 'uvmregs' | 'bench') block
    block       : '{' assign* '}'
    assign      : ID '=' (ID | STR | NUM)
    annotate_block     : 'annotate' '{' annotation_command* '}'
    annotation_command : ('set_reg_property' | 'set_field_property') (ID | STR) '=' STR
                         ('instances' | 'components') STR

Syntax errors are collected; after each error the parser skips ahead to the
next plausible statement so that every error in a file is reported.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .lexer import Token, TokenType, SyntaxIssue, tokenize


class RuleKind(Enum):
    """Grammar rule that produced an event."""
    GLOBAL = "global"
    RDL_IN = "input rdl"
    JSPEC_IN = "input jspec"
    SYSTEMVERILOG_OUT = "output systemverilog"
    RDL_OUT = "output rdl"
    JSPEC_OUT = "output jspec"
    REGLIST_OUT = "output reglist"
    UVMREGS_OUT = "output uvmregs"
    BENCH_OUT = "output bench"
    ANNOTATION_COMMAND = "annotate"

    @property
    def is_assignment(self) -> bool:
        return self != RuleKind.ANNOTATION_COMMAND


_SECTIONS = {
    ("global",): RuleKind.GLOBAL,
    ("input", "rdl"): RuleKind.RDL_IN,
    ("input", "jspec"): RuleKind.JSPEC_IN,
    ("output", "systemverilog"): RuleKind.SYSTEMVERILOG_OUT,
    ("output", "rdl"): RuleKind.RDL_OUT,
    ("output", "jspec"): RuleKind.JSPEC_OUT,
    ("output", "reglist"): RuleKind.REGLIST_OUT,
    ("output", "uvmregs"): RuleKind.UVMREGS_OUT,
    ("output", "bench"): RuleKind.BENCH_OUT,
}

_ANNOTATION_COMMANDS = ("set_reg_property", "set_field_property")
_PATH_MODES = ("instances", "components")
_VALUE_TYPES = (TokenType.ID, TokenType.STR, TokenType.NUM)


@dataclass(frozen=True)
class ParseEvent:
    """
    One matched rule.

    Attributes:
        kind: Rule that matched
        tokens: The rule's child tokens, in source order
    """
    kind: RuleKind
    tokens: Tuple[Token, ...]

    @property
    def texts(self) -> Tuple[str, ...]:
        return tuple(t.text for t in self.tokens)

    @property
    def line(self) -> int:
        return self.tokens[0].line if self.tokens else 0


class _Mismatch(Exception):
    """Internal: current statement does not match the grammar."""


class Parser:
    """Recursive-descent parser producing ParseEvents."""

    def __init__(self, tokens: List[Token], errors: Optional[List[SyntaxIssue]] = None):
        self.tokens = tokens
        self.pos = 0
        self.errors: List[SyntaxIssue] = list(errors or [])

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def peek(self, offset: int = 1) -> Token:
        return self.tokens[min(self.pos + offset, len(self.tokens) - 1)]

    def advance(self) -> Token:
        token = self.current
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def at(self, type_: TokenType, text: Optional[str] = None) -> bool:
        return self.current.type == type_ and (text is None or self.current.text == text)

    def fail(self, expected: str) -> None:
        token = self.current
        got = token.type.value if token.type == TokenType.EOF else f"'{token.text}'"
        self.errors.append(SyntaxIssue(token.line, token.column, f"expected {expected}, got {got}"))
        raise _Mismatch()

    def expect(self, types, expected: str, texts=None) -> Token:
        if not isinstance(types, tuple):
            types = (types,)
        if self.current.type not in types or (texts is not None and self.current.text not in texts):
            self.fail(expected)
        return self.advance()

    # ------------------------------------------------------------------ rules

    def parse(self) -> Iterator[ParseEvent]:
        """Yield events for the whole token stream."""
        while not self.at(TokenType.EOF):
            try:
                yield from self.parse_top_level()
            except _Mismatch:
                self.recover_top_level()

    def parse_top_level(self) -> Iterator[ParseEvent]:
        head = self.expect(TokenType.ID, "'global', 'input', 'output' or 'annotate'",
                           texts=("global", "input", "output", "annotate"))

        if head.text == "annotate":
            yield from self.parse_block(RuleKind.ANNOTATION_COMMAND)
            return

        if head.text == "global":
            key = ("global",)
        else:
            choices = sorted(k[1] for k in _SECTIONS if k[0] == head.text)
            target = self.expect(TokenType.ID, f"one of {', '.join(choices)}", texts=choices)
            key = (head.text, target.text)

        yield from self.parse_block(_SECTIONS[key])

    def parse_block(self, kind: RuleKind) -> Iterator[ParseEvent]:
        self.expect(TokenType.LBRACE, "'{'")

        while not self.at(TokenType.RBRACE):
            if self.at(TokenType.EOF):
                self.fail("'}'")
            start = self.pos
            try:
                if kind.is_assignment:
                    yield self.parse_assign(kind)
                else:
                    yield self.parse_annotation_command()
            except _Mismatch:
                self.recover_statement(kind, start)

        self.advance()

    def parse_assign(self, kind: RuleKind) -> ParseEvent:
        name = self.expect(TokenType.ID, "parameter name")
        eq = self.expect(TokenType.EQ, "'='")
        value = self.expect(_VALUE_TYPES, "parameter value")
        return ParseEvent(kind, (name, eq, value))

    def parse_annotation_command(self) -> ParseEvent:
        cmd = self.expect(TokenType.ID, "'set_reg_property' or 'set_field_property'", texts=_ANNOTATION_COMMANDS)
        prop = self.expect((TokenType.ID, TokenType.STR), "property name")
        eq = self.expect(TokenType.EQ, "'='")
        value = self.expect(TokenType.STR, "quoted property value")
        mode = self.expect(TokenType.ID, "'instances' or 'components'", texts=_PATH_MODES)
        path = self.expect(TokenType.STR, "quoted path")
        return ParseEvent(RuleKind.ANNOTATION_COMMAND, (cmd, prop, eq, value, mode, path))

    # --------------------------------------------------------------- recovery

    def _starts_statement(self, kind: RuleKind) -> bool:
        if kind.is_assignment:
            return self.at(TokenType.ID) and self.peek().type == TokenType.EQ
        return self.at(TokenType.ID) and self.current.text in _ANNOTATION_COMMANDS

    def recover_statement(self, kind: RuleKind, start: int) -> None:
        """Skip to the next statement start, or to the block's closing brace."""
        if self.pos == start:
            self.advance()
        while not (self.at(TokenType.EOF) or self.at(TokenType.RBRACE) or self._starts_statement(kind)):
            self.advance()
        if self.at(TokenType.EOF):
            self.fail("'}'")

    def recover_top_level(self) -> None:
        """Skip to the next section header."""
        depth = 0
        while not self.at(TokenType.EOF):
            if self.at(TokenType.LBRACE):
                depth += 1
            elif self.at(TokenType.RBRACE):
                depth = max(depth - 1, 0)
            elif depth == 0 and self.at(TokenType.ID) and self.current.text in ("global", "input", "output", "annotate") \
                    and self.peek().type in (TokenType.ID, TokenType.LBRACE):
                return
            self.advance()


def parse_text(text: str) -> Tuple[List[ParseEvent], List[SyntaxIssue]]:
    """
    Tokenize and parse text.

    Returns:
        (events, syntax errors). Events are only produced for statements that
        matched the grammar.
    """
    tokens, lex_errors = tokenize(text)
    parser = Parser(tokens, lex_errors)
    events = list(parser.parse())
    return events, sorted(parser.errors, key=lambda e: (e.line, e.column))
