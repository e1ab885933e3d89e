"""
Parameter file grammar: lexer and event-producing parser.
"""

from .lexer import Token, TokenType, SyntaxIssue, tokenize
from .parser import Parser, ParseEvent, RuleKind, parse_text

__all__ = ['Token', 'TokenType', 'SyntaxIssue', 'tokenize', 'Parser', 'ParseEvent', 'RuleKind', 'parse_text']
