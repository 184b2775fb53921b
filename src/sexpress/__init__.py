from sexpress.io.config_loader import ConfigError, ParserConfig, load_config
from sexpress.syntax.expr import Atom, Expr, Group, Ident, Num
from sexpress.syntax.parser import (
    SExprError,
    UnbalancedParen,
    UnclosedParen,
    WrongTopLevelCount,
    parse,
    parse_tokens,
)
from sexpress.syntax.render import describe, render
from sexpress.syntax.tokenizer import Token, TokenKind, classify_atom, tokenize

__all__ = [
    "Atom",
    "ConfigError",
    "Expr",
    "Group",
    "Ident",
    "Num",
    "ParserConfig",
    "SExprError",
    "Token",
    "TokenKind",
    "UnbalancedParen",
    "UnclosedParen",
    "WrongTopLevelCount",
    "classify_atom",
    "describe",
    "load_config",
    "parse",
    "parse_tokens",
    "render",
    "tokenize",
]
