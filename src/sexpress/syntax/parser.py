from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from sexpress.io.config_loader import ParserConfig
from .expr import Expr, Group
from .tokenizer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)


class SExprError(ValueError):
    pass


class UnbalancedParen(SExprError):
    def __init__(self):
        super().__init__("unexpected closing paren")


class UnclosedParen(SExprError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"{count} unclosed open paren(s)")


class WrongTopLevelCount(SExprError):
    def __init__(self, found: int):
        self.found = found
        super().__init__(f"expected 1 top-level expression, found {found}")


def parse_tokens(tokens: Iterable[Token]) -> Expr:
    """
    Assemble a token stream into a single expression.

    contexts[0] is the root: it collects top-level expressions and is never
    closed or turned into a Group. Invariant: len(contexts) >= 1.
    """
    contexts: List[List[Expr]] = [[]]

    for tok in tokens:
        if tok.kind is TokenKind.LPAREN:
            contexts.append([])
        elif tok.kind is TokenKind.RPAREN:
            if len(contexts) < 2:
                raise UnbalancedParen()
            group = Group(tuple(contexts.pop()))
            contexts[-1].append(group)
        else:
            contexts[-1].append(tok.atom)

    if len(contexts) != 1:
        raise UnclosedParen(len(contexts) - 1)

    root = contexts[0]
    if len(root) != 1:
        raise WrongTopLevelCount(len(root))
    return root[0]


def parse(text: str, config: Optional[ParserConfig] = None) -> Expr:
    """Parse exactly one S-expression from `text`."""
    try:
        expr = parse_tokens(tokenize(text, config))
    except SExprError as e:
        logger.debug(f"Failed to parse {text!r}: {e}")
        raise
    logger.debug(f"Parsed {len(text or '')} chars into {type(expr).__name__}")
    return expr
