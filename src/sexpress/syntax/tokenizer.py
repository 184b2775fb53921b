from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from sexpress.io.config_loader import DEFAULT_CONFIG, ParserConfig
from .expr import Atom, Ident, Num

_DIGITS = re.compile(r"\+?[0-9]+")


class TokenKind(str, Enum):
    LPAREN = "("
    RPAREN = ")"
    ATOM = "atom"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    atom: Optional[Atom] = None


LPAREN = Token(TokenKind.LPAREN)
RPAREN = Token(TokenKind.RPAREN)


def classify_atom(text: str, config: Optional[ParserConfig] = None) -> Atom:
    """
    Number if `text` is an unsigned decimal that fits the configured width,
    identifier otherwise. Never raises for non-empty text.
    """
    cfg = config or DEFAULT_CONFIG
    if _DIGITS.fullmatch(text):
        n = int(text)
        if n <= cfg.max_number:
            return Num(n)
    return Ident(text)


def tokenize(text: str, config: Optional[ParserConfig] = None) -> Iterator[Token]:
    """
    Lazily split `text` into paren and atom tokens.

    Separators only delimit atoms and produce no token of their own.
    """
    cfg = config or DEFAULT_CONFIG
    buf: List[str] = []
    for ch in text or "":
        if ch == "(" or ch == ")" or cfg.is_separator(ch):
            if buf:
                yield Token(TokenKind.ATOM, classify_atom("".join(buf), cfg))
                buf.clear()
            if ch == "(":
                yield LPAREN
            elif ch == ")":
                yield RPAREN
        else:
            buf.append(ch)
    # trailing atom
    if buf:
        yield Token(TokenKind.ATOM, classify_atom("".join(buf), cfg))
