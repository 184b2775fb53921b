"""
Expression tree: a Group of child expressions, or an Atom leaf.

Atoms are either identifiers (any non-empty text that is not a number) or
unsigned integers. Trees are immutable and compare structurally.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Ident:
    name: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("Identifier text must be non-empty.")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Num:
    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError(f"Numbers are unsigned, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)


Atom = Union[Ident, Num]


@dataclass(frozen=True)
class Group:
    items: Tuple["Expr", ...] = ()

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, i):
        return self.items[i]

    def __str__(self) -> str:
        # late import: render depends on this module
        from .render import render
        return render(self)


Expr = Union[Group, Ident, Num]


def is_atom(expr: Expr) -> bool:
    return isinstance(expr, (Ident, Num))
