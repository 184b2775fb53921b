from typing import Callable, List, Union

from .expr import Expr, Group, Ident, Num, is_atom


def _walk(expr: Expr, open_: str, close: str, sep: str,
          leaf: Callable[[Union[Ident, Num]], str]) -> str:
    # Explicit stack so deeply nested trees do not hit the recursion limit.
    # Stack entries are either expressions or literal text to emit.
    out: List[str] = []
    stack: List[Union[Expr, str]] = [expr]
    while stack:
        node = stack.pop()
        if isinstance(node, str):
            out.append(node)
        elif isinstance(node, Group):
            out.append(open_)
            stack.append(close)
            for i in range(len(node.items) - 1, -1, -1):
                stack.append(node.items[i])
                if i:
                    stack.append(sep)
        elif is_atom(node):
            out.append(leaf(node))
        else:
            raise TypeError(f"Not an expression: {node!r}")
    return "".join(out)


def render(expr: Expr) -> str:
    """Canonical text: single-space separated, no extra whitespace."""
    return _walk(expr, "(", ")", " ", str)


def _describe_atom(atom: Union[Ident, Num]) -> str:
    if isinstance(atom, Num):
        return f"Atom(Number {atom.value})"
    return f'Atom(Identifier "{atom.name}")'


def describe(expr: Expr) -> str:
    """
    Structural form of a tree, e.g.
      Group[Atom(Identifier "+"), Atom(Number 2), Atom(Number 3)]
    """
    return _walk(expr, "Group[", "]", ", ", _describe_atom)
