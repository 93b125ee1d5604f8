from typing import Sequence, Tuple

from tex_ast.helpers import is_nonterminal
from tex_ast.symbols import NonTerminal, Terminal, Token
from tex_ast.tree import MalformedParseTreeError
from tex_ast.type_defs import TupleTree


class TupleParseTree:
    """
    Exposes a derivation tree in the nested form :code:`(symbol, children)` as a
    :class:`~tex_ast.type_defs.ParseTree`. Lists such as :code:`["x", []]` are
    accepted as well.

    Symbols of the form :code:`<name>` are nonterminals, everything else is a
    terminal. A nonterminal whose children are :code:`None` is an *open* leaf;
    it becomes a nonterminal node without children. Terminals must have an
    empty list of children.

    >>> tree = TupleParseTree(("<var>", [["x", []]]))
    >>> tree.is_leaf()
    False
    >>> tree.get_nonterminal()
    NonTerminal(name='<var>')
    >>> child = tree.get_children()[0]
    >>> child.is_leaf()
    True
    >>> child.get_token()
    Token(terminal=Terminal(name='x'), value=None)

    >>> TupleParseTree(("x", [("y", [])])).get_token()
    Traceback (most recent call last):
    ...
    tex_ast.tree.MalformedParseTreeError: Terminal 'x' must have an empty list of children

    >>> TupleParseTree(("x", None)).get_token()
    Traceback (most recent call last):
    ...
    tex_ast.tree.MalformedParseTreeError: Terminal 'x' must have an empty list of children

    >>> TupleParseTree(("<var>",))
    Traceback (most recent call last):
    ...
    tex_ast.tree.MalformedParseTreeError: Not a (symbol, children) pair: ('<var>',)
    """

    def __init__(self, tree: TupleTree | Sequence):
        if isinstance(tree, str) or not isinstance(tree, Sequence) or len(tree) != 2:
            raise MalformedParseTreeError(f"Not a (symbol, children) pair: {tree!r}")

        self.symbol, self.children = tree

    def is_leaf(self) -> bool:
        return not is_nonterminal(self.symbol)

    def get_token(self) -> Token:
        if self.children is None or len(self.children) > 0:
            raise MalformedParseTreeError(
                f"Terminal {self.symbol!r} must have an empty list of children"
            )

        return Token(Terminal(self.symbol))

    def get_nonterminal(self) -> NonTerminal:
        return NonTerminal(self.symbol)

    def get_children(self) -> Tuple["TupleParseTree", ...]:
        return tuple(TupleParseTree(child) for child in self.children or [])

    def __repr__(self):
        return f"TupleParseTree({(self.symbol, self.children)!r})"
