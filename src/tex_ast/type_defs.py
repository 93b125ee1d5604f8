from abc import abstractmethod
from typing import Any, List, Optional, Protocol, Sequence, Tuple, runtime_checkable

Path = Tuple[int, ...]

# A derivation tree in the nested tuple form ``(symbol, children)``.
TupleTree = Tuple[str, Optional[List[Any]]]


@runtime_checkable
class TeXRenderable(Protocol):
    """
    Anything that knows how to render itself as LaTeX source. Terminals,
    nonterminals and tokens handed to a :class:`~tex_ast.labels.Label` must
    satisfy this protocol; the text they return is inserted verbatim.
    """

    @abstractmethod
    def to_tex(self) -> str:
        ...


@runtime_checkable
class ParseTree(Protocol):
    """
    The interface a concrete parse tree must offer to be converted into a
    :class:`~tex_ast.tree.SyntaxTree`.

    A parse tree node is either a *leaf* carrying a token, or an *internal*
    node carrying a nonterminal and an ordered sequence of children.
    :meth:`get_token` is only meaningful for leaves; :meth:`get_nonterminal`
    and :meth:`get_children` only for internal nodes.

    For example, the adapter :class:`~tex_ast.tuple_tree.TupleParseTree`
    implements this protocol:

    >>> from tex_ast.tuple_tree import TupleParseTree
    >>> isinstance(TupleParseTree(("<start>", [("x", [])])), ParseTree)
    True
    """

    @abstractmethod
    def is_leaf(self) -> bool:
        ...

    @abstractmethod
    def get_token(self) -> TeXRenderable:
        ...

    @abstractmethod
    def get_nonterminal(self) -> TeXRenderable:
        ...

    @abstractmethod
    def get_children(self) -> Sequence["ParseTree"]:
        ...
