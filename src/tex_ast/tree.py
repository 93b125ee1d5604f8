# This file is part of TeXAST.
#
# TeXAST is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# TeXAST is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with TeXAST.  If not, see <http://www.gnu.org/licenses/>.
import logging
from enum import Enum, auto
from itertools import zip_longest
from typing import Any, Iterator, List, Optional, Sequence, Tuple

from ordered_set import OrderedSet
from returns.maybe import Maybe, Nothing, Some
from returns.result import Failure, Result, Success

from tex_ast import latex
from tex_ast.labels import Epsilon, Label, NonTerminalLabel, TokenLabel, to_label
from tex_ast.symbols import NonTerminal, Terminal, Token
from tex_ast.type_defs import ParseTree, Path

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


class Visit(Enum):
    """Events emitted by :meth:`SyntaxTree.walk`."""

    ENTER = auto()
    EXIT = auto()


class SyntaxTree:
    def __init__(
        self,
        label: Label | NonTerminal | Token | Terminal,
        children: Optional[List["SyntaxTree"]] = None,
    ):
        r"""
        Creates a tree whose root is labeled by :code:`label`. The label may be
        given as a :class:`~tex_ast.labels.Label` or as a nonterminal, token, or
        terminal, which is wrapped into the corresponding label.

        The tree takes ownership of :code:`children`; without children, the
        tree is a singleton.

        >>> leaf = SyntaxTree(Terminal("a"))
        >>> leaf.label
        TokenLabel(token=Token(terminal=Terminal(name='a'), value=None))
        >>> leaf.children
        ()

        >>> tree = SyntaxTree(NonTerminal("root"), [leaf, SyntaxTree(Epsilon())])
        >>> print(tree.to_str_repr())
        root
        ├── "a"
        └── ε

        :param label: The label of the root.
        :param children: The subtrees below the root, in order.
        """

        self.label: Label = to_label(label)
        self._children: List[SyntaxTree] = children if children is not None else []

    @property
    def children(self) -> "Tuple[SyntaxTree, ...]":
        return tuple(self._children)

    def add_child(self, child: "SyntaxTree") -> None:
        """
        Appends :code:`child` to the children of this tree's root.

        :param child: The subtree to append.
        :return: Nothing; this tree is extended.
        """

        assert isinstance(child, SyntaxTree)
        self._children.append(child)

    def populate_ast(self, parse_trees: ParseTree | Sequence[ParseTree]) -> None:
        """
        Converts the given parse tree (or each parse tree of a sequence, in order)
        into an abstract syntax tree and appends it as a new child of this tree.
        Leaves become token-labeled nodes, internal nodes become nonterminal-labeled
        nodes with the converted children in the same order.

        Example
        -------

        Consider the assignment :code:`x := 1`, parsed with a grammar for a small
        assignment language:

        >>> from tex_ast.tuple_tree import TupleParseTree
        >>> parse_tree = TupleParseTree(
        ...   ('<start>',
        ...     [('<stmt>',
        ...       [('<assgn>',
        ...         [('<var>', [('x', [])]),
        ...          (' := ', []),
        ...          ('<rhs>', [('<digit>', [('1', [])])])])])]))

        We populate a fresh tree from it:

        >>> ast = SyntaxTree(NonTerminal("<program>"))
        >>> ast.populate_ast(parse_tree)
        >>> print(ast.to_str_repr())
        <program>
        └── <start>
            └── <stmt>
                └── <assgn>
                    ├── <var>
                    │   └── "x"
                    ├── " := "
                    └── <rhs>
                        └── <digit>
                            └── "1"

        Passing a sequence appends one child per parse tree:

        >>> ast.populate_ast([TupleParseTree(("y", [])), TupleParseTree(("z", []))])
        >>> [str(child.label) for child in ast.children]
        ['<start>', '"y"', '"z"']

        Parse trees violating the :class:`~tex_ast.type_defs.ParseTree` contract
        are rejected; the partially converted subtree is not attached:

        >>> ast.populate_ast(TupleParseTree(("<var>", [("x", [("y", [])])])))
        Traceback (most recent call last):
        ...
        tex_ast.tree.MalformedParseTreeError: Terminal 'x' must have an empty list of children
        >>> len(ast.children)
        3

        The conversion uses an explicit stack, so the height of the parse tree is
        not limited by Python's recursion limit.

        :param parse_trees: A parse tree or a sequence of parse trees.
        :return: Nothing; this tree is extended.
        """

        if isinstance(parse_trees, ParseTree) or not isinstance(parse_trees, Sequence):
            parse_trees = (parse_trees,)

        num_nodes = 0
        pending: List[Tuple[SyntaxTree, Iterator[Any]]] = [(self, iter(parse_trees))]
        while pending:
            parent, remaining = pending[-1]
            parse_tree = next(remaining, _EXHAUSTED)

            if parse_tree is _EXHAUSTED:
                pending.pop()
                if pending:
                    # The subtree is complete; attach it to its parent.
                    pending[-1][0].add_child(parent)
                continue

            num_nodes += 1
            if _access(parse_tree, "is_leaf", "leaf status"):
                token = _access(parse_tree, "get_token", "token")
                if isinstance(token, Terminal):
                    token = Token(token)
                parent.add_child(SyntaxTree(TokenLabel(token)))
            else:
                node = SyntaxTree(
                    NonTerminalLabel(
                        _access(parse_tree, "get_nonterminal", "nonterminal")
                    )
                )
                children = _access(parse_tree, "get_children", "children")
                try:
                    pending.append((node, iter(children)))
                except TypeError as exc:
                    raise MalformedParseTreeError(
                        f"The children of {parse_tree!r} are not a sequence"
                    ) from exc

        logger.debug("Populated %d AST nodes below %s", num_nodes, self)

    @staticmethod
    def from_parse_tree(
        parse_tree: ParseTree,
    ) -> Result["SyntaxTree", "MalformedParseTreeError"]:
        """
        Converts a parse tree into an abstract syntax tree whose root corresponds
        to the root of the parse tree.

        >>> from tex_ast.tuple_tree import TupleParseTree
        >>> tree = SyntaxTree.from_parse_tree(
        ...     TupleParseTree(("<var>", [("x", [])]))).unwrap()
        >>> print(tree.to_str_repr())
        <var>
        └── "x"

        Malformed parse trees result in a Failure:

        >>> print(SyntaxTree.from_parse_tree(
        ...     TupleParseTree(("<var>", [("x", [("y", [])])]))).failure())
        Terminal 'x' must have an empty list of children

        Only a single parse tree can be converted; for sequences of parse trees,
        use :meth:`populate_ast`:

        >>> SyntaxTree.from_parse_tree([])
        Traceback (most recent call last):
        ...
        TypeError: Expected a single parse tree, got []

        :param parse_tree: The parse tree to convert.
        :return: The converted tree, or a Failure with the reason why the parse
            tree could not be converted.
        """

        if not isinstance(parse_tree, ParseTree):
            raise TypeError(f"Expected a single parse tree, got {parse_tree!r}")

        holder = SyntaxTree(Epsilon())
        try:
            holder.populate_ast(parse_tree)
        except MalformedParseTreeError as exc:
            logger.debug("Rejected parse tree %r: %s", parse_tree, exc)
            return Failure(exc)

        return Success(holder._children[0])

    def walk(self) -> Iterator[Tuple[Visit, "SyntaxTree"]]:
        """
        Traverses the tree depth-first, left to right, without recursion. Every
        node is reported twice: when it is entered, before its children, and when
        it is exited, after its children.

        >>> tree = SyntaxTree(NonTerminal("root"), [SyntaxTree(Terminal("a"))])
        >>> [(visit.name, str(node.label)) for visit, node in tree.walk()]
        [('ENTER', 'root'), ('ENTER', '"a"'), ('EXIT', '"a"'), ('EXIT', 'root')]

        :return: An iterator of (event, node) pairs.
        """

        stack: List[Tuple[Visit, SyntaxTree]] = [(Visit.ENTER, self)]
        while stack:
            visit, node = stack.pop()
            yield visit, node
            if visit is Visit.ENTER:
                stack.append((Visit.EXIT, node))
                stack.extend((Visit.ENTER, child) for child in reversed(node._children))

    def to_latex_tree(self) -> str:
        r"""
        Writes the tree in the bracket notation of the :code:`forest` package.
        The empty symbol is rendered as :math:`\varepsilon`.

        >>> tree = SyntaxTree(
        ...     NonTerminal("root"), [SyntaxTree(Terminal("a")), SyntaxTree(Terminal("b"))])
        >>> print(tree.to_latex_tree())
        [{root} [{a} ][{b} ]]

        >>> print(SyntaxTree(Epsilon()).to_latex_tree())
        [{$\varepsilon$} ]

        :return: The bracket notation of this tree.
        """

        result: List[str] = []
        for visit, node in self.walk():
            if visit is Visit.EXIT:
                result.append("]")
                continue

            rendering = (
                latex.EPSILON_GLYPH if node.label.is_epsilon() else node.label.to_tex()
            )
            result.append("[{" + rendering + "} ")

        return "".join(result)

    def to_tikz(self) -> str:
        """
        Writes the tree as TikZ code, one :code:`node` per tree node and one
        :code:`child` per edge. Labels are rendered as they are, the empty symbol
        included.

        >>> tree = SyntaxTree(
        ...     NonTerminal("root"), [SyntaxTree(Terminal("a")), SyntaxTree(Terminal("b"))])
        >>> tree.to_tikz()
        'node {root}\\nchild { node {a}\\n }\\nchild { node {b}\\n }\\n'

        >>> SyntaxTree(Epsilon()).to_tikz()
        'node {EPSILON}\\n'

        :return: The TikZ code of this tree.
        """

        result: List[str] = []
        for visit, node in self.walk():
            if visit is Visit.EXIT:
                if node is not self:
                    result.append(" }\n")
                continue

            if node is not self:
                result.append("child { ")
            result.append("node {" + node.label.to_tex() + "}\n")

        return "".join(result)

    def to_tikz_picture(self) -> str:
        r"""
        Writes the tree as a TikZ picture laid out by the :code:`graphdrawing`
        library.

        >>> tree = SyntaxTree(NonTerminal("root"), [SyntaxTree(Terminal("a"))])
        >>> print(tree.to_tikz_picture())
        \begin{tikzpicture}[tree layout]
        \node {root}
        child { node {a}
         }
        ;
        \end{tikzpicture}
        """

        return latex.TIKZ_PICTURE_HEADER + self.to_tikz() + latex.TIKZ_PICTURE_FOOTER

    def to_forest_picture(self) -> str:
        r"""
        Writes the tree as a :code:`forest` environment.

        >>> tree = SyntaxTree(NonTerminal("root"), [SyntaxTree(Terminal("a"))])
        >>> print(tree.to_forest_picture())
        \begin{forest}for tree={rectangle,draw, l sep=20pt}[{root} [{a} ]];
        \end{forest}
        """

        return latex.FOREST_HEADER + self.to_latex_tree() + latex.FOREST_FOOTER

    def to_latex(self) -> str:
        """
        Writes the tree as a standalone LaTeX document drawing it with the
        :code:`forest` package. Compile it with pdfLaTeX.
        """

        return latex.PDFLATEX_PREAMBLE + self.to_forest_picture() + latex.PDFLATEX_FOOTER

    def to_latex_with_lua(self) -> str:
        """
        Writes the tree as a standalone LaTeX document drawing it with TikZ's
        :code:`graphdrawing` library. The layout algorithms of that library are
        written in Lua: the document only compiles with LuaLaTeX, not with
        pdfLaTeX.
        """

        return (
            latex.LUALATEX_PREAMBLE + self.to_tikz_picture() + latex.LUALATEX_FOOTER
        )

    def __len__(self) -> int:
        return sum(1 for visit, _ in self.walk() if visit is Visit.ENTER)

    def depth(self) -> int:
        """
        Computes the number of nodes on the longest path from the root to a leaf.

        >>> SyntaxTree(Terminal("a")).depth()
        1

        >>> SyntaxTree(NonTerminal("<var>"), [SyntaxTree(Terminal("x"))]).depth()
        2

        :return: The depth of the tree.
        """

        result = 0
        current = 0
        for visit, _ in self.walk():
            current += 1 if visit is Visit.ENTER else -1
            result = max(result, current)

        return result

    def get_subtree(self, path: Path) -> Maybe["SyntaxTree"]:
        """
        Returns the subtree at the given path, a sequence of child indices starting
        at the root.

        >>> tree = SyntaxTree(
        ...     NonTerminal("<assgn>"),
        ...     [SyntaxTree(NonTerminal("<var>"), [SyntaxTree(Terminal("x"))])])
        >>> print(tree.get_subtree((0, 0)).unwrap().label)
        "x"

        >>> print(tree.get_subtree(()))
        <Some: SyntaxTree(<assgn>)>

        >>> tree.get_subtree((1,)) == Nothing
        True

        :param path: The path to the subtree.
        :return: The subtree, or Nothing if there is no node at that path.
        """

        node = self
        for idx in path:
            if not 0 <= idx < len(node._children):
                return Nothing
            node = node._children[idx]

        return Some(node)

    def leaves(self) -> "Tuple[SyntaxTree, ...]":
        """
        :return: The nodes without children, from left to right.
        """

        return tuple(
            node
            for visit, node in self.walk()
            if visit is Visit.ENTER and not node._children
        )

    def labels(self) -> OrderedSet[Label]:
        """
        Collects the distinct labels of the tree in document order.

        >>> tree = SyntaxTree(
        ...     NonTerminal("<stmt>"),
        ...     [SyntaxTree(Terminal("x")), SyntaxTree(Terminal(";")),
        ...      SyntaxTree(Terminal("x"))])
        >>> [str(label) for label in tree.labels()]
        ['<stmt>', '"x"', '";"']

        :return: The labels occurring in this tree.
        """

        return OrderedSet(
            node.label for visit, node in self.walk() if visit is Visit.ENTER
        )

    def to_str_repr(self) -> str:
        """
        This method converts the tree to a textual representation capturing the
        whole structure. Nonterminals are printed as they are, tokens in double
        quotes, and the empty symbol as ε. See :meth:`populate_ast` for an example.

        :return: A multi-line, human-readable representation of this tree.
        """

        lines: List[str] = []
        stack: List[Tuple[SyntaxTree, str, str]] = [(self, "", "")]
        while stack:
            node, line_prefix, child_prefix = stack.pop()
            lines.append(line_prefix + str(node.label))

            last_idx = len(node._children) - 1
            for child_idx in reversed(range(len(node._children))):
                if child_idx == last_idx:
                    branch, indent = "└── ", "    "
                else:
                    branch, indent = "├── ", "│   "
                stack.append(
                    (
                        node._children[child_idx],
                        child_prefix + branch,
                        child_prefix + indent,
                    )
                )

        return "\n".join(lines)

    def __eq__(self, other: Any) -> bool:
        """
        Trees are equal if they have the same shape and the same labels.

        >>> SyntaxTree(Terminal("a")) == SyntaxTree(Token(Terminal("a")))
        True

        >>> SyntaxTree(Terminal("a")) == SyntaxTree(Terminal("a"), [SyntaxTree(Epsilon())])
        False
        """

        if not isinstance(other, SyntaxTree):
            return NotImplemented

        return all(
            visit is other_visit and (visit is None or node.label == other_node.label)
            for (visit, node), (other_visit, other_node) in zip_longest(
                self.walk(), other.walk(), fillvalue=(None, None)
            )
        )

    __hash__ = None

    def __str__(self):
        return f"SyntaxTree({self.label})"

    def __repr__(self):
        return str(self)


def _access(parse_tree: Any, accessor: str, what: str) -> Any:
    """
    Calls the accessor method :code:`accessor` of :code:`parse_tree`, turning any
    failure or missing result into a :class:`MalformedParseTreeError`.
    """

    try:
        result = getattr(parse_tree, accessor)()
    except MalformedParseTreeError:
        raise
    except Exception as exc:
        raise MalformedParseTreeError(
            f"Could not retrieve the {what} of {parse_tree!r}"
        ) from exc

    if result is None:
        raise MalformedParseTreeError(f"{parse_tree!r} has no {what}")

    return result


class MalformedParseTreeError(Exception):
    """
    Signals that a parse tree does not satisfy the
    :class:`~tex_ast.type_defs.ParseTree` contract.
    """

    pass
