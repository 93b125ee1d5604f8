from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from tex_ast.symbols import NonTerminal, Terminal, Token

EPSILON_TEXT = "EPSILON"


@dataclass(frozen=True)
class Label(ABC):
    """
    What a node of a :class:`~tex_ast.tree.SyntaxTree` denotes: the empty
    symbol (:class:`Epsilon`), a token (:class:`TokenLabel`), or a nonterminal
    (:class:`NonTerminalLabel`).

    Abstract base class.
    """

    def is_epsilon(self) -> bool:
        return False

    @abstractmethod
    def to_tex(self) -> str:
        ...


@dataclass(frozen=True)
class Epsilon(Label):
    """
    The empty symbol.

    >>> Epsilon().is_epsilon()
    True
    >>> print(Epsilon())
    ε

    Its LaTeX rendering is the plain identifier text; substituting a glyph is
    up to the renderer:

    >>> Epsilon().to_tex()
    'EPSILON'
    """

    def is_epsilon(self) -> bool:
        return True

    def to_tex(self) -> str:
        return EPSILON_TEXT

    def __str__(self):
        return "ε"


@dataclass(frozen=True)
class TokenLabel(Label):
    """
    A label wrapping a token occurrence.

    >>> label = TokenLabel(Token(Terminal("VARNAME"), "x"))
    >>> label.is_epsilon()
    False
    >>> label.to_tex()
    'VARNAME: x'
    >>> print(label)
    "VARNAME: x"
    """

    token: Any

    def to_tex(self) -> str:
        return render(self.token)

    def __str__(self):
        return f'"{self.token}"'


@dataclass(frozen=True)
class NonTerminalLabel(Label):
    """
    A label wrapping a nonterminal (grammar variable).

    >>> label = NonTerminalLabel(NonTerminal("<assgn>"))
    >>> print(label.to_tex())
    $\\langle$assgn$\\rangle$
    >>> print(label)
    <assgn>
    """

    nonterminal: Any

    def to_tex(self) -> str:
        return render(self.nonterminal)

    def __str__(self):
        return str(self.nonterminal)


def render(symbol: Any) -> str:
    """
    Delegates LaTeX rendering to :code:`symbol`'s own :code:`to_tex` method.

    >>> render(Terminal("IF"))
    'IF'

    Objects that cannot render themselves raise an
    :class:`UnrenderableLabelError`:

    >>> render(42)
    Traceback (most recent call last):
    ...
    tex_ast.labels.UnrenderableLabelError: 42 has no to_tex() method

    :param symbol: A terminal, nonterminal, or token.
    :return: The LaTeX source for :code:`symbol`.
    """

    to_tex = getattr(symbol, "to_tex", None)
    if not callable(to_tex):
        raise UnrenderableLabelError(f"{symbol!r} has no to_tex() method")

    try:
        result = to_tex()
    except Exception as exc:
        raise UnrenderableLabelError(f"Could not render {symbol!r}") from exc

    if not isinstance(result, str):
        raise UnrenderableLabelError(
            f"{symbol!r}.to_tex() returned {type(result).__name__}, not str"
        )

    return result


def to_label(value: Label | NonTerminal | Token | Terminal) -> Label:
    """
    Converts a nonterminal, token, or terminal into a :class:`Label`. Labels
    are returned unchanged, and bare terminals are wrapped into a
    :class:`~tex_ast.symbols.Token` first.

    >>> to_label(NonTerminal("<stmt>"))
    NonTerminalLabel(nonterminal=NonTerminal(name='<stmt>'))

    >>> to_label(Terminal("a"))
    TokenLabel(token=Token(terminal=Terminal(name='a'), value=None))

    >>> to_label(Epsilon())
    Epsilon()

    >>> to_label("<stmt>")
    Traceback (most recent call last):
    ...
    TypeError: Cannot convert '<stmt>' to a label

    :param value: The value to convert.
    :return: The corresponding label.
    """

    match value:
        case Label():
            return value
        case NonTerminal():
            return NonTerminalLabel(value)
        case Token():
            return TokenLabel(value)
        case Terminal():
            return TokenLabel(Token(value))

    raise TypeError(f"Cannot convert {value!r} to a label")


class UnrenderableLabelError(Exception):
    """
    Signals that the identifier wrapped by a label cannot produce LaTeX source.
    """

    pass
