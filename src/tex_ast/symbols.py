from dataclasses import dataclass
from typing import Optional

from tex_ast.helpers import is_nonterminal, tex_escape


@dataclass(frozen=True)
class Terminal:
    """
    A terminal symbol (lexical unit) of a grammar.

    Example:

    >>> print(Terminal("VARNAME").to_tex())
    VARNAME

    Special characters are escaped:

    >>> print(Terminal(":=").to_tex())
    :=
    >>> print(Terminal("#").to_tex())
    \\#
    """

    name: str

    def to_tex(self) -> str:
        return tex_escape(self.name)

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class NonTerminal:
    """
    A nonterminal symbol (grammar variable). Names may follow the usual
    :code:`<name>` convention, in which case they are typeset with angle
    brackets.

    Example:

    >>> print(NonTerminal("<stmt>").to_tex())
    $\\langle$stmt$\\rangle$

    >>> print(NonTerminal("Program").to_tex())
    Program

    >>> NonTerminal("<stmt>") == NonTerminal("<stmt>")
    True
    """

    name: str

    def to_tex(self) -> str:
        if is_nonterminal(self.name):
            return "$\\langle$" + tex_escape(self.name[1:-1]) + "$\\rangle$"

        return tex_escape(self.name)

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Token:
    """
    An occurrence of a terminal in the input, optionally together with the
    lexical content it was read from.

    Example:

    >>> print(Token(Terminal("BEGIN")).to_tex())
    BEGIN

    >>> print(Token(Terminal("VARNAME"), "my_var").to_tex())
    VARNAME: my\\_var

    >>> print(Token(Terminal("VARNAME"), "x"))
    VARNAME: x
    """

    terminal: Terminal
    value: Optional[str] = None

    def to_tex(self) -> str:
        if self.value is None:
            return self.terminal.to_tex()

        return self.terminal.to_tex() + ": " + tex_escape(self.value)

    def __str__(self):
        if self.value is None:
            return str(self.terminal)

        return f"{self.terminal}: {self.value}"
