import re

from frozendict import frozendict

RE_NONTERMINAL = re.compile(r"(<[^<> ]*>)")

TEX_SPECIAL_CHARACTERS = frozendict(
    {
        "\\": r"\textbackslash{}",
        "&": r"\&",
        "%": r"\%",
        "$": r"\$",
        "#": r"\#",
        "_": r"\_",
        "{": r"\{",
        "}": r"\}",
        "~": r"\textasciitilde{}",
        "^": r"\textasciicircum{}",
        "<": r"\textless{}",
        ">": r"\textgreater{}",
    }
)


def is_nonterminal(symbol: str) -> bool:
    """
    Checks whether the given symbol looks like a nonterminal symbol.

    >>> is_nonterminal("a")
    False

    >>> is_nonterminal("<a>")
    True

    >>> is_nonterminal("<a>a")
    False

    :param symbol: The grammar symbol to check.
    :return: True iff the given symbol is a nonterminal symbol.
    """

    return RE_NONTERMINAL.fullmatch(symbol) is not None


def tex_escape(text: str) -> str:
    r"""
    Escapes the characters that have a special meaning in LaTeX text mode.

    >>> print(tex_escape("x := 1"))
    x := 1

    >>> print(tex_escape("a_b & 100%"))
    a\_b \& 100\%

    >>> print(tex_escape("{x}"))
    \{x\}

    >>> print(tex_escape("a<b"))
    a\textless{}b

    Backslashes are replaced before anything else could introduce new ones:

    >>> print(tex_escape("\\"))
    \textbackslash{}

    :param text: The text to escape.
    :return: The escaped text, safe for inclusion in a LaTeX document.
    """

    return "".join(TEX_SPECIAL_CHARACTERS.get(char, char) for char in text)
