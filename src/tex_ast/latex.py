"""
Fixed LaTeX fragments wrapped around serialized trees.

The bracket notation is meant for the :code:`forest` package and compiles with
pdfLaTeX; the node/child notation uses TikZ's :code:`graphdrawing` library,
whose layout algorithms are written in Lua and therefore need LuaLaTeX. The two
kinds of documents are not interchangeable.
"""

EPSILON_GLYPH = "$\\varepsilon$"

FOREST_OPTIONS = "for tree={rectangle,draw, l sep=20pt}"
FOREST_HEADER = "\\begin{forest}" + FOREST_OPTIONS
FOREST_FOOTER = ";\n\\end{forest}"

TIKZ_PICTURE_HEADER = "\\begin{tikzpicture}[tree layout]\n\\"
TIKZ_PICTURE_FOOTER = ";\n\\end{tikzpicture}"

PDFLATEX_PREAMBLE = (
    "\\documentclass[border=5pt]{standalone}\n"
    "\n"
    "\\usepackage{tikz}\n"
    "\\usepackage{forest}\n"
    "\n"
    "\\begin{document}\n"
    "\n"
)

LUALATEX_PREAMBLE = (
    "\\RequirePackage{luatex85}\n"
    "\\documentclass{standalone}\n"
    "\n"
    "\\usepackage{tikz}\n"
    "\n"
    "\\usetikzlibrary{graphdrawing, graphdrawing.trees}\n"
    "\n"
    "\\begin{document}\n"
    "\n"
)


def document_footer(engine: str) -> str:
    """
    The end of a standalone document, including an Emacs/AUCTeX file-local
    variable block selecting the TeX engine.

    >>> print(document_footer("luatex"))
    <BLANKLINE>
    <BLANKLINE>
    \\end{document}
    %% Local Variables:
    %% TeX-engine: luatex
    %% End:
    """

    return (
        "\n\n\\end{document}\n"
        "%% Local Variables:\n"
        f"%% TeX-engine: {engine}\n"
        "%% End:"
    )


PDFLATEX_FOOTER = document_footer("pdflatex")
LUALATEX_FOOTER = document_footer("luatex")
