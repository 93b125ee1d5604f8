from tex_ast.labels import (
    Epsilon,
    Label,
    NonTerminalLabel,
    TokenLabel,
    UnrenderableLabelError,
    to_label,
)
from tex_ast.symbols import NonTerminal, Terminal, Token
from tex_ast.tree import MalformedParseTreeError, SyntaxTree, Visit
from tex_ast.tuple_tree import TupleParseTree
from tex_ast.type_defs import ParseTree, TeXRenderable
