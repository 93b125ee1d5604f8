import unittest

from tex_ast import (
    Epsilon,
    NonTerminal,
    NonTerminalLabel,
    Terminal,
    Token,
    TokenLabel,
    UnrenderableLabelError,
    to_label,
)


class BrokenSymbol:
    def to_tex(self):
        raise ValueError("no rendering")


class NumericSymbol:
    def to_tex(self):
        return 42


class TestLabels(unittest.TestCase):
    def test_only_epsilon_is_epsilon(self):
        self.assertTrue(Epsilon().is_epsilon())
        self.assertFalse(TokenLabel(Token(Terminal("a"))).is_epsilon())
        self.assertFalse(NonTerminalLabel(NonTerminal("<a>")).is_epsilon())

    def test_to_tex_delegates_to_symbol(self):
        self.assertEqual("a", TokenLabel(Token(Terminal("a"))).to_tex())
        self.assertEqual(
            "VARNAME: x", TokenLabel(Token(Terminal("VARNAME"), "x")).to_tex()
        )
        self.assertEqual("root", NonTerminalLabel(NonTerminal("root")).to_tex())
        self.assertEqual(
            "$\\langle$if\\_stmt$\\rangle$",
            NonTerminalLabel(NonTerminal("<if_stmt>")).to_tex(),
        )
        self.assertEqual("EPSILON", Epsilon().to_tex())

    def test_labels_are_values(self):
        self.assertEqual(Epsilon(), Epsilon())
        self.assertEqual(
            TokenLabel(Token(Terminal("a"))), TokenLabel(Token(Terminal("a")))
        )
        self.assertNotEqual(
            TokenLabel(Token(Terminal("a"))), NonTerminalLabel(NonTerminal("a"))
        )
        self.assertEqual(2, len({Epsilon(), Epsilon(), to_label(Terminal("a"))}))

    def test_to_label(self):
        self.assertEqual(
            NonTerminalLabel(NonTerminal("<stmt>")), to_label(NonTerminal("<stmt>"))
        )
        self.assertEqual(TokenLabel(Token(Terminal("a"))), to_label(Terminal("a")))
        self.assertEqual(
            TokenLabel(Token(Terminal("a"), "b")), to_label(Token(Terminal("a"), "b"))
        )

        label = Epsilon()
        self.assertIs(label, to_label(label))

        with self.assertRaises(TypeError):
            to_label(42)

    def test_unrenderable_symbol_without_to_tex(self):
        with self.assertRaises(UnrenderableLabelError):
            TokenLabel("a").to_tex()

    def test_unrenderable_symbol_failure_is_chained(self):
        with self.assertRaises(UnrenderableLabelError) as context:
            NonTerminalLabel(BrokenSymbol()).to_tex()

        self.assertIsInstance(context.exception.__cause__, ValueError)

    def test_unrenderable_symbol_returning_no_string(self):
        with self.assertRaises(UnrenderableLabelError):
            TokenLabel(NumericSymbol()).to_tex()

    def test_str(self):
        self.assertEqual("ε", str(Epsilon()))
        self.assertEqual('"a"', str(TokenLabel(Token(Terminal("a")))))
        self.assertEqual("<stmt>", str(NonTerminalLabel(NonTerminal("<stmt>"))))


if __name__ == "__main__":
    unittest.main()
