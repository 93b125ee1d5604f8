import doctest
import unittest

from tex_ast import helpers, labels, latex, symbols, tree, tuple_tree, type_defs


class TestDocstrings(unittest.TestCase):
    def test_helpers(self):
        doctest_results = doctest.testmod(m=helpers)
        self.assertFalse(doctest_results.failed)

    def test_labels(self):
        doctest_results = doctest.testmod(m=labels)
        self.assertFalse(doctest_results.failed)

    def test_latex(self):
        doctest_results = doctest.testmod(m=latex)
        self.assertFalse(doctest_results.failed)

    def test_symbols(self):
        doctest_results = doctest.testmod(m=symbols)
        self.assertFalse(doctest_results.failed)

    def test_tree(self):
        doctest_results = doctest.testmod(m=tree)
        self.assertFalse(doctest_results.failed)

    def test_tuple_tree(self):
        doctest_results = doctest.testmod(m=tuple_tree)
        self.assertFalse(doctest_results.failed)

    def test_type_defs(self):
        doctest_results = doctest.testmod(m=type_defs)
        self.assertFalse(doctest_results.failed)


if __name__ == "__main__":
    unittest.main()
