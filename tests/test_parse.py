import os, unittest
from unittest import mock
from tnt.errors import (ParseError, UnexpectedToken, UnexpectedEndOfInput,
                        TrailingInput, IllegalCharacter, NestingTooDeep,
                        ConfigurationError)
from tnt.syntax.ast import (Numeral, Variable, Successor, CompoundTerm, Atom,
                            Negation, Compound, Quantification)
from tnt.syntax.parse import parse_formula
from tnt.syntax.token import Token

a, b, c, d = Variable("a"), Variable("b"), Variable("c"), Variable("d")


class TestParseFormula(unittest.TestCase):
    CASES = {
        "simplest atom": ("0=0", Atom(Numeral(0), Numeral(0))),
        "variables": ("a=b", Atom(a, b)),
        "primed variables": ("a'=a''", Atom(Variable("a'"), Variable("a''"))),
        "compound terms": ("(0+a)=(b*(c+d))", Atom(
            CompoundTerm("sum", Numeral(0), a),
            CompoundTerm("product", b, CompoundTerm("sum", c, d)))),
        "successors": ("Sa=SS(SSS0+b)", Atom(
            Successor(1, a),
            Successor(2, CompoundTerm("sum", Numeral(3), b)))),
        "negation": ("~0=S0", Negation(Atom(Numeral(0), Numeral(1)))),
        "double negation": ("~~0=S0", Negation(Negation(Atom(Numeral(0), Numeral(1))))),
        "compound": ("<<0=0 ∧ a=b> ∨ <a=b ⊃ a=b>>", Compound(
            "or",
            Compound("and", Atom(Numeral(0), Numeral(0)), Atom(a, b)),
            Compound("implies", Atom(a, b), Atom(a, b)))),
        "quantification": ("Aa:Eb:0=0", Quantification(
            "forall", a, Quantification("exists", b, Atom(Numeral(0), Numeral(0))))),
        "unicode quantifiers": ("∀a:∃b:a=b", Quantification(
            "forall", a, Quantification("exists", b, Atom(a, b)))),
        "ascii multiply alternatives": ("(a.b)=(a·b)", Atom(
            CompoundTerm("product", a, b), CompoundTerm("product", a, b))),
    }

    def test_valid(self):
        for name, (src, expected) in self.CASES.items():
            with self.subTest(name):
                self.assertEqual(parse_formula(src), expected)

    def test_successor_folding(self):
        self.assertEqual(parse_formula("SSS0=0"), parse_formula("S S S 0=0"))
        self.assertEqual(parse_formula("SS S0=0").left, Numeral(3))
        # Successors over non-numerals are kept as written.
        self.assertEqual(parse_formula("S Sa=0").left, Successor(1, Successor(1, a)))


class TestParseInvalidFormula(unittest.TestCase):
    BAD = [
        "", "a", "0=0 a", "a+b=c+d", "(a-b)=0", "0=(a-b)", "S(a-b)=0",
        "((a-b)+c)=0", "(a+(b-c))=0", "(a+b=0)", "<(a)^0=0>", "<0=0_0=0>",
        "<0=0^(a)>", "<0=0^0=0 b>", "~(a)=0", "A0:S0=0", "Aa_0=0", "Aa:(a)=b",
    ]

    def test_rejected(self):
        for src in self.BAD:
            with self.subTest(src):
                with self.assertRaises(ParseError):
                    parse_formula(src)

    def test_error_kinds(self):
        with self.assertRaises(UnexpectedEndOfInput):
            parse_formula("")
        with self.assertRaises(UnexpectedEndOfInput):
            parse_formula("a")
        with self.assertRaises(IllegalCharacter) as cm:
            parse_formula("(a-b)=0")
        self.assertEqual(cm.exception.character, "-")
        self.assertEqual(cm.exception.position, 2)
        with self.assertRaises(IllegalCharacter):
            parse_formula("<0=0_0=0>")
        with self.assertRaises(UnexpectedToken) as cm:
            parse_formula("a+b=c+d")
        self.assertEqual(cm.exception.actual, Token.PLUS)
        self.assertEqual(cm.exception.expected, "=")
        with self.assertRaises(UnexpectedToken) as cm:
            parse_formula("A0:S0=0")
        self.assertEqual(cm.exception.actual, Token.ZERO)

    def test_trailing_input(self):
        with self.assertRaises(TrailingInput) as cm:
            parse_formula("0=0 a")
        self.assertEqual(cm.exception.remaining, Token.VARIABLE)
        self.assertEqual(cm.exception.position, 4)
        with self.assertRaises(TrailingInput) as cm:
            parse_formula("0=0_")
        self.assertEqual(cm.exception.remaining, Token.ILLEGAL)
        self.assertEqual(cm.exception.lexeme, "_")


class TestNestingDepth(unittest.TestCase):
    def test_deep_negation_rejected(self):
        with self.assertRaises(NestingTooDeep) as cm:
            parse_formula("~" * 10 + "0=0", max_depth=5)
        self.assertEqual(cm.exception.max_depth, 5)

    def test_deep_terms_rejected(self):
        src = "(" * 20 + "0" + "+0)" * 20 + "=0"
        with self.assertRaises(NestingTooDeep):
            parse_formula(src, max_depth=10)
        self.assertIsInstance(parse_formula(src, max_depth=50), Atom)

    def test_adversarial_input_fails_cleanly(self):
        with self.assertRaises(NestingTooDeep):
            parse_formula("~" * 100000 + "0=0")

    def test_environment_default(self):
        with mock.patch.dict(os.environ, {"TNT_MAX_DEPTH": "3"}):
            with self.assertRaises(NestingTooDeep):
                parse_formula("~~~0=0")
            self.assertIsInstance(parse_formula("~~~0=0", max_depth=10), Negation)

    def test_bound_above_interpreter_stack(self):
        src = "(" * 3000 + "0" + "+0)" * 3000 + "=0"
        with self.assertRaises(NestingTooDeep) as cm:
            parse_formula(src, max_depth=100000)
        self.assertGreater(cm.exception.max_depth, 0)
        self.assertLess(cm.exception.max_depth, 100000)
        # The parser is still usable afterwards.
        self.assertEqual(parse_formula("0=0", max_depth=100000), Atom(Numeral(0), Numeral(0)))

    def test_invalid_depth(self):
        with self.assertRaises(ConfigurationError):
            parse_formula("0=0", max_depth=0)

    def test_malformed_environment_depth(self):
        for value in ["abc", "0", "-4"]:
            with self.subTest(value), mock.patch.dict(os.environ, {"TNT_MAX_DEPTH": value}):
                with self.assertRaises(ConfigurationError) as cm:
                    parse_formula("0=0")
                self.assertIn("TNT_MAX_DEPTH", str(cm.exception))


if __name__ == "__main__":
    unittest.main()
