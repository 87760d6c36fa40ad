"""
Syntax behavioral tests (arity, backtracking and rendering).

Scope
- Validate the required phase: exhaustion and undecodable tokens fail the call
  and leave the offending token under the cursor.
- Validate the optional phase: the first undecodable token ends the run quietly.
- Validate result shapes (bare value, value or None, list).
- Validate call-site (syntax) and value renderings.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import enum
import unittest
from unittest import TestCase

from argot import (
    MAX,
    Literal,
    One,
    ZeroOrOne,
    ZeroOrMore,
    OneOrMore,
    Name,
    Positional,
    Keyed,
    String,
    Variant,
    Typed,
    TokenCursor,
    NotEnoughValuesError,
    InvalidValueError,
    InvalidRequiredValueError,
    FaultCode,
)


class Color(enum.Enum):
    RED = "red"
    GREEN = "green"


class TestArity(TestCase):
    """Bounds and derived flags of each syntax."""

    def testBounds(self):
        self.assertEqual(Literal().arity, (1, 1))
        self.assertEqual(One().arity, (1, 1))
        self.assertEqual(ZeroOrOne().arity, (0, 1))
        self.assertEqual(ZeroOrMore().arity, (0, MAX))
        self.assertEqual(OneOrMore().arity, (1, MAX))

    def testOptionalAndVariadic(self):
        self.assertTrue(ZeroOrOne().optional)
        self.assertFalse(ZeroOrOne().variadic)
        self.assertTrue(ZeroOrMore().optional and ZeroOrMore().variadic)
        self.assertFalse(OneOrMore().optional)
        self.assertTrue(OneOrMore().variadic)

    def testTotality(self):
        self.assertFalse(One().total)
        self.assertTrue(ZeroOrOne().total)
        self.assertTrue(OneOrMore().total)
        self.assertFalse(ZeroOrMore(Positional(Variant(Color))).total)
        self.assertFalse(ZeroOrMore(Keyed()).total)
        self.assertFalse(Literal().total)

    def testTypename(self):
        self.assertEqual(One().typename, "string")
        self.assertEqual(One(Keyed(Variant(Color))).typename, "enum")
        self.assertEqual(Literal().typename, "literal")

    def testRejectsNonStructure(self):
        with self.assertRaises(TypeError):
            One(String())


class TestLiteral(TestCase):
    """Exact name matching."""

    def setUp(self) -> None:
        self.name = Name("--help", "-h")

    def testMatchConsumes(self):
        cursor = TokenCursor(["-h", "rest"])
        self.assertEqual(Literal().parse(cursor, self.name), "-h")
        self.assertEqual(cursor.peek(), "rest")
        self.assertEqual(cursor.index, 2)

    def testMismatchDoesNotConsume(self):
        cursor = TokenCursor(["--halp"])
        with self.assertRaises(InvalidValueError) as context:
            Literal().parse(cursor, self.name)
        self.assertNotIsInstance(context.exception, NotEnoughValuesError)
        self.assertEqual(context.exception.options["token"], "--halp")
        self.assertEqual(cursor.peek(), "--halp")
        self.assertEqual(cursor.index, 1)

    def testExhaustedCursor(self):
        with self.assertRaises(NotEnoughValuesError) as context:
            Literal().parse(TokenCursor([]), self.name)
        self.assertEqual(context.exception.options["code"], FaultCode.NOT_ENOUGH_VALUES)


class TestRequiredPhase(TestCase):
    """Tokens covered by the lower bound."""

    def testOneString(self):
        cursor = TokenCursor(["./f", "x"])
        self.assertEqual(One().parse(cursor, Name("path")), "./f")
        self.assertEqual(cursor.peek(), "x")

    def testOneOnExhaustedCursor(self):
        with self.assertRaises(NotEnoughValuesError):
            One().parse(TokenCursor([]), Name("path"))

    def testUndecodableRequiredToken(self):
        cursor = TokenCursor(["blue"])
        with self.assertRaises(InvalidRequiredValueError) as context:
            One(Positional(Variant(Color))).parse(cursor, Name("color"))
        error = context.exception
        self.assertIsInstance(error, NotEnoughValuesError)
        self.assertIsInstance(error, InvalidValueError)
        self.assertEqual(error.options["token"], "blue")
        self.assertEqual(error.options["index"], 1)
        self.assertIsInstance(error.__cause__, InvalidValueError)
        self.assertEqual(cursor.peek(), "blue")
        self.assertEqual(cursor.index, 1)

    def testOneOrMoreWithoutValidTokens(self):
        cursor = TokenCursor(["purple", "red"])
        with self.assertRaises(NotEnoughValuesError):
            OneOrMore(Positional(Variant(Color))).parse(cursor, Name("colors"))
        self.assertEqual(cursor.peek(), "purple")

    def testOneOrMoreOnExhaustedCursor(self):
        with self.assertRaises(NotEnoughValuesError):
            OneOrMore().parse(TokenCursor([]), Name("files"))


class TestOptionalPhase(TestCase):
    """Tokens beyond the lower bound."""

    def testZeroOrOneAbsent(self):
        cursor = TokenCursor([])
        self.assertIsNone(ZeroOrOne().parse(cursor, Name("path")))

    def testZeroOrOnePresent(self):
        cursor = TokenCursor(["a", "b"])
        self.assertEqual(ZeroOrOne().parse(cursor, Name("path")), "a")
        self.assertEqual(cursor.peek(), "b")

    def testZeroOrOneLeavesUndecodableToken(self):
        cursor = TokenCursor(["not-a-number"])
        self.assertIsNone(ZeroOrOne(Positional(Typed(int))).parse(cursor, Name("count")))
        self.assertEqual(cursor.peek(), "not-a-number")
        self.assertEqual(cursor.index, 1)

    def testZeroOrMoreStopsAtFirstUndecodableToken(self):
        cursor = TokenCursor(["1", "2", "x", "3"])
        self.assertEqual(ZeroOrMore(Positional(Typed(int))).parse(cursor, Name("numbers")), [1, 2])
        self.assertEqual(cursor.peek(), "x")
        self.assertEqual(cursor.index, 3)

    def testZeroOrMoreEmpty(self):
        self.assertEqual(ZeroOrMore().parse(TokenCursor([]), Name("files")), [])

    def testZeroOrMoreTakesEveryString(self):
        cursor = TokenCursor(["a", "b", "c"])
        self.assertEqual(ZeroOrMore().parse(cursor, Name("files")), ["a", "b", "c"])
        self.assertTrue(cursor.exhausted)

    def testOneOrMoreCollects(self):
        cursor = TokenCursor(["red", "green", "blue"])
        self.assertEqual(
            OneOrMore(Positional(Variant(Color))).parse(cursor, Name("colors")),
            [Color.RED, Color.GREEN],
        )
        self.assertEqual(cursor.peek(), "blue")

    def testAdjacentOptionals(self):
        cursor = TokenCursor(["./f"])
        pattern = ZeroOrOne(Keyed()).parse(cursor, Name("--filter", "-f"))
        path = ZeroOrOne().parse(cursor, Name("path"))
        self.assertIsNone(pattern)
        self.assertEqual(path, "./f")
        self.assertTrue(cursor.exhausted)

    def testAdjacentOptionalsBothPresent(self):
        cursor = TokenCursor(["-f=argument", "./f"])
        self.assertEqual(ZeroOrOne(Keyed()).parse(cursor, Name("--filter", "-f")), "argument")
        self.assertEqual(ZeroOrOne().parse(cursor, Name("path")), "./f")

    def testKeyedWithWrongKeyEndsRun(self):
        cursor = TokenCursor(["--filter=a", "--other=b"])
        self.assertEqual(ZeroOrMore(Keyed()).parse(cursor, Name("--filter", "-f")), ["a"])
        self.assertEqual(cursor.peek(), "--other=b")


class TestRendering(TestCase):
    """Call-site and value strings."""

    def testSyntaxStrings(self):
        self.assertEqual(ZeroOrOne().syntax(Name("path")), "[path]")
        self.assertEqual(One().syntax(Name("path")), "<path>")
        self.assertEqual(One(Keyed()).syntax(Name("--filter", "-f")), "<-f|--filter=string>")
        self.assertEqual(ZeroOrOne(Keyed()).syntax(Name("--filter", "-f")), "[-f|--filter=string]")
        self.assertEqual(OneOrMore().syntax(Name("files")), "<files...>")
        self.assertEqual(ZeroOrMore().syntax(Name("files")), "[files...]")
        self.assertEqual(Literal().syntax(Name("--help", "-h")), "-h|--help")
        self.assertEqual(Literal().syntax(Name("build")), "build")

    def testValueStrings(self):
        self.assertEqual(One(Keyed(Variant(Color))).value(Name("en", "e")), "<en=enum>")
        self.assertEqual(ZeroOrOne(Keyed(Variant(Color))).value(Name("en", "e")), "[en=enum]")
        self.assertEqual(ZeroOrMore().value(Name("files")), "[files]")
        self.assertEqual(Literal().value(Name("command", "c")), "c|command")

    def testPositionalUsesLongName(self):
        self.assertEqual(One().syntax(Name("path", "p")), "<path>")

    def testShortOnlyPositional(self):
        self.assertEqual(ZeroOrOne().syntax(Name("", "p")), "[p]")
        self.assertEqual(ZeroOrOne().value(Name("", "p")), "[p]")
        self.assertEqual(OneOrMore().syntax(Name("", "p")), "<p...>")

    def testShortOnlyKeyed(self):
        self.assertEqual(One(Keyed()).syntax(Name("", "-f")), "<-f=string>")
        self.assertEqual(One(Keyed()).value(Name("", "-f")), "<-f=string>")


class TestEquality(TestCase):
    """Value semantics of syntaxes."""

    def testEqualByStructure(self):
        self.assertEqual(One(Keyed()), One(Keyed()))
        self.assertNotEqual(One(), ZeroOrOne())
        self.assertEqual(hash(Literal()), hash(Literal()))

    def testBindWithoutValuesIsIdentity(self):
        syntax = One(Positional(Variant(Color)))
        self.assertIs(syntax.bind(()), syntax)


if __name__ == "__main__":
    unittest.main()
