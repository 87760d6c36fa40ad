"""
Tests for the internal utilities.

This module verifies:
- The Unset sentinel (singleton, falsy, non-subclassable).
- coalesce() replacing only Unset.
- rename() in both call forms.
- mirror() read-only properties and frozen container views.
- titlecase() and ordinal() formatting helpers.
"""
import unittest
from types import MappingProxyType
from unittest import TestCase

from argot.utils import *


class UnsetTest(TestCase):
    """
    Test suite for the `UnsetType` sentinel.
    """

    def testSingleton(self) -> None:
        """
        The constructor returns the same object reference on every call.
        """
        self.assertIs(UnsetType(), Unset)

    def testFalsy(self) -> None:
        self.assertFalse(Unset)

    def testRepr(self) -> None:
        self.assertEqual(repr(Unset), "Unset")

    def testFinalClass(self) -> None:
        """
        The class is final: attempts to subclass must fail with TypeError.
        """
        with self.assertRaises(TypeError):
            type("UnsetType", (UnsetType,), {})

    def testUnion(self) -> None:
        self.assertTrue(isinstance("name", str | Unset))
        self.assertTrue(isinstance(Unset, str | Unset))


class CoalesceTest(TestCase):

    def testReplacesUnset(self) -> None:
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")

    def testPreservesFalsyValues(self) -> None:
        """
        None, 0 and empty strings are legitimate values and are kept.
        """
        for value in (None, 0, "", []):
            self.assertIs(coalesce(value, "fallback"), value)

    def testDefaultsToNone(self) -> None:
        self.assertIsNone(coalesce(Unset))


class RenameTest(TestCase):

    def testDirectForm(self) -> None:
        def function():
            pass

        self.assertIs(rename(function, "renamed"), function)
        self.assertEqual(function.__name__, "renamed")
        self.assertEqual(function.__qualname__, "renamed")

    def testDecoratorForm(self) -> None:
        @rename("renamed")
        def function():
            pass

        self.assertEqual(function.__name__, "renamed")

    def testRejectsBuiltins(self) -> None:
        with self.assertRaises(TypeError):
            rename(len, "size")

    def testArity(self) -> None:
        with self.assertRaises(TypeError):
            rename()


class MirrorTest(TestCase):

    def setUp(self) -> None:
        class Holder:
            items = mirror("items")
            table = mirror("table")
            name = mirror("name")

            def __init__(self):
                self._items = ["a", "b"]
                self._table = {"a": 1}
                self._name = "holder"

        self.holder = Holder()

    def testFreezesContainers(self) -> None:
        """
        Lists come back as tuples and dicts as read-only proxies.
        """
        self.assertEqual(self.holder.items, ("a", "b"))
        self.assertIsInstance(self.holder.table, MappingProxyType)
        self.assertEqual(self.holder.name, "holder")

    def testReadOnly(self) -> None:
        with self.assertRaises(AttributeError):
            self.holder.name = "other"

    def testRejectsNonString(self) -> None:
        with self.assertRaises(TypeError):
            mirror(1)


class FormattingTest(TestCase):

    def testTitlecase(self) -> None:
        self.assertEqual(titlecase("sub-command"), "Sub Command")
        self.assertEqual(titlecase("build_name"), "Build Name")
        self.assertEqual(titlecase("--help"), "Help")
        self.assertEqual(titlecase("zig"), "Zig")

    def testTitlecaseRejectsNonString(self) -> None:
        with self.assertRaises(TypeError):
            titlecase(1)

    def testOrdinalWords(self) -> None:
        self.assertEqual(ordinal(1), "first")
        self.assertEqual(ordinal(10), "tenth")

    def testOrdinalSuffixes(self) -> None:
        self.assertEqual(ordinal(11), "11th")
        self.assertEqual(ordinal(12), "12th")
        self.assertEqual(ordinal(21), "21st")
        self.assertEqual(ordinal(22), "22nd")
        self.assertEqual(ordinal(23), "23rd")
        self.assertEqual(ordinal(113), "113th")


if __name__ == '__main__':
    unittest.main()
