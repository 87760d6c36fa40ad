r"""
Argot arguments.

Overview
- Argument[_T]: a named, described unit of the command line. It combines a
  syntax (arity + structure + decoder, see argot.syntax) with presentation
  metadata:
  • name: long and short names (either may be empty, not both).
  • descr: free-text description.
  • values: ordered value descriptions (label, description[, short alias]).
  • examples: ordered example tokens, used by the documentation renderer.

- ValueDescription: one documented value of an argument. For enumerations,
  the label must name a member and the optional short alias becomes an
  accepted label as well.

Parsing
- Argument.parse(cursor) forwards to the syntax. What comes back depends only
  on the syntax: Literal/One give a bare value, ZeroOrOne a value or None,
  ZeroOrMore/OneOrMore a list.

Rendering
- to_syntax_string(): call-site shape used by usage lines (e.g. "<path>",
  "[-f|--filter=string]", "-h|--help").
- to_value_string(): "[...]"/"<...>" enclosed value shape (e.g. "<en=enum>").
- to_doc_string(): heading + two-column table of values and descriptions.

Metadata (sanitized on construction)
- names: strings without whitespace or '='; at least one must be non-empty.
- syntax: a Syntax instance; bound to the value descriptions once, so that
  enumeration labels and aliases are checked before any parsing happens
  (NotEnoughVariantsError when a member is left undescribed).
- descr: string (trimmed); defaults to "".
- values: pairs or triples of strings; labels are unique and non-empty.
- examples: non-empty strings.

Quick example:
    >>> from argot import Argument, One, Keyed, String, TokenCursor
    >>> path = Argument("path", syntax=One(), descr="Path of the file.")
    >>> path.to_syntax_string()
    '<path>'
    >>> path.parse(TokenCursor(["./main.ext"]))
    './main.ext'
"""
import functools
import operator
import re
from collections.abc import Iterable
from typing import NamedTuple

from .structures import Name
from .syntax import Syntax, One
from .utils import *


class ValueDescription(NamedTuple):
    """
    One documented value: label, description and optional short alias.
    """
    label: str
    description: str = ""
    short: str = ""


class ArgumentType(type):
    """
    Metaclass giving arguments a stable typename, read-only metadata properties
    and readable representations.

    - __typename__ is derived from the class name (camel-case split with hyphens).
    - every name in __introspectable__ becomes a read-only property mirroring
      the private field "_<name>".
    - __repr__/__rich_repr__ list the introspectable fields.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: normalize and validate argument metadata in place.

    Raises
    - TypeError: a field has the wrong type.
    - ValueError: a field has the right type but an unusable value.
    """
    long, short = metadata["name"]
    for name in (long, short):
        if not isinstance(name, str):
            raise TypeError(f"{cls.__typename__} names must be strings")
        elif re.search(r"[\s=]", name):
            raise ValueError(f"{cls.__typename__} names cannot contain whitespaces or '='")
    if not long and not short:
        raise ValueError(f"{cls.__typename__} must specify at least one name")
    metadata["name"] = Name(long, short)

    if not isinstance(metadata["syntax"], Syntax):
        raise TypeError(f"{cls.__typename__} 'syntax' must be a syntax")

    if not isinstance(descr := metadata["descr"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    metadata["descr"] = coalesce(descr, "").strip()

    if isinstance(values := metadata["values"], str) or not isinstance(values, Iterable):
        raise TypeError(f"{cls.__typename__} 'values' must be an iterable of value descriptions")
    sanitized = []
    for value in values:
        if isinstance(value, str) or not isinstance(value, Iterable):
            raise TypeError(f"{cls.__typename__} 'values' must be an iterable of value descriptions")
        if not 1 <= len(value := tuple(value)) <= 3:
            raise ValueError(f"{cls.__typename__} value descriptions must be (label, description[, short])")
        if not all(isinstance(part, str) for part in value):
            raise TypeError(f"{cls.__typename__} value descriptions must contain only strings")
        if not (value := ValueDescription(*value)).label:
            raise ValueError(f"{cls.__typename__} value labels cannot be empty")
        if any(value.label == other.label for other in sanitized):
            raise ValueError(f"{cls.__typename__} value labels cannot contain duplicates")
        sanitized.append(value)
    metadata["values"] = tuple(sanitized)

    if isinstance(examples := metadata["examples"], str) or not isinstance(examples, Iterable):
        raise TypeError(f"{cls.__typename__} 'examples' must be an iterable of strings")
    examples = tuple(examples)
    if not all(isinstance(example, str) for example in examples):
        raise TypeError(f"{cls.__typename__} 'examples' must contain only strings")
    if not all(examples):
        raise ValueError(f"{cls.__typename__} 'examples' cannot contain empty strings")
    metadata["examples"] = examples

    # Build the static label table of enumerations now rather than at parse time.
    metadata["syntax"] = metadata["syntax"].bind(metadata["values"])


class Argument[_T](metaclass=ArgumentType):
    """
    Named, described command-line argument.

    Immutable once constructed; meant to be declared once at program start and
    passed by reference to parsing (parse) and rendering (argot.documentation).

    Parameters
    - long, short: names (positional-only). Literal and keyed syntaxes match
      tokens against both; positional syntaxes use the long name (or the short one) in usage.
    - syntax: Syntax (defaults to One(), a required positional string).
    - descr: description used when no value descriptions are given.
    - values: value descriptions, as (label, description[, short]).
    - examples: example tokens for the documentation renderer.
    """

    __introspectable__ = (
        "name",
        "syntax",
        "descr",
        "values",
        "examples",
    )

    def __init__(
            self,
            long,
            short="",
            /,
            syntax=Unset,
            descr=Unset,
            values=(),
            examples=(),
    ):
        metadata = {
            "name": (long, short),
            "syntax": coalesce(syntax, One()),
            "descr": descr,
            "values": values,
            "examples": examples,
        }
        _sanitize_metadata(type(self), metadata)

        for name, object in metadata.items():
            setattr(self, "_" + name, object)

    @property
    def long(self):
        return self._name.long

    @property
    def short(self):
        return self._name.short

    @property
    def optional(self):
        return self._syntax.optional

    @property
    def positional(self):
        return self._syntax.positional and not self._syntax.literal

    def parse(self, cursor, /):
        """
        Consume this argument's token(s) from the cursor and return the value(s).

        Raises
        - NotEnoughValuesError: the required part of the arity is not satisfied.
        - InvalidValueError: a literal does not match (nothing is consumed).
        """
        return self._syntax.parse(cursor, self._name, argument=self)

    def to_syntax_string(self):
        return self._syntax.syntax(self._name)

    def to_value_string(self):
        return self._syntax.value(self._name)

    @property
    def heading(self):
        """
        Title-cased name ("sub-command" -> "Sub Command", "--help" -> "Help").
        """
        return titlecase(self._name.long or self._name.short)

    def rows(self):
        """
        Documentation rows as (left column, description) pairs.

        One row per value description ("short, label"); without value
        descriptions, a single row built from the names and the description.
        """
        if not self._values:
            return [(self._name.aliases, self._descr)]
        return [
            (", ".join(part for part in (value.short, value.label) if part), value.description)
            for value in self._values
        ]

    def to_doc_string(self):
        rows = self.rows()
        width = max(len(left) for left, _ in rows)
        lines = [self.heading + ":\n\n"]
        for left, right in rows:
            lines.append(left + " " * (width - len(left) + 4) + right + "\n")
        return "".join(lines)

    def __eq__(self, other, /):
        if not isinstance(other, Argument):
            return NotImplemented
        return all(getattr(self, "_" + name) == getattr(other, "_" + name) for name in type(self).__introspectable__)

    def __hash__(self):
        return hash((self._name, self._syntax, self._descr, self._values, self._examples))


__all__ = (
    "Argument",
    "ValueDescription",
)

# Internal metaclass, not part of the public API.
del ArgumentType
