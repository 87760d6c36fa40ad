r"""
Argot syntaxes: arity and the parsing algorithm.

Overview
- A syntax wraps a structure (see argot.structures) with an arity, the closed
  range [lower, upper] of tokens it may consume:

    Literal      [1, 1]    exact match of the long or short name
    One          [1, 1]    one value
    ZeroOrOne    [0, 1]    optional value
    OneOrMore    [1, MAX]  non-empty list
    ZeroOrMore   [0, MAX]  possibly empty list

  MAX only stops the decoding loop; it is never materialized.

Parsing
1. Required phase: peek, decode and accept exactly 'lower' tokens. An
   exhausted cursor or a token that does not decode fails the whole call;
   the offending token is left under the cursor.
2. Optional phase: keep going for up to 'upper - lower' tokens. The first
   token that does not decode (or the end of input) ends the run quietly and
   stays under the cursor for the next argument.
3. The values are shaped by the syntax: One gives the bare value, ZeroOrOne
   the value or None, ZeroOrMore/OneOrMore a list.

The asymmetry between the two phases is what lets adjacent optional
arguments share a command line: an optional run never steals a token it
cannot decode.

Rendering
- syntax(name): call-site shape for usage lines.
    Literal "short|long", One "<s>", ZeroOrOne "[s]", OneOrMore "<s...>",
    ZeroOrMore "[s...]" where s is "long" (positional) or "short|long=type" (keyed).
- value(name): "[...]" for optional, "<...>" for required around
  "long" (positional) or "long=type" (keyed); literals are bare.
"""
import sys

from .decoders import String
from .faults import (
    NotEnoughValuesError,
    InvalidValueError,
    InvalidRequiredValueError,
    FaultCode,
    getdoc,
)
from .structures import Structure, Positional
from .utils import Unset, coalesce, mirror, ordinal

MAX = sys.maxsize


def _missing(cursor, name, argument):
    return NotEnoughValuesError(
        "missing value for %r at %s position" % (name.long or name.short, ordinal(cursor.index)),
        title="not enough values",
        code=FaultCode.NOT_ENOUGH_VALUES,
        index=cursor.index,
        argument=argument,
        hint="add a value for %r" % (name.long or name.short),
        docs=getdoc(FaultCode.NOT_ENOUGH_VALUES),
    )


class Syntax:
    """
    Base of all syntaxes. Subclasses set the arity bounds and shape the result.
    """
    lower = 1
    upper = 1

    structure = mirror("structure")

    def __init__(self, structure=Unset, /):
        structure = coalesce(structure, Positional(String()))
        if not isinstance(structure, Structure):
            raise TypeError(f"{type(self).__name__}() argument must be a structure")
        self._structure = structure

    @property
    def arity(self):
        return self.lower, self.upper

    @property
    def optional(self):
        return self.lower == 0

    @property
    def variadic(self):
        return self.upper > 1

    @property
    def positional(self):
        return self._structure.positional

    @property
    def literal(self):
        return False

    @property
    def total(self):
        """
        True when this syntax may take any token it is offered without a bound
        (an optional or unbounded positional run over a decoder that always succeeds).
        """
        return self._structure.total and (self.optional or self.variadic)

    @property
    def typename(self):
        return self._structure.decoder.typename

    def bind(self, values, /):
        if (structure := self._structure.bind(values)) is self._structure:
            return self
        return type(self)(structure)

    def parse(self, cursor, name, /, argument=None):
        values = []

        for _ in range(self.lower):
            if (token := cursor.peek()) is None:
                raise _missing(cursor, name, argument)
            try:
                values.append(self._structure.decode(token, name))
            except InvalidValueError as error:
                raise InvalidRequiredValueError(
                    "invalid value %r for %r at %s position" % (token, name.long or name.short, ordinal(cursor.index)),
                    title="invalid value",
                    code=FaultCode.INVALID_REQUIRED_VALUE,
                    token=token,
                    index=cursor.index,
                    argument=argument,
                    hint=error.options.get("hint", "check the value for %r" % (name.long or name.short)),
                    docs=getdoc(FaultCode.INVALID_REQUIRED_VALUE),
                ) from error
            cursor.accept()

        while len(values) < self.upper:
            if (token := cursor.peek()) is None:
                break
            try:
                value = self._structure.decode(token, name)
            except InvalidValueError:
                # End of the run; the token is left for the next argument.
                break
            values.append(value)
            cursor.accept()

        return self._shape(values)

    def _shape(self, values):
        return values[0]

    def syntax(self, name, /):
        return self._enclose(self._structure.syntax(name) + "..." * self.variadic)

    def value(self, name, /):
        return self._enclose(self._structure.value(name))

    def _enclose(self, text):
        return f"[{text}]" if self.optional else f"<{text}>"

    def __eq__(self, other, /):
        if type(other) is not type(self):
            return NotImplemented
        return self._structure == other._structure

    def __hash__(self):
        return hash((type(self), self._structure))

    def __repr__(self):
        return f"{type(self).__name__}({self._structure!r})"


class Literal(Syntax):
    """
    Exact match of a token against the long or short name.

    A mismatch raises InvalidValueError and consumes nothing.
    """

    def __init__(self):
        self._structure = Positional(String())

    @property
    def literal(self):
        return True

    @property
    def total(self):
        return False

    @property
    def typename(self):
        return "literal"

    def bind(self, values, /):
        return self

    def parse(self, cursor, name, /, argument=None):
        if (token := cursor.peek()) is None:
            raise _missing(cursor, name, argument)
        if not name.matches(token):
            raise InvalidValueError(
                "expected %s instead of %r at %s position" % (
                    " or ".join(repr(alias) for alias in (name.long, name.short) if alias), token, ordinal(cursor.index)
                ),
                title="invalid value",
                code=FaultCode.INVALID_VALUE,
                token=token,
                index=cursor.index,
                argument=argument,
                hint="use %r" % name.display,
                docs=getdoc(FaultCode.INVALID_VALUE),
            )
        cursor.accept()
        return token

    def syntax(self, name, /):
        return name.display

    def value(self, name, /):
        return name.display

    def __repr__(self):
        return "Literal()"


class One[_T](Syntax):
    """
    Exactly one value.
    """


class ZeroOrOne[_T](Syntax):
    """
    An optional value; None when absent.
    """
    lower = 0

    def _shape(self, values):
        return values[-1] if values else None


class ZeroOrMore[_T](Syntax):
    """
    Any number of values, possibly none.
    """
    lower = 0
    upper = MAX

    def _shape(self, values):
        return values


class OneOrMore[_T](Syntax):
    """
    At least one value.
    """
    upper = MAX

    def _shape(self, values):
        # Guaranteed by the required phase (lower == 1).
        if not values:
            raise NotEnoughValuesError(
                "at least one value is required",
                title="not enough values",
                code=FaultCode.NOT_ENOUGH_VALUES,
                hint="provide one or more values",
                docs=getdoc(FaultCode.NOT_ENOUGH_VALUES),
            )
        return values


__all__ = (
    "MAX",
    "Syntax",
    "Literal",
    "One",
    "ZeroOrOne",
    "ZeroOrMore",
    "OneOrMore",
)
