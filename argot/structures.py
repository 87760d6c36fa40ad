"""
Argot name bindings.

- Name: the (long, short) pair an argument answers to.
- Positional: the token is the value.
- Keyed: the token is "name=value"; the name half must be the long or short
  name of the argument, the value half is decoded.

Both structures wrap a decoder (see argot.decoders) and are in turn wrapped by
a syntax (see argot.syntax), which adds the arity.
"""
from typing import NamedTuple

from .decoders import String
from .faults import InvalidValueError, FaultCode, getdoc
from .utils import mirror


class Name(NamedTuple):
    """
    Long and short names of an argument. Either may be empty, not both.
    """
    long: str
    short: str = ""

    @property
    def display(self):
        """
        "short|long" when a short name exists, otherwise "long".
        """
        return "|".join(name for name in (self.short, self.long) if name)

    @property
    def aliases(self):
        """
        "short, long" (used as the left column of documentation rows).
        """
        return ", ".join(name for name in (self.short, self.long) if name)

    def matches(self, token, /):
        return bool(token) and token in (self.long, self.short)


class Structure:
    """
    Base of the name-binding modes. Subclasses implement decode() and syntax().
    """
    positional = True

    decoder = mirror("decoder")

    def __init__(self, decoder=String(), /):
        if not callable(getattr(decoder, "decode", None)):
            raise TypeError(f"{type(self).__name__}() argument must be a decoder")
        self._decoder = decoder

    @property
    def total(self):
        """
        True when every token decodes (see String).
        """
        return self.positional and getattr(self._decoder, "total", False)

    def bind(self, values, /):
        if (decoder := self._decoder.bind(values)) is self._decoder:
            return self
        return type(self)(decoder)

    def __eq__(self, other, /):
        if type(other) is not type(self):
            return NotImplemented
        return self._decoder == other._decoder

    def __hash__(self):
        return hash((type(self), self._decoder))

    def __repr__(self):
        return f"{type(self).__name__}({self._decoder!r})"


class Positional(Structure):
    """
    Bare value; its meaning comes from its position on the command line.
    """

    def decode(self, token, name, /):
        return self._decoder.decode(token)

    def syntax(self, name, /):
        return name.long or name.short

    def value(self, name, /):
        return name.long or name.short


class Keyed(Structure):
    """
    "name=value" pair matched against the long and short names.
    """
    positional = False

    def decode(self, token, name, /):
        key, separator, value = token.partition("=")
        if not separator or "=" in value or not key or not value:
            raise InvalidValueError(
                "malformed keyed value %r" % token,
                title="invalid value",
                code=FaultCode.INVALID_VALUE,
                token=token,
                hint="use the form %s=<%s>" % (name.long or name.short, self._decoder.typename),
                docs=getdoc(FaultCode.INVALID_VALUE),
            )
        if not name.matches(key):
            raise InvalidValueError(
                "unknown key %r in %r" % (key, token),
                title="invalid value",
                code=FaultCode.INVALID_VALUE,
                token=token,
                hint="use %s" % " or ".join(repr(alias) for alias in (name.long, name.short) if alias),
                docs=getdoc(FaultCode.INVALID_VALUE),
            )
        return self._decoder.decode(value)

    def syntax(self, name, /):
        return f"{name.display}={self._decoder.typename}"

    def value(self, name, /):
        return f"{name.long or name.short}={self._decoder.typename}"


__all__ = (
    "Name",
    "Structure",
    "Positional",
    "Keyed",
)
