"""
Argot value decoders.

A decoder turns one raw token into a typed value, or refuses it with
InvalidValueError. Decoders know nothing about names, arity or the cursor;
structures and syntaxes wrap them.

- String: identity, always succeeds.
- Variant: closed set of labels mapped to the members of an enum.Enum.
- Typed: any converter callable (int, float, pathlib.Path, ...).
"""
import enum

from .faults import InvalidValueError, NotEnoughVariantsError, FaultCode, getdoc
from .utils import Unset, coalesce, mirror


def _invalid(token, typename, hint):
    return InvalidValueError(
        "invalid %s value %r" % (typename, token),
        title="invalid value",
        code=FaultCode.INVALID_VALUE,
        token=token,
        hint=hint,
        docs=getdoc(FaultCode.INVALID_VALUE),
    )


class String:
    """
    Pass the raw token through unchanged.

    Since every token decodes, a String argument with an optional or unbounded
    arity will take whatever comes next; bound it by declaring arguments in the
    order their tokens appear.
    """
    typename = "string"
    total = True

    def decode(self, token, /):
        return token

    def bind(self, values, /):
        return self

    def __eq__(self, other, /):
        return type(other) is type(self)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return "String()"


def label(member, /):
    """
    Default label of an enum member: its value when that is a string, else its name.
    """
    return member.value if isinstance(member.value, str) else member.name


class Variant[_E: enum.Enum]:
    """
    Match a token against the labels of an enumeration.

    Labels are compared exactly (no prefix matching) in declaration order and
    the first match wins. The label table is static: it is built when the
    decoder is created and extended with short aliases by bind(), which an
    Argument calls once at construction.
    """
    typename = "enum"
    total = False

    enumeration = mirror("enumeration")
    labels = mirror("labels")

    def __init__(self, enum_type, /):
        if not isinstance(enum_type, type) or not issubclass(enum_type, enum.Enum):
            raise TypeError("Variant() argument must be an enumeration")
        if not len(enum_type):
            raise ValueError("Variant() enumeration must have at least one member")
        self._enumeration = enum_type
        self._labels = {}
        for member in enum_type:
            self._labels.setdefault(label(member), member)

    def bind(self, values, /):
        """
        Return a copy whose table also accepts the short aliases of 'values'.

        'values' are the value descriptions of the owning argument. When any
        are given, every member of the enumeration must be described.

        Raises
        - ValueError: a description names a label that matches no member.
        - NotEnoughVariantsError: some members are not described.
        """
        if not values:
            return self

        bound = object.__new__(type(self))
        bound._enumeration = self._enumeration
        bound._labels = dict(self._labels)

        described = set()
        for value in values:
            try:
                member = self._labels[value.label]
            except KeyError:
                try:
                    member = self._enumeration[value.label]
                except KeyError:
                    raise ValueError(
                        f"value {value.label!r} is not a member of {self._enumeration.__name__!r}"
                    ) from None
                bound._labels.setdefault(value.label, member)
            if value.short:
                bound._labels.setdefault(value.short, member)
            described.add(member)

        if missing := [member for member in self._enumeration if member not in described]:
            raise NotEnoughVariantsError(
                "values of %r do not describe %s" % (
                    self._enumeration.__name__, ", ".join(repr(label(member)) for member in missing)
                ),
                title="not enough variants",
                code=FaultCode.NOT_ENOUGH_VARIANTS,
                missing=tuple(missing),
                hint="describe every member of the enumeration or none of them",
                docs=getdoc(FaultCode.NOT_ENOUGH_VARIANTS),
            )
        return bound

    def decode(self, token, /):
        try:
            return self._labels[token]
        except KeyError:
            raise _invalid(
                token,
                self.typename,
                "use one of %s" % ", ".join(map(repr, self._labels)),
            ) from None

    def __eq__(self, other, /):
        if type(other) is not type(self):
            return NotImplemented
        return self._enumeration is other._enumeration and self._labels == other._labels

    def __hash__(self):
        return hash((type(self), self._enumeration))

    def __repr__(self):
        return f"Variant({self._enumeration.__name__})"


class Typed[_T]:
    """
    Decode with an arbitrary converter callable.

    A ValueError or TypeError raised by the converter is reported as an
    InvalidValueError; any other exception propagates.
    """
    total = False

    converter = mirror("converter")
    typename = mirror("typename")

    def __init__(self, converter, /, typename=Unset):
        if not callable(converter):
            raise TypeError("Typed() argument must be callable")
        if not isinstance(typename, str | Unset):
            raise TypeError("Typed() 'typename' must be a string")
        elif isinstance(typename, str) and not (typename := typename.strip()):
            raise ValueError("Typed() 'typename' cannot be empty")
        self._converter = converter
        self._typename = coalesce(typename, getattr(converter, "__name__", "value"))

    def decode(self, token, /):
        try:
            return self._converter(token)
        except (ValueError, TypeError) as error:
            raise _invalid(token, self._typename, str(error) or "provide a valid %s" % self._typename) from error

    def bind(self, values, /):
        return self

    def __eq__(self, other, /):
        if type(other) is not type(self):
            return NotImplemented
        return self._converter == other._converter and self._typename == other._typename

    def __hash__(self):
        return hash((type(self), self._converter))

    def __repr__(self):
        return f"Typed({self._typename})"


__all__ = (
    "String",
    "Variant",
    "Typed",
)
