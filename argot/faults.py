"""
Argot faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue
  (errors and warnings). Codes are grouped by domain to keep logs/searches
  predictable.
- ArgumentException / ArgumentWarning: base types that carry message + options
  and know how to render themselves (via rich) in a friendly, lowercased tone.
- trigger(): central entry point to surface any fault (respecting shell/fancy/colorful).
- getdoc(): optional description lookup for a code from the host application.

Error kinds
- NotEnoughValuesError: the required part of an arity was not satisfied
  (exhausted cursor or a token that does not decode). Fatal to that parse call.
- InvalidValueError: a token is present but fails structural or decode
  validation. Propagated for literals and bare decoders; swallowed by the
  optional tail of quantified runs.
- InvalidRequiredValueError: a token is present where a value is required but
  it does not decode; a NotEnoughValuesError and an InvalidValueError at once.
- UnparsedTokensError: tokens were left once the caller declared the run finished.
- NotEnoughVariantsError: configuration error raised while an Argument is being
  constructed, before any parsing happens.

Integration
- Parsing raises faults directly; hosts that want shell-style output catch them
  and call trigger(fault, shell=True), which prints through rich and exits.
"""
import copy
import inspect
import sys
import warnings
from abc import ABC
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across argot (stable identifiers).

    grouping (by high-level domain)
    - values (1112x)
      • NOT_ENOUGH_VALUES, INVALID_VALUE, INVALID_REQUIRED_VALUE
    - cursor (1114x)
      • UNPARSED_TOKENS
    - configuration (1115x)
      • NOT_ENOUGH_VARIANTS
    - warnings (1214x)
      • SHADOWED_ARGUMENT

    normalize() allows host remapping to custom labels while keeping codes stable.
    """
    # --- value errors (11xxx) ---
    NOT_ENOUGH_VALUES           = 11122
    INVALID_VALUE               = 11124
    INVALID_REQUIRED_VALUE      = 11125

    # --- cursor errors (11xxx) ---
    UNPARSED_TOKENS             = 11141

    # --- configuration errors (11xxx) ---
    NOT_ENOUGH_VARIANTS         = 11151

    # --- warnings (12xxx) ---
    SHADOWED_ARGUMENT           = 12141

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _render(self, palette, kind):
    """
    build the rich renderable shared by exceptions and warnings.

    layout: "[ prog — code | title ]" header, one-sentence message, hint arrow.
    a panel is used instead when the 'fancy' option is set.
    """
    main = __import__("__main__")
    styles = defaultdict(str, palette | getattr(main, "__styles__", {}))
    colorful = self.options.get("colorful", True)
    fancy = self.options.get("fancy", False)

    def styler(style):
        return styles[style] if colorful else ""

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not colorful:
            return Text(str(fragment))
        if isinstance(fragment, Text):
            return fragment
        return Text(str(fragment), style)

    argument = self.options.get("argument")
    prog = getattr(main, "__prog__", argument.long if argument is not None else "argot")

    code = self.options.get("code")
    header = Text.assemble(
        "[ ",
        text(prog, styler("prog-name")),
        " — ",
        text(code.normalize() if code is not None else "", styler("code")),
        " | ",
        text(self.options.get("title", kind).title(), styler(f"{kind}-title")),
        " ]"
    )
    message = text(self.message, styler(f"{kind}-message"))
    hint = Text.assemble(text(" → ", styler("hint-arrow")), text(self.options.get("hint", ""), styler("hint")))

    if fancy:
        width = console.width - 4
        try:
            width = int(width * self.options["ratio"])
        except KeyError:
            width = None
        return Panel(Group(message, hint), title=header, title_align="left", width=width)

    return Group(header, message, hint)


class ArgumentException(Exception):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(message,) * (message is not Unset))
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        return _render(self, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        }, "error")

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class NotEnoughValuesError(ArgumentException): ...
class InvalidValueError(ArgumentException): ...
class UnparsedTokensError(ArgumentException): ...
class NotEnoughVariantsError(ArgumentException, TypeError): ...


class InvalidRequiredValueError(NotEnoughValuesError, InvalidValueError):
    """
    a token is present where a value is required, but it does not decode.

    it is both kinds at once: the required arity is not satisfied, and the
    token under the cursor is invalid.
    """


class ArgumentWarning(ABC, Warning):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(message,) * (message is not Unset))
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        return _render(self, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #FFB400",  # amber fault code for warnings
            "warning-title": "bold #FFC2E0",  # softer pinky title for warnings

            # body
            "warning-message": "#D6D6DE",  # slightly lighter gray body
            "hint-arrow": "#B8EFAF dim",  # softer green arrow
            "hint": "italic #B8EFAF",  # softer green hint text
        }, "warning")

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            return warnings.warn(self, stacklevel=len(inspect.stack()))
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class ShadowedArgumentWarning(ArgumentWarning): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via copy.replace() before triggering.
    - in shell mode, rendering happens via the rich console; otherwise,
      exceptions are raised and warnings are emitted through warnings.warn.

    typical options
    - shell, fancy, colorful, title, code, hint, docs, and any other context the
      reporter may want to show (e.g., token/index/argument).
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    when not found, returns None.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "ArgumentException",
    "NotEnoughValuesError",
    "InvalidValueError",
    "UnparsedTokensError",
    "NotEnoughVariantsError",
    "InvalidRequiredValueError",
    "ArgumentWarning",
    "ShadowedArgumentWarning",
    "FaultCode",
    "trigger",
    "getdoc",
)
