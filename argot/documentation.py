r"""
Argot documentation renderer.

Overview
- Documentation(usage, arguments=Unset, examples=Unset) renders the same
  declarative Arguments that parse the command line as help text:

    Usage:                      <- one line per usage entry, arguments
                                   rendered with to_syntax_string()
    tool -h|--help
    tool <sub-command> [path]


    Help:                       <- one block per unique argument,
                                   rendered with to_doc_string()
    -h, --help    Display these instructions.

    ...

    Examples:                   <- explicit example lines, or the Cartesian
                                   product of each usage line's examples
    tool --help
    tool build ./src/main.ext

- Sections are omitted entirely when their source collection is empty.

Output
- write(sink) writes plain text to any object with a write(str) method
  (sys.stdout by default) and flushes it when it can be flushed. The format is
  stable and exact; str(documentation) returns the same text.
- __rich__ / print() give the same layout styled with rich. The palette can
  be overridden with a __styles__ mapping in __main__ (keys below).

Palette keys
- section-label, literal, required, optional
- doc-heading, value-label, value-description
- example

Argument order
- Positional arguments whose decoder accepts any token (String) take the next
  token whenever their arity allows it. A usage line that puts such an optional
  or unbounded argument before another argument cannot reach the latter; a
  ShadowedArgumentWarning is emitted when the documentation is built.
"""
import io
import itertools
import sys
from collections import defaultdict
from collections.abc import Iterable

from rich.console import Console, Group
from rich.text import Text

from .arguments import Argument
from .faults import ShadowedArgumentWarning, FaultCode, trigger, getdoc
from .utils import *

SEPARATOR = " "
DELIMITER = "\n"
GAP = 4


def _sanitize_arguments(arguments, what, /):
    if isinstance(arguments, str) or not isinstance(arguments, Iterable):
        raise TypeError(f"documentation {what} must be an iterable of arguments")
    arguments = tuple(arguments)
    if not all(isinstance(argument, Argument) for argument in arguments):
        raise TypeError(f"documentation {what} must contain only arguments")
    return arguments


def _check_order(line, /):
    """
    Warn about arguments that can never be reached on a usage line.
    """
    for argument, shadowed in itertools.pairwise(line):
        if argument.syntax.total:
            trigger(ShadowedArgumentWarning(
                "%r takes any token, so %r after it is never reached" % (argument.long, shadowed.long),
                title="shadowed argument",
                code=FaultCode.SHADOWED_ARGUMENT,
                argument=argument,
                shadowed=shadowed,
                hint="declare %r before %r or give %r a bounded syntax" % (shadowed.long, argument.long, argument.long),
                docs=getdoc(FaultCode.SHADOWED_ARGUMENT),
            ))


class Documentation:
    """
    Usage, argument and example sections for a set of Arguments.

    Parameters
    - usage: Iterable[Iterable[Argument]], one entry per usage line.
    - arguments: Iterable[Argument] to document. Defaults to every argument of
      the usage lines, in order. Arguments whose doc strings are identical are
      documented once.
    - examples: Iterable[str] written verbatim, one per line. When Unset, the
      example lines are synthesized from the usage lines: every combination of
      the examples of their arguments.
    - colorful: style the rich rendering (plain text output is never styled).
    """

    usage = mirror("usage")
    arguments = mirror("arguments")
    examples = mirror("examples")

    def __init__(self, usage=(), /, arguments=Unset, examples=Unset, *, colorful=True):
        if isinstance(usage, str) or not isinstance(usage, Iterable):
            raise TypeError("documentation usage must be an iterable of usage lines")
        self._usage = tuple(_sanitize_arguments(line, "usage lines") for line in usage)

        if arguments is Unset:
            arguments = itertools.chain.from_iterable(self._usage)
        self._arguments = _sanitize_arguments(arguments, "arguments")

        if examples is Unset:
            self._examples = tuple(
                SEPARATOR.join(combination)
                for line in self._usage
                for combination in itertools.product(*(argument.examples for argument in line))
            )
        elif isinstance(examples, str) or not isinstance(examples, Iterable):
            raise TypeError("documentation examples must be an iterable of strings")
        else:
            examples = tuple(examples)
            if not all(isinstance(example, str) for example in examples):
                raise TypeError("documentation examples must contain only strings")
            self._examples = examples

        self._colorful = bool(colorful)

        for line in self._usage:
            _check_order(line)

    def docs(self):
        """
        Unique doc strings of the documented arguments, in order.
        """
        return list(dict.fromkeys(argument.to_doc_string() for argument in self._arguments))

    def write(self, sink=Unset, /):
        """
        Write all sections to the sink (sys.stdout by default).
        """
        sink = coalesce(sink, sys.stdout)
        self.write_usage(sink)
        self.write_arguments(sink)
        self.write_examples(sink)

    def write_usage(self, sink, /):
        if not self._usage:
            return
        sink.write(_heading("Usage"))
        for line in self._usage:
            sink.write(SEPARATOR.join(argument.to_syntax_string() for argument in line))
            sink.write(DELIMITER)
        sink.write("\n\n")
        _flush(sink)

    def write_arguments(self, sink, /):
        if not self._arguments:
            return
        for doc in self.docs():
            sink.write(doc)
            sink.write("\n")
        sink.write("\n")
        _flush(sink)

    def write_examples(self, sink, /):
        if not self._examples:
            return
        sink.write(_heading("Examples"))
        for example in self._examples:
            sink.write(example)
            sink.write(DELIMITER)
        _flush(sink)

    def __str__(self):
        buffer = io.StringIO()
        self.write(buffer)
        return buffer.getvalue()

    def __rich__(self):
        styles = defaultdict(str, {
            "section-label": "bold #FFFFFF",  # Pure white headers
            "literal": "bold #22C55E",  # GREEN for literal tokens
            "required": "bold #00E6FF",  # CYAN for required values
            "optional": "bold #FFD600",  # AMBER for optional values
            "doc-heading": "bold #FF4D94",  # MAGENTA-PINK argument headings
            "value-label": "bold #36C5F0",  # SKY-BLUE left column
            "value-description": "#9CA3AF",  # Muted gray
            "example": "#E5E7EB",
        } | getattr(__import__("__main__"), "__styles__", {}))

        def styler(style):
            return styles[style] if self._colorful else ""

        renders = []

        if self._usage:
            usage = Text(_heading("Usage"), styler("section-label"))
            for line in self._usage:
                usage.append(Text(SEPARATOR).join(
                    Text(argument.to_syntax_string(), styler(
                        "literal" if argument.syntax.literal else "optional" if argument.optional else "required"
                    ))
                    for argument in line
                ))
                usage.append(DELIMITER)
            renders.append(usage)

        seen = set()
        for argument in self._arguments:
            if (doc := argument.to_doc_string()) in seen:
                continue
            seen.add(doc)
            block = Text(argument.heading + ":\n\n", styler("doc-heading"))
            rows = argument.rows()
            width = max(len(left) for left, _ in rows)
            for left, right in rows:
                block.append(left, styler("value-label"))
                block.append(" " * (width - len(left) + GAP))
                block.append(right, styler("value-description"))
                block.append("\n")
            renders.append(block)

        if self._examples:
            examples = Text(_heading("Examples"), styler("section-label"))
            for example in self._examples:
                examples.append(example, styler("example")).append(DELIMITER)
            renders.append(examples)

        if renders:
            renders[-1].rstrip()

        return Group(*renders)

    def print(self, console=Unset, /):
        """
        Print the styled documentation to a rich console (stdout by default).
        """
        coalesce(console, Console()).print(self)


def _heading(title, /):
    return title + ":\n\n"


def _flush(sink, /):
    if callable(flush := getattr(sink, "flush", None)):
        flush()


__all__ = (
    "Documentation",
)
