import enum
import sys

from argot import *
from argot.utils import Unset

__prog__ = "tool"
__version__ = "0.1.0"


class SubCommand(enum.Enum):
    BUILD = "build"
    HELP = "--help"
    RUN = "run"
    TEST = "test"
    VERSION = "--version"


# The first token, the path of the executable.
tool = Argument(
    "tool",
    syntax=One(),
    descr="The command for running tool.",
    examples=("tool",),
)

sub_command = Argument(
    "sub-command",
    syntax=One(Positional(Variant(SubCommand))),
    descr="A sub-command including help and version.",
    values=(
        ("build", "Build source files."),
        ("--help", "Display these instructions.", "-h"),
        ("run", "Run a source file."),
        ("test", "Run tests."),
        ("--version", "Display tool version.", "-v"),
    ),
)

build_name = Argument(
    "build-name",
    syntax=ZeroOrOne(),
    descr="The name of the build process.",
    examples=("build-name",),
)

name_filter = Argument(
    "--filter",
    "-f",
    syntax=ZeroOrOne(Keyed()),
    descr="Filter tests by name.",
    examples=("--filter=documentation", "-f=argument"),
)


def path(descr):
    return Argument(
        "path",
        syntax=ZeroOrOne(),
        descr=descr,
        examples=("./src/main.ext", "./src/utils/process.ext"),
    )


def literal(long, short="", descr=""):
    return Argument(long, short, syntax=Literal(), descr=descr, examples=(long,))


def build(cursor):
    name = build_name.parse(cursor)
    print("Building", name or "all")


def run(cursor):
    value = path("The path of the source file to run.").parse(cursor)
    print("Running", value or "all")


def test(cursor):
    pattern = name_filter.parse(cursor)
    value = path("The path of the source file to test.").parse(cursor)
    print("Testing", value or "all", "with filter", pattern or "none")


def show_help(cursor):
    program = Argument(tool.long, syntax=Literal(), descr=tool.descr, examples=tool.examples)
    source = path("The path of the source file to run or test.")
    Documentation((
        (program, literal("--help", "-h", "Display these instructions.")),
        (program, literal("--version", "-v", "Display tool version.")),
        (program, literal("build", descr="Build source files."), source),
        (program, literal("run", descr="Run a source file."), source),
        (program, literal("test", descr="Run tests."), name_filter, source),
    )).write(sys.stdout)


def version(cursor):
    print(__version__)


def main(argv=Unset):
    cursor = TokenCursor(argv)
    try:
        tool.parse(cursor)
        match sub_command.parse(cursor):
            case SubCommand.BUILD:
                build(cursor)
            case SubCommand.HELP:
                show_help(cursor)
            case SubCommand.RUN:
                run(cursor)
            case SubCommand.TEST:
                test(cursor)
            case SubCommand.VERSION:
                version(cursor)
        cursor.finish()
    except ArgumentException as error:
        trigger(error, shell=True)


if __name__ == '__main__':
    main()
