"""
Argot token cursor.

Overview
- TokenCursor walks the command-line tokens left to parse, one token of
  lookahead at a time. A parser first peeks at a token, decides whether it
  belongs to the argument being parsed, and only then accepts (commits) it.

Why one slot
- Optional arities may read a token, find that it does not decode, and stop.
  The token must then be handed to the next argument untouched. The cursor
  keeps exactly one peeked-but-not-accepted token in a buffer; the next
  peek()/next() returns it before pulling anything else from the source.

Contract
- peek() -> str | None: the token under the cursor (None when exhausted).
  Repeated calls return the same token until accept() is called.
- accept(): drop the buffered token so the next peek() pulls a new one.
- next() -> str | None: peek() followed by accept().
- Running out of tokens is never an error; peek() returns None.

Quick example:
    >>> cursor = TokenCursor(["tool", "build"])
    >>> cursor.peek(), cursor.peek()
    ('tool', 'tool')
    >>> cursor.accept()
    >>> cursor.next()
    'build'
    >>> cursor.peek() is None
    True
"""
import sys
from collections.abc import Iterable

from .faults import UnparsedTokensError, FaultCode, getdoc
from .utils import Unset, ordinal


def _sanitized(iterable):
    """
    Yield items from an iterable, validating element types.

    Raises
    - TypeError: if any element is not a string.
    """
    for item in iterable:
        if not isinstance(item, str):
            raise TypeError("TokenCursor() argument must be an iterable of strings")
        yield item


class TokenCursor:
    """
    Backtracking-capable cursor over the remaining command-line tokens.

    Parameters
    - tokens:
      • Unset: read the process arguments (sys.argv, executable path included).
      • Iterable[str]: pre-tokenized sequence; consumed lazily.

    Attributes
    - index: 1-based position of the token under the cursor; advanced by accept().
    """

    def __init__(self, tokens=Unset, /):
        if tokens is Unset:
            tokens = sys.argv
        elif isinstance(tokens, str) or not isinstance(tokens, Iterable):
            raise TypeError("TokenCursor() argument must be an iterable of strings")

        self._source = _sanitized(tokens)
        self._buffer = Unset
        self._index = 1

    @property
    def index(self):
        return self._index

    @property
    def exhausted(self):
        """
        True when no token is buffered and the source has nothing left.
        """
        return self.peek() is None

    def peek(self):
        """
        Return the token under the cursor without consuming it.

        The first call after accept() pulls from the source into the one-slot
        buffer; later calls return the buffered token as-is.
        """
        if self._buffer is Unset:
            self._buffer = next(self._source, None)
        return self._buffer

    def accept(self):
        """
        Commit the buffered token. A no-op when nothing is buffered.
        """
        if self._buffer is not Unset and self._buffer is not None:
            self._index += 1
        self._buffer = Unset

    def next(self):
        token = self.peek()
        self.accept()
        return token

    def parse(self, argument, /):
        """
        Parse the next value(s) of an argument from this cursor.

        Equivalent to argument.parse(cursor); the return shape depends on the
        argument's syntax (bare value, optional value, or list of values).
        """
        return argument.parse(self)

    def finish(self):
        """
        Assert that every token was consumed.

        Raises
        - UnparsedTokensError: when a token is still under the cursor.
        """
        if (token := self.peek()) is None:
            return
        raise UnparsedTokensError(
            "unexpected token %r at %s position" % (token, ordinal(self._index)),
            title="unparsed tokens",
            code=FaultCode.UNPARSED_TOKENS,
            token=token,
            index=self._index,
            hint="remove the extra input or check the order of the arguments",
            docs=getdoc(FaultCode.UNPARSED_TOKENS),
        )

    def __iter__(self):
        """
        Drain the remaining tokens (each one accepted as it is yielded).
        """
        while (token := self.next()) is not None:
            yield token

    def __rich_repr__(self):
        yield "index", self._index
        yield "buffer", self._buffer

    def __repr__(self):
        return f"TokenCursor(index={self._index!r}, buffer={self._buffer!r})"


__all__ = (
    "TokenCursor",
)
