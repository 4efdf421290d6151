"""Resettable read cursor over a sequence of ZBasic tokens."""

from typing import Iterable, Iterator, Tuple

from zbasic.zbasic_token import ZBasicToken


class ZBasicTokenStream:
    """
    Holds an immutable token sequence and a read position into it.

    The read position only ever moves forward, one token per pop(), until
    reset() returns it to the start.  The tokens themselves are never changed.
    """

    def __init__(self, tokens: Iterable[ZBasicToken]) -> None:
        self._tokens: Tuple[ZBasicToken, ...] = tuple(tokens)
        self._index = 0

    @property
    def tokens(self) -> Tuple[ZBasicToken, ...]:
        """All tokens in the stream, regardless of the read position."""
        return self._tokens

    @property
    def index(self) -> int:
        """Index of the next token to be read."""
        return self._index

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[ZBasicToken]:
        return iter(self._tokens)

    def __repr__(self) -> str:
        return f"ZBasicTokenStream({len(self._tokens)} tokens, index={self._index})"

    def available(self) -> bool:
        """Return True if there is another token to read."""
        return self._index < len(self._tokens)

    def peek(self) -> ZBasicToken | None:
        """
        Get the next token without consuming it.

        Returns:
            The next token, or None if the stream is exhausted
        """
        if not self.available():
            return None

        return self._tokens[self._index]

    def pop(self) -> ZBasicToken | None:
        """
        Get the next token and move past it.

        Returns:
            The next token, or None (without moving) if the stream is exhausted
        """
        token = self.peek()
        if token is not None:
            self._index += 1

        return token

    def reset(self) -> None:
        """Move the read position back to the first token."""
        self._index = 0
