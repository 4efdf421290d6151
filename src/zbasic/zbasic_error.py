"""Exception classes for the ZBasic lexical front end."""


class ZBasicError(Exception):
    """Base exception for ZBasic errors with context information."""

    def __init__(
        self,
        message: str,
        word: str | None = None,
        position: int | None = None,
        suggestion: str | None = None
    ):
        """
        Initialize error.

        Args:
            message: Core error description
            word: The source word that caused the error, if any
            position: Character position of the word in the source
            suggestion: Suggestion for fixing the error
        """
        self.message = message
        self.word = word
        self.position = position
        self.suggestion = suggestion

        super().__init__(self._format_detailed_message())

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [f"Error: {self.message}"]

        if self.position is not None:
            parts.append(f"Position: {self.position}")

        if self.word is not None:
            parts.append(f"Received: {self.word}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        return "\n".join(parts)


class ZBasicTokenError(ZBasicError):
    """A source word could not be classified as a token."""


class ZBasicUnparsableFloatError(ZBasicTokenError):
    """A word looks like a float literal but its value cannot be represented."""


class ZBasicUnparsableIntError(ZBasicTokenError):
    """A word looks like an integer literal but its value does not fit in 32 bits."""


class ZBasicUnrecognizedTokenError(ZBasicTokenError):
    """A word matches none of the token rules."""


class ZBasicOperatorTableError(ZBasicError):
    """The operator table is malformed, so operator matches can be ambiguous."""
