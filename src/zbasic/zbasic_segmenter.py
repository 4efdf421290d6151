"""Splits ZBasic source text into words on whitespace and operator boundaries."""

import logging
from typing import ClassVar, FrozenSet, List, Sequence, Tuple

from zbasic.zbasic_error import ZBasicOperatorTableError
from zbasic.zbasic_token import OPERATORS


def validate_operator_table(operators: Sequence[str]) -> Tuple[str, ...]:
    """
    Check that an operator table can never produce an ambiguous match.

    Two operators that could match the same text must differ in length, so the
    table must not contain empty or duplicate entries.

    Args:
        operators: The operator strings to check

    Returns:
        The operators as an immutable tuple, in their original order

    Raises:
        ZBasicOperatorTableError: If the table is malformed
    """
    seen = set()
    for op in operators:
        if not op:
            raise ZBasicOperatorTableError(
                message="Operator table contains an empty operator",
                suggestion="Remove the empty entry from the operator table"
            )

        if op in seen:
            raise ZBasicOperatorTableError(
                message=f"Operator table contains duplicate operator: {op}",
                word=op,
                suggestion="Each operator may only appear once"
            )

        seen.add(op)

    return tuple(operators)


class ZBasicSegmenter:
    """
    Splits source text into words.

    A word is either a maximal run of characters that are neither whitespace nor
    the start of an operator, or a single operator.  When several operators
    could match at a position the longest one wins, so with both "=" and "=="
    available, "====" becomes "==", "==".
    """

    # Characters with the Unicode White_Space property
    _WHITESPACE_CHARS: ClassVar[FrozenSet[str]] = frozenset(
        "\t\n\v\f\r \u0085\u00A0\u1680\u2028\u2029\u202F\u205F\u3000"
        + "".join(chr(i) for i in range(0x2000, 0x200B))
    )

    def __init__(self, operators: Sequence[str] = OPERATORS) -> None:
        """
        Initialize the segmenter.

        Args:
            operators: The operator table to split on

        Raises:
            ZBasicOperatorTableError: If the operator table is malformed
        """
        self._operators = validate_operator_table(operators)
        self._max_operator_len = max((len(op) for op in self._operators), default=0)
        self._logger = logging.getLogger("ZBasicSegmenter")

    @property
    def operators(self) -> Tuple[str, ...]:
        """The operator table used by this segmenter."""
        return self._operators

    def segment(self, text: str) -> List[str]:
        """
        Split text into words.

        Args:
            text: The source text

        Returns:
            The words in source order, never including whitespace or empty words
        """
        return [word for word, _position in self.segment_with_positions(text)]

    def segment_with_positions(self, text: str) -> List[Tuple[str, int]]:
        """
        Split text into words, recording where each word starts.

        Args:
            text: The source text

        Returns:
            List of (word, start offset) tuples in source order
        """
        words: List[Tuple[str, int]] = []
        current: List[str] = []
        current_start = 0
        i = 0

        while i < len(text):
            match_len = self.match_operator(text, i)
            if match_len > 0:
                if current:
                    words.append((''.join(current), current_start))
                    current = []

                words.append((text[i:i + match_len], i))
                i += match_len
                continue

            ch = text[i]
            if ch in self._WHITESPACE_CHARS:
                if current:
                    words.append((''.join(current), current_start))
                    current = []

                i += 1
                continue

            if not current:
                current_start = i

            current.append(ch)
            i += 1

        if current:
            words.append((''.join(current), current_start))

        self._logger.debug("segmented %d characters into %d words", len(text), len(words))
        return words

    def match_operator(self, text: str, start: int) -> int:
        """
        Work out the length of the operator, if any, that begins at a position.

        Candidates are every operator that fits in the remaining text.  Any whose
        characters differ from the text are eliminated, then any candidate that
        is a prefix of a longer surviving candidate is dropped.

        Args:
            text: The source text
            start: Offset to match at

        Returns:
            The length of the matched operator, or 0 if no operator starts here

        Raises:
            ZBasicOperatorTableError: If more than one operator is equally specific
        """
        remaining = len(text) - start
        possible = [len(op) <= remaining for op in self._operators]

        for size in range(1, min(self._max_operator_len, remaining) + 1):
            prefix = text[start:start + size]
            for index, op in enumerate(self._operators):
                if possible[index] and len(op) == size and op != prefix:
                    possible[index] = False

        candidates = [op for index, op in enumerate(self._operators) if possible[index]]

        if len(candidates) > 1:
            candidates = [
                op for op in candidates
                if not any(len(other) > len(op) and other.startswith(op) for other in candidates)
            ]

        if not candidates:
            return 0

        if len(candidates) > 1:
            raise ZBasicOperatorTableError(
                message=f"Ambiguous operator match: {', '.join(candidates)}",
                word=text[start:start + len(candidates[0])],
                position=start
            )

        return len(candidates[0])
