"""Classifies segmented ZBasic words into typed tokens."""

import logging
import re
from typing import AbstractSet, Callable, List, Sequence, Tuple

from zbasic.zbasic_error import (
    ZBasicUnparsableFloatError, ZBasicUnparsableIntError, ZBasicUnrecognizedTokenError
)
from zbasic.zbasic_token import (
    BOOLEAN_LITERALS, INT_MAX, INT_MIN, KEYWORDS, OPERATORS, ZBasicToken, ZBasicTokenType, parse_float32
)


ClassifierRule = Callable[[str, int | None], ZBasicToken | None]


class ZBasicClassifier:
    """
    Assigns a token type to each word produced by the segmenter.

    Rules are tried in a fixed order and the first one that recognizes the word
    wins: keyword, boolean, float, int, operator, then variable.  The order
    matters; "-" has no digits so it reaches the operator rule, and "true" is
    caught before it can be treated as a variable name.
    """

    _FLOAT_PATTERN = re.compile(r'-?(?:[0-9]+\.[0-9]*|[0-9]*\.[0-9]+)')
    _INT_PATTERN = re.compile(r'-?[0-9]+')
    _VARIABLE_PATTERN = re.compile(r'[a-zA-Z][a-zA-Z0-9]*')

    def __init__(
        self,
        keywords: AbstractSet[str] = KEYWORDS,
        operators: Sequence[str] = OPERATORS
    ) -> None:
        """
        Initialize the classifier.

        Args:
            keywords: Reserved words
            operators: Operator table
        """
        self._keywords = frozenset(keywords)
        self._operators = frozenset(operators)
        self._logger = logging.getLogger("ZBasicClassifier")

        self._rules: Tuple[Tuple[str, ClassifierRule], ...] = (
            ("keyword", self._classify_keyword),
            ("bool", self._classify_bool),
            ("float", self._classify_float),
            ("int", self._classify_int),
            ("operator", self._classify_operator),
            ("variable", self._classify_variable),
        )

    @property
    def rule_names(self) -> List[str]:
        """Names of the classification rules in the order they are tried."""
        return [name for name, _rule in self._rules]

    def classify(self, word: str, position: int | None = None) -> ZBasicToken:
        """
        Classify a single word.

        Args:
            word: A word produced by the segmenter
            position: Where the word starts in the source, if known

        Returns:
            The token for the word

        Raises:
            ZBasicUnparsableFloatError: If a float literal cannot be represented
            ZBasicUnparsableIntError: If an integer literal does not fit in 32 bits
            ZBasicUnrecognizedTokenError: If no rule recognizes the word
        """
        for name, rule in self._rules:
            token = rule(word, position)
            if token is not None:
                self._logger.debug("classified %r as %s", word, name)
                return token

        raise ZBasicUnrecognizedTokenError(
            message=f"unable to parse `{word}` as a token",
            word=word,
            position=position,
            suggestion="Names must start with a letter and contain only letters and digits"
        )

    def _make_token(
        self,
        token_type: ZBasicTokenType,
        value: int | float | bool | str,
        word: str,
        position: int | None
    ) -> ZBasicToken:
        if position is None:
            return ZBasicToken(token_type, value)

        return ZBasicToken(token_type, value, position, len(word))

    def _classify_keyword(self, word: str, position: int | None) -> ZBasicToken | None:
        if word in self._keywords:
            return self._make_token(ZBasicTokenType.KEYWORD, word, word, position)

        return None

    def _classify_bool(self, word: str, position: int | None) -> ZBasicToken | None:
        if word in BOOLEAN_LITERALS:
            return self._make_token(ZBasicTokenType.BOOL, word == "true", word, position)

        return None

    def _classify_float(self, word: str, position: int | None) -> ZBasicToken | None:
        if not self._FLOAT_PATTERN.fullmatch(word):
            return None

        try:
            value = parse_float32(word)

        except OverflowError as e:
            raise ZBasicUnparsableFloatError(
                message=f"unable to parse token `{word}` as float",
                word=word,
                position=position,
                suggestion="Float literals must fit in single precision"
            ) from e

        return self._make_token(ZBasicTokenType.FLOAT, value, word, position)

    def _classify_int(self, word: str, position: int | None) -> ZBasicToken | None:
        if not self._INT_PATTERN.fullmatch(word):
            return None

        try:
            value = int(word)
            if not INT_MIN <= value <= INT_MAX:
                raise ValueError(f"{word} is out of range")

        except ValueError as e:
            raise ZBasicUnparsableIntError(
                message=f"unable to parse token `{word}` as int",
                word=word,
                position=position,
                suggestion=f"Integer literals must be between {INT_MIN} and {INT_MAX}"
            ) from e

        return self._make_token(ZBasicTokenType.INT, value, word, position)

    def _classify_operator(self, word: str, position: int | None) -> ZBasicToken | None:
        if word in self._operators:
            return self._make_token(ZBasicTokenType.OPERATOR, word, word, position)

        return None

    def _classify_variable(self, word: str, position: int | None) -> ZBasicToken | None:
        if self._VARIABLE_PATTERN.fullmatch(word):
            return self._make_token(ZBasicTokenType.VARIABLE, word, word, position)

        return None
