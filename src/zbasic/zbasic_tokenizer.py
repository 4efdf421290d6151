"""Tokenizer for ZBasic source."""

import logging
from typing import AbstractSet, List, Sequence

from zbasic.zbasic_classifier import ZBasicClassifier
from zbasic.zbasic_segmenter import ZBasicSegmenter
from zbasic.zbasic_token import KEYWORDS, OPERATORS, ZBasicToken
from zbasic.zbasic_token_stream import ZBasicTokenStream


class ZBasicTokenizer:
    """Segments ZBasic source into words and classifies each one as a token."""

    def __init__(
        self,
        operators: Sequence[str] = OPERATORS,
        keywords: AbstractSet[str] = KEYWORDS
    ) -> None:
        """
        Initialize the tokenizer.

        Args:
            operators: Operator table, shared by segmentation and classification
            keywords: Reserved words

        Raises:
            ZBasicOperatorTableError: If the operator table is malformed
        """
        self._segmenter = ZBasicSegmenter(operators)
        self._classifier = ZBasicClassifier(keywords, self._segmenter.operators)
        self._logger = logging.getLogger("ZBasicTokenizer")

    @property
    def segmenter(self) -> ZBasicSegmenter:
        """The segmenter used to split source into words."""
        return self._segmenter

    @property
    def classifier(self) -> ZBasicClassifier:
        """The classifier used to turn words into tokens."""
        return self._classifier

    def tokenize(self, source: str) -> ZBasicTokenStream:
        """
        Tokenize ZBasic source.

        Classification stops at the first word that can't be classified; no
        partial token sequence is returned in that case.

        Args:
            source: The source text

        Returns:
            A token stream positioned at the first token

        Raises:
            ZBasicTokenError: If any word can't be classified
        """
        tokens: List[ZBasicToken] = []
        for word, position in self._segmenter.segment_with_positions(source):
            tokens.append(self._classifier.classify(word, position))

        self._logger.debug("tokenized %d characters into %d tokens", len(source), len(tokens))
        return ZBasicTokenStream(tokens)


_default_tokenizer = ZBasicTokenizer()


def tokenize(source: str) -> ZBasicTokenStream:
    """
    Tokenize ZBasic source using the standard operator and keyword tables.

    Args:
        source: The source text

    Returns:
        A token stream positioned at the first token

    Raises:
        ZBasicTokenError: If any word can't be classified
    """
    return _default_tokenizer.tokenize(source)
