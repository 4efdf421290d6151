"""Shared fixtures and utilities for ZBasic tests."""

import pytest
from typing import List

from zbasic import ZBasicClassifier, ZBasicSegmenter, ZBasicToken, ZBasicTokenizer, ZBasicTokenType


@pytest.fixture
def tokenizer():
    """Create a fresh tokenizer with the standard tables."""
    return ZBasicTokenizer()


@pytest.fixture
def segmenter():
    """Create a fresh segmenter with the standard operator table."""
    return ZBasicSegmenter()


@pytest.fixture
def classifier():
    """Create a fresh classifier with the standard tables."""
    return ZBasicClassifier()


class ZBasicTestHelpers:
    """Helper utilities for ZBasic testing."""

    @staticmethod
    def tokens(*pairs) -> List[ZBasicToken]:
        """Build a token list from (type, value) pairs."""
        return [ZBasicToken(token_type, value) for token_type, value in pairs]

    @staticmethod
    def assert_tokenizes_to(tokenizer: ZBasicTokenizer, source: str, expected: List[ZBasicToken]) -> None:
        """Assert that source tokenizes to exactly the expected tokens."""
        result = list(tokenizer.tokenize(source))
        assert result == expected, f"Expected {expected!r}, got {result!r}"

    @staticmethod
    def variable(name: str) -> ZBasicToken:
        return ZBasicToken(ZBasicTokenType.VARIABLE, name)

    @staticmethod
    def operator(symbol: str) -> ZBasicToken:
        return ZBasicToken(ZBasicTokenType.OPERATOR, symbol)

    @staticmethod
    def keyword(name: str) -> ZBasicToken:
        return ZBasicToken(ZBasicTokenType.KEYWORD, name)


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return ZBasicTestHelpers
