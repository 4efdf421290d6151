"""Token types, token representation and fixed lexical tables for ZBasic source."""

import struct
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import FrozenSet, Tuple


class ZBasicTokenType(Enum):
    """Token types for ZBasic source."""
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    KEYWORD = "keyword"
    OPERATOR = "operator"
    VARIABLE = "variable"


# Operators recognized by both the segmenter and the classifier
OPERATORS: Tuple[str, ...] = (
    ";",
    ",",
    "(",
    ")",
    "{",
    "}",
    "+",
    "*",
    "-",
    "/",
    "=",
    "&&",
    "||",
    "==",
    "!=",
    "!",
)

# Reserved words, matched case-sensitively
KEYWORDS: FrozenSet[str] = frozenset({
    "if",
    "else",
    "for",
})

BOOLEAN_LITERALS: FrozenSet[str] = frozenset({"true", "false"})

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


_FLOAT32_INF_BITS = 0x7F800000
_FLOAT32_MAX_BITS = _FLOAT32_INF_BITS - 1


def to_float32(value: float) -> float:
    """
    Round a value to the nearest single precision float.

    Raises:
        OverflowError: If the value is outside the single precision range
    """
    return struct.unpack("f", struct.pack("f", value))[0]


def _float32_bits(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", value))[0]


def _float32_from_bits(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits))[0]


def parse_float32(text: str) -> float:
    """
    Parse decimal text directly to the nearest single precision float.

    The decimal value is rounded once, with ties going to the even neighbour,
    so the result can differ from rounding the text to a double first.

    Args:
        text: Decimal text with an optional leading '-'

    Returns:
        The correctly rounded single precision value

    Raises:
        OverflowError: If the value rounds beyond the single precision range
    """
    exact = Fraction(text)
    magnitude = abs(exact)

    # The double approximation is never more than one single precision step away
    bits = _float32_bits(min(float(magnitude), _float32_from_bits(_FLOAT32_MAX_BITS)))

    best_bits = bits
    best_distance: Fraction | None = None
    for candidate in (bits - 1, bits, bits + 1):
        if candidate < 0 or candidate > _FLOAT32_INF_BITS:
            continue

        if candidate == _FLOAT32_INF_BITS:
            candidate_value = Fraction(2 ** 128)

        else:
            candidate_value = Fraction(_float32_from_bits(candidate))

        distance = abs(candidate_value - magnitude)
        if (
            best_distance is None
            or distance < best_distance
            or (distance == best_distance and candidate % 2 == 0)
        ):
            best_bits = candidate
            best_distance = distance

    if best_bits == _FLOAT32_INF_BITS:
        raise OverflowError(f"{text} is out of single precision range")

    value = _float32_from_bits(best_bits)
    return -value if text.startswith("-") else value


def format_float32(value: float) -> str:
    """Format a single precision value positionally, using the fewest digits that still round trip."""
    for precision in range(1, 10):
        text = f"{value:.{precision}g}"
        if to_float32(float(text)) == value:
            return format(Decimal(text), "f")

    return format(Decimal(repr(value)), "f")


@dataclass(frozen=True)
class ZBasicToken:
    """
    Represents a single classified token.

    Equality and hashing only consider the token type and its value. The
    position and length describe where the token's word was found in the
    source, when known.
    """
    type: ZBasicTokenType
    value: int | float | bool | str
    position: int | None = field(default=None, compare=False)
    length: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.type == ZBasicTokenType.FLOAT:
            object.__setattr__(self, "value", to_float32(float(self.value)))

        elif self.type == ZBasicTokenType.INT and not INT_MIN <= self.value <= INT_MAX:
            raise ValueError(f"Int token value {self.value} does not fit in 32 bits")

    def __str__(self) -> str:
        if self.type == ZBasicTokenType.BOOL:
            return f"(bool {'true' if self.value else 'false'})"

        if self.type == ZBasicTokenType.OPERATOR:
            return f"(operator '{self.value}')"

        if self.type == ZBasicTokenType.FLOAT:
            return f"(float {format_float32(float(self.value))})"

        return f"({self.type.value} {self.value})"

    def __repr__(self) -> str:
        if self.position is None:
            return f"ZBasicToken({self.type.name}, {self.value!r})"

        return f"ZBasicToken({self.type.name}, {self.value!r}, pos={self.position})"
