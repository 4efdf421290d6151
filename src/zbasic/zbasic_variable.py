"""Variable records for ZBasic programs."""

from dataclasses import dataclass
from enum import Enum


class ZBasicVariableType(Enum):
    """Types a ZBasic variable can hold."""
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"


@dataclass
class ZBasicVariable:
    """A named variable and its current value."""
    name: str
    type: ZBasicVariableType
    value: bool | int | float
