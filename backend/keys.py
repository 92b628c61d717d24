"""
Keypad keys understood by the calculator engine.

Button labels are mapped to a Key once, at the boundary, so the engine never
compares raw label strings.
"""
from enum import Enum
from typing import Optional


class UnknownKeyError(ValueError):
    pass


class Key(Enum):
    DIGIT_0 = "0"
    DIGIT_1 = "1"
    DIGIT_2 = "2"
    DIGIT_3 = "3"
    DIGIT_4 = "4"
    DIGIT_5 = "5"
    DIGIT_6 = "6"
    DIGIT_7 = "7"
    DIGIT_8 = "8"
    DIGIT_9 = "9"

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    EQUALS = "="
    CLEAR = "C"

    MEMORY_STORE = "SM"
    MEMORY_RECALL = "RM"
    MEMORY_CLEAR = "CM"

    SQUARE = "X^2"

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_digit(self) -> bool:
        return self.name.startswith("DIGIT_")

    @property
    def is_operator(self) -> bool:
        return self in _OPERATORS

    @property
    def digit(self) -> Optional[str]:
        return self.value if self.is_digit else None

    @classmethod
    def from_label(cls, label: str) -> "Key":
        """Map raw button text to its Key; raises UnknownKeyError otherwise."""
        try:
            return cls(label)
        except ValueError:
            raise UnknownKeyError(f"Unknown key label: {label!r}") from None


_OPERATORS = frozenset({Key.ADD, Key.SUBTRACT, Key.MULTIPLY, Key.DIVIDE})


def _lookup(label) -> Optional[Key]:
    try:
        return Key(label)
    except ValueError:
        return None


def is_numeric(label: str) -> bool:
    """True for the digit keys 0-9."""
    key = _lookup(label)
    return key is not None and key.is_digit


def is_symbol(label: str) -> bool:
    """True for the arithmetic operator keys + - * /."""
    key = _lookup(label)
    return key is not None and key.is_operator
