from enum import Enum


class ParamKind(str, Enum):
    """Classifies how a constructor parameter is bound.

    Attributes:
        REFERENCE: Another managed object, looked up by name in the cache.
        TYPED_LITERAL: A literal that needs conversion (see LiteralType).
        VALUE: A literal used verbatim.
        ABSENT: No value; binds as None in its positional slot.
    """

    REFERENCE = "reference"
    TYPED_LITERAL = "typed_literal"
    VALUE = "value"
    ABSENT = "absent"

    def __str__(self) -> str:
        return self.value


class LiteralType(str, Enum):
    """Tags recognised in the ``type`` field of a parameter spec."""

    DATE = "Date"

    def __str__(self) -> str:
        return self.value
