from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dotti_factory.domain.enums import LiteralType, ParamKind
from dotti_factory.domain.exceptions import DependencyCycleError


class ParamSpec(BaseModel):
    """Value object describing how one positional constructor parameter is bound.

    Exactly one of the document shapes is expected:
    ``{"reference": name}``, ``{"type": "Date", "value": text}`` or ``{"value": literal}``.

    Attributes:
        reference: Name of another managed object.
        type: Typed-literal tag.
        value: Literal value, or the raw text of a typed literal.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    reference: Optional[str] = Field(default=None, description="Name of the referenced object.")
    type: Optional[str] = Field(default=None, description="Typed-literal tag, e.g. 'Date'.")
    value: Any = Field(default=None, description="Literal value or raw typed-literal text.")

    @property
    def kind(self) -> ParamKind:
        """Classify this spec.

        An unknown ``type`` tag falls through to the plain value. A missing or
        falsy value (``None``, ``0``, ``""``, ``False``, empty containers) is absent.
        """
        if self.reference is not None:
            return ParamKind.REFERENCE
        if self.type == LiteralType.DATE.value:
            return ParamKind.TYPED_LITERAL
        if self.value:
            return ParamKind.VALUE
        return ParamKind.ABSENT


class ObjectDescriptor(BaseModel):
    """Declarative record describing how to build one named object.

    Attributes:
        type_path: Dotted path of the constructor (``type`` in config documents).
        params: Positional slot key to parameter spec. Keys encode non-negative integers.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type_path: str = Field(..., alias="type", min_length=1, description="Dotted path of the constructor.")
    params: Dict[str, Optional[ParamSpec]] = Field(
        default_factory=dict,
        description="Positional slot key to parameter spec.",
    )

    @field_validator("params", mode="before")
    @classmethod
    def _normalise_slot_keys(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, Mapping):
            return {str(key): spec for key, spec in value.items()}
        return value

    @field_validator("params")
    @classmethod
    def _check_slot_keys(cls, value: Dict[str, Optional[ParamSpec]]) -> Dict[str, Optional[ParamSpec]]:
        for key in value:
            if not (key.isascii() and key.isdigit()):
                raise ValueError(f"slot key {key!r} is not a non-negative integer")
        return value

    def ordered_params(self) -> List[Tuple[str, Optional[ParamSpec]]]:
        """Return (slot key, spec) pairs sorted by the numeric value of the slot key.

        Gaps in the numbering are not padded: slots 1 and 5 yield two pairs.
        """
        return sorted(self.params.items(), key=lambda item: int(item[0]))

    def references(self) -> List[str]:
        """Return the names referenced by this descriptor, in parameter mapping order."""
        return [
            spec.reference
            for spec in self.params.values()
            if spec is not None and spec.kind is ParamKind.REFERENCE
        ]


class ResolutionContext(BaseModel):
    """Tracks the names whose dependencies are currently being visited.

    Used for cycle detection while computing a build order.

    Attributes:
        stack: Names currently in progress, outermost first.
    """

    stack: List[str] = Field(
        default_factory=list,
        description="Names currently in progress.",
    )

    def push(self, name: str) -> None:
        """Mark a name as in progress.

        Args:
            name: The name being visited.

        Raises:
            DependencyCycleError: If the name is already in progress.
        """
        if name in self.stack:
            cycle = self.stack[self.stack.index(name) :] + [name]
            raise DependencyCycleError(cycle)
        self.stack.append(name)

    def pop(self) -> None:
        """Remove the most recent name from the stack."""
        if self.stack:
            self.stack.pop()

    def clear(self) -> None:
        """Clear the entire stack."""
        self.stack.clear()
