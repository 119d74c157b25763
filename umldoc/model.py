"""Domain objects describing entities and the associations between them."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from .errors import StructuralInputError


class Modifier(Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    PACKAGE = "package"
    STATIC = "static"
    FINAL = "final"

    @classmethod
    def parse(cls, value: str) -> "Modifier":
        return cls(value.strip().lower())


class Cardinality(Enum):
    ONE = "ONE"
    MANY = "MANY"
    ZERO_OR_ONE = "ZERO_OR_ONE"
    ZERO_OR_MANY = "ZERO_OR_MANY"


@dataclass(frozen=True)
class Field:
    name: str
    type: str
    modifiers: FrozenSet[Modifier] = frozenset()

    def __post_init__(self) -> None:
        if self.type is None:
            raise StructuralInputError(f"Field '{self.name}' has no type")
        # accept any iterable of modifiers but store a hashable set
        object.__setattr__(self, "modifiers", frozenset(self.modifiers))


@dataclass(frozen=True)
class Entity:
    name: str
    stereotype: str = ""
    fields: Tuple[Field, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))


@dataclass(frozen=True)
class Side:
    entity: Entity
    cardinality: Cardinality = Cardinality.ONE
    navigability: bool = False
    label: Optional[str] = None

    @property
    def has_label(self) -> bool:
        return bool(self.label)


@dataclass(frozen=True)
class AssociationDependency:
    """A directed relation between two entities.

    Only one of the two sides may carry a label; an edge without any label is
    fine, an edge labeled on both ends is rejected here so that no generator
    ever starts writing it.
    """

    left: Side
    right: Side

    def __post_init__(self) -> None:
        check_single_label(self.left, self.right)

    @property
    def label(self) -> str:
        return check_single_label(self.left, self.right)


def check_single_label(left: Side, right: Side) -> str:
    """Return the label of the labeled side, or an empty string."""
    if left.has_label and right.has_label:
        raise StructuralInputError(
            f"Only one side of the association {left.entity.name} -- "
            f"{right.entity.name} can hold the label "
            f"(got '{left.label}' and '{right.label}')"
        )
    return left.label or right.label or ""


@dataclass(frozen=True)
class Model:
    entities: Tuple[Entity, ...]
    associations: Tuple[AssociationDependency, ...] = ()

    def entity_by_name(self) -> Dict[str, Entity]:
        return {entity.name: entity for entity in self.entities}
