"""Field classification and the strategies that supply associations."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import AbstractSet, Iterable, List, Sequence, Tuple

from .model import AssociationDependency, Cardinality, Entity, Field, Side
from .resolver import is_generic, resolve


@dataclass(frozen=True)
class FieldClassification:
    attributes: Tuple[Field, ...]
    associations: Tuple[str, ...]
    association_fields: Tuple[Field, ...] = ()


def classify_fields(
    fields: Iterable[Field], known_names: AbstractSet[str]
) -> FieldClassification:
    """Split ``fields`` into plain attributes and references to known entities.

    A field is an association when its resolved type is exactly one of
    ``known_names``. Referenced names are returned in field order and are not
    deduplicated.
    """
    attributes: List[Field] = []
    associations: List[str] = []
    association_fields: List[Field] = []
    for field in fields:
        resolved = resolve(field.type)
        if resolved in known_names:
            associations.append(resolved)
            association_fields.append(field)
        else:
            attributes.append(field)
    return FieldClassification(
        tuple(attributes), tuple(associations), tuple(association_fields)
    )


EntitiesAndAssociations = Tuple[List[Entity], List[AssociationDependency]]


class AssociationSource(ABC):
    """Decide which associations a render shows and which fields stay visible."""

    name = ""

    @abstractmethod
    def collect(
        self,
        entities: Sequence[Entity],
        associations: Sequence[AssociationDependency],
    ) -> EntitiesAndAssociations:
        ...


class DeclaredAssociations(AssociationSource):
    name = "declared"

    def collect(self, entities, associations):
        return list(entities), list(associations)


class InferredAssociations(AssociationSource):
    """Derive associations from field types, ignoring any declared ones.

    Each association field is removed from its entity and turned into an edge
    from the owner (ONE, not navigable) to the referenced entity (MANY when
    the field type is generic, ONE otherwise, navigable) labeled with the
    field name.
    """

    name = "inferred"

    def collect(self, entities, associations):
        by_name = {entity.name: entity for entity in entities}
        rendered: List[Entity] = []
        inferred: List[AssociationDependency] = []
        for entity in entities:
            classification = classify_fields(entity.fields, by_name.keys())
            rendered.append(replace(entity, fields=classification.attributes))
            for target, field in zip(
                classification.associations, classification.association_fields
            ):
                inferred.append(_association_for(entity, by_name[target], field))
        return rendered, inferred


def _association_for(owner: Entity, target: Entity, field: Field) -> AssociationDependency:
    cardinality = Cardinality.MANY if is_generic(field.type) else Cardinality.ONE
    return AssociationDependency(
        left=Side(owner, Cardinality.ONE, navigability=False),
        right=Side(target, cardinality, navigability=True, label=field.name),
    )


ASSOCIATION_SOURCES = {
    DeclaredAssociations.name: DeclaredAssociations,
    InferredAssociations.name: InferredAssociations,
}
