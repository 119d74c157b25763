"""Shared rendering loop for class diagram notations."""
from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import List, Sequence, TextIO

from .errors import UnresolvedAssociationReference
from .model import AssociationDependency, Entity, Side


class DiagramGenerator(ABC):
    """Write entities and associations to a text sink in one notation.

    Subclasses provide the notation specific pieces. Association lines are
    rendered before anything is written so that invalid input never leaves a
    half written diagram behind.
    """

    notation = ""
    fence = ""

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict

    def generate(
        self,
        sink: TextIO,
        entities: Sequence[Entity],
        associations: Sequence[AssociationDependency],
    ) -> None:
        if self.strict:
            self._check_references(entities, associations)
        edges = [self.render_association(association) for association in associations]

        sink.write(self.render_header())
        for entity in entities:
            sink.write(self.render_entity(entity))
        for edge in edges:
            sink.write(edge)
        sink.write(self.render_footer())

    def render(
        self,
        entities: Sequence[Entity],
        associations: Sequence[AssociationDependency],
    ) -> str:
        buffer = io.StringIO()
        self.generate(buffer, entities, associations)
        return buffer.getvalue()

    @abstractmethod
    def render_header(self) -> str:
        ...

    @abstractmethod
    def render_entity(self, entity: Entity) -> str:
        ...

    @abstractmethod
    def render_association(self, association: AssociationDependency) -> str:
        ...

    def render_footer(self) -> str:
        return ""

    def arrow(self, left: Side, right: Side) -> str:
        arrow = ""
        if left.navigability:
            arrow += "<"
        arrow += "--"
        if right.navigability:
            arrow += ">"
        return arrow

    def _check_references(
        self,
        entities: Sequence[Entity],
        associations: Sequence[AssociationDependency],
    ) -> None:
        known = {entity.name for entity in entities}
        for association in associations:
            for side in (association.left, association.right):
                if side.entity.name not in known:
                    raise UnresolvedAssociationReference(side.entity.name)


def join_lines(lines: List[str]) -> str:
    return "\n".join(lines) + "\n"
