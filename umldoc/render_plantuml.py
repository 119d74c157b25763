"""PlantUML class diagram renderer."""
from __future__ import annotations

from typing import List

from .model import AssociationDependency, Cardinality, Entity
from .modifiers import PLANTUML_MODIFIERS, decorate
from .render_base import DiagramGenerator, join_lines

MULTIPLICITIES = {
    Cardinality.ONE: "1",
    Cardinality.MANY: "*",
    Cardinality.ZERO_OR_ONE: "0..1",
    Cardinality.ZERO_OR_MANY: "0..*",
}


class PlantUMLGenerator(DiagramGenerator):
    notation = "plantuml"
    fence = "plantuml"

    def render_header(self) -> str:
        return join_lines(["@startuml", "top to bottom direction", ""])

    def render_entity(self, entity: Entity) -> str:
        header = f"class {entity.name}"
        stereotype = entity.stereotype.strip("<>")
        if stereotype:
            header += f" <<{stereotype}>>"
        lines: List[str] = [header + " {"]
        for field in entity.fields:
            lines.append("  " + decorate(field, PLANTUML_MODIFIERS))
        lines.append("}")
        return join_lines(lines)

    def render_association(self, association: AssociationDependency) -> str:
        left, right = association.left, association.right
        line = (
            f'{left.entity.name} "{MULTIPLICITIES[left.cardinality]}" '
            f"{self.arrow(left, right)} "
            f'"{MULTIPLICITIES[right.cardinality]}" {right.entity.name}'
        )
        label = association.label
        if label:
            line += f" : {label}"
        return join_lines([line])

    def render_footer(self) -> str:
        return join_lines(["", "@enduml"])
