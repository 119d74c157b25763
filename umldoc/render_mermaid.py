"""Mermaid classDiagram renderer."""
from __future__ import annotations

from .model import AssociationDependency, Entity
from .modifiers import MERMAID_MODIFIERS, decorate
from .render_base import DiagramGenerator, join_lines

INDENT = "    "
MEMBER_INDENT = INDENT + "  "


def stereotype_line(stereotype: str) -> str:
    if not stereotype or stereotype.startswith("<<"):
        return stereotype
    return f"<<{stereotype}>>"


class MermaidGenerator(DiagramGenerator):
    notation = "mermaid"
    fence = "mermaid"

    def render_header(self) -> str:
        return join_lines(["classDiagram", f"{INDENT}direction TB", ""])

    def render_entity(self, entity: Entity) -> str:
        fields = "\n".join(
            MEMBER_INDENT + decorate(field, MERMAID_MODIFIERS) for field in entity.fields
        )
        stereotype = stereotype_line(entity.stereotype)
        return join_lines(
            [
                f"{INDENT}class {entity.name} {{",
                f"{MEMBER_INDENT}{stereotype}" if stereotype else "",
                fields,
                f"{INDENT}}}",
            ]
        )

    def render_association(self, association: AssociationDependency) -> str:
        left, right = association.left, association.right
        tokens = [
            left.entity.name,
            left.cardinality.name,
            self.arrow(left, right),
            right.cardinality.name,
            right.entity.name,
        ]
        if association.label:
            tokens.append(association.label)
        return join_lines([INDENT + " ".join(tokens)])
