"""Lookup table from notation identifier to generator class."""
from __future__ import annotations

from typing import Dict, Type

from .errors import UnknownNotationError
from .render_base import DiagramGenerator
from .render_mermaid import MermaidGenerator
from .render_plantuml import PlantUMLGenerator

GENERATORS: Dict[str, Type[DiagramGenerator]] = {
    MermaidGenerator.notation: MermaidGenerator,
    PlantUMLGenerator.notation: PlantUMLGenerator,
}

DEFAULT_NOTATION = MermaidGenerator.notation


def generator_class(notation: str) -> Type[DiagramGenerator]:
    try:
        return GENERATORS[notation.lower()]
    except KeyError:
        known = ", ".join(sorted(GENERATORS))
        raise UnknownNotationError(
            f"Unsupported notation '{notation}'. Expected one of: {known}."
        ) from None


def get_generator(notation: str, *, strict: bool = False) -> DiagramGenerator:
    return generator_class(notation)(strict=strict)
