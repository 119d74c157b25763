"""Encode field modifiers into notation specific decorations."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from .model import Field, Modifier

# highest priority first
VISIBILITY_PRIORITY: Tuple[Modifier, ...] = (
    Modifier.PUBLIC,
    Modifier.PROTECTED,
    Modifier.PACKAGE,
    Modifier.PRIVATE,
)

STORAGE_ORDER: Tuple[Modifier, ...] = (Modifier.STATIC, Modifier.FINAL)


@dataclass(frozen=True)
class ModifierNotation:
    visibility: Dict[Modifier, str]
    storage: Dict[Modifier, str]


MERMAID_MODIFIERS = ModifierNotation(
    visibility={
        Modifier.PUBLIC: "+",
        Modifier.PRIVATE: "-",
        Modifier.PROTECTED: "#",
        Modifier.PACKAGE: "~",
    },
    storage={
        Modifier.STATIC: "$",
        Modifier.FINAL: "*",
    },
)

PLANTUML_MODIFIERS = ModifierNotation(
    visibility=MERMAID_MODIFIERS.visibility,
    storage={
        Modifier.STATIC: " {static}",
        Modifier.FINAL: " {readOnly}",
    },
)


def encode(
    modifiers: Iterable[Modifier], notation: ModifierNotation = MERMAID_MODIFIERS
) -> Tuple[str, str]:
    present = frozenset(modifiers)
    prefix = next(
        (notation.visibility[m] for m in VISIBILITY_PRIORITY if m in present), ""
    )
    suffix = "".join(notation.storage[m] for m in STORAGE_ORDER if m in present)
    return prefix, suffix


def decorate(field: Field, notation: ModifierNotation = MERMAID_MODIFIERS) -> str:
    prefix, suffix = encode(field.modifiers, notation)
    return f"{prefix}{field.name}{suffix}"
