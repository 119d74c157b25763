"""Render class models as Mermaid or PlantUML class diagrams."""

from importlib.metadata import version, PackageNotFoundError

from .classifier import DeclaredAssociations, InferredAssociations, classify_fields
from .errors import StructuralInputError, UmlDocError, UnresolvedAssociationReference
from .model import AssociationDependency, Cardinality, Entity, Field, Modifier, Side
from .modifiers import encode
from .registry import GENERATORS, get_generator
from .resolver import resolve

try:
    __version__ = version("umldoc")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "AssociationDependency",
    "Cardinality",
    "DeclaredAssociations",
    "Entity",
    "Field",
    "GENERATORS",
    "InferredAssociations",
    "Modifier",
    "Side",
    "StructuralInputError",
    "UmlDocError",
    "UnresolvedAssociationReference",
    "__version__",
    "classify_fields",
    "encode",
    "get_generator",
    "resolve",
]
