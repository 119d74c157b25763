"""Exceptions raised while loading or rendering a class model."""
from __future__ import annotations


class UmlDocError(RuntimeError):
    """Base class for every error surfaced by umldoc."""


class StructuralInputError(UmlDocError, ValueError):
    """Raised when the supplied model cannot be rendered as given."""


class UnresolvedAssociationReference(UmlDocError):
    """Raised by strict generators when an association names an unknown entity."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Association references unknown entity '{name}'")
        self.name = name


class UnknownNotationError(UmlDocError):
    """Raised when no generator is registered for a notation."""


class ModelLoadError(UmlDocError):
    """Raised when the model file cannot be read or fails validation."""
