"""YAML loader that builds the class model."""
from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List

import yaml
from jsonschema import Draft202012Validator

from .errors import ModelLoadError
from .model import AssociationDependency, Cardinality, Entity, Field, Model, Modifier, Side

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema" / "model.schema.yaml"


class ModelLoader:
    """Load YAML files into :class:`Model`."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> Model:
        data = self._read_yaml()
        validate_against_schema(data)
        model = Model(
            entities=tuple(self._parse_entity(item) for item in data.get("entities", []))
        )
        index = model.entity_by_name()
        associations = [
            self._parse_association(item, index) for item in data.get("associations", []) or []
        ]
        logger.debug(
            "Loaded %d entities and %d associations from %s",
            len(model.entities),
            len(associations),
            self.path,
        )
        return replace(model, associations=tuple(associations))

    def _read_yaml(self) -> Dict[str, Any]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as exc:
            raise ModelLoadError(f"Cannot read model file {self.path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ModelLoadError(f"Failed to parse YAML: {exc}") from exc
        if data is None:
            raise ModelLoadError("Empty YAML file provided.")
        if not isinstance(data, dict):
            raise ModelLoadError("Top level YAML structure must be a mapping/object.")
        return data

    def _parse_entity(self, item: Dict[str, Any]) -> Entity:
        return Entity(
            name=item["name"],
            stereotype=item.get("stereotype", ""),
            fields=tuple(self._parse_field(f) for f in item.get("fields", []) or []),
        )

    def _parse_field(self, item: Dict[str, Any]) -> Field:
        return Field(
            name=item["name"],
            type=item["type"],
            modifiers=frozenset(Modifier.parse(m) for m in item.get("modifiers", []) or []),
        )

    def _parse_association(
        self, item: Dict[str, Any], index: Dict[str, Entity]
    ) -> AssociationDependency:
        return AssociationDependency(
            left=self._parse_side(item["left"], index),
            right=self._parse_side(item["right"], index),
        )

    def _parse_side(self, item: Dict[str, Any], index: Dict[str, Entity]) -> Side:
        name = item["entity"]
        entity = index.get(name)
        if entity is None:
            logger.warning("Association side references unknown entity '%s'", name)
            entity = Entity(name)
        return Side(
            entity=entity,
            cardinality=Cardinality[item.get("cardinality", Cardinality.ONE.name)],
            navigability=item.get("navigability", False),
            label=item.get("label"),
        )


def validate_against_schema(document: Dict[str, Any]) -> None:
    schema = yaml.safe_load(SCHEMA_PATH.read_text(encoding="utf-8"))
    validator = Draft202012Validator(schema)
    errors = sorted(
        validator.iter_errors(document),
        key=lambda e: [str(segment) for segment in e.absolute_path],
    )
    if not errors:
        return

    details: List[str] = []
    for error in errors:
        path = "$" + "".join(f"/{segment}" for segment in error.absolute_path)
        details.append(f"- {path}: {error.message}")
    raise ModelLoadError("Schema validation failed:\n" + "\n".join(details))
