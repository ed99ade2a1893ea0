"""
Schema validation for graph documents.

Graph documents are plain JSON objects describing one of the three graph
shapes understood by the toolkit. Each kind has a JSON schema; documents are
checked against it before any graph structure is built.
"""

from typing import Any, Dict

from jsonschema import Draft7Validator

from .base import ValidationResult

_NAME_PAIR = {
    "type": "array",
    "items": {"type": "string"},
    "minItems": 2,
    "maxItems": 2,
}

OBJECT_GRAPH_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "vertices": {
            "type": "object",
            "additionalProperties": {"type": "integer"},
        },
        "edges": {"type": "array", "items": _NAME_PAIR},
    },
    "required": ["vertices"],
    "additionalProperties": False,
}

KEYED_GRAPH_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "adjacency": {
            "type": "object",
            "propertyNames": {"pattern": "^-?[0-9]+$"},
            "additionalProperties": {
                "type": "array",
                "items": {"type": "integer"},
                "uniqueItems": True,
            },
        },
    },
    "required": ["adjacency"],
    "additionalProperties": False,
}

NETWORK_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "professionals": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
        "connections": {"type": "array", "items": _NAME_PAIR},
        "mutual": {"type": "boolean"},
    },
    "required": ["professionals"],
    "additionalProperties": False,
}

DOCUMENT_SCHEMAS: Dict[str, Dict[str, Any]] = {
    "object": OBJECT_GRAPH_SCHEMA,
    "keyed": KEYED_GRAPH_SCHEMA,
    "network": NETWORK_SCHEMA,
}


class SchemaValidator:
    """
    JSON Schema-based validator for graph documents.

    Attributes:
        schemas (Dict[str, Dict[str, Any]]): Schemas keyed by document kind
    """

    def __init__(self, schemas: Dict[str, Dict[str, Any]] = DOCUMENT_SCHEMAS):
        self.schemas = dict(schemas)

    def register_schema(self, kind: str, schema: Dict[str, Any]) -> None:
        """Register or replace the schema used for a document kind."""
        Draft7Validator.check_schema(schema)
        self.schemas[kind] = schema

    def validate(self, kind: str, document: Any) -> ValidationResult:
        """
        Validate a document against the schema registered for its kind.

        Args:
            kind: Document kind ("object", "keyed" or "network")
            document: Decoded JSON document

        Returns:
            ValidationResult listing every schema violation found
        """
        schema = self.schemas.get(kind)
        if schema is None:
            return ValidationResult(
                is_valid=False,
                errors=[f"No schema registered for document kind: {kind}"],
                context={"kind": kind},
            )

        validator = Draft7Validator(schema)
        found = sorted(
            validator.iter_errors(document),
            key=lambda error: [str(part) for part in error.absolute_path],
        )
        errors = [
            f"{'/'.join(str(part) for part in error.absolute_path) or '<root>'}: {error.message}"
            for error in found
        ]
        return ValidationResult(is_valid=not errors, errors=errors, context={"kind": kind})
