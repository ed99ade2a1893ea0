"""Graph document loading.

This module builds the structures traversed by the queries from JSON
documents:
- object graphs of named integer vertices and directed edges
- keyed graphs given as an adjacency mapping
- professional networks of named people and their connections

Documents are validated against their JSON schema before anything is built.
"""

import json
import logging
import os
from typing import Any, Dict, Optional, Set

from ..utils.validation import SchemaValidator, ValidationResult
from .exceptions import ValidationError
from .models import Professional, Vertex

logger = logging.getLogger(__name__)


def parse_json_input(json_str: str) -> Any:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.
            Relative paths are resolved against the current directory.

    Returns:
        The decoded JSON value.

    Raises:
        ValidationError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@"):
        file_path = os.path.abspath(json_str[1:])
        if not os.path.exists(file_path):
            raise ValidationError(f"File not found: {file_path}")

        with open(file_path, "r") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ValidationError(f"Invalid JSON in {file_path}: {e}") from e

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON input: {e}") from e


class GraphLoader:
    """Builds graph structures from validated JSON documents."""

    def __init__(self, validator: Optional[SchemaValidator] = None):
        """Initialize loader.

        Args:
            validator: Schema validator to check documents with
        """
        self.validator = validator or SchemaValidator()

    def validate(self, kind: str, document: Any) -> ValidationResult:
        """Check a document against the schema of its kind without raising."""
        return self.validator.validate(kind, document)

    def _require_valid(self, kind: str, document: Any) -> None:
        result = self.validate(kind, document)
        if not result.is_valid:
            raise ValidationError(f"Invalid {kind} graph document: " + "; ".join(result.errors))

    def load_object_graph(self, document: Dict[str, Any]) -> Dict[str, Vertex[int]]:
        """Build an object graph.

        Document format::

            {"vertices": {"a": 5, "b": 4}, "edges": [["a", "b"]]}

        Edges are added in document order; repeated edges become parallel
        references.

        Returns:
            Vertices keyed by their document name

        Raises:
            ValidationError: If the document is malformed or an edge names an
                undeclared vertex
        """
        self._require_valid("object", document)

        vertices = {name: Vertex(value) for name, value in document["vertices"].items()}
        for source, target in document.get("edges", []):
            for name in (source, target):
                if name not in vertices:
                    raise ValidationError(
                        f"Edge {source}->{target} references unknown vertex '{name}'"
                    )
            vertices[source].connect(vertices[target])

        logger.debug("Loaded object graph with %d vertices", len(vertices))
        return vertices

    def load_keyed_graph(self, document: Dict[str, Any]) -> Dict[int, Set[int]]:
        """Build a keyed graph.

        Document format::

            {"adjacency": {"1": [2, 3], "2": []}}

        JSON object keys are strings; they are converted to integers.
        Neighbor keys need not be declared themselves.

        Returns:
            Mapping from key to the set of its neighbor keys
        """
        self._require_valid("keyed", document)

        graph: Dict[int, Set[int]] = {}
        for key, neighbors in document["adjacency"].items():
            node = int(key)
            if node in graph:
                raise ValidationError(f"Duplicate adjacency key: {node}")
            graph[node] = set(neighbors)

        logger.debug("Loaded keyed graph with %d keys", len(graph))
        return graph

    def load_network(self, document: Dict[str, Any]) -> Dict[str, Professional]:
        """Build a professional network.

        Document format::

            {"professionals": {"ann": "X", "bob": "Y"},
             "connections": [["ann", "bob"]],
             "mutual": true}

        With ``mutual`` (the default) every connection is recorded in both
        directions, otherwise only from the first to the second person.

        Returns:
            Professionals keyed by their document name
        """
        self._require_valid("network", document)

        people = {
            name: Professional(company) for name, company in document["professionals"].items()
        }
        mutual = document.get("mutual", True)
        for first, second in document.get("connections", []):
            for name in (first, second):
                if name not in people:
                    raise ValidationError(
                        f"Connection {first}-{second} references unknown professional '{name}'"
                    )
            people[first].connect(people[second])
            if mutual:
                people[second].connect(people[first])

        logger.debug("Loaded network with %d professionals", len(people))
        return people
