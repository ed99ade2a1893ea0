"""
Vertex model for object graphs.

A vertex owns its payload and holds plain references to the vertices it
points at. Graphs built from vertices may contain cycles and parallel edges.
"""

from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Vertex(Generic[T]):
    """
    Node of a directed object graph.

    Equality and hashing are by identity: two vertices holding the same value
    are still distinct nodes.

    Attributes:
        value (T): Payload carried by the vertex
        neighbors (List[Vertex[T]]): Outgoing edges in insertion order,
            duplicates allowed
    """

    value: T
    neighbors: List["Vertex[T]"] = field(default_factory=list)

    def connect(self, *others: "Vertex[T]") -> "Vertex[T]":
        """Append outgoing edges to the given vertices and return self."""
        self.neighbors.extend(others)
        return self

    def __repr__(self) -> str:
        return f"Vertex(value={self.value!r}, out_degree={len(self.neighbors)})"
