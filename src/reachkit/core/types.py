"""
Core type definitions and protocols.

This module provides the capability protocols the traversal queries rely on
and the type aliases shared by the traversal engine.
"""

from typing import AbstractSet, Callable, Hashable, Iterable, Mapping, Protocol, Sequence, TypeVar

N = TypeVar("N")


class VertexProtocol(Protocol):
    """Protocol for nodes of an object graph."""

    @property
    def value(self):
        """Payload carried by the node."""
        ...

    @property
    def neighbors(self) -> Sequence["VertexProtocol"]:
        """Outgoing neighbors in insertion order."""
        ...


class ProfessionalProtocol(Protocol):
    """Protocol for members of a professional network."""

    @property
    def company(self) -> str:
        """Identifier of the employer."""
        ...

    @property
    def connections(self) -> Sequence["ProfessionalProtocol"]:
        """Acquaintances in insertion order."""
        ...


# Type alias for keyed graphs: integer key to the set of neighbor keys
AdjacencyMap = Mapping[int, AbstractSet[int]]

# Type alias for neighbor accessors used by the walker
NeighborFunc = Callable[[N], Iterable[N]]

# Type alias for predicates deciding whether a neighbor may be entered
AdmitFunc = Callable[[N], bool]

# Type alias for functions mapping a node to its visited-set identity
KeyFunc = Callable[[N], Hashable]
