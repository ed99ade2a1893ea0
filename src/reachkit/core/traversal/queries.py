"""
Reachability queries over object graphs, keyed graphs and professional networks.

Every query configures the shared depth-first walker with a neighbor accessor
and a per-node action. Absent starts and failed preconditions produce the
identity result of the query (0, an empty list or False) rather than an error.
"""

import logging
from typing import Any, List, Optional, Sequence

from ..config import TraversalConfig
from ..types import AdjacencyMap, ProfessionalProtocol, VertexProtocol
from .base import DepthFirstWalker, reachable

logger = logging.getLogger(__name__)


def _vertex_neighbors(vertex: VertexProtocol) -> Sequence[VertexProtocol]:
    return vertex.neighbors


def _connections(person: ProfessionalProtocol) -> Sequence[ProfessionalProtocol]:
    return person.connections


def _key_identity(key: int) -> int:
    return key


def _keyed_walker(graph: AdjacencyMap, config: Optional[TraversalConfig], admit=None):
    # Keys that only appear as neighbor values have no adjacency entry
    return DepthFirstWalker(
        lambda key: graph.get(key, ()), admit=admit, key=_key_identity, config=config
    )


def odd_vertices(
    starting: Optional[VertexProtocol], *, config: Optional[TraversalConfig] = None
) -> int:
    """
    Count vertices with odd values reachable from the starting vertex.

    The starting vertex is included. Each vertex is counted once no matter how
    many paths lead to it. Negative odd values count as odd.

    Example:
        5 -> 4, 5 -> 8, 8 -> 7, 8 -> 9, 1 -> 7

        Starting from 5 the reachable odd vertices are 5, 7 and 9, so the
        result is 3.

    Args:
        starting: Vertex to start from, may be None
        config: Optional traversal settings

    Returns:
        Number of reachable odd-valued vertices, 0 for a None start
    """
    walker = DepthFirstWalker(_vertex_neighbors, config=config)
    return walker.count(starting, lambda vertex: vertex.value % 2 != 0)


def sorted_reachable(
    starting: Optional[VertexProtocol], *, config: Optional[TraversalConfig] = None
) -> List[Any]:
    """
    Return the values of all vertices reachable from starting, sorted ascending.

    Distinct vertices sharing a value each contribute one entry.

    Example:
        5 -> 8a, 5 -> 8b, 8a -> 2, 8b -> 2, 4 -> 2

        Starting from 5 the result is [2, 5, 8, 8].
    """
    walker = DepthFirstWalker(_vertex_neighbors, config=config)
    return sorted(walker.collect(starting, lambda vertex: vertex.value))


def sorted_reachable_keys(
    graph: Optional[AdjacencyMap], starting: int, *, config: Optional[TraversalConfig] = None
) -> List[int]:
    """
    Return all keys reachable from starting in a keyed graph, sorted ascending.

    Args:
        graph: Mapping from key to the set of neighbor keys
        starting: Key to start from
        config: Optional traversal settings

    Returns:
        Sorted reachable keys, or an empty list if starting is not a key of graph
    """
    if graph is None or starting not in graph:
        logger.debug("Start key %r is not declared in the graph", starting)
        return []
    return sorted(_keyed_walker(graph, config).walk(starting))


def two_way(
    v1: Optional[VertexProtocol],
    v2: Optional[VertexProtocol],
    *,
    config: Optional[TraversalConfig] = None,
) -> bool:
    """
    Return True iff v2 is reachable from v1 and v1 is reachable from v2.

    A vertex is always reachable from itself, so two_way(v, v) is True. The
    two directions are searched with independent visited-sets.
    """
    if v1 is None or v2 is None:
        return False
    return reachable(v1, v2, _vertex_neighbors, config=config) and reachable(
        v2, v1, _vertex_neighbors, config=config
    )


def positive_path_exists(
    graph: Optional[AdjacencyMap],
    starting: int,
    ending: int,
    *,
    config: Optional[TraversalConfig] = None,
) -> bool:
    """
    Return whether a path from starting to ending runs through positive keys only.

    Both endpoints must be positive and declared keys of graph. Non-positive
    neighbors are never entered. A key is always reachable from itself.
    """
    if starting <= 0 or ending <= 0:
        logger.debug("Rejecting non-positive endpoints %r -> %r", starting, ending)
        return False
    if graph is None or starting not in graph or ending not in graph:
        logger.debug("Endpoints %r -> %r are not both declared keys", starting, ending)
        return False

    walker = _keyed_walker(graph, config, admit=lambda key: key > 0)
    return walker.search(starting, lambda key: key == ending)


def has_extended_connection_at_company(
    person: Optional[ProfessionalProtocol],
    company_name: str,
    *,
    config: Optional[TraversalConfig] = None,
) -> bool:
    """
    Return True if anyone in person's extended network works for company_name.

    The extended network includes the person themself and everyone reachable
    through any number of connections.
    """
    walker = DepthFirstWalker(_connections, config=config)
    return walker.search(person, lambda member: member.company == company_name)
