"""
Depth-first traversal engine shared by all reachability queries.

The walker explores a graph from a start node and yields every distinct
reachable node exactly once, in depth-first preorder. Nodes are marked in a
visited-set guard before their neighbors are explored, which both terminates
the walk on cyclic graphs and suppresses duplicate processing of nodes
reached along several paths.

The walk runs over an explicit stack of neighbor iterators instead of
recursion, so deep graphs do not hit the interpreter recursion limit. The
order in which nodes are produced is identical to the recursive formulation:
a node is produced, then each of its neighbors is fully explored in the order
the neighbor collection lists them.

Queries that only need to know whether some node satisfies a predicate stop
consuming the generator at the first match; siblings not yet explored are
never visited.
"""

import logging
import operator
from typing import Callable, Generic, Hashable, Iterator, List, Optional, Set, TypeVar

from ..config import DEFAULT_CONFIG, TraversalConfig
from ..types import AdmitFunc, KeyFunc, NeighborFunc
from ...utils.memory import MemoryManager

logger = logging.getLogger(__name__)

N = TypeVar("N")
R = TypeVar("R")
V = TypeVar("V")


class VisitedSet(Generic[N]):
    """
    Set of node identities already visited by one traversal.

    Args:
        key: Maps a node to the identity stored in the set. Defaults to ``id``
            so that object graphs are tracked by reference identity.
    """

    def __init__(self, key: KeyFunc = id):
        self._key = key
        self._seen: Set[Hashable] = set()

    def __contains__(self, node: N) -> bool:
        return self._key(node) in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def add(self, node: N) -> bool:
        """Mark node as visited. Returns False if it was already visited."""
        identity = self._key(node)
        if identity in self._seen:
            return False
        self._seen.add(identity)
        return True


class DepthFirstWalker(Generic[N]):
    """
    Generic depth-first walker.

    Attributes:
        neighbors: Accessor returning the ordered outgoing neighbors of a node
        admit: Optional predicate a neighbor must satisfy to be entered
        key: Identity function used by the visited-set guard
        config: Traversal settings
    """

    def __init__(
        self,
        neighbors: NeighborFunc,
        admit: Optional[AdmitFunc] = None,
        key: KeyFunc = id,
        config: Optional[TraversalConfig] = None,
    ):
        self.neighbors = neighbors
        self.admit = admit
        self.key = key
        self.config = config or DEFAULT_CONFIG

    def walk(self, start: Optional[N]) -> Iterator[N]:
        """
        Traverse the graph in depth-first preorder.

        Args:
            start: Node to start from. None yields nothing.

        Yields:
            Every distinct node reachable from start, start first
        """
        if start is None:
            return

        visited: VisitedSet[N] = VisitedSet(self.key)
        memory = (
            MemoryManager(self.config.max_memory_mb, self.config.memory_check_interval)
            if self.config.max_memory_mb
            else None
        )

        visited.add(start)
        try:
            yield self._enter(start, memory)

            stack = [iter(self.neighbors(start))]
            while stack:
                try:
                    neighbor = next(stack[-1])
                except StopIteration:
                    stack.pop()
                    continue

                if neighbor is None:
                    continue
                if self.admit is not None and not self.admit(neighbor):
                    continue
                if not visited.add(neighbor):
                    continue

                yield self._enter(neighbor, memory)
                stack.append(iter(self.neighbors(neighbor)))
        finally:
            logger.debug("Traversal from %r visited %d nodes", start, len(visited))

    def _enter(self, node: N, memory: Optional[MemoryManager]) -> N:
        if memory is not None:
            memory.check_memory()
        if self.config.trace:
            logger.debug("Visiting %r", node)
        return node

    def fold(
        self,
        start: Optional[N],
        visit: Callable[[N], V],
        initial: R,
        combine: Callable[[R, V], R],
    ) -> R:
        """
        Accumulate a value over every reachable node.

        Args:
            start: Node to start from. None returns initial unchanged.
            visit: Per-node action producing the node's contribution
            initial: Identity element of the accumulation
            combine: Merges the running result with one contribution

        Returns:
            The accumulated result, combined in visit order
        """
        result = initial
        for node in self.walk(start):
            result = combine(result, visit(node))
        return result

    def count(self, start: Optional[N], predicate: Callable[[N], bool]) -> int:
        """Count reachable nodes satisfying predicate."""
        return self.fold(start, lambda node: 1 if predicate(node) else 0, 0, operator.add)

    def collect(self, start: Optional[N], extract: Callable[[N], R]) -> List[R]:
        """Collect one extracted item per reachable node, in visit order."""

        def append(items: List[R], item: R) -> List[R]:
            items.append(item)
            return items

        return self.fold(start, extract, [], append)

    def search(self, start: Optional[N], predicate: Callable[[N], bool]) -> bool:
        """Return True as soon as a reachable node satisfies predicate."""
        return any(predicate(node) for node in self.walk(start))


def iter_reachable(
    start: Optional[N],
    neighbors: NeighborFunc,
    *,
    admit: Optional[AdmitFunc] = None,
    key: KeyFunc = id,
    config: Optional[TraversalConfig] = None,
) -> Iterator[N]:
    """Generate all nodes reachable from start in depth-first preorder."""
    return DepthFirstWalker(neighbors, admit=admit, key=key, config=config).walk(start)


def reachable(
    start: Optional[N],
    target: Optional[N],
    neighbors: NeighborFunc,
    *,
    admit: Optional[AdmitFunc] = None,
    key: KeyFunc = id,
    config: Optional[TraversalConfig] = None,
) -> bool:
    """
    Can we get from start to target?

    Nodes are compared through ``key``: by reference identity for object
    graphs, by value for keyed graphs when ``key`` is the identity function.
    Every node is reachable from itself.
    """
    if start is None or target is None:
        return False
    target_key = key(target)
    walker = DepthFirstWalker(neighbors, admit=admit, key=key, config=config)
    return walker.search(start, lambda node: key(node) == target_key)
