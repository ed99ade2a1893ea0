"""Depth-first traversal engine and the reachability queries built on it."""

from .base import DepthFirstWalker, VisitedSet, iter_reachable, reachable
from .queries import (
    has_extended_connection_at_company,
    odd_vertices,
    positive_path_exists,
    sorted_reachable,
    sorted_reachable_keys,
    two_way,
)

__all__ = [
    "DepthFirstWalker",
    "VisitedSet",
    "iter_reachable",
    "reachable",
    "has_extended_connection_at_company",
    "odd_vertices",
    "positive_path_exists",
    "sorted_reachable",
    "sorted_reachable_keys",
    "two_way",
]
