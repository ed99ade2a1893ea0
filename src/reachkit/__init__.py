"""
Reachkit - Graph Reachability Toolkit

This package answers connectivity and aggregation questions over directed,
possibly cyclic graphs. It includes:

- A depth-first traversal engine with a visited-set guard
- Reachability queries over object graphs, keyed graphs and professional networks
- Loading of graph documents validated with JSON schemas
- A command-line interface for running queries against documents
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Reachkit requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.config import TraversalConfig
from .core.models import Professional, Vertex
from .core.serialization import GraphLoader
from .core.traversal import (
    DepthFirstWalker,
    VisitedSet,
    has_extended_connection_at_company,
    iter_reachable,
    odd_vertices,
    positive_path_exists,
    reachable,
    sorted_reachable,
    sorted_reachable_keys,
    two_way,
)

__all__ = [
    "DepthFirstWalker",
    "GraphLoader",
    "Professional",
    "TraversalConfig",
    "Vertex",
    "VisitedSet",
    "has_extended_connection_at_company",
    "iter_reachable",
    "odd_vertices",
    "positive_path_exists",
    "reachable",
    "sorted_reachable",
    "sorted_reachable_keys",
    "two_way",
]
