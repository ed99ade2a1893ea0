"""Core reachability functionality."""

from .config import TraversalConfig
from .exceptions import (
    ConfigurationError,
    GraphOperationError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from .models import Professional, Vertex
from .serialization import GraphLoader, parse_json_input
from .traversal import (
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
from .types import AdjacencyMap, ProfessionalProtocol, VertexProtocol

__all__ = [
    "AdjacencyMap",
    "ConfigurationError",
    "DepthFirstWalker",
    "GraphLoader",
    "GraphOperationError",
    "NodeNotFoundError",
    "Professional",
    "ProfessionalProtocol",
    "ResourceNotFoundError",
    "TraversalConfig",
    "ValidationError",
    "Vertex",
    "VertexProtocol",
    "VisitedSet",
    "has_extended_connection_at_company",
    "iter_reachable",
    "odd_vertices",
    "parse_json_input",
    "positive_path_exists",
    "reachable",
    "sorted_reachable",
    "sorted_reachable_keys",
    "two_way",
]
