"""
Core domain models package for the reachability toolkit.

This package provides the node shapes traversed by the query algorithms:
generic value-carrying vertices and professionals linked by acquaintance.
"""

from .professional import Professional
from .vertex import Vertex

__all__ = [
    "Professional",
    "Vertex",
]
