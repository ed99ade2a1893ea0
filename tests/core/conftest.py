"""Shared test fixtures."""

from typing import Dict, Set

import pytest

from reachkit.core.models import Professional, Vertex


@pytest.fixture
def odd_graph() -> Dict[int, Vertex[int]]:
    """Fixture providing the graph 5->4, 5->8, 8->7, 8->9, 1->7 keyed by value."""
    vertices = {value: Vertex(value) for value in (1, 4, 5, 7, 8, 9)}
    vertices[5].connect(vertices[4], vertices[8])
    vertices[8].connect(vertices[7], vertices[9])
    vertices[1].connect(vertices[7])
    return vertices


@pytest.fixture
def duplicate_value_graph() -> Dict[str, Vertex[int]]:
    """Fixture providing 5->8a, 5->8b, 8a->2, 8b->2, 4->2 with two distinct 8-valued vertices."""
    vertices = {
        "five": Vertex(5),
        "eight_a": Vertex(8),
        "eight_b": Vertex(8),
        "two": Vertex(2),
        "four": Vertex(4),
    }
    vertices["five"].connect(vertices["eight_a"], vertices["eight_b"])
    vertices["eight_a"].connect(vertices["two"])
    vertices["eight_b"].connect(vertices["two"])
    vertices["four"].connect(vertices["two"])
    return vertices


@pytest.fixture
def keyed_graph() -> Dict[int, Set[int]]:
    """Fixture providing a keyed graph with a cycle, a negative key and an undeclared key."""
    return {
        1: {2, 3},
        2: {4},
        3: {4, -5},
        4: {1},
        -5: {6},
        6: set(),
        7: {8},
    }


@pytest.fixture
def company_chain() -> Dict[str, Professional]:
    """Fixture providing A(X) -> B(Y) -> C(Z)."""
    people = {"A": Professional("X"), "B": Professional("Y"), "C": Professional("Z")}
    people["A"].connect(people["B"])
    people["B"].connect(people["C"])
    return people
