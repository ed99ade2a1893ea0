"""
Professional model for acquaintance networks.

Structurally a vertex whose payload is the company a person works for.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(eq=False)
class Professional:
    """
    Person in a professional network.

    Attributes:
        company (str): Identifier of the employer
        connections (List[Professional]): Acquaintances in insertion order
    """

    company: str
    connections: List["Professional"] = field(default_factory=list)

    def __post_init__(self):
        """Validate the company identifier."""
        if not isinstance(self.company, str):
            raise TypeError("company must be a string")

    def connect(self, *others: "Professional") -> "Professional":
        """Append connections to the given professionals and return self."""
        self.connections.extend(others)
        return self

    def __repr__(self) -> str:
        return f"Professional(company={self.company!r}, connections={len(self.connections)})"
