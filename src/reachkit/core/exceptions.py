"""
Custom exceptions for the reachability toolkit.

Traversal queries never raise for in-band conditions such as an absent start
vertex or a key without adjacency entry; those produce an identity result.
The exceptions below cover the surfaces around the core: loading graph
documents, configuring traversals and driving queries from the command line.
"""


class ValidationError(Exception):
    """
    Raised when a graph document fails validation.

    Examples:
        * Document does not match its JSON schema
        * Edge references an undeclared vertex name
        * Adjacency key is not an integer
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when a graph operation cannot be carried out.

    Examples:
        * Unknown query name
        * Query run against the wrong kind of graph document
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when traversal configuration is invalid.

    Examples:
        * Non-positive memory limit
        * Negative memory check interval
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Vertex name not declared in a document
        * Professional name not declared in a document
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a named node is not part of a loaded graph.

    This is a specialized version of ResourceNotFoundError for lookups of
    vertices, keys and professionals by the names used in graph documents.
    """
