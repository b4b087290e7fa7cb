"""
Custom exceptions for the route graph system.

This module defines the hierarchy of custom exceptions used throughout the package
to report error conditions in a structured way. Structural errors (unknown nodes,
invalid weights, unsupported operations) are raised at the graph store or at the
query-entry boundary, before any search begins. An unreachable destination is not
an error: searches return an empty result instead.
"""


class ValidationError(Exception):
    """
    Raised when data validation fails.

    Examples:
        * Empty or non-string node identifiers
        * Graph definitions that do not match the expected schema
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class InvalidWeightError(ValidationError):
    """
    Raised when an edge weight is rejected at insertion time.

    Weights must be non-negative integers.
    """


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    Examples:
        * A search exceeding its configured deadline
        * Invalid query arguments detected after node lookup
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class SearchTimeoutError(GraphOperationError):
    """Raised when a path search runs past its configured timeout."""


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Node not found
        * Edge not found
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a query references a node that was never added to the graph.

    A node exists once it has appeared as an edge endpoint or as the key of a
    place of interest.
    """


class EdgeNotFoundError(ResourceNotFoundError):
    """Raised when no edge connects the two requested nodes."""


class InvalidOperationError(Exception):
    """
    Raised when an operation is invalid in the current context.

    Examples:
        * Unsupported operations
        * Context-specific violations
    """


class NotSupportedError(InvalidOperationError):
    """
    Raised for capabilities the graph store deliberately does not provide.

    Edge-weight updates and node removal always raise this error so the
    capability surface stays explicit instead of silently doing nothing.
    """
