"""
Interfaces Layer - Abstract Protocols for Containers.

This package defines the abstract interfaces (using typing.Protocol) the
containers conform to. Callers that only need to query a container should
depend on these protocols, not on a concrete variant.

Protocols:
    - Enumerable: Step-by-step cursor contract
    - QueryableCollection: Shared query/aggregation surface

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: cursor and query surface are separate
    - All methods have clear contracts in docstrings
"""

from querykit.interfaces.collection import QueryableCollection
from querykit.interfaces.enumerable import Enumerable

__all__ = ["Enumerable", "QueryableCollection"]
