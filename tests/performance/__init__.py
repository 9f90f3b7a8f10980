"""
Performance Tests.

Sanity bounds for the O(n) operators:
    - 10_000 element traversals well under a second
    - 1_000 key map built by linear scan within a few seconds
"""
