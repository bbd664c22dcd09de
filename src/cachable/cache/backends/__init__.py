"""
cachable — Store Backends

Exports available store implementations.

The redis store is lazy-loaded via registry.py to avoid import overhead.
"""

from .memory import MemoryStore

__all__ = [
    "MemoryStore",
]
