from __future__ import annotations

"""
Infrastructure layer.

Concrete adapters behind the application ports: configuration, key-value media,
the durable favorites store, and logging helpers.
"""

__all__ = [
    "bootstrap",
    "config",
    "integrations",
    "persistence",
    "utils",
]
