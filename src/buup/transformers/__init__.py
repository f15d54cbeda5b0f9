"""
Transformer implementations.

Each family lives in its own module; every class is a ``Transformer`` subclass
that the registry instantiates once.
"""

from __future__ import annotations

from buup.transformers.base import Transformer

__all__ = ["Transformer"]
