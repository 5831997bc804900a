"""
Core contracts shared by models and the persistence layer.
"""

from .interfaces import Transform, is_transform

__all__ = ["Transform", "is_transform"]
