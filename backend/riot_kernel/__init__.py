"""
Riot match gateway package.

This package exposes the Riot match-v4 endpoints through a typed retrieval
pipeline with platform resolution and immutable query descriptors.
"""

from .core import get_global_settings

__version__ = "0.1.0"

__all__ = ["get_global_settings"]
