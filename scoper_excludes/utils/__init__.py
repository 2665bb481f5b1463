"""
Shared utilities for scoper-excludes.
"""

from .sorting import natural_sort_key, natural_sorted

__all__ = ['natural_sort_key', 'natural_sorted']
