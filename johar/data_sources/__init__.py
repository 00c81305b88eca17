"""
Data Sources Layer - static reference data
"""

from .seed_loader import SeedLoader, get_seed_loader

__all__ = [
    "SeedLoader",
    "get_seed_loader",
]
