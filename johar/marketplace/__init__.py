"""
Marketplace - listings and simulated purchases
"""

from .market import MarketService

__all__ = [
    "MarketService",
]
