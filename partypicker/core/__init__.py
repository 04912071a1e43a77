"""
Core module - Protocols for injected capabilities.
"""
from .protocols import RandomSource, TrackSource

__all__ = [
    "RandomSource",
    "TrackSource",
]
