"""
Utility modules for the resume screener.
"""

from .config import Config

__all__ = [
    "Config",
]
