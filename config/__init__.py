"""
Configuration package for Product Registry Service.
"""
from .settings import Settings

__all__ = [
    "Settings",
]
