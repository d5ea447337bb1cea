"""
Configuration Package

Dependency injection container, environment settings and suite loading.
"""

from .container import Container
from .settings import Settings
from .loader import load_scenarios

__all__ = [
    "Container",
    "Settings",
    "load_scenarios",
]
