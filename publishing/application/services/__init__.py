"""
Application Services Package
"""

from .showcase_service import ShowcaseService, WalkthroughResult

__all__ = [
    "ShowcaseService",
    "WalkthroughResult",
]
