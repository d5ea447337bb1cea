"""
Application Ports Package

Interfaces defining boundaries between application and adapters layers.
"""

from .result_sink import IResultSink

__all__ = [
    "IResultSink",
]
