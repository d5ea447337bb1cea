"""
Result Sink Adapters
"""

from .console_sink import ConsoleResultSink
from .memory_sink import InMemoryResultSink

__all__ = [
    "ConsoleResultSink",
    "InMemoryResultSink",
]
