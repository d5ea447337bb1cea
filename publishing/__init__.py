"""
Publishing

Publisher domain model with a collection lookup benchmark
(linear search vs. hash lookup).
"""

__version__ = "1.0.0"
