"""
Domain Exceptions
"""


class InvalidArgumentError(ValueError):
    """Raised when a value violates a domain invariant (e.g. a future registration year)."""
    pass
