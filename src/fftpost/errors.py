"""
Exceptions raised by fftpost.
"""


class InvalidInputError(ValueError):
    """Raised when a buffer or parameter violates an operation's contract."""
