"""
This module contains the exceptions raised by the pistonmeta framework.
"""

from typing import Optional


class PistonMetaException(Exception):
    """
    Exceptions raised by the pistonmeta framework.
    """

    def __init__(self, message: str):
        """
        Initializes the exception with the given message.
        """
        super().__init__(message)


class FetchError(PistonMetaException):
    """
    Raised when a manifest or artifact cannot be retrieved: the request failed,
    the server answered with a non-success status, or the body could not be
    decoded.
    """

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class ConfigError(PistonMetaException):
    """Raised when the configuration cannot be read or holds invalid values."""
