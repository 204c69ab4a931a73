"""User account lifecycle and access-control API."""

__version__ = "0.1.0"
