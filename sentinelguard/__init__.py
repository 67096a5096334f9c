"""Domain models, sort and pagination types, and environment configuration for an access-control service."""

__version__ = "0.1.0"