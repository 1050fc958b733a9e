"""In-memory task registry with owner-only completion."""

__version__ = "0.1.0"
