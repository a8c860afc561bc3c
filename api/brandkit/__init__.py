"""Brand Kit Generator API."""

__version__ = "0.2.0"
