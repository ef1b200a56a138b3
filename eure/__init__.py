"""Core data model for the EURE data format: identifiers, values, documents, extensions and spans."""

__version__ = "0.1.0"

__all__ = ["document", "extensions", "identifier", "span", "value"]