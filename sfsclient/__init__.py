"""Content model, result codes, error helpers, logging and environment helpers for an SFS client."""

__version__ = "1.0.0"