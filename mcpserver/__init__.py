"""Model Context Protocol building blocks: protocol types, errors, hooks, URI templates and pagination."""

__version__ = "0.1.0"

__all__ = ["errors", "hooks", "pagination", "protocol", "uritemplate"]