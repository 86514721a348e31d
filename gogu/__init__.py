"""Collection helpers, function utilities and generic data structures."""

__version__ = "0.1.0"