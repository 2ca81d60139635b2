"""Building blocks: exact decimals, structured errors, boolean parsing and ordered collections."""

__version__ = "0.1.0"
__all__ = ["boolean", "collection", "decimals", "errors"]