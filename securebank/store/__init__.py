"""In-memory stores for account records."""

from securebank.store.registry import AccountRegistry

__all__ = ["AccountRegistry"]
