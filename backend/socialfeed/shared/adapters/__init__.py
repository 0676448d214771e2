"""
Adapters Package

External resource integrations.

Contents:
=========
- storage_adapter: Post image files on local disk

Note: Database access is handled by shared/db/session.py using async SQLAlchemy.

Usage:
======
    from socialfeed.shared.adapters.storage_adapter import StorageAdapter
"""

from socialfeed.shared.adapters.storage_adapter import StorageAdapter

__all__ = [
    "StorageAdapter",
]
