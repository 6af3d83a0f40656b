"""In-memory persistence infrastructure.

This module provides:
- InMemoryDatabase: process-local tables with all-or-nothing transactions
- Repository implementations over that database
"""

from src.infrastructure.persistence.database import InMemoryDatabase

__all__ = [
    "InMemoryDatabase",
]
