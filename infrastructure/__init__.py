"""
Infrastructure Layer for the GymTrack Progression API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase and in-memory history stores
- catalog_repository: Rep ranges from the static exercise dictionary
"""

# Re-export repositories for convenient access
from infrastructure.db import (
    SupabaseHistoryRepository,
    InMemoryHistoryRepository,
)
from infrastructure.catalog_repository import CatalogRepRangeRepository

__all__ = [
    "SupabaseHistoryRepository",
    "InMemoryHistoryRepository",
    "CatalogRepRangeRepository",
]
