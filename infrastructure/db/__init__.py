"""
Infrastructure Database Layer.

This package provides history store implementations of the HistoryRepository
interface defined in application.ports. These implementations can be injected
into services and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseHistoryRepository, InMemoryHistoryRepository

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    history_repo = SupabaseHistoryRepository(client)
    local_repo = InMemoryHistoryRepository()
"""

from infrastructure.db.history_repository import (
    SupabaseHistoryRepository,
    InMemoryHistoryRepository,
)

__all__ = [
    "SupabaseHistoryRepository",
    "InMemoryHistoryRepository",
]
