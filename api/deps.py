"""
FastAPI Dependency Providers for the GymTrack Progression API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with mock implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- The in-memory history store is cached per-process so logged sets survive
  between requests
- Catalog and service providers create new instances per-request

Usage in routers:
    from api.deps import get_progression_service
    from backend.core.progression_service import ProgressionService

    @router.get("/exercises/{exercise_id}/next")
    def next_workout(
        exercise_id: str,
        service: ProgressionService = Depends(get_progression_service),
    ):
        return service.recommend_next_workout(exercise_id, Goal.HYPERTROPHY)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_history_repo] = lambda: FakeHistoryRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import HistoryRepository, RepRangeRepository

# Concrete implementations
from infrastructure import (
    CatalogRepRangeRepository,
    InMemoryHistoryRepository,
    SupabaseHistoryRepository,
)

from backend.core.progression_service import ProgressionService
from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


@lru_cache
def get_memory_history_repo() -> InMemoryHistoryRepository:
    """Process-wide in-memory history store."""
    return InMemoryHistoryRepository()


def get_history_repo(
    settings: Settings = Depends(get_settings),
) -> HistoryRepository:
    """
    Get HistoryRepository implementation.

    Returns a SupabaseHistoryRepository when HISTORY_BACKEND=supabase,
    otherwise the process-wide in-memory store.

    Args:
        settings: Application settings (injected)

    Returns:
        HistoryRepository: Provider of logged sets

    Raises:
        HTTPException: 503 if the Supabase backend is selected but not configured
    """
    if settings.history_backend == "supabase":
        return SupabaseHistoryRepository(
            get_supabase_client_required(),
            table=settings.history_table,
        )
    return get_memory_history_repo()


def get_rep_range_repo() -> RepRangeRepository:
    """
    Get RepRangeRepository implementation.

    Returns a CatalogRepRangeRepository instance.
    This repository uses local file data and doesn't require Supabase.

    Returns:
        RepRangeRepository: Provider of goal rep ranges
    """
    return CatalogRepRangeRepository()


# =============================================================================
# Service Providers
# =============================================================================


def get_progression_service(
    history_repo: HistoryRepository = Depends(get_history_repo),
    rep_range_repo: RepRangeRepository = Depends(get_rep_range_repo),
    settings: Settings = Depends(get_settings),
) -> ProgressionService:
    """
    Get ProgressionService with injected providers.

    Args:
        history_repo: History provider (injected)
        rep_range_repo: Rep-range provider (injected)
        settings: Application settings (injected)

    Returns:
        ProgressionService: Service for recommendations and progress metrics
    """
    return ProgressionService(
        history_repo=history_repo,
        rep_range_repo=rep_range_repo,
        policy=settings.progression_policy(),
    )


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_memory_history_repo",
    "get_history_repo",
    "get_rep_range_repo",
    # Services
    "get_progression_service",
]
