"""
API package for the GymTrack Progression API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_history_repo,
    get_rep_range_repo,
    get_progression_service,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_history_repo",
    "get_rep_range_repo",
    # Services
    "get_progression_service",
]
