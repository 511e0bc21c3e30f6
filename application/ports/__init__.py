"""
Repository Interfaces (Ports) for the GymTrack Progression API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, static catalogs). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import HistoryRepository, RepRangeRepository

    class ProgressionService:
        def __init__(self, history_repo: HistoryRepository):
            self.history_repo = history_repo
"""

# Logged set history (history provider)
from application.ports.history_repository import HistoryRepository

# Goal-indexed rep ranges (rep-range provider)
from application.ports.rep_range_repository import RepRangeRepository

__all__ = [
    "HistoryRepository",
    "RepRangeRepository",
]
