"""Coordinators - Orchestration layer connecting UI with business logic."""

from .history_coordinator import HistoryCoordinator
from .translation_coordinator import TranslationCoordinator

__all__ = [
    "TranslationCoordinator",
    "HistoryCoordinator",
]
