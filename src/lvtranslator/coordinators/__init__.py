"""Coordinators - Orchestration layer connecting callers with business logic."""

from .translation_coordinator import TranslationCoordinator

__all__ = [
    "TranslationCoordinator",
]
