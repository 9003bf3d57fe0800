"""Data models for vocabulary content and session state."""

from vocabdrill.models.session import (
    CardView,
    FavoriteKey,
    NavigationMode,
    NavigationState,
    RevealStage,
)
from vocabdrill.models.vocabulary import CardPair, Direction, StageRange, VocabularyCard

__all__ = [
    "CardPair",
    "CardView",
    "Direction",
    "FavoriteKey",
    "NavigationMode",
    "NavigationState",
    "RevealStage",
    "StageRange",
    "VocabularyCard",
]
