"""
Vocabulary drilling engine

This package contains the in-memory learning-session engine behind the
vocabulary drill: stage registry, identifier mapping, content store, card
resolution, favorites and the progressive-reveal navigator.

**Version**: 0.1.0
**Python**: >=3.11
**Key Dependencies**: pydantic, loguru, python-dotenv
"""

__version__ = "0.1.0"
__author__ = "Vocabdrill"

from vocabdrill.content_store import ContentStore
from vocabdrill.errors import (
    ContentMismatchError,
    NotFoundError,
    OutOfRangeError,
    VocabDrillError,
)
from vocabdrill.favorites import FavoritesStore
from vocabdrill.identifier_mapper import IdentifierMapper
from vocabdrill.navigator import SessionNavigator
from vocabdrill.registry import StageRegistry
from vocabdrill.resolver import CardResolver
from vocabdrill.session import LearningSession
from vocabdrill.utils.language_utils import LANGUAGE_CODE_TO_NAME

# Languages with bundled metadata
SUPPORTED_LANGUAGES = list(LANGUAGE_CODE_TO_NAME)

__all__ = [
    "__version__",
    "__author__",
    "SUPPORTED_LANGUAGES",
    "CardResolver",
    "ContentMismatchError",
    "ContentStore",
    "FavoritesStore",
    "IdentifierMapper",
    "LearningSession",
    "NotFoundError",
    "OutOfRangeError",
    "SessionNavigator",
    "StageRegistry",
    "VocabDrillError",
]
