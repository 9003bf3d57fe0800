"""One learning session: shared content plus the session's mutable state.

The content store is read-only and may be shared between sessions; the
favorites store and navigator belong to this session and die with it.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from vocabdrill.constants import (
    CONTENT_DIR,
    DEFAULT_DIRECTION,
    LEARNING_LANGUAGE,
    NATIVE_LANGUAGE,
    STAGE_WIDTH,
)
from vocabdrill.content_store import ContentStore
from vocabdrill.favorites import FavoritesStore
from vocabdrill.models.vocabulary import Direction
from vocabdrill.navigator import SessionNavigator, Speaker
from vocabdrill.resolver import CardResolver

logger = logging.getLogger(__name__)


class LearningSession:
    """Owns the favorites store and navigator for one learner session."""

    def __init__(
        self,
        content: ContentStore,
        speak: Optional[Speaker] = None,
        direction_token: Optional[str] = DEFAULT_DIRECTION,
    ):
        self.content = content
        self.resolver = CardResolver(content)
        self.favorites = FavoritesStore()
        self.navigator = SessionNavigator(
            self.resolver,
            self.favorites,
            direction=Direction.from_token(direction_token, *content.languages),
            speak=speak,
        )
        logger.info(
            f"Session started: stages={content.stages()} "
            f"direction={self.navigator.direction_token}"
        )

    @classmethod
    def from_directory(
        cls,
        content_dir: Union[str, Path] = CONTENT_DIR,
        stage_width: int = STAGE_WIDTH,
        learning_language: str = LEARNING_LANGUAGE,
        native_language: str = NATIVE_LANGUAGE,
        speak: Optional[Speaker] = None,
        direction_token: Optional[str] = DEFAULT_DIRECTION,
    ) -> "LearningSession":
        """Load content from disk and start a session over it."""
        content = ContentStore.from_directory(
            content_dir,
            stage_width=stage_width,
            learning_language=learning_language,
            native_language=native_language,
        )
        return cls(content, speak=speak, direction_token=direction_token)

    def end(self) -> None:
        """Discard session state. Nothing is persisted."""
        self.favorites.clear()
        self.navigator.reset()
        logger.info("Session ended")
