"""Session state models: reveal stages, favorites keys, navigation snapshots."""

from enum import Enum
from typing import NamedTuple, Optional

from pydantic import BaseModel, Field

from vocabdrill.models.vocabulary import Direction


class RevealStage(str, Enum):
    """How much of the current card is disclosed."""

    WORD = "word"
    WORD_EXAMPLE = "word_example"
    WORD_EXAMPLE_TRANSLATION = "word_example_translation"

    def advanced(self) -> "RevealStage":
        """Next disclosure level; WORD_EXAMPLE_TRANSLATION is terminal."""
        order = list(RevealStage)
        position = order.index(self)
        return order[min(position + 1, len(order) - 1)]

    @property
    def shows_example(self) -> bool:
        return self is not RevealStage.WORD

    @property
    def shows_translation(self) -> bool:
        return self is RevealStage.WORD_EXAMPLE_TRANSLATION


class NavigationMode(str, Enum):
    """Sequential stage order or the favorites cursor."""

    STAGE = "stage"
    FAVORITES = "favorites"


class FavoriteKey(NamedTuple):
    stage: int
    global_id: int


class NavigationState(BaseModel):
    """Immutable snapshot of the navigator.

    ``stage``/``index`` are None before the first card is entered and in
    favorites mode when there are no favorites to show.
    """

    mode: NavigationMode = NavigationMode.STAGE
    stage: Optional[int] = None
    index: Optional[int] = None
    direction: Direction = Direction.FORWARD
    reveal_stage: RevealStage = RevealStage.WORD
    favorites_cursor: int = 0

    model_config = {"frozen": True}

    @property
    def has_card(self) -> bool:
        return self.stage is not None and self.index is not None


class CardView(BaseModel):
    """Everything the rendering layer needs to draw the current card."""

    mode: NavigationMode
    stage: int
    index: int
    global_id: int
    position: int = Field(..., description="1-based position shown to the learner")
    total: int
    progress_label: str
    direction: Direction
    reveal_stage: RevealStage
    source_word: str
    source_example: Optional[str] = None
    target_word: Optional[str] = None
    target_example: Optional[str] = None
    source_locale: str
    is_favorite: bool
    can_go_previous: bool
    can_go_next: bool

    model_config = {"frozen": True}
