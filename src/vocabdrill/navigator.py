"""Progressive-reveal navigation over a stage or over the favorites list.

The navigator owns the current position, reveal stage and direction. All
mutation goes through its methods, and a transition that fails validation
leaves the previous state untouched.

Reveal order per card: WORD -> WORD_EXAMPLE -> WORD_EXAMPLE_TRANSLATION.
Changing the card resets the reveal stage; flipping the direction does not.
"""

import logging
from typing import Callable, List, Optional, Tuple

from vocabdrill.content_store import ContentStore
from vocabdrill.errors import NotFoundError, VocabDrillError
from vocabdrill.favorites import FavoritesStore
from vocabdrill.identifier_mapper import IdentifierMapper
from vocabdrill.models.session import (
    CardView,
    FavoriteKey,
    NavigationMode,
    NavigationState,
    RevealStage,
)
from vocabdrill.models.vocabulary import CardPair, Direction
from vocabdrill.resolver import CardResolver
from vocabdrill.utils.language_utils import get_locale_tag

logger = logging.getLogger(__name__)

# speak(text, locale_tag); fire-and-forget
Speaker = Callable[[str, str], None]


def is_resolvable(key: FavoriteKey, mapper: IdentifierMapper, content: ContentStore) -> bool:
    """True when a favorite still points at loaded content."""
    if not content.has_stage(key.stage) or not mapper.contains(key.stage, key.global_id):
        return False
    return mapper.to_local_index(key.stage, key.global_id) < content.count(key.stage)


def sorted_favorites(
    favorites: FavoritesStore, mapper: IdentifierMapper, content: ContentStore
) -> List[FavoriteKey]:
    """Favorites ordered by global id, for the favorites view.

    Entries whose stage or id no longer resolves are skipped but stay in
    the store.
    """
    entries = []
    for key in favorites.list_all():
        if is_resolvable(key, mapper, content):
            entries.append(key)
        else:
            logger.debug(f"Skipping unresolvable favorite {key}")
    return sorted(entries, key=lambda key: key.global_id)


class SessionNavigator:
    """State machine for the card currently shown to the learner."""

    def __init__(
        self,
        resolver: CardResolver,
        favorites: FavoritesStore,
        direction: Direction = Direction.FORWARD,
        speak: Optional[Speaker] = None,
    ):
        self.resolver = resolver
        self.content = resolver.content
        self.mapper = resolver.content.mapper
        self.favorites = favorites
        self.speak = speak
        self._state = NavigationState(direction=direction)

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def state(self) -> NavigationState:
        """Current snapshot; in favorites mode re-synced with the favorites store."""
        if self._state.mode is NavigationMode.FAVORITES:
            self._sync_favorites()
        return self._state

    @property
    def direction(self) -> Direction:
        return self.state.direction

    @property
    def reveal_stage(self) -> RevealStage:
        return self.state.reveal_stage

    @property
    def mode(self) -> NavigationMode:
        return self.state.mode

    @property
    def direction_token(self) -> str:
        return self._state.direction.to_token(*self.content.languages)

    def _commit(self, **changes) -> None:
        previous = self._state
        self._state = previous.model_copy(update=changes)
        logger.debug(
            f"Navigation: mode={self._state.mode.value} stage={self._state.stage} "
            f"index={self._state.index} reveal={self._state.reveal_stage.value} "
            f"direction={self._state.direction.value}"
        )

    def _position(self) -> Tuple[int, int]:
        state = self.state
        if not state.has_card:
            if state.mode is NavigationMode.FAVORITES:
                raise NotFoundError("No favorites available")
            raise NotFoundError("No card selected")
        return state.stage, state.index

    # ------------------------------------------------------------------
    # Favorites cursor
    # ------------------------------------------------------------------

    def favorite_entries(self) -> List[FavoriteKey]:
        return sorted_favorites(self.favorites, self.mapper, self.content)

    def _favorite_state(self, key: FavoriteKey, cursor: int) -> dict:
        return {
            "stage": key.stage,
            "index": self.mapper.to_local_index(key.stage, key.global_id),
            "favorites_cursor": cursor,
        }

    def _sync_favorites(self) -> List[FavoriteKey]:
        """Keep the cursor on the same card, or clamp it if that card is gone."""
        entries = self.favorite_entries()
        state = self._state

        if not entries:
            if state.has_card or state.favorites_cursor != 0:
                self._commit(stage=None, index=None, favorites_cursor=0, reveal_stage=RevealStage.WORD)
            return entries

        if state.has_card:
            current = FavoriteKey(state.stage, self.mapper.to_global_id(state.stage, state.index))
            if current in entries:
                cursor = entries.index(current)
                if cursor != state.favorites_cursor:
                    self._commit(favorites_cursor=cursor)
                return entries

        cursor = min(state.favorites_cursor, len(entries) - 1)
        self._commit(reveal_stage=RevealStage.WORD, **self._favorite_state(entries[cursor], cursor))
        return entries

    def enter_favorites(self) -> None:
        """Switch to the favorites view, starting at the lowest global id."""
        entries = self.favorite_entries()
        if entries:
            self._commit(
                mode=NavigationMode.FAVORITES,
                reveal_stage=RevealStage.WORD,
                **self._favorite_state(entries[0], 0),
            )
        else:
            self._commit(
                mode=NavigationMode.FAVORITES,
                stage=None,
                index=None,
                favorites_cursor=0,
                reveal_stage=RevealStage.WORD,
            )
        logger.info(f"Entered favorites view with {len(entries)} cards")

    # ------------------------------------------------------------------
    # Stage transitions
    # ------------------------------------------------------------------

    def jump_to(self, stage: int, index: int) -> None:
        """Show card ``index`` of ``stage`` with the reveal stage reset.

        Raises:
            NotFoundError: If the stage has no content or the index has no card
            OutOfRangeError: If the index is outside the stage's id range
            ContentMismatchError: If the stage's language lists disagree
        """
        try:
            if not self.content.has_stage(stage):
                raise NotFoundError(f"Stage {stage} not found")
            self.mapper.to_global_id(stage, index)
            self.resolver.resolve(stage, index, self._state.direction)
        except VocabDrillError as e:
            logger.warning(f"Rejected jump to stage {stage} index {index}: {e}")
            raise

        self._commit(
            mode=NavigationMode.STAGE,
            stage=stage,
            index=index,
            favorites_cursor=0,
            reveal_stage=RevealStage.WORD,
        )

    def jump_to_card(self, stage: int, global_id: int) -> None:
        """Deep-link entry: show the card with ``global_id`` in ``stage``."""
        if not self.content.has_stage(stage):
            logger.warning(f"Rejected jump to card {global_id}: stage {stage} not found")
            raise NotFoundError(f"Stage {stage} not found")
        self.jump_to(stage, self.mapper.to_local_index(stage, global_id))

    def enter_stage(self, stage: int) -> None:
        self.jump_to(stage, 0)

    def next(self) -> bool:
        """Move to the next card; no-op at the end.

        Returns:
            True if the position changed
        """
        state = self.state
        if not state.has_card:
            return False

        if state.mode is NavigationMode.FAVORITES:
            entries = self.favorite_entries()
            cursor = state.favorites_cursor + 1
            if cursor >= len(entries):
                return False
            self._commit(reveal_stage=RevealStage.WORD, **self._favorite_state(entries[cursor], cursor))
            return True

        if state.index + 1 >= self.resolver.card_count(state.stage):
            return False
        self._commit(index=state.index + 1, reveal_stage=RevealStage.WORD)
        return True

    def previous(self) -> bool:
        """Move to the previous card; no wraparound at the start."""
        state = self.state
        if not state.has_card:
            return False

        if state.mode is NavigationMode.FAVORITES:
            if state.favorites_cursor == 0:
                return False
            cursor = state.favorites_cursor - 1
            entries = self.favorite_entries()
            self._commit(reveal_stage=RevealStage.WORD, **self._favorite_state(entries[cursor], cursor))
            return True

        if state.index == 0:
            return False
        self._commit(index=state.index - 1, reveal_stage=RevealStage.WORD)
        return True

    def advance_reveal(self) -> RevealStage:
        """Disclose the next part of the card; terminal at the translation."""
        state = self.state
        current = state.reveal_stage
        if not state.has_card:
            return current
        advanced = current.advanced()
        if advanced is not current:
            self._commit(reveal_stage=advanced)
        return advanced

    # ------------------------------------------------------------------
    # Direction
    # ------------------------------------------------------------------

    def toggle_direction(self) -> Direction:
        """Swap source and target language; the reveal stage is kept."""
        self._commit(direction=self._state.direction.flipped())
        return self._state.direction

    def set_direction(self, direction: Direction) -> None:
        if direction is not self._state.direction:
            self._commit(direction=direction)

    def set_direction_from_token(self, token: Optional[str]) -> Direction:
        """Set the direction from an external token such as ``en-to-es``."""
        direction = Direction.from_token(token, *self.content.languages)
        self.set_direction(direction)
        return direction

    # ------------------------------------------------------------------
    # Current card
    # ------------------------------------------------------------------

    def current_pair(self) -> CardPair:
        """Pair for the current position and direction.

        Raises:
            NotFoundError: If no card is selected or there are no favorites
        """
        stage, index = self._position()
        return self.resolver.resolve(stage, index, self._state.direction)

    def current_key(self) -> FavoriteKey:
        stage, index = self._position()
        return FavoriteKey(stage, self.mapper.to_global_id(stage, index))

    def is_current_favorite(self) -> bool:
        return self.favorites.is_favorite(*self.current_key())

    def toggle_current_favorite(self) -> bool:
        """Flag or unflag the current card.

        In the favorites view, unflagging moves the cursor onto the card that
        takes its place, or onto the new last card.

        Returns:
            True if the card is a favorite after the call
        """
        key = self.current_key()
        is_favorite = self.favorites.toggle(*key)
        if self._state.mode is NavigationMode.FAVORITES:
            self._sync_favorites()
        return is_favorite

    def speak_current(self) -> None:
        """Pronounce the current source word in the source language's locale."""
        pair = self.current_pair()
        source_language = pair.direction.source_language(*self.content.languages)
        locale = get_locale_tag(source_language)
        if self.speak is None:
            logger.debug(f"No speaker configured, skipping '{pair.source.word}' ({locale})")
            return
        self.speak(pair.source.word, locale)

    def view(self) -> CardView:
        """Render payload for the current card and reveal stage."""
        pair = self.current_pair()
        state = self._state
        reveal = state.reveal_stage

        if state.mode is NavigationMode.FAVORITES:
            total = len(self.favorite_entries())
            position = state.favorites_cursor + 1
            progress_label = f"{position} / {total} (Stage {state.stage})"
        else:
            total = self.resolver.card_count(state.stage)
            position = state.index + 1
            progress_label = f"{position} / {total}"

        source_language = pair.direction.source_language(*self.content.languages)

        return CardView(
            mode=state.mode,
            stage=state.stage,
            index=state.index,
            global_id=pair.global_id,
            position=position,
            total=total,
            progress_label=progress_label,
            direction=pair.direction,
            reveal_stage=reveal,
            source_word=pair.source.word,
            source_example=pair.source.example if reveal.shows_example else None,
            target_word=pair.target.word if reveal.shows_translation else None,
            target_example=pair.target.example if reveal.shows_translation else None,
            source_locale=get_locale_tag(source_language),
            is_favorite=self.favorites.is_favorite(pair.stage, pair.global_id),
            can_go_previous=position > 1,
            can_go_next=position < total,
        )

    def reset(self) -> None:
        """Forget the position; direction is kept."""
        self._state = NavigationState(direction=self._state.direction)
