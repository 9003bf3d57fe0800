"""Unit tests for the progressive-reveal session navigator."""

import pytest

from vocabdrill.errors import NotFoundError, OutOfRangeError
from vocabdrill.models.session import NavigationMode, RevealStage
from vocabdrill.models.vocabulary import Direction
from vocabdrill.navigator import SessionNavigator


class TestInitialState:
    """Tests for the navigator before and on entering a stage."""

    def test_no_card_before_entering(self, navigator):
        assert not navigator.state.has_card
        with pytest.raises(NotFoundError, match="No card selected"):
            navigator.current_pair()

    def test_moves_without_card_are_noops(self, navigator):
        assert navigator.next() is False
        assert navigator.previous() is False
        assert navigator.advance_reveal() is RevealStage.WORD

    def test_enter_stage(self, navigator):
        navigator.enter_stage(2)
        state = navigator.state
        assert (state.stage, state.index, state.reveal_stage) == (2, 0, RevealStage.WORD)
        assert state.mode is NavigationMode.STAGE
        assert navigator.current_pair().global_id == 21


class TestReveal:
    """Tests for the reveal sequence."""

    def test_three_steps_then_terminal(self, navigator):
        navigator.enter_stage(1)
        assert navigator.advance_reveal() is RevealStage.WORD_EXAMPLE
        assert navigator.advance_reveal() is RevealStage.WORD_EXAMPLE_TRANSLATION
        assert navigator.advance_reveal() is RevealStage.WORD_EXAMPLE_TRANSLATION
        before = navigator.state
        assert navigator.advance_reveal() is RevealStage.WORD_EXAMPLE_TRANSLATION
        assert navigator.state == before

    def test_next_resets_reveal(self, navigator):
        navigator.enter_stage(1)
        navigator.advance_reveal()
        navigator.next()
        assert navigator.reveal_stage is RevealStage.WORD

    def test_toggle_direction_keeps_reveal(self, navigator):
        navigator.enter_stage(1)
        navigator.advance_reveal()
        navigator.advance_reveal()
        assert navigator.toggle_direction() is Direction.REVERSE
        assert navigator.reveal_stage is RevealStage.WORD_EXAMPLE_TRANSLATION
        assert navigator.current_pair().source.word == "word 1"


class TestStageNavigation:
    """Tests for next/previous within a stage."""

    def test_next_then_previous_round_trip(self, navigator):
        navigator.jump_to(2, 7)
        navigator.advance_reveal()
        assert navigator.next() is True
        assert navigator.previous() is True
        state = navigator.state
        assert (state.stage, state.index) == (2, 7)
        assert state.reveal_stage is RevealStage.WORD

    def test_next_clamped_at_end(self, navigator):
        navigator.jump_to(1, 19)
        navigator.advance_reveal()
        assert navigator.next() is False
        assert navigator.state.index == 19
        assert navigator.reveal_stage is RevealStage.WORD_EXAMPLE

    def test_previous_clamped_at_start(self, navigator):
        navigator.enter_stage(1)
        assert navigator.previous() is False
        assert navigator.state.index == 0

    def test_walk_whole_stage(self, navigator):
        navigator.enter_stage(2)
        seen = [navigator.current_pair().global_id]
        while navigator.next():
            seen.append(navigator.current_pair().global_id)
        assert seen == list(range(21, 41))


class TestJumpTo:
    """Tests for validated jumps and failure atomicity."""

    def test_jump_to_card_by_global_id(self, navigator):
        navigator.jump_to_card(2, 25)
        assert navigator.state.index == 4
        assert navigator.current_pair().global_id == 25

    def test_undeclared_stage_leaves_state_unchanged(self, navigator):
        navigator.jump_to(1, 3)
        navigator.advance_reveal()
        before = navigator.state
        with pytest.raises(NotFoundError):
            navigator.jump_to(5, 0)
        assert navigator.state == before

    def test_declared_stage_without_content(self, navigator):
        with pytest.raises(NotFoundError):
            navigator.enter_stage(3)
        assert not navigator.state.has_card

    def test_index_outside_range(self, navigator):
        navigator.enter_stage(1)
        before = navigator.state
        with pytest.raises(OutOfRangeError):
            navigator.jump_to(1, 20)
        assert navigator.state == before

    def test_bad_deep_link(self, navigator):
        """A card id from another stage is reported, never substituted."""
        navigator.jump_to(2, 2)
        before = navigator.state
        with pytest.raises(OutOfRangeError):
            navigator.jump_to_card(2, 5)
        with pytest.raises(NotFoundError):
            navigator.jump_to_card(8, 150)
        assert navigator.state == before

    def test_jump_resets_reveal(self, navigator):
        navigator.enter_stage(1)
        navigator.advance_reveal()
        navigator.jump_to(1, 4)
        assert navigator.reveal_stage is RevealStage.WORD


class TestDirection:
    """Tests for direction handling."""

    def test_token_round_trip(self, navigator):
        assert navigator.direction_token == "es-to-en"
        assert navigator.set_direction_from_token("en-to-es") is Direction.REVERSE
        assert navigator.direction_token == "en-to-es"

    @pytest.mark.parametrize("token", [None, "", "es-to-en", "fr-to-de", "garbage"])
    def test_other_tokens_select_forward(self, navigator, token):
        navigator.toggle_direction()
        assert navigator.set_direction_from_token(token) is Direction.FORWARD

    def test_direction_applies_to_jump(self, navigator):
        navigator.set_direction(Direction.REVERSE)
        navigator.jump_to(2, 4)
        pair = navigator.current_pair()
        assert pair.source.word == "word 25"
        assert pair.target.word == "palabra 25"


class TestCurrentCardActions:
    """Tests for favorite toggling, speech and the render payload."""

    def test_toggle_current_favorite(self, navigator, favorites):
        navigator.jump_to(2, 4)
        assert navigator.toggle_current_favorite() is True
        assert favorites.is_favorite(2, 25)
        assert navigator.is_current_favorite()
        assert navigator.toggle_current_favorite() is False
        assert favorites.count() == 0

    def test_speak_uses_source_locale(self, navigator, spoken):
        navigator.jump_to(1, 0)
        navigator.speak_current()
        navigator.toggle_direction()
        navigator.speak_current()
        assert spoken == [("palabra 1", "es-ES"), ("word 1", "en-US")]

    def test_speak_without_speaker(self, resolver, favorites):
        navigator = SessionNavigator(resolver, favorites)
        navigator.enter_stage(1)
        navigator.speak_current()

    def test_view_progressive_reveal(self, navigator):
        navigator.jump_to(2, 4)
        view = navigator.view()
        assert view.source_word == "palabra 25"
        assert view.source_example is None
        assert view.target_word is None
        assert view.progress_label == "5 / 20"
        assert view.source_locale == "es-ES"
        assert view.can_go_previous and view.can_go_next

        navigator.advance_reveal()
        view = navigator.view()
        assert view.source_example == "Ejemplo 25."
        assert view.target_word is None

        navigator.advance_reveal()
        view = navigator.view()
        assert view.target_word == "word 25"
        assert view.target_example == "Example 25."

    def test_view_edges(self, navigator):
        navigator.enter_stage(1)
        assert not navigator.view().can_go_previous
        navigator.jump_to(1, 19)
        assert not navigator.view().can_go_next

    def test_view_reports_favorite(self, navigator):
        navigator.enter_stage(1)
        navigator.toggle_current_favorite()
        assert navigator.view().is_favorite

    def test_reset(self, navigator):
        navigator.enter_stage(1)
        navigator.toggle_direction()
        navigator.reset()
        assert not navigator.state.has_card
        assert navigator.direction is Direction.REVERSE


class TestFavoritesMode:
    """Tests for navigating the favorites cursor."""

    @pytest.fixture
    def flagged(self, favorites):
        for stage, global_id in [(2, 25), (1, 5), (2, 40)]:
            favorites.toggle(stage, global_id)
        return favorites

    def test_empty_favorites(self, navigator):
        navigator.enter_favorites()
        assert navigator.mode is NavigationMode.FAVORITES
        assert navigator.next() is False
        with pytest.raises(NotFoundError, match="No favorites available"):
            navigator.view()

    def test_cursor_sorted_by_global_id(self, navigator, flagged):
        navigator.enter_favorites()
        seen = [navigator.current_pair().global_id]
        while navigator.next():
            seen.append(navigator.current_pair().global_id)
        assert seen == [5, 25, 40]
        assert navigator.previous() is True
        assert navigator.current_pair().global_id == 25

    def test_cursor_state_tracks_stage_and_index(self, navigator, flagged):
        navigator.enter_favorites()
        navigator.next()
        state = navigator.state
        assert (state.stage, state.index, state.favorites_cursor) == (2, 4, 1)

    def test_progress_label_includes_stage(self, navigator, flagged):
        navigator.enter_favorites()
        navigator.next()
        assert navigator.view().progress_label == "2 / 3 (Stage 2)"

    def test_cursor_moves_reset_reveal(self, navigator, flagged):
        navigator.enter_favorites()
        navigator.advance_reveal()
        navigator.next()
        assert navigator.reveal_stage is RevealStage.WORD

    def test_unflag_moves_to_following_card(self, navigator, flagged):
        navigator.enter_favorites()
        navigator.next()
        assert navigator.toggle_current_favorite() is False
        assert navigator.current_pair().global_id == 40
        assert navigator.state.favorites_cursor == 1

    def test_unflag_last_clamps_cursor(self, navigator, flagged):
        navigator.enter_favorites()
        navigator.next()
        navigator.next()
        navigator.toggle_current_favorite()
        assert navigator.current_pair().global_id == 25
        assert navigator.state.favorites_cursor == 1

    def test_unflag_everything(self, navigator, flagged):
        navigator.enter_favorites()
        for _ in range(3):
            navigator.toggle_current_favorite()
        assert flagged.count() == 0
        assert not navigator.state.has_card
        with pytest.raises(NotFoundError):
            navigator.current_pair()

    def test_external_change_keeps_current_card(self, navigator, flagged):
        """A favorite added elsewhere before the cursor does not move the shown card."""
        navigator.enter_favorites()
        navigator.next()
        flagged.toggle(1, 1)
        assert navigator.current_pair().global_id == 25
        assert navigator.state.favorites_cursor == 2

    def test_reveal_after_shown_card_unflagged_elsewhere(self, navigator, flagged):
        """Revealing applies to the card that replaced the removed one."""
        navigator.enter_favorites()
        flagged.toggle(1, 5)

        assert navigator.advance_reveal() is RevealStage.WORD_EXAMPLE
        assert navigator.current_pair().global_id == 25
        assert navigator.reveal_stage is RevealStage.WORD_EXAMPLE
        assert navigator.view().source_example == "Ejemplo 25."

    def test_reads_see_external_removal(self, navigator, flagged):
        navigator.enter_favorites()
        navigator.advance_reveal()
        flagged.toggle(1, 5)

        assert navigator.reveal_stage is RevealStage.WORD
        assert navigator.mode is NavigationMode.FAVORITES
        assert navigator.state.favorites_cursor == 0
        assert navigator.current_pair().global_id == 25

    def test_unresolvable_favorites_skipped(self, navigator, flagged):
        flagged.toggle(3, 50)
        navigator.enter_favorites()
        assert navigator.view().total == 3
        assert flagged.is_favorite(3, 50)

    def test_jump_leaves_favorites_mode(self, navigator, flagged):
        navigator.enter_favorites()
        navigator.jump_to(1, 0)
        assert navigator.mode is NavigationMode.STAGE
