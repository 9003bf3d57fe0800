"""Unit tests for Pydantic schema models."""

import pytest
from pydantic import ValidationError

from vocabdrill.models import (
    CardPair,
    Direction,
    FavoriteKey,
    NavigationState,
    RevealStage,
    StageRange,
    VocabularyCard,
)


class TestVocabularyCard:
    """Test VocabularyCard model validation."""

    def test_valid_card(self):
        card = VocabularyCard(id=25, word="la ventana", example="Abre la ventana.")
        assert card.id == 25
        assert card.word == "la ventana"

    def test_id_must_be_positive(self):
        with pytest.raises(ValidationError) as exc_info:
            VocabularyCard(id=0, word="x", example="y")
        assert "id" in str(exc_info.value)

    def test_word_required(self):
        with pytest.raises(ValidationError):
            VocabularyCard(id=1, word="", example="y")

    def test_frozen(self):
        card = VocabularyCard(id=1, word="hola", example="Hola.")
        with pytest.raises(ValidationError):
            card.word = "adiós"

    def test_hashable(self):
        card = VocabularyCard(id=1, word="hola", example="Hola.")
        assert card in {card}


class TestCardPair:
    """Test CardPair id invariant."""

    def test_matching_ids(self):
        pair = CardPair(
            stage=1,
            index=0,
            direction=Direction.FORWARD,
            source=VocabularyCard(id=1, word="hola", example="Hola."),
            target=VocabularyCard(id=1, word="hello", example="Hello."),
        )
        assert pair.global_id == 1

    def test_mismatched_ids_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CardPair(
                stage=1,
                index=0,
                direction=Direction.FORWARD,
                source=VocabularyCard(id=1, word="hola", example="Hola."),
                target=VocabularyCard(id=2, word="goodbye", example="Goodbye."),
            )
        assert "does not match" in str(exc_info.value)


class TestDirection:
    """Test Direction helpers."""

    def test_flipped(self):
        assert Direction.FORWARD.flipped() is Direction.REVERSE
        assert Direction.REVERSE.flipped() is Direction.FORWARD

    def test_languages(self):
        assert Direction.FORWARD.source_language("es", "en") == "es"
        assert Direction.FORWARD.target_language("es", "en") == "en"
        assert Direction.REVERSE.source_language("es", "en") == "en"

    def test_tokens(self):
        assert Direction.FORWARD.to_token("es", "en") == "es-to-en"
        assert Direction.REVERSE.to_token("es", "en") == "en-to-es"

    def test_from_token_case_insensitive(self):
        assert Direction.from_token(" EN-to-ES ", "es", "en") is Direction.REVERSE

    def test_from_token_defaults_forward(self):
        assert Direction.from_token(None, "es", "en") is Direction.FORWARD
        assert Direction.from_token("xx", "es", "en") is Direction.FORWARD


class TestRevealStage:
    """Test RevealStage ordering."""

    def test_advance_order(self):
        assert RevealStage.WORD.advanced() is RevealStage.WORD_EXAMPLE
        assert RevealStage.WORD_EXAMPLE.advanced() is RevealStage.WORD_EXAMPLE_TRANSLATION
        assert RevealStage.WORD_EXAMPLE_TRANSLATION.advanced() is RevealStage.WORD_EXAMPLE_TRANSLATION

    def test_visibility(self):
        assert not RevealStage.WORD.shows_example
        assert RevealStage.WORD_EXAMPLE.shows_example
        assert not RevealStage.WORD_EXAMPLE.shows_translation
        assert RevealStage.WORD_EXAMPLE_TRANSLATION.shows_translation


class TestStageRange:
    """Test StageRange bounds."""

    def test_width_and_contains(self):
        entry = StageRange(stage=2, range_start=21, range_end=40)
        assert entry.width == 20
        assert entry.contains(21) and entry.contains(40)
        assert not entry.contains(41)

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValidationError):
            StageRange(stage=1, range_start=20, range_end=1)

    def test_overlaps(self):
        first = StageRange(stage=1, range_start=1, range_end=20)
        assert first.overlaps(StageRange(stage=2, range_start=20, range_end=39))
        assert not first.overlaps(StageRange(stage=2, range_start=21, range_end=40))


class TestSessionModels:
    """Test session state models."""

    def test_navigation_state_defaults(self):
        state = NavigationState()
        assert not state.has_card
        assert state.reveal_stage is RevealStage.WORD
        assert state.direction is Direction.FORWARD

    def test_favorite_key_is_tuple(self):
        key = FavoriteKey(stage=2, global_id=25)
        assert key == (2, 25)
        assert key.global_id == 25
