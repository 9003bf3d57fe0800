"""Pydantic models for vocabulary content.

Cards are immutable once loaded; a CardPair is built per navigation step.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


# ============================================================================
# Enums
# ============================================================================


class Direction(str, Enum):
    """Which language fills the source side of a card pair.

    FORWARD shows the learning language (L1) first, REVERSE the native
    language (L2) first.
    """

    FORWARD = "forward"
    REVERSE = "reverse"

    def flipped(self) -> "Direction":
        return Direction.REVERSE if self is Direction.FORWARD else Direction.FORWARD

    def source_language(self, learning_language: str, native_language: str) -> str:
        return learning_language if self is Direction.FORWARD else native_language

    def target_language(self, learning_language: str, native_language: str) -> str:
        return native_language if self is Direction.FORWARD else learning_language

    def to_token(self, learning_language: str, native_language: str) -> str:
        """External token, e.g. ``es-to-en`` for FORWARD with es/en."""
        source = self.source_language(learning_language, native_language)
        target = self.target_language(learning_language, native_language)
        return f"{source}-to-{target}"

    @classmethod
    def from_token(
        cls,
        token: Optional[str],
        learning_language: str,
        native_language: str,
    ) -> "Direction":
        """Parse an external direction token.

        Only the exact reverse token selects REVERSE; anything else,
        including a missing token, selects FORWARD.

        Example:
            >>> Direction.from_token("en-to-es", "es", "en")
            <Direction.REVERSE: 'reverse'>
        """
        if token and token.strip().lower() == cls.REVERSE.to_token(
            learning_language, native_language
        ):
            return cls.REVERSE
        return cls.FORWARD


# ============================================================================
# Core Entities
# ============================================================================


class VocabularyCard(BaseModel):
    """A word with an example sentence, in one language."""

    id: int = Field(..., ge=1, description="Global card id, unique across all stages")
    word: str = Field(..., min_length=1, description="Word or short phrase")
    example: str = Field(..., description="Example sentence using the word")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "id": 25,
                "word": "la ventana",
                "example": "Abre la ventana, por favor.",
            }
        },
    }


class CardPair(BaseModel):
    """The same card in the source and target language for one direction."""

    stage: int = Field(..., ge=1)
    index: int = Field(..., ge=0, description="Stage-relative index")
    direction: Direction
    source: VocabularyCard
    target: VocabularyCard

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_matching_ids(self) -> "CardPair":
        """Source and target must describe the same card."""
        if self.source.id != self.target.id:
            raise ValueError(
                f"source id {self.source.id} does not match target id {self.target.id}"
            )
        return self

    @property
    def global_id(self) -> int:
        return self.source.id


class StageRange(BaseModel):
    """Registry entry: the global id range owned by a stage and where its content lives."""

    stage: int = Field(..., ge=1)
    range_start: int = Field(..., ge=1)
    range_end: int = Field(..., ge=1)
    content_handle: Optional[str] = Field(
        None, description="Directory holding the stage's language files, if any"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_bounds(self) -> "StageRange":
        if self.range_end < self.range_start:
            raise ValueError(
                f"stage {self.stage}: range_end {self.range_end} < range_start {self.range_start}"
            )
        return self

    @property
    def width(self) -> int:
        return self.range_end - self.range_start + 1

    def contains(self, global_id: int) -> bool:
        return self.range_start <= global_id <= self.range_end

    def overlaps(self, other: "StageRange") -> bool:
        return self.range_start <= other.range_end and other.range_start <= self.range_end
