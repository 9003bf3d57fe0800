"""In-memory vocabulary content, per stage and per language.

Populated once at startup and read-only afterwards. A stage is either
completely loaded (both languages, validated) or absent.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from loguru import logger

from vocabdrill.constants import LEARNING_LANGUAGE, NATIVE_LANGUAGE, STAGE_WIDTH
from vocabdrill.errors import ContentMismatchError, NotFoundError, OutOfRangeError
from vocabdrill.identifier_mapper import IdentifierMapper
from vocabdrill.models.vocabulary import VocabularyCard
from vocabdrill.parsers.content_parsers import (
    discover_stage_dirs,
    load_stage_languages,
    parse_vocabulary_records,
)
from vocabdrill.registry import StageRegistry
from vocabdrill.utils.language_utils import get_language_code


class ContentStore:
    """Validated vocabulary cards keyed by stage and language."""

    def __init__(
        self,
        registry: StageRegistry,
        learning_language: str = LEARNING_LANGUAGE,
        native_language: str = NATIVE_LANGUAGE,
    ):
        """Create an empty store; use the ``from_*`` constructors to load content.

        Args:
            registry: Stage ranges the content must fit into
            learning_language: Language being learned (L1), e.g. "es"
            native_language: Language of the translations (L2), e.g. "en"

        Raises:
            ValueError: If a language is unsupported or both are the same
        """
        self.registry = registry
        self.mapper = IdentifierMapper(registry)
        self.learning_language = get_language_code(learning_language)
        self.native_language = get_language_code(native_language)
        if self.learning_language == self.native_language:
            raise ValueError(
                f"Learning and native language must differ, both are '{self.learning_language}'"
            )
        self._cards: Dict[int, Dict[str, Tuple[VocabularyCard, ...]]] = {}

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def from_records(
        cls,
        registry: StageRegistry,
        records: Mapping[int, Mapping[str, Any]],
        learning_language: str = LEARNING_LANGUAGE,
        native_language: str = NATIVE_LANGUAGE,
    ) -> "ContentStore":
        """Build a store from already-parsed JSON records.

        Args:
            registry: Declared stages
            records: ``{stage: {language: [record, ...]}}``
        """
        store = cls(registry, learning_language, native_language)
        for stage, by_language in records.items():
            cards = {
                get_language_code(language): parse_vocabulary_records(
                    raw, source=f"stage {stage}/{language}"
                )
                for language, raw in by_language.items()
            }
            store._load_stage(stage, cards)
        logger.info(f"Loaded {len(store._cards)} stages from records")
        return store

    @classmethod
    def from_registry(
        cls,
        registry: StageRegistry,
        learning_language: str = LEARNING_LANGUAGE,
        native_language: str = NATIVE_LANGUAGE,
    ) -> "ContentStore":
        """Load every registry entry that has a content handle (a stage directory)."""
        store = cls(registry, learning_language, native_language)
        for entry in registry:
            if entry.content_handle is None:
                logger.debug(f"Stage {entry.stage} has no content handle, skipping")
                continue
            cards = load_stage_languages(Path(entry.content_handle), store.languages)
            store._load_stage(entry.stage, cards)
        logger.info(f"Loaded {len(store._cards)} stages from registry")
        return store

    @classmethod
    def from_directory(
        cls,
        content_dir: Union[str, Path],
        stage_width: int = STAGE_WIDTH,
        learning_language: str = LEARNING_LANGUAGE,
        native_language: str = NATIVE_LANGUAGE,
        stages: Optional[List[int]] = None,
    ) -> "ContentStore":
        """Declare and load the stages found under ``content_dir``.

        Args:
            content_dir: Directory laid out as ``<stage>/<language>.json``
            stage_width: Cards per stage
            stages: Restrict loading to these stages (default: all discovered)

        Raises:
            NotFoundError: If the directory or a requested stage is missing
        """
        stage_dirs = discover_stage_dirs(content_dir)
        if stages is not None:
            missing = sorted(set(stages) - set(stage_dirs))
            if missing:
                raise NotFoundError(f"Stage {missing[0]} not found in {content_dir}")
            stage_dirs = {stage: stage_dirs[stage] for stage in sorted(stages)}

        registry = StageRegistry(stage_width=stage_width)
        for stage, stage_dir in stage_dirs.items():
            registry.declare(stage, content_handle=stage_dir)

        logger.info(f"Discovered {len(registry)} stages in {content_dir}")
        return cls.from_registry(registry, learning_language, native_language)

    def _load_stage(self, stage: int, cards: Mapping[str, List[VocabularyCard]]) -> None:
        """Validate and store one stage; fails fast on any inconsistency."""
        entry = self.registry.get(stage)

        for language in self.languages:
            if language not in cards:
                raise NotFoundError(f"Stage {stage} for language {language} not found")

        learning_cards = cards[self.learning_language]
        native_cards = cards[self.native_language]

        if len(learning_cards) != len(native_cards):
            raise ContentMismatchError(
                f"Stage {stage}: {self.learning_language} has {len(learning_cards)} cards "
                f"but {self.native_language} has {len(native_cards)}"
            )

        for position, (learning_card, native_card) in enumerate(zip(learning_cards, native_cards)):
            if learning_card.id != native_card.id:
                raise ContentMismatchError(
                    f"Stage {stage}: position {position} holds id {learning_card.id} "
                    f"in {self.learning_language} but id {native_card.id} in {self.native_language}"
                )
            if not self.mapper.contains(stage, learning_card.id):
                raise OutOfRangeError(
                    f"Stage {stage}: card {learning_card.id} is outside ids "
                    f"{entry.range_start}-{entry.range_end}"
                )
            # Favorites and deep links derive ids from positions
            expected = entry.range_start + position
            if learning_card.id != expected:
                raise ContentMismatchError(
                    f"Stage {stage}: position {position} holds id {learning_card.id}, "
                    f"expected {expected}"
                )

        self._cards[stage] = {
            self.learning_language: tuple(learning_cards),
            self.native_language: tuple(native_cards),
        }
        logger.debug(f"Stage {stage}: loaded {len(learning_cards)} cards")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def languages(self) -> Tuple[str, str]:
        return self.learning_language, self.native_language

    def has_stage(self, stage: int) -> bool:
        return stage in self._cards

    def stages(self) -> List[int]:
        return sorted(self._cards)

    def count(self, stage: int) -> int:
        """Number of cards in ``stage``.

        Raises:
            NotFoundError: If the stage has no content
        """
        return len(self._stage(stage)[self.learning_language])

    def cards(self, stage: int, language: str) -> Tuple[VocabularyCard, ...]:
        """All cards of a stage in one language, in content order."""
        stage_cards = self._stage(stage)
        if language not in stage_cards:
            raise NotFoundError(f"Stage {stage} for language {language} not found")
        return stage_cards[language]

    def get_card(self, stage: int, language: str, index: int) -> VocabularyCard:
        """Card at a stage-relative ``index``.

        Raises:
            NotFoundError: If the stage/language has no content or the index
                is outside ``[0, count(stage))``
        """
        language_cards = self.cards(stage, language)
        if not 0 <= index < len(language_cards):
            raise NotFoundError(
                f"Card index {index} out of bounds for stage {stage} ({len(language_cards)} cards)"
            )
        return language_cards[index]

    def _stage(self, stage: int) -> Dict[str, Tuple[VocabularyCard, ...]]:
        try:
            return self._cards[stage]
        except KeyError:
            raise NotFoundError(f"Stage {stage} not found") from None
