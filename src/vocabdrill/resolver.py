"""Turns stage + index + direction into a renderable card pair."""

import logging

from vocabdrill.content_store import ContentStore
from vocabdrill.errors import ContentMismatchError
from vocabdrill.models.vocabulary import CardPair, Direction

logger = logging.getLogger(__name__)


class CardResolver:
    """Looks up the same index in both language lists of a stage."""

    def __init__(self, content: ContentStore):
        self.content = content

    def card_count(self, stage: int) -> int:
        return self.content.count(stage)

    def resolve(self, stage: int, index: int, direction: Direction) -> CardPair:
        """Build the (source, target) pair for one card.

        Args:
            stage: Stage number
            index: Stage-relative index
            direction: FORWARD puts the learning language in ``source``

        Returns:
            CardPair with matching ids

        Raises:
            NotFoundError: If the stage or index has no content
            ContentMismatchError: If the two language lists disagree on the id
        """
        learning, native = self.content.languages
        source_language = direction.source_language(learning, native)
        target_language = direction.target_language(learning, native)

        source = self.content.get_card(stage, source_language, index)
        target = self.content.get_card(stage, target_language, index)

        if source.id != target.id:
            logger.error(
                f"Stage {stage} index {index}: {source_language} id {source.id} "
                f"!= {target_language} id {target.id}"
            )
            raise ContentMismatchError(
                f"Stage {stage} index {index}: card ids differ between languages "
                f"({source.id} vs {target.id})"
            )

        return CardPair(
            stage=stage,
            index=index,
            direction=direction,
            source=source,
            target=target,
        )
