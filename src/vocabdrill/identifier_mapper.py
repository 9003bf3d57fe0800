"""Global card id <-> stage-relative index conversion.

The only place that decides whether an id belongs to a stage.
"""

import logging

from vocabdrill.errors import NotFoundError, OutOfRangeError
from vocabdrill.models.vocabulary import StageRange
from vocabdrill.registry import StageRegistry

logger = logging.getLogger(__name__)


class IdentifierMapper:
    """Validates and converts card identifiers against a StageRegistry."""

    def __init__(self, registry: StageRegistry):
        self.registry = registry

    def _range(self, stage: int) -> StageRange:
        try:
            return self.registry.get(stage)
        except NotFoundError:
            raise OutOfRangeError(f"Stage {stage} is not declared") from None

    def contains(self, stage: int, global_id: int) -> bool:
        """True when ``global_id`` lies in the range of a declared ``stage``."""
        if stage not in self.registry:
            return False
        return self.registry.get(stage).contains(global_id)

    def to_local_index(self, stage: int, global_id: int) -> int:
        """Convert a global card id to its zero-based index within ``stage``.

        Args:
            stage: Stage number
            global_id: Card id unique across all stages

        Returns:
            ``global_id - range_start(stage)``

        Raises:
            OutOfRangeError: If the stage is unknown or the id is outside its range

        Example:
            >>> mapper.to_local_index(2, 25)
            4
        """
        entry = self._range(stage)
        if not entry.contains(global_id):
            raise OutOfRangeError(
                f"Card {global_id} is not in stage {stage} "
                f"(ids {entry.range_start}-{entry.range_end})"
            )
        return global_id - entry.range_start

    def to_global_id(self, stage: int, index: int) -> int:
        """Convert a stage-relative index back to the global card id.

        Raises:
            OutOfRangeError: If the stage is unknown or the index is outside
                ``[0, width)``
        """
        entry = self._range(stage)
        if not 0 <= index < entry.width:
            raise OutOfRangeError(
                f"Index {index} is out of range for stage {stage} (0-{entry.width - 1})"
            )
        return entry.range_start + index

    def stage_for(self, global_id: int) -> int:
        """Find the stage owning ``global_id``.

        Raises:
            OutOfRangeError: If no declared stage owns the id
        """
        for entry in self.registry:
            if entry.contains(global_id):
                return entry.stage
        raise OutOfRangeError(f"Card {global_id} does not belong to any stage")
