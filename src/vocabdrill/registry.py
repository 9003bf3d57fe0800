"""Stage registry: stage number -> (range_start, range_end, content_handle).

Built once at startup. Adding a stage is a registry insertion; the
identifier mapper and the content store both read ranges from here.
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from vocabdrill.constants import STAGE_WIDTH
from vocabdrill.errors import NotFoundError
from vocabdrill.models.vocabulary import StageRange

logger = logging.getLogger(__name__)


class StageRegistry:
    """Registry of stages and the contiguous global id ranges they own."""

    def __init__(self, stage_width: int = STAGE_WIDTH):
        if stage_width < 1:
            raise ValueError(f"stage_width must be positive, got {stage_width}")
        self.stage_width = stage_width
        self._entries: Dict[int, StageRange] = {}

    @classmethod
    def with_stages(
        cls,
        stages: List[int],
        stage_width: int = STAGE_WIDTH,
        content_root: Optional[Union[str, Path]] = None,
    ) -> "StageRegistry":
        """Declare fixed-width stages, optionally pointing each at ``content_root/<stage>``."""
        registry = cls(stage_width=stage_width)
        for stage in stages:
            handle = Path(content_root) / str(stage) if content_root is not None else None
            registry.declare(stage, content_handle=handle)
        return registry

    def default_range(self, stage: int) -> tuple[int, int]:
        """Fixed-width range for ``stage``: ``[(n-1)*W + 1, n*W]``."""
        start = (stage - 1) * self.stage_width + 1
        return start, stage * self.stage_width

    def declare(
        self,
        stage: int,
        range_start: Optional[int] = None,
        range_end: Optional[int] = None,
        content_handle: Optional[Union[str, Path]] = None,
    ) -> StageRange:
        """Register a stage.

        Without explicit bounds the stage gets its fixed-width default range.

        Raises:
            ValueError: If the stage is already declared or its range overlaps
                another stage's range
        """
        if stage < 1:
            raise ValueError(f"Stage must be a positive integer, got {stage}")
        if stage in self._entries:
            raise ValueError(f"Stage {stage} is already declared")

        default_start, default_end = self.default_range(stage)
        entry = StageRange(
            stage=stage,
            range_start=default_start if range_start is None else range_start,
            range_end=default_end if range_end is None else range_end,
            content_handle=str(content_handle) if content_handle is not None else None,
        )

        for other in self._entries.values():
            if entry.overlaps(other):
                raise ValueError(
                    f"Stage {stage} range [{entry.range_start}, {entry.range_end}] overlaps "
                    f"stage {other.stage} range [{other.range_start}, {other.range_end}]"
                )

        self._entries[stage] = entry
        logger.debug(
            f"Declared stage {stage}: ids {entry.range_start}-{entry.range_end}"
        )
        return entry

    def get(self, stage: int) -> StageRange:
        """Registry entry for ``stage``.

        Raises:
            NotFoundError: If the stage is not declared
        """
        try:
            return self._entries[stage]
        except KeyError:
            raise NotFoundError(f"Stage {stage} not found") from None

    def stages(self) -> List[int]:
        return sorted(self._entries)

    def __contains__(self, stage: object) -> bool:
        return stage in self._entries

    def __iter__(self) -> Iterator[StageRange]:
        return iter(self._entries[stage] for stage in self.stages())

    def __len__(self) -> int:
        return len(self._entries)
