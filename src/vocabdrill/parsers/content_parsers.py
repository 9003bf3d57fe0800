"""Parsers for static vocabulary content.

Each stage directory holds one JSON file per language, each a list of
records shaped like:

    [
        {"id": 21, "word": "la casa", "example": "Mi casa es pequeña."},
        ...
    ]

Records are validated into VocabularyCard models; ordering is preserved.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from pydantic import ValidationError

from vocabdrill.errors import NotFoundError
from vocabdrill.models.vocabulary import VocabularyCard
from vocabdrill.utils.file_io import language_files, read_json

logger = logging.getLogger(__name__)


def parse_vocabulary_records(
    records: Any, source: str = "<memory>"
) -> List[VocabularyCard]:
    """Validate raw parsed records into VocabularyCard models.

    Args:
        records: Parsed JSON content, expected to be a list of dicts
        source: Label used in error messages (usually the file path)

    Returns:
        List of VocabularyCard in the original order

    Raises:
        ValueError: If the content is not a list or a record fails validation
    """
    if not isinstance(records, list):
        raise ValueError(
            f"{source}: expected a list of vocabulary records, got {type(records).__name__}"
        )

    cards = []
    for position, record in enumerate(records):
        try:
            cards.append(VocabularyCard.model_validate(record))
        except ValidationError as e:
            raise ValueError(f"{source}: invalid record at position {position}: {e}") from e

    return cards


def parse_vocabulary_json(source_path: Union[str, Path]) -> List[VocabularyCard]:
    """Parse one language file of a stage.

    Args:
        source_path: Path to a ``<language>.json`` file

    Returns:
        List of VocabularyCard in file order
    """
    source_path = Path(source_path)
    cards = parse_vocabulary_records(read_json(source_path), source=str(source_path))
    logger.debug(f"Parsed {len(cards)} cards from {source_path}")
    return cards


def discover_stage_dirs(content_root: Union[str, Path]) -> Dict[int, Path]:
    """Find stage directories (numeric names) under ``content_root``.

    Example:
        >>> discover_stage_dirs("data/vocabulary")
        {1: Path('data/vocabulary/1'), 2: Path('data/vocabulary/2')}
    """
    content_root = Path(content_root)
    if not content_root.is_dir():
        raise NotFoundError(f"Content directory not found: {content_root}")

    stage_dirs = {}
    for child in content_root.iterdir():
        if child.is_dir() and child.name.isdigit() and int(child.name) >= 1:
            stage_dirs[int(child.name)] = child
        elif child.is_dir():
            logger.debug(f"Skipping non-stage directory {child}")

    return dict(sorted(stage_dirs.items()))


def available_languages(stage_dir: Union[str, Path]) -> List[str]:
    """Language codes that have a JSON file in ``stage_dir``."""
    return list(language_files(stage_dir))


def load_stage_languages(
    stage_dir: Union[str, Path], languages: Iterable[str]
) -> Dict[str, List[VocabularyCard]]:
    """Load every requested language file of one stage.

    Raises:
        NotFoundError: If a language file is missing
        ValueError: If a file holds invalid records
    """
    stage_dir = Path(stage_dir)
    files = language_files(stage_dir)
    loaded = {}
    for language in languages:
        if language not in files:
            raise NotFoundError(f"Stage {stage_dir.name} for language {language} not found")
        loaded[language] = parse_vocabulary_json(files[language])
    return loaded
