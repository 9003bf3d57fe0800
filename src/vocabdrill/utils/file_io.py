"""Reading and writing vocabulary content files.

Content is laid out as ``<content_dir>/<stage>/<language>.json``, one JSON
list of card records per file.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
CONTENT_SUFFIX = ".json"


def read_json(path: PathLike) -> Any:
    """Load one content file.

    Raises:
        FileNotFoundError: If ``path`` does not exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    path = Path(path)
    logger.debug(f"Loading {path}")
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def write_json(data: Union[Dict[str, Any], List[Any]], path: PathLike) -> Path:
    """Save ``data`` as UTF-8 JSON, creating the stage directory if needed.

    Accented words stay readable in the file (no ``\\u`` escapes).
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=2, ensure_ascii=False)
    logger.debug(f"Saved {path}")
    return path


def stage_file(content_dir: PathLike, stage: int, language: str) -> Path:
    """Where the ``language`` cards of ``stage`` live; existence is not checked.

    Example:
        >>> stage_file("data/vocabulary", 2, "es")
        PosixPath('data/vocabulary/2/es.json')
    """
    return Path(content_dir) / str(stage) / f"{language}{CONTENT_SUFFIX}"


def language_files(stage_dir: PathLike) -> Dict[str, Path]:
    """Content files of one stage directory keyed by language code, sorted by code."""
    stage_dir = Path(stage_dir)
    if not stage_dir.is_dir():
        logger.warning(f"Stage directory does not exist: {stage_dir}")
        return {}

    found = {
        path.stem: path
        for path in stage_dir.iterdir()
        if path.is_file() and path.suffix == CONTENT_SUFFIX
    }
    return dict(sorted(found.items()))
