"""Validate a vocabulary content directory.

Loads every stage the way a session would and reports per-stage card
counts. Exits non-zero on the first problem (missing language file,
desynchronized ids, ids outside the stage's range, malformed records).

Usage:
    python -m vocabdrill.cli.validate_content --content-dir data/vocabulary
"""

import argparse
import logging
import sys
from typing import List, Optional

from vocabdrill.constants import (
    CONTENT_DIR,
    LEARNING_LANGUAGE,
    LOG_FORMAT,
    LOG_LEVEL,
    NATIVE_LANGUAGE,
    STAGE_WIDTH,
)
from vocabdrill.content_store import ContentStore
from vocabdrill.errors import VocabDrillError
from vocabdrill.parsers.content_parsers import available_languages
from vocabdrill.utils.logging_config import configure_logging, timed_operation

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Validate vocabulary content files"
    )

    parser.add_argument(
        "--content-dir",
        default=str(CONTENT_DIR),
        help="Directory with <stage>/<language>.json content"
    )
    parser.add_argument(
        "--learning-language",
        default=LEARNING_LANGUAGE,
        help="Language being learned (name or ISO 639-1 code)"
    )
    parser.add_argument(
        "--native-language",
        default=NATIVE_LANGUAGE,
        help="Language of the translations (name or ISO 639-1 code)"
    )
    parser.add_argument(
        "--stage-width",
        type=int,
        default=STAGE_WIDTH,
        help="Cards per stage (default: %(default)s)"
    )
    parser.add_argument(
        "--stage",
        type=int,
        action="append",
        dest="stages",
        help="Only validate this stage (repeatable)"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for content validation."""
    args = parse_args(argv)

    configure_logging(level=LOG_LEVEL, json_format=LOG_FORMAT == "json")

    try:
        with timed_operation("validate_content", content_dir=args.content_dir):
            store = ContentStore.from_directory(
                args.content_dir,
                stage_width=args.stage_width,
                learning_language=args.learning_language,
                native_language=args.native_language,
                stages=args.stages,
            )
    except (VocabDrillError, ValueError) as e:
        print(f"INVALID: {e}")
        return 1

    for entry in store.registry:
        extra = sorted(set(available_languages(entry.content_handle)) - set(store.languages))
        note = f" (ignored languages: {', '.join(extra)})" if extra else ""
        print(
            f"Stage {entry.stage}: {store.count(entry.stage)} cards, "
            f"ids {entry.range_start}-{entry.range_end}{note}"
        )

    print(f"OK: {len(store.stages())} stages")
    return 0


if __name__ == "__main__":
    sys.exit(main())
