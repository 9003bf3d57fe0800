"""Parsers for static vocabulary content files."""

from vocabdrill.parsers.content_parsers import (
    available_languages,
    discover_stage_dirs,
    load_stage_languages,
    parse_vocabulary_json,
    parse_vocabulary_records,
)

__all__ = [
    "available_languages",
    "discover_stage_dirs",
    "load_stage_languages",
    "parse_vocabulary_json",
    "parse_vocabulary_records",
]
