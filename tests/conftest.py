"""Shared fixtures: synthetic Spanish/English stage content."""

from typing import Dict, List

import pytest

from vocabdrill.content_store import ContentStore
from vocabdrill.favorites import FavoritesStore
from vocabdrill.navigator import SessionNavigator
from vocabdrill.registry import StageRegistry
from vocabdrill.resolver import CardResolver
from vocabdrill.utils.file_io import stage_file, write_json

STAGE_WIDTH = 20


def make_stage_records(stage: int, count: int = STAGE_WIDTH) -> Dict[str, List[dict]]:
    """Records for one stage: ids start at the stage's range start."""
    start = (stage - 1) * STAGE_WIDTH + 1
    ids = range(start, start + count)
    return {
        "es": [{"id": i, "word": f"palabra {i}", "example": f"Ejemplo {i}."} for i in ids],
        "en": [{"id": i, "word": f"word {i}", "example": f"Example {i}."} for i in ids],
    }


@pytest.fixture
def stage_records():
    """The record builder, for tests that need to tamper with content."""
    return make_stage_records


@pytest.fixture
def registry():
    """Stages 1-3 declared with the default 20-card ranges."""
    return StageRegistry.with_stages([1, 2, 3], stage_width=STAGE_WIDTH)


@pytest.fixture
def content(registry):
    """Stages 1 and 2 fully loaded; stage 3 declared but without content."""
    return ContentStore.from_records(
        registry,
        {1: make_stage_records(1), 2: make_stage_records(2)},
        learning_language="es",
        native_language="en",
    )


@pytest.fixture
def resolver(content):
    return CardResolver(content)


@pytest.fixture
def favorites():
    return FavoritesStore()


@pytest.fixture
def spoken():
    """Collects (text, locale) pairs passed to the speaker."""
    return []


@pytest.fixture
def navigator(resolver, favorites, spoken):
    return SessionNavigator(
        resolver,
        favorites,
        speak=lambda text, locale: spoken.append((text, locale)),
    )


@pytest.fixture
def content_dir(tmp_path):
    """Content directory with stages 1 and 2 on disk."""
    root = tmp_path / "vocabulary"
    for stage in (1, 2):
        for language, records in make_stage_records(stage).items():
            write_json(records, stage_file(root, stage, language))
    return root
