"""Session-scoped favorites: a set of (stage, global_id) keys.

Created fresh for every session and discarded with it; there is no
serialization hook.
"""

import logging
from typing import List, Set

from vocabdrill.models.session import FavoriteKey

logger = logging.getLogger(__name__)


class FavoritesStore:
    """Set of favorite cards with O(1) toggle, query and removal."""

    def __init__(self):
        self._keys: Set[FavoriteKey] = set()

    def toggle(self, stage: int, global_id: int) -> bool:
        """Add the card if absent, remove it if present.

        Returns:
            True if the card is a favorite after the call
        """
        key = FavoriteKey(stage, global_id)
        if key in self._keys:
            self._keys.remove(key)
            logger.debug(f"Removed favorite {key}")
            return False
        self._keys.add(key)
        logger.debug(f"Added favorite {key}")
        return True

    def is_favorite(self, stage: int, global_id: int) -> bool:
        return FavoriteKey(stage, global_id) in self._keys

    def remove(self, stage: int, global_id: int) -> None:
        """Remove the card if present; no-op otherwise."""
        self._keys.discard(FavoriteKey(stage, global_id))

    def list_all(self) -> List[FavoriteKey]:
        """All favorites in no particular order."""
        return list(self._keys)

    def count(self) -> int:
        return len(self._keys)

    def clear(self) -> None:
        self._keys.clear()
        logger.debug("Favorites cleared")

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._keys
