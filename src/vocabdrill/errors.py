"""Error kinds raised by the session engine.

Every error here is recoverable: the rendering layer catches
``VocabDrillError``, shows ``str(error)`` and lets the learner navigate away.
"""


class VocabDrillError(Exception):
    """Base class for validation failures on fully-loaded static content."""
    pass


class OutOfRangeError(VocabDrillError):
    """Raised when a card identifier or index falls outside its stage's range."""
    pass


class NotFoundError(VocabDrillError):
    """Raised when a stage, language or card has no registered content."""
    pass


class ContentMismatchError(VocabDrillError):
    """Raised when the two language lists of a stage are desynchronized."""
    pass
