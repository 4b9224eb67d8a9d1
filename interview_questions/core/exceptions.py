"""Exception classes for the question store.

These are raised inside the store and translated into status messages
at its public boundary.
"""


class QuestionStoreError(Exception):
    """Base exception class for all question store errors."""
    pass


class StorageUnavailableError(QuestionStoreError):
    """The database file could not be opened, read or written."""
    pass


class EmptyQuestionError(QuestionStoreError):
    """Question text was empty or whitespace only."""
    pass


class DuplicateQuestionError(QuestionStoreError):
    """A question with the same text is already stored."""
    pass


class QuestionNotFoundError(QuestionStoreError):
    """No stored question matched both text and category."""
    pass
