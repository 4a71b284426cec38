"""
Infrastructure exceptions raised by adapters.

Business outcomes never use these; they travel as ``Error`` values inside a
``Result``.
"""


class StoreUnavailableError(Exception):
    """A store call failed transiently (timeout, lost connection, locked database)."""


class DuplicateRecordError(Exception):
    """An insert hit a unique constraint."""


class StoreCommitUncertainError(Exception):
    """A commit failed transiently and may or may not have been applied.

    Never retried: replaying the operation could contradict a write that landed.
    """
