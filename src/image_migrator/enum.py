"""Enumeration types for the migration run"""
from enum import Enum


class RowStatus(str, Enum):
    """Outcome of processing a single legacy record"""
    SUCCESS = "success"
    FETCH_FAILED = "fetch_failed"
    INSERT_FAILED = "insert_failed"


class RunStatus(str, Enum):
    """Final state of a migration run

    DONE: every page was read (row failures do not change this)
    FATAL_ABORTED: a page read failed, the run stopped
    """
    DONE = "done"
    FATAL_ABORTED = "fatal_aborted"
