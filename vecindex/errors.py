"""Status codes and the exception raised when an index operation fails."""

from __future__ import annotations

import enum


class Status(enum.IntEnum):
    """Result codes of index operations."""

    success = 0
    invalid_args = 1
    invalid_param_in_json = 2
    out_of_range_in_json = 3
    type_conflict_in_json = 4
    invalid_metric_type = 5
    empty_index = 6
    not_implemented = 7
    index_not_trained = 8
    index_already_trained = 9
    faiss_inner_error = 10
    hnsw_inner_error = 12
    malloc_error = 13
    diskann_inner_error = 14
    diskann_file_error = 15
    invalid_value_in_json = 16
    arithmetic_overflow = 17
    raft_inner_error = 18
    invalid_binary_set = 19


class KnowhereError(Exception):
    """An index operation failed with a non-success status."""

    def __init__(self, status: Status, message: str = "") -> None:
        status = Status(status)
        if status is Status.success:
            raise ValueError("KnowhereError requires a failure status")
        super().__init__(message)
        self.status = status
        self.message = message

    def __str__(self) -> str:
        return self.message or self.status.name


def check(condition: object, message: str) -> None:
    """Raise KnowhereError when ``condition`` is false."""
    if not condition:
        raise KnowhereError(Status.invalid_args, f"Error: '{message}' failed")