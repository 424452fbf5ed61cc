"""Declarative index parameters loaded and validated from JSON-like dicts."""

from __future__ import annotations

import enum
import logging
import math
import os
import struct
from typing import Any

from vecindex.errors import KnowhereError, Status

logger = logging.getLogger(__name__)

INT32_MAX = 2**31 - 1
FLOAT32_MAX = 3.4028234663852886e38

DEFAULT_RANGE_FILTER = math.inf

_KINDS = (int, float, str, list, bool)


class ParamType(enum.IntFlag):
    """Operations a parameter takes part in."""

    TRAIN = 1 << 0
    SEARCH = 1 << 1
    RANGE_SEARCH = 1 << 2
    FEDER = 1 << 3
    DESERIALIZE = 1 << 4
    DESERIALIZE_FROM_FILE = 1 << 5
    ITERATOR = 1 << 6


def _to_float32(value: float) -> float:
    """Round a number to the nearest single-precision value."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _fail(status: Status, log_message: str, message: str) -> KnowhereError:
    logger.error(log_message)
    return KnowhereError(status, message)


class Entry:
    """One declared parameter: its kind, current value, default and constraints."""

    def __init__(self, kind: type) -> None:
        if kind not in _KINDS:
            raise TypeError(f"unsupported parameter kind: {kind!r}")
        self.kind = kind
        self.value: Any = None
        self.default: Any = None
        self.type = ParamType(0)
        self.range: tuple[Any, Any] | None = None
        self.desc: str | None = None
        self.allow_empty = False

    def _coerce(self, value: Any) -> Any:
        if self.kind is float:
            return _to_float32(float(value))
        if self.kind is int:
            return int(value)
        if self.kind is list:
            return list(value)
        return value

    def set_default(self, value: Any) -> Entry:
        self.default = self._coerce(value)
        self.value = self._coerce(value)
        return self

    def set_range(self, low: Any, high: Any) -> Entry:
        if self.kind not in (int, float):
            raise TypeError("a range applies only to integer and float parameters")
        self.range = (self._coerce(low), self._coerce(high))
        return self

    def allow_empty_without_default(self) -> Entry:
        self.allow_empty = True
        return self

    def description(self, desc: str) -> Entry:
        self.desc = desc
        return self

    def for_train(self) -> Entry:
        self.type |= ParamType.TRAIN
        return self

    def for_search(self) -> Entry:
        self.type |= ParamType.SEARCH
        return self

    def for_range_search(self) -> Entry:
        self.type |= ParamType.RANGE_SEARCH
        return self

    def for_iterator(self) -> Entry:
        self.type |= ParamType.ITERATOR
        return self

    def for_feder(self) -> Entry:
        self.type |= ParamType.FEDER
        return self

    def for_deserialize(self) -> Entry:
        self.type |= ParamType.DESERIALIZE
        return self

    def for_deserialize_from_file(self) -> Entry:
        self.type |= ParamType.DESERIALIZE_FROM_FILE
        return self

    def for_train_and_search(self) -> Entry:
        self.type |= ParamType.TRAIN | ParamType.SEARCH | ParamType.RANGE_SEARCH
        return self


class Config:
    """A set of declared parameters that can be loaded from a JSON object."""

    def __init__(self) -> None:
        self._entries: dict[str, Entry] = {}

    def declare(self, name: str, kind: type) -> Entry:
        """Declare a parameter and return its entry for further setup."""
        entry = Entry(kind)
        self._entries[name] = entry
        return entry

    def __getitem__(self, name: str) -> Any:
        return self._entries[name].value

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def load(self, json: dict, param_type: ParamType) -> None:
        """Fill the parameters used by ``param_type`` from ``json``.

        Raises KnowhereError on a missing, mistyped or out-of-range value.
        """
        for name, entry in self._entries.items():
            if not (param_type & entry.type):
                continue
            if name not in json:
                if entry.default is None:
                    if entry.allow_empty:
                        continue
                    raise _fail(
                        Status.invalid_param_in_json,
                        f"Invalid param [{name}] in json.",
                        f"invalid param {name}",
                    )
                entry.value = entry._coerce(entry.default)
                continue
            entry.value = self._load_value(name, entry, json[name])

    def _check_entries(self, param_type: ParamType) -> None:
        """Verify that the current values used by ``param_type`` lie in their ranges."""
        for name, entry in self._entries.items():
            if not (param_type & entry.type) or entry.range is None:
                continue
            if entry.value is None:
                continue
            low, high = entry.range
            if not low <= entry.value <= high:
                raise _fail(
                    Status.out_of_range_in_json,
                    f"Out of range: param [{name}] should be in [{low}, {high}].",
                    f"param {name} out of range [ {low},{high} ]",
                )

    @staticmethod
    def _load_value(name: str, entry: Entry, raw: Any) -> Any:
        if entry.kind is int:
            if not _is_integer(raw):
                raise _fail(
                    Status.type_conflict_in_json,
                    f"Type conflict in json: param [{name}] should be integer.",
                    f"param {name} should be integer",
                )
            if entry.range is None:
                return raw
            if raw > INT32_MAX:
                raise _fail(
                    Status.arithmetic_overflow,
                    f"Arithmetic overflow: param [{name}] should be at most {INT32_MAX}",
                    f"param {name} should be at most 2147483647",
                )
            low, high = entry.range
            if low <= raw <= high:
                return raw
            raise _fail(
                Status.out_of_range_in_json,
                f"Out of range in json: param [{name}] should be in [{low}, {high}].",
                f"param {name} out of range [ {low},{high} ]",
            )

        if entry.kind is float:
            if not _is_number(raw):
                raise _fail(
                    Status.type_conflict_in_json,
                    f"Type conflict in json: param [{name}] should be a number.",
                    f"param {name} should be a number",
                )
            if entry.range is None:
                return _to_float32(float(raw))
            if float(raw) > FLOAT32_MAX:
                raise _fail(
                    Status.arithmetic_overflow,
                    f"Arithmetic overflow: param [{name}] should be at most {FLOAT32_MAX:e}",
                    f"param {name} should be at most 3.402823e+38",
                )
            value = _to_float32(float(raw))
            low, high = entry.range
            if low <= value <= high:
                return value
            raise _fail(
                Status.out_of_range_in_json,
                f"Out of range in json: param [{name}] should be in [{low}, {high}].",
                f"param {name} out of range [ {low:f},{high:f} ]",
            )

        if entry.kind is str:
            if not isinstance(raw, str):
                raise _fail(
                    Status.type_conflict_in_json,
                    f"Type conflict in json: param [{name}] should be a string.",
                    f"param {name} should be a string",
                )
            return raw

        if entry.kind is list:
            if not isinstance(raw, (list, tuple)):
                raise _fail(
                    Status.type_conflict_in_json,
                    f"Type conflict in json: param [{name}] should be an array.",
                    f"param {name} should be an array",
                )
            if not all(_is_number(item) or isinstance(item, bool) for item in raw):
                raise _fail(
                    Status.type_conflict_in_json,
                    f"Type conflict in json: param [{name}] should be an array of integers.",
                    f"param {name} should be an array of integers",
                )
            return [int(item) for item in raw]

        if not isinstance(raw, bool):
            raise _fail(
                Status.type_conflict_in_json,
                f"Type conflict in json: param [{name}] should be a boolean.",
                f"param {name} should be a boolean",
            )
        return raw


class BaseConfig(Config):
    """Parameters shared by every index type."""

    def __init__(self) -> None:
        super().__init__()
        self.declare("metric_type", str).set_default("L2").description(
            "metric type"
        ).for_train_and_search()
        self.declare("k", int).set_default(10).description(
            "search for top k similar vector."
        ).set_range(1, INT32_MAX).for_search()
        self.declare("num_build_thread", int).description(
            "index thread limit for build."
        ).allow_empty_without_default().set_range(1, os.cpu_count() or 1).for_train()
        self.declare("radius", float).set_default(0.0).description(
            "radius for range search"
        ).for_range_search()
        self.declare("range_filter", float).set_default(DEFAULT_RANGE_FILTER).description(
            "result filter for range search"
        ).for_range_search()
        self.declare("trace_visit", bool).set_default(False).description(
            "trace visit for feder"
        ).for_search().for_range_search()
        self.declare("enable_mmap", bool).set_default(False).description(
            "enable mmap for load index"
        ).for_deserialize_from_file()
        self.declare("for_tuning", bool).set_default(False).description(
            "for tuning"
        ).for_search()

    def check_and_adjust_for_search(self) -> None:
        """Verify the search parameters; raises KnowhereError if one is out of range."""
        self._check_entries(ParamType.SEARCH)

    def check_and_adjust_for_range_search(self) -> None:
        """Verify the range-search parameters; raises KnowhereError if one is out of range."""
        self._check_entries(ParamType.RANGE_SEARCH)

    def check_and_adjust_for_iterator(self) -> None:
        """Verify the iterator parameters; raises KnowhereError if one is out of range."""
        self._check_entries(ParamType.ITERATOR)

    def check_and_adjust_for_build(self) -> None:
        """Verify the build parameters; raises KnowhereError if one is out of range."""
        self._check_entries(ParamType.TRAIN)