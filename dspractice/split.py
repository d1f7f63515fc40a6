"""Splitting delimited text into typed values."""

from __future__ import annotations

import re
import struct
from enum import Enum
from typing import Callable, List, Union

MAX_SPLIT_STR_BUF_LEN = 512
STRING_DELIMITER = "|"

_INT32_MIN = -(2**31)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_C_SPACE = " \t\n\v\f\r"
_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

Value = Union[int, float, str]


class SplitType(Enum):
    """The kind of values a :class:`StringSplit` currently holds."""

    UNKNOWN = -1
    INT = 0
    BIG_INT = 1
    FLOAT = 2
    STRING = 3


def _tokens(text: str, sep: str) -> List[str]:
    """Split on any character of ``sep``, dropping empty tokens."""
    tokens: List[str] = []
    current: List[str] = []
    for ch in text:
        if ch in sep:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        tokens.append("".join(current))
    return tokens


def _leading_int(token: str) -> int:
    match = _INT_PREFIX.match(token.lstrip(_C_SPACE))
    return int(match.group()) if match else 0


def _to_int32(token: str) -> int:
    value = _leading_int(token) & 0xFFFFFFFF
    return value + 2 * _INT32_MIN if value > 0x7FFFFFFF else value


def _to_int64(token: str) -> int:
    return min(max(_leading_int(token), _INT64_MIN), _INT64_MAX)


def _to_float32(token: str) -> float:
    match = _FLOAT_PREFIX.match(token.lstrip(_C_SPACE))
    value = float(match.group()) if match else 0.0
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return float("inf") if value > 0 else float("-inf")


def _to_string(token: str) -> str:
    return token[: MAX_SPLIT_STR_BUF_LEN - 1]


class StringSplit:
    """Text and a set of separator characters, split on demand into typed values."""

    def __init__(self, text: str, sep: str = STRING_DELIMITER):
        if text is None or sep is None:
            raise ValueError("text and separator must both be given")
        self.text = text
        self.sep = sep
        self.type = SplitType.UNKNOWN
        self._values: List[Value] = []

    def _convert(self, kind: SplitType, convert: Callable[[str], Value]) -> int:
        self.type = kind
        self._values = [convert(token) for token in _tokens(self.text, self.sep)]
        return len(self._values)

    def convert_to_int(self) -> int:
        """Read every token as a 32-bit integer; return the number of tokens."""
        return self._convert(SplitType.INT, _to_int32)

    def convert_to_big_int(self) -> int:
        """Read every token as a 64-bit integer; return the number of tokens."""
        return self._convert(SplitType.BIG_INT, _to_int64)

    def convert_to_float(self) -> int:
        """Read every token as a single-precision float; return the number of tokens."""
        return self._convert(SplitType.FLOAT, _to_float32)

    def convert_to_string(self) -> int:
        """Keep every token as text, cut to the buffer limit; return the number of tokens."""
        return self._convert(SplitType.STRING, _to_string)

    def __len__(self) -> int:
        return len(self._values)

    def _get(self, kind: SplitType, idx: int) -> Value:
        if self.type is not kind:
            raise TypeError(f"values are {self.type.name}, not {kind.name}")
        if not 0 <= idx < len(self._values):
            raise IndexError(f"index {idx} out of range")
        return self._values[idx]

    def get_int(self, idx: int) -> int:
        return self._get(SplitType.INT, idx)

    def get_big_int(self, idx: int) -> int:
        return self._get(SplitType.BIG_INT, idx)

    def get_float(self, idx: int) -> float:
        return self._get(SplitType.FLOAT, idx)

    def get_string(self, idx: int) -> str:
        return self._get(SplitType.STRING, idx)


def str_tok(text: str, sep: str = STRING_DELIMITER) -> List[str]:
    """Split ``text`` on any character of ``sep``, skipping empty pieces."""
    return _tokens(text, sep)


def string_tok(text: str, sep: str = "") -> List[str]:
    """Split ``text`` on any character of ``sep``.

    Raises ValueError when a token is due but only separators remain, as
    happens with two or more trailing separators.
    """
    tokens: List[str] = []
    length = len(text)
    pos = 0
    while pos < length:
        while pos < length and text[pos] in sep:
            pos += 1
        if pos >= length:
            raise ValueError("only separators remain where a token was expected")
        end = pos
        while end < length and text[end] not in sep:
            end += 1
        tokens.append(text[pos:end])
        pos = end + 1
    return tokens