import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

Value = Union[str, int, bool]

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


def parse_string(text: str) -> str:
    return text


def parse_int(text: str) -> int:
    """Parses a base-10 signed 64-bit integer (no whitespace, no underscores)."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    num = int(text)
    if num < _INT_MIN or num > _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return num


def parse_bool(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"invalid boolean: {text!r}")


class ValueKind(str, Enum):
    """Supported value types, valued by their format label."""
    STRING = "[STRING]"
    INTEGER = "[INTEGER]"
    BOOLEAN = "[BOOLEAN]"

    @property
    def label(self) -> str:
        return self.value

    @property
    def convert(self) -> Callable[[str], Value]:
        return _CONVERTERS[self]


_CONVERTERS: dict[ValueKind, Callable[[str], Value]] = {
    ValueKind.STRING: parse_string,
    ValueKind.INTEGER: parse_int,
    ValueKind.BOOLEAN: parse_bool,
}


@dataclass(frozen=True)
class ResolvedValue:
    """
    Cached lookup result tagged with its kind.
    bool is an int subclass, so the tag is what tells them apart.
    """
    kind: ValueKind
    value: Value
