"""
Loader capability consumed by components that need configuration.
Depend on this protocol, not on a concrete loader.
"""

from __future__ import annotations

from typing import Protocol


class Loader(Protocol):
    def get_str(self, name: str) -> str: ...
    def get_str_or(self, name: str, default: str) -> str: ...

    def get_int(self, name: str) -> int: ...
    def get_int_or(self, name: str, default: int) -> int: ...

    def get_bool(self, name: str) -> bool: ...
    def get_bool_or(self, name: str, default: bool) -> bool: ...
