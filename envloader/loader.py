from __future__ import annotations

import os
import threading
from collections.abc import Mapping

from .conversions import ResolvedValue, Value, ValueKind
from .utils import InvalidFormatError, MissingVariableError, get_logger

log = get_logger("envloader.loader")


class EnvLoader:
    """
    Typed, memoized access to environment variables.

    The first successful resolution of a name (including a default) is kept
    for the lifetime of the instance. Failed lookups are not cached.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ
        self._lock = threading.Lock()
        self._cache: dict[str, ResolvedValue] = {}

    def get_str(self, name: str) -> str:
        return self._resolve(name, ValueKind.STRING, "", required=True)

    def get_str_or(self, name: str, default: str) -> str:
        return self._resolve(name, ValueKind.STRING, default, required=False)

    def get_int(self, name: str) -> int:
        return self._resolve(name, ValueKind.INTEGER, 0, required=True)

    def get_int_or(self, name: str, default: int) -> int:
        return self._resolve(name, ValueKind.INTEGER, default, required=False)

    def get_bool(self, name: str) -> bool:
        return self._resolve(name, ValueKind.BOOLEAN, False, required=True)

    def get_bool_or(self, name: str, default: bool) -> bool:
        return self._resolve(name, ValueKind.BOOLEAN, default, required=False)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def _resolve(self, name: str, kind: ValueKind, default: Value, *, required: bool):
        with self._lock:
            cached = self._cache.get(name)
            if cached is not None:
                if cached.kind is not kind:
                    log.warning("cached kind mismatch", extra={"var": name, "cached": cached.kind.label, "requested": kind.label})
                    raise InvalidFormatError(name, kind.label)
                return cached.value

            raw = self._environ.get(name, "")
            # empty string counts as unset
            if raw == "":
                if required:
                    log.warning("required variable missing", extra={"var": name})
                    raise MissingVariableError(name)
                value, source = default, "default"
            else:
                try:
                    value = kind.convert(raw)
                except ValueError as e:
                    log.warning("invalid variable format", extra={"var": name, "format": kind.label})
                    raise InvalidFormatError(name, kind.label) from e
                source = "env"

            self._cache[name] = ResolvedValue(kind, value)
            log.debug("variable resolved", extra={"var": name, "kind": kind.name, "source": source})
            return value
