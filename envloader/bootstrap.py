"""
Startup helpers: .env loading, loader construction and the single place
where configuration errors turn into process exit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .loader import EnvLoader
from .utils import ConfigError, get_logger

EXIT_CONFIG_ERROR = 2


def load_env_file(path: str | Path | None = None, *, override: bool = False) -> bool:
    """Loads a .env file into os.environ. Returns False when none was found."""
    log = get_logger("envloader.boot")
    env_path = str(path) if path is not None else find_dotenv(usecwd=True)
    if not env_path or not Path(env_path).is_file():
        log.debug("no .env file loaded", extra={"path": env_path or None})
        return False
    load_dotenv(dotenv_path=env_path, override=override)
    log.info("env file loaded", extra={"path": env_path, "override": override})
    return True


def create_loader(
    *,
    env_file: str | Path | None = None,
    load_dotenv_file: bool = True,
    environ: Mapping[str, str] | None = None,
) -> EnvLoader:
    """Builds the process loader; call once at startup and share it."""
    if load_dotenv_file:
        load_env_file(env_file)
    return EnvLoader(environ=environ)


@contextmanager
def exit_on_config_error(logger: logging.Logger | None = None) -> Iterator[None]:
    """Turns a ConfigError raised during startup into SystemExit(2)."""
    log = logger or get_logger("envloader.boot")
    try:
        yield
    except ConfigError as e:
        log.error("invalid configuration: %s", e, extra={"var": e.name, "code": e.code.value})
        raise SystemExit(EXIT_CONFIG_ERROR) from e
