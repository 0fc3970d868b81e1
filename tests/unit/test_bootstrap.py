import logging
import os

import pytest

from envloader import EnvLoader, create_loader, exit_on_config_error, load_env_file


def test_load_env_file_sets_missing_variables(tmp_path, env_name):
    env_file = tmp_path / ".env"
    env_file.write_text(f"{env_name}=from_file\n")

    assert load_env_file(env_file) is True
    assert os.environ[env_name] == "from_file"


def test_load_env_file_keeps_existing_unless_override(tmp_path, monkeypatch, env_name):
    env_file = tmp_path / ".env"
    env_file.write_text(f"{env_name}=from_file\n")
    monkeypatch.setenv(env_name, "from_env")

    load_env_file(env_file)
    assert os.environ[env_name] == "from_env"

    load_env_file(env_file, override=True)
    assert os.environ[env_name] == "from_file"


def test_load_env_file_returns_false_when_missing(tmp_path):
    assert load_env_file(tmp_path / "nope.env") is False


def test_create_loader_reads_env_file(tmp_path, env_name):
    env_file = tmp_path / ".env"
    env_file.write_text(f"{env_name}=8080\n")
    loader = create_loader(env_file=env_file)

    assert isinstance(loader, EnvLoader)
    assert loader.get_int(env_name) == 8080


def test_create_loader_with_injected_environ():
    loader = create_loader(load_dotenv_file=False, environ={"MODE": "test"})
    assert loader.get_str("MODE") == "test"


def test_exit_on_config_error_exits_with_code_2(caplog, env_name):
    loader = EnvLoader()

    with caplog.at_level(logging.ERROR, logger="envloader.boot"):
        with pytest.raises(SystemExit) as exc:
            with exit_on_config_error():
                loader.get_str(env_name)

    assert exc.value.code == 2
    assert any(getattr(r, "code", None) == "missing_variable" for r in caplog.records)


def test_exit_on_config_error_passes_other_errors_through():
    with pytest.raises(KeyError):
        with exit_on_config_error():
            raise KeyError("boom")


def test_exit_on_config_error_is_silent_on_success():
    loader = EnvLoader(environ={"OK": "1"})
    with exit_on_config_error():
        assert loader.get_bool("OK") is True
