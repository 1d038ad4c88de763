"""Tests for ConfigFileReader."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from consumer_config.errors import ConfigFileError, PathResolutionError
from consumer_config.reader import ConfigFileReader


def test_read_absolute_path(tmp_path):
    path = tmp_path / "worker.conf"
    path.write_text("[RabbitMq]\nhost = broker\n", encoding="utf-8")

    assert ConfigFileReader().read(path) == "[RabbitMq]\nhost = broker\n"


def test_resolve_relative_path_against_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    resolved = ConfigFileReader().resolve("conf/worker.conf")

    assert resolved.is_absolute()
    assert resolved == Path.cwd() / "conf" / "worker.conf"


def test_read_relative_path(tmp_path, monkeypatch):
    (tmp_path / "worker.conf").write_text("[Logs]\ninfo = info.log\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert ConfigFileReader().read("worker.conf") == "[Logs]\ninfo = info.log\n"


def test_resolve_keeps_absolute_path(tmp_path):
    path = tmp_path / "worker.conf"

    assert ConfigFileReader().resolve(str(path)) == path


def test_missing_file_raises_config_file_error(tmp_path):
    with pytest.raises(ConfigFileError) as excinfo:
        ConfigFileReader().read(tmp_path / "missing.conf")

    assert isinstance(excinfo.value, OSError)
    assert excinfo.value.filename == str(tmp_path / "missing.conf")
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_directory_raises_config_file_error(tmp_path):
    with pytest.raises(ConfigFileError):
        ConfigFileReader().read(tmp_path)


def test_invalid_encoding_raises_config_file_error(tmp_path):
    path = tmp_path / "worker.conf"
    path.write_bytes(b"[RabbitMq]\nhost = \xff\xfe\n")

    with pytest.raises(ConfigFileError):
        ConfigFileReader().read(path)


def test_unresolvable_cwd_raises_path_resolution_error():
    with patch(
        "consumer_config.reader.config_file_reader.os.path.abspath",
        side_effect=FileNotFoundError(2, "No such file or directory"),
    ):
        with pytest.raises(PathResolutionError):
            ConfigFileReader().resolve("worker.conf")


def test_absolute_path_does_not_touch_cwd(tmp_path):
    with patch(
        "consumer_config.reader.config_file_reader.os.path.abspath",
        side_effect=AssertionError("cwd lookup"),
    ):
        assert ConfigFileReader().resolve(tmp_path / "worker.conf") == tmp_path / "worker.conf"


def test_resolved_path_matches_os_abspath(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert str(ConfigFileReader().resolve("a/../b.conf")) == os.path.abspath("a/../b.conf")


def test_read_strips_byte_order_mark(tmp_path):
    path = tmp_path / "worker.conf"
    path.write_bytes(b"\xef\xbb\xbf[RabbitMq]\nhost = broker\n")

    assert ConfigFileReader().read(path) == "[RabbitMq]\nhost = broker\n"
