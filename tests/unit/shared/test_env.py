from __future__ import annotations

import logging
import os

import pytest

from garment_forecast.shared.env import load_secret_file_variables


def _unset(monkeypatch: pytest.MonkeyPatch, key: str) -> None:
    monkeypatch.delenv(key, raising=False)


def test_load_secret_file_variables_reads_content(tmp_path, monkeypatch):
    secret_file = tmp_path / "secret.txt"
    secret_file.write_text("s3cr3t\n", encoding="utf-8")

    monkeypatch.setenv("APP_SECRET_FILE", str(secret_file))
    _unset(monkeypatch, "APP_SECRET")

    resolved = load_secret_file_variables()

    assert os.environ["APP_SECRET"] == "s3cr3t"
    assert "APP_SECRET" in resolved


def test_load_secret_file_variables_accepts_custom_mapping(tmp_path):
    secret_file = tmp_path / "mongo_uri"
    secret_file.write_text("mongodb://user:pw@db:27017\n", encoding="utf-8")
    environ = {"DB_MONGO_URI_FILE": str(secret_file)}

    assert load_secret_file_variables(environ) == ["DB_MONGO_URI"]
    assert environ["DB_MONGO_URI"] == "mongodb://user:pw@db:27017"


def test_load_secret_file_variables_logs_missing_file(monkeypatch, caplog):
    monkeypatch.setenv("MISSING_SECRET_FILE", "/tmp/does-not-exist")
    _unset(monkeypatch, "MISSING_SECRET")

    with caplog.at_level(logging.WARNING):
        load_secret_file_variables()

    assert any(record.message == "env.secret_file.missing" for record in caplog.records)


def test_load_secret_file_variables_handles_decode_error(tmp_path, monkeypatch, caplog):
    binary_file = tmp_path / "binary.bin"
    binary_file.write_bytes(b"\xff\xfe\xfd")

    monkeypatch.setenv("BINARY_SECRET_FILE", str(binary_file))
    _unset(monkeypatch, "BINARY_SECRET")

    with caplog.at_level(logging.WARNING):
        load_secret_file_variables()

    assert any(
        record.message == "env.secret_file.decode_failed" for record in caplog.records
    )


def test_load_secret_file_variables_handles_os_error(monkeypatch, caplog):
    def _raise_os_error(self, *args, **kwargs):
        raise OSError("permission denied")

    monkeypatch.setenv("BROKEN_SECRET_FILE", "/tmp/any")
    _unset(monkeypatch, "BROKEN_SECRET")
    monkeypatch.setattr(
        "garment_forecast.shared.env.Path.read_text", _raise_os_error, raising=False
    )

    with caplog.at_level(logging.WARNING):
        load_secret_file_variables()

    assert any(
        record.message == "env.secret_file.load_failed" for record in caplog.records
    )


def test_load_secret_file_variables_skips_existing_target():
    environ = {"EXISTING_SECRET": "present", "EXISTING_SECRET_FILE": "/tmp/ignored"}

    assert load_secret_file_variables(environ) == []
    assert environ["EXISTING_SECRET"] == "present"


def test_load_secret_file_variables_skips_empty_path():
    environ = {"EMPTY_SECRET_FILE": ""}

    load_secret_file_variables(environ)

    assert "EMPTY_SECRET" not in environ
