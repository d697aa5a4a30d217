"""
목적: 설정 로더의 병합 규칙을 검증한다.
설명: dict/JSON/.env/환경 변수 소스의 우선순위와 값 파싱을 확인한다.
디자인 패턴: 빌더 패턴
참조: src/datastore_examples/shared/config/loader.py
"""

from __future__ import annotations

import json

import pytest

from datastore_examples.shared.config import ConfigLoader
from datastore_examples.shared.logging import create_default_logger


def _loader() -> ConfigLoader:
    return ConfigLoader(logger=create_default_logger("loader-test", emit_stdout=False))


def test_loader_merges_sources_in_order(tmp_path, monkeypatch) -> None:
    """나중 소스가 앞선 소스를 키 단위로 덮어쓰는지 확인한다."""

    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps({"redis": {"host": "json-host", "port": 6380}, "mongodb": {"database": "json_db"}}),
        encoding="utf-8",
    )
    monkeypatch.setenv("DATASTORE__REDIS__HOST", "env-host")

    merged = (
        _loader()
        .add_dict({"redis": {"host": "dict-host", "db": 1}})
        .add_json_file(str(config_path))
        .add_env()
        .build({"mongodb": {"database": "override_db"}})
    )

    assert merged["redis"] == {"host": "env-host", "port": 6380, "db": 1}
    assert merged["mongodb"]["database"] == "override_db"


def test_loader_keeps_env_values_as_strings(monkeypatch) -> None:
    """환경 변수 값을 문자열 그대로 두고, 빈 값은 건너뛰는지 확인한다."""

    monkeypatch.setenv("DATASTORE__LOG_STDOUT", "false")
    monkeypatch.setenv("DATASTORE__POSTGRES__PORT", "15432")
    monkeypatch.setenv("DATASTORE__POSTGRES__PASSWORD", "007")
    monkeypatch.setenv("DATASTORE__MONGODB__AUTH_SOURCE", "")

    merged = _loader().add_env().build()

    assert merged["log_stdout"] == "false"
    assert merged["postgres"] == {"port": "15432", "password": "007"}
    assert "mongodb" not in merged


def test_loader_required_json_file_missing(tmp_path) -> None:
    """필수 JSON 파일이 없으면 FileNotFoundError를 발생시키는지 확인한다."""

    with pytest.raises(FileNotFoundError):
        _loader().add_json_file(str(tmp_path / "missing.json"), required=True)


def test_loader_rejects_non_object_json(tmp_path) -> None:
    """최상위가 객체가 아닌 JSON을 거부하는지 확인한다."""

    config_path = tmp_path / "config.json"
    config_path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        _loader().add_json_file(str(config_path))


def test_loader_env_file_does_not_override(tmp_path, monkeypatch) -> None:
    """.env 값이 이미 설정된 환경 변수를 덮어쓰지 않는지 확인한다."""

    env_path = tmp_path / ".env"
    env_path.write_text(
        "DATASTORE__REDIS__HOST=file-host\nDATASTORE__REDIS__CHANNEL=file-channel\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("DATASTORE__REDIS__HOST", "process-host")
    monkeypatch.delenv("DATASTORE__REDIS__CHANNEL", raising=False)

    merged = _loader().load_env_file(str(env_path)).add_env().build()
    # load_dotenv가 프로세스 환경에 남긴 값을 정리한다.
    monkeypatch.delenv("DATASTORE__REDIS__CHANNEL", raising=False)

    assert merged["redis"]["host"] == "process-host"
    assert merged["redis"]["channel"] == "file-channel"


def test_loader_explicit_env_file_missing(tmp_path) -> None:
    """명시한 .env 파일이 없으면 FileNotFoundError를 발생시키는지 확인한다."""

    with pytest.raises(FileNotFoundError):
        _loader().load_env_file(str(tmp_path / "absent.env"))
