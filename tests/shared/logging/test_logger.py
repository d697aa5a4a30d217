"""
목적: 인메모리 로거와 로그 모델 동작을 검증한다.
설명: 로그 기록, 컨텍스트 병합, 저장소 공유, JSON 라인 출력을 확인한다.
디자인 패턴: 전략 패턴, 저장소 패턴
참조: src/datastore_examples/shared/logging/logger.py, src/datastore_examples/shared/logging/models.py
"""

from __future__ import annotations

import io
import json
from datetime import datetime, timezone
from decimal import Decimal

from datastore_examples.shared.logging import (
    InMemoryLogger,
    LogContext,
    LogLevel,
    create_default_logger,
)


def test_inmemory_logger_records_log() -> None:
    """기본 로거가 로그를 기록하는지 확인한다."""

    logger = create_default_logger("unit-test", emit_stdout=False)
    logger.info("시작 로그")

    records = logger.repository.list()

    assert len(records) == 1
    assert records[0].level == LogLevel.INFO
    assert records[0].message == "시작 로그"
    assert records[0].logger_name == "unit-test"


def test_logger_with_context_merges_tags() -> None:
    """컨텍스트 병합 규칙이 올바른지 확인한다."""

    base_context = LogContext(run_id="run-1", store="redis", tags={"env": "dev", "team": "db"})
    logger = InMemoryLogger(name="ctx-test", base_context=base_context, emit_stdout=False)

    logger.info("기본 컨텍스트 로그")

    child_logger = logger.with_context(LogContext(step="pub_sub", tags={"env": "prod"}))
    child_logger.error("확장 컨텍스트 로그")

    records = logger.repository.list()

    assert len(records) == 2
    assert records[0].context is not None
    assert records[0].context.step is None
    assert records[1].context is not None
    assert records[1].context.run_id == "run-1"
    assert records[1].context.store == "redis"
    assert records[1].context.step == "pub_sub"
    assert records[1].context.tags == {"env": "prod", "team": "db"}


def test_logger_writes_json_line_with_driver_values() -> None:
    """JSON으로 직렬화되지 않는 값도 문자열로 출력하는지 확인한다."""

    stream = io.StringIO()
    logger = InMemoryLogger(name="stdout-test", emit_stdout=True, stream=stream)

    logger.warning(
        "드라이버 값",
        LogContext(store="postgres"),
        metadata={
            "amount": Decimal("12.50"),
            "created": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "raw": b"bytes",
            "tags": {"a"},
        },
    )

    payload = json.loads(stream.getvalue().strip())
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "stdout-test"
    assert payload["context"]["store"] == "postgres"
    assert payload["metadata"]["amount"] == "12.50"
    assert payload["metadata"]["created"].startswith("2024-01-01")
    assert payload["metadata"]["raw"] == "bytes"
    assert payload["metadata"]["tags"] == ["a"]


def test_logger_reads_stdout_flag_from_env(monkeypatch) -> None:
    """LOG_STDOUT 환경 변수로 출력 여부를 결정하는지 확인한다."""

    stream = io.StringIO()
    monkeypatch.setenv("LOG_STDOUT", "false")
    InMemoryLogger(name="quiet", stream=stream).info("출력 안 됨")
    assert stream.getvalue() == ""

    monkeypatch.setenv("LOG_STDOUT", "1")
    InMemoryLogger(name="loud", stream=stream).info("출력됨")
    assert "출력됨" in stream.getvalue()
