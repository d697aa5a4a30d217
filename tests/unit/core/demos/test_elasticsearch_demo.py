"""
목적: Elasticsearch 데모의 호출 순서와 인자를 검증한다.
설명: 목 클라이언트를 주입해 각 단계가 올바른 API를 호출하고 응답을 로깅하는지 확인한다.
디자인 패턴: 테스트 더블
참조: src/datastore_examples/core/demos/elasticsearch_demo.py
"""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from datastore_examples.core.demos import ElasticsearchDemo
from datastore_examples.shared.config import ElasticsearchSettings
from datastore_examples.shared.exceptions import DemoStepError
from datastore_examples.shared.logging import create_default_logger


def _demo(client: MagicMock, settings: ElasticsearchSettings | None = None):
    connection = MagicMock()
    connection.ensure_client.return_value = client
    logger = create_default_logger("es-demo-test", emit_stdout=False)
    demo = ElasticsearchDemo(settings=settings, logger=logger, connection=connection)
    return demo, connection, logger


def test_elasticsearch_demo_runs_all_steps() -> None:
    """모든 단계를 순서대로 실행하고 연결을 닫는지 확인한다."""

    client = MagicMock()
    client.index.return_value = {"result": "created"}
    client.bulk.return_value = {"errors": False}
    client.get.return_value = {"_source": {"field": "value"}}
    client.search.return_value = {"hits": {"total": {"value": 1}}}
    client.count.return_value = {"count": 3}
    client.update.return_value = {"result": "updated"}
    client.delete.return_value = {"result": "deleted"}
    client.delete_by_query.return_value = {"deleted": 2}
    demo, connection, logger = _demo(client)

    report = demo.run()

    assert report.completed_steps == [
        "create_document",
        "bulk_index_documents",
        "get_document",
        "search_documents",
        "count_documents",
        "update_document",
        "upsert_document",
        "delete_document",
        "delete_by_query",
    ]
    connection.connect.assert_called_once()
    connection.close.assert_called_once()

    client.index.assert_called_once_with(
        index="index", id="id", document={"field": "value"}, refresh="true"
    )
    operations = client.bulk.call_args.kwargs["operations"]
    assert operations == [
        {"index": {"_id": "1"}},
        {"field": "value1"},
        {"index": {"_id": "2"}},
        {"field": "value2"},
    ]
    client.search.assert_called_once_with(index="index", query={"match": {"field": "value"}})
    client.count.assert_called_once_with(index="index", query={"match_all": {}})
    assert client.update.call_args_list[1].kwargs["doc_as_upsert"] is True
    client.delete_by_query.assert_called_once_with(
        index="index", query={"match": {"field": "value"}}, refresh=True
    )

    results = {record.message: record.metadata.get("result") for record in logger.repository.list()}
    assert results["count_documents"] == {"count": 3}
    assert results["get_document"] == {"_source": {"field": "value"}}


def test_elasticsearch_demo_unwraps_api_response_body() -> None:
    """ObjectApiResponse처럼 body 속성을 가진 응답에서 본문을 꺼내는지 확인한다."""

    client = MagicMock()
    client.count.return_value = SimpleNamespace(body={"count": 7})
    demo, _, logger = _demo(client)

    demo.count_documents()

    assert logger.repository.list()[-1].metadata == {"result": {"count": 7}}


def test_elasticsearch_demo_uses_configured_index() -> None:
    """설정한 인덱스와 문서 ID를 사용하는지 확인한다."""

    client = MagicMock()
    demo, _, _ = _demo(client, ElasticsearchSettings(index="articles", document_id="a-1"))

    demo.connect()
    demo.get_document()

    client.get.assert_called_once_with(index="articles", id="a-1")


def test_elasticsearch_demo_failure_stops_run() -> None:
    """실패한 단계 이후 단계는 실행하지 않는지 확인한다."""

    client = MagicMock()
    client.get.side_effect = RuntimeError("not_found")
    demo, connection, _ = _demo(client)

    with pytest.raises(DemoStepError) as exc_info:
        demo.run()

    assert exc_info.value.step == "get_document"
    client.search.assert_not_called()
    connection.close.assert_called_once()
