"""
목적: Elasticsearch 클라이언트 호출 예제를 제공한다.
설명: 문서 색인/벌크 색인/조회/검색/카운트/부분 수정/업서트/삭제/쿼리 삭제를 순서대로 실행하고 응답을 로깅한다.
디자인 패턴: 템플릿 메서드 패턴
참조: src/datastore_examples/core/demos/base.py, src/datastore_examples/integrations/db/engines/elasticsearch/connection.py
"""

from __future__ import annotations

from typing import Any, List, Optional

from datastore_examples.core.demos.base import BaseDemo, DemoStep
from datastore_examples.integrations.db.engines.elasticsearch import ElasticConnectionManager
from datastore_examples.shared.config import ElasticsearchSettings
from datastore_examples.shared.logging import Logger

# 쓰기 요청은 모두 즉시 검색 가능하도록 리프레시한다.
_REFRESH = "true"


def _body(response: Any) -> Any:
    """API 응답 객체에서 JSON 본문을 꺼낸다."""

    return getattr(response, "body", response)


class ElasticsearchDemo(BaseDemo):
    """Elasticsearch 데모."""

    def __init__(
        self,
        settings: Optional[ElasticsearchSettings] = None,
        logger: Optional[Logger] = None,
        connection: Optional[ElasticConnectionManager] = None,
        run_id: Optional[str] = None,
    ) -> None:
        super().__init__(logger=logger, run_id=run_id)
        self._settings = settings or ElasticsearchSettings()
        self._connection = connection or ElasticConnectionManager(
            hosts=self._settings.resolve_hosts(),
            logger=self._logger,
            ca_certs=self._settings.ca_certs,
            verify_certs=self._settings.verify_certs,
            ssl_assert_fingerprint=self._settings.ssl_assert_fingerprint,
        )
        self._index = self._settings.index
        self._doc_id = self._settings.document_id

    @property
    def store(self) -> str:
        return "elasticsearch"

    def connect(self) -> None:
        self._connection.connect()

    def close(self) -> None:
        self._connection.close()

    def steps(self) -> List[DemoStep]:
        return [
            DemoStep("create_document", self.create_document),
            DemoStep("bulk_index_documents", self.bulk_index_documents),
            DemoStep("get_document", self.get_document),
            DemoStep("search_documents", self.search_documents),
            DemoStep("count_documents", self.count_documents),
            DemoStep("update_document", self.update_document),
            DemoStep("upsert_document", self.upsert_document),
            DemoStep("delete_document", self.delete_document),
            DemoStep("delete_by_query", self.delete_by_query),
        ]

    def create_document(self) -> None:
        client = self._connection.ensure_client()
        response = client.index(
            index=self._index,
            id=self._doc_id,
            document={"field": "value"},
            refresh=_REFRESH,
        )
        self.log_result("create_document", _body(response))

    def bulk_index_documents(self) -> None:
        client = self._connection.ensure_client()
        operations = [
            {"index": {"_id": "1"}},
            {"field": "value1"},
            {"index": {"_id": "2"}},
            {"field": "value2"},
        ]
        response = client.bulk(index=self._index, operations=operations, refresh=_REFRESH)
        self.log_result("bulk_index_documents", _body(response))

    def get_document(self) -> None:
        client = self._connection.ensure_client()
        response = client.get(index=self._index, id=self._doc_id)
        self.log_result("get_document", _body(response))

    def search_documents(self) -> None:
        client = self._connection.ensure_client()
        response = client.search(index=self._index, query={"match": {"field": "value"}})
        self.log_result("search_documents", _body(response))

    def count_documents(self) -> None:
        client = self._connection.ensure_client()
        response = client.count(index=self._index, query={"match_all": {}})
        self.log_result("count_documents", _body(response))

    def update_document(self) -> None:
        client = self._connection.ensure_client()
        response = client.update(
            index=self._index,
            id=self._doc_id,
            doc={"field": "new_value"},
            refresh=_REFRESH,
        )
        self.log_result("update_document", _body(response))

    def upsert_document(self) -> None:
        client = self._connection.ensure_client()
        response = client.update(
            index=self._index,
            id=self._doc_id,
            doc={"field": "new_value"},
            doc_as_upsert=True,
            refresh=_REFRESH,
        )
        self.log_result("upsert_document", _body(response))

    def delete_document(self) -> None:
        client = self._connection.ensure_client()
        response = client.delete(index=self._index, id=self._doc_id, refresh=_REFRESH)
        self.log_result("delete_document", _body(response))

    def delete_by_query(self) -> None:
        client = self._connection.ensure_client()
        # delete_by_query의 refresh는 불리언만 받는다.
        response = client.delete_by_query(
            index=self._index,
            query={"match": {"field": "value"}},
            refresh=True,
        )
        self.log_result("delete_by_query", _body(response))
