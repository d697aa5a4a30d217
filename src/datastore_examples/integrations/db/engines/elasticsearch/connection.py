"""
목적: Elasticsearch 연결 관리 모듈을 제공한다.
설명: 클라이언트 생성/연결 확인/종료를 담당한다.
디자인 패턴: 매니저 패턴
참조: src/datastore_examples/core/demos/elasticsearch_demo.py
"""

from __future__ import annotations

from typing import Any, Optional

from elasticsearch import Elasticsearch

from datastore_examples.shared.logging import Logger


class ElasticConnectionManager:
    """Elasticsearch 연결 관리자."""

    def __init__(
        self,
        hosts: list[str],
        logger: Logger,
        elasticsearch_cls: Any = Elasticsearch,
        ca_certs: Optional[str] = None,
        verify_certs: Optional[bool] = None,
        ssl_assert_fingerprint: Optional[str] = None,
    ) -> None:
        self._hosts = hosts
        self._logger = logger
        self._elasticsearch_cls = elasticsearch_cls
        self._ca_certs = ca_certs
        self._verify_certs = verify_certs
        self._ssl_assert_fingerprint = ssl_assert_fingerprint
        self._client: Optional[Any] = None

    def connect(self) -> None:
        """Elasticsearch 연결을 초기화하고 응답 여부를 확인한다."""

        if self._client is not None:
            return
        options: dict = {}
        if self._ca_certs:
            options["ca_certs"] = self._ca_certs
        if self._verify_certs is not None:
            options["verify_certs"] = self._verify_certs
        if self._ssl_assert_fingerprint:
            options["ssl_assert_fingerprint"] = self._ssl_assert_fingerprint
        client = self._elasticsearch_cls(self._hosts, **options)
        if not client.ping():
            client.close()
            raise ConnectionError(f"Elasticsearch 노드가 응답하지 않습니다: {self._hosts}")
        self._client = client
        self._logger.info("Elasticsearch 연결이 초기화되었습니다.")

    def close(self) -> None:
        """Elasticsearch 연결을 종료한다."""

        if self._client is None:
            return
        self._client.close()
        self._client = None
        self._logger.info("Elasticsearch 연결이 종료되었습니다.")

    def ensure_client(self) -> Elasticsearch:
        """초기화된 Elasticsearch 클라이언트를 반환한다."""

        if self._client is None:
            raise RuntimeError("Elasticsearch 연결이 초기화되지 않았습니다.")
        return self._client
