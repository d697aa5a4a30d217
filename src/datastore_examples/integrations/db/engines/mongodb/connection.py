"""
목적: MongoDB 연결 관리 모듈을 제공한다.
설명: 연결 초기화/ping 확인/종료와 데이터베이스·컬렉션 객체 보장을 담당한다.
디자인 패턴: 매니저 패턴
참조: src/datastore_examples/core/demos/mongodb_demo.py
"""

from __future__ import annotations

from typing import Any, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from datastore_examples.shared.logging import Logger


class MongoConnectionManager:
    """MongoDB 연결 관리자."""

    def __init__(
        self,
        uri: str,
        database_name: str,
        logger: Logger,
        write_concern: Optional[str] = "majority",
        mongo_client_cls: Any = MongoClient,
    ) -> None:
        if not database_name:
            raise ValueError("database 설정이 필요합니다.")
        self._uri = uri
        self._database_name = database_name
        self._write_concern = write_concern
        self._logger = logger
        self._mongo_client_cls = mongo_client_cls
        self._client: Any | None = None
        self._database: Any | None = None

    def connect(self) -> None:
        """MongoDB 연결을 초기화하고 ping으로 확인한다."""

        if self._client is not None:
            return
        options: dict = {}
        if self._write_concern:
            options["w"] = self._write_concern
        client = self._mongo_client_cls(self._uri, **options)
        try:
            client.admin.command("ping")
        except Exception:
            client.close()
            raise
        self._client = client
        self._database = client[self._database_name]
        self._logger.info("MongoDB 연결이 초기화되었습니다.")

    def close(self) -> None:
        """MongoDB 연결을 종료한다."""

        if self._client is None:
            return
        self._client.close()
        self._client = None
        self._database = None
        self._logger.info("MongoDB 연결이 종료되었습니다.")

    def ensure_database(self) -> Database:
        """초기화된 MongoDB 데이터베이스 객체를 반환한다."""

        if self._database is None:
            raise RuntimeError("MongoDB 연결이 초기화되지 않았습니다.")
        return self._database

    def ensure_collection(self, name: str) -> Collection:
        """이름에 해당하는 컬렉션 객체를 반환한다."""

        return self.ensure_database()[name]
