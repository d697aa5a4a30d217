"""
목적: PostgreSQL 연결 관리 모듈을 제공한다.
설명: 연결 초기화/종료, 딕셔너리 커서 생성, autocommit 구간 전환을 담당한다.
디자인 패턴: 매니저 패턴
참조: src/datastore_examples/core/demos/postgres_demo.py
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Optional

import psycopg2
from psycopg2.extensions import connection as PgConnection
from psycopg2.extensions import cursor as PgCursor
from psycopg2.extras import RealDictCursor

from datastore_examples.shared.logging import Logger


class PostgresConnectionManager:
    """PostgreSQL 연결 관리자."""

    def __init__(
        self,
        dsn: str,
        logger: Logger,
        psycopg2_module: Any = psycopg2,
        cursor_factory: Any = RealDictCursor,
    ) -> None:
        self._dsn = dsn
        self._logger = logger
        self._psycopg2 = psycopg2_module
        self._cursor_factory = cursor_factory
        self._connection: Optional[Any] = None

    def connect(self) -> None:
        """PostgreSQL 연결을 초기화한다."""

        if self._connection is not None:
            return
        self._connection = self._psycopg2.connect(self._dsn)
        self._logger.info("PostgreSQL 연결이 초기화되었습니다.")

    def close(self) -> None:
        """PostgreSQL 연결을 종료한다."""

        if self._connection is None:
            return
        self._connection.close()
        self._connection = None
        self._logger.info("PostgreSQL 연결이 종료되었습니다.")

    def ensure_connection(self) -> PgConnection:
        """초기화된 PostgreSQL 연결 객체를 반환한다."""

        if self._connection is None:
            raise RuntimeError("PostgreSQL 연결이 초기화되지 않았습니다.")
        return self._connection

    def cursor(self) -> PgCursor:
        """행을 사전으로 돌려주는 커서를 생성한다."""

        return self.ensure_connection().cursor(cursor_factory=self._cursor_factory)

    @contextmanager
    def autocommit(self) -> Iterator[Any]:
        """트랜잭션 블록 밖에서만 실행되는 명령(VACUUM 등)을 위한 구간을 제공한다."""

        connection = self.ensure_connection()
        previous = connection.autocommit
        connection.autocommit = True
        try:
            yield connection
        finally:
            connection.autocommit = previous
