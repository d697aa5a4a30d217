"""
목적: PostgreSQL 연결 모듈 공개 API를 제공한다.
설명: 연결 관리자 클래스를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/datastore_examples/integrations/db/engines/postgres/connection.py
"""

from datastore_examples.integrations.db.engines.postgres.connection import (
    PostgresConnectionManager,
)

__all__ = ["PostgresConnectionManager"]
