"""
목적: DB 통합 모듈 공개 API를 제공한다.
설명: 저장소별 연결 관리자를 노출한다.
디자인 패턴: 퍼사드
참조: src/datastore_examples/integrations/db/engines
"""

from datastore_examples.integrations.db.engines import (
    ElasticConnectionManager,
    MongoConnectionManager,
    PostgresConnectionManager,
    RedisConnectionManager,
)

__all__ = [
    "ElasticConnectionManager",
    "MongoConnectionManager",
    "PostgresConnectionManager",
    "RedisConnectionManager",
]
