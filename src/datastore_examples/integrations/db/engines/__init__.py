"""
목적: 저장소별 연결 관리자 모듈을 제공한다.
설명: 각 저장소 연결 관리자 클래스를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/datastore_examples/integrations/db/engines/*/connection.py
"""

from datastore_examples.integrations.db.engines.elasticsearch import ElasticConnectionManager
from datastore_examples.integrations.db.engines.mongodb import MongoConnectionManager
from datastore_examples.integrations.db.engines.postgres import PostgresConnectionManager
from datastore_examples.integrations.db.engines.redis import RedisConnectionManager

__all__ = [
    "ElasticConnectionManager",
    "MongoConnectionManager",
    "PostgresConnectionManager",
    "RedisConnectionManager",
]
