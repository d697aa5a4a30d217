"""
목적: 저장소 데모 공개 API를 제공한다.
설명: 데모 클래스와 저장소 이름 → 데모 클래스 레지스트리를 노출한다.
디자인 패턴: 퍼사드, 레지스트리
참조: src/datastore_examples/main.py
"""

from __future__ import annotations

from typing import Dict, Type

from datastore_examples.core.demos.base import BaseDemo, DemoReport, DemoStep
from datastore_examples.core.demos.elasticsearch_demo import ElasticsearchDemo
from datastore_examples.core.demos.mongodb_demo import MongoDemo
from datastore_examples.core.demos.postgres_demo import PostgresDemo
from datastore_examples.core.demos.redis_demo import RedisDemo

DEMO_REGISTRY: Dict[str, Type[BaseDemo]] = {
    "elasticsearch": ElasticsearchDemo,
    "mongodb": MongoDemo,
    "postgres": PostgresDemo,
    "redis": RedisDemo,
}

__all__ = [
    "BaseDemo",
    "DemoReport",
    "DemoStep",
    "DEMO_REGISTRY",
    "ElasticsearchDemo",
    "MongoDemo",
    "PostgresDemo",
    "RedisDemo",
]
