"""
목적: 설정 모듈 공개 API를 제공한다.
설명: 설정 병합 로더와 저장소별 설정 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/datastore_examples/shared/config/loader.py, src/datastore_examples/shared/config/settings.py
"""

from datastore_examples.shared.config.loader import ConfigLoader
from datastore_examples.shared.config.settings import (
    AppSettings,
    ElasticsearchSettings,
    MongoSettings,
    PostgresSettings,
    RedisSettings,
    load_settings,
)

__all__ = [
    "AppSettings",
    "ConfigLoader",
    "ElasticsearchSettings",
    "MongoSettings",
    "PostgresSettings",
    "RedisSettings",
    "load_settings",
]
