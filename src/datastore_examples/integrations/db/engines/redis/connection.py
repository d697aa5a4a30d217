"""
목적: Redis 연결 관리 모듈을 제공한다.
설명: 연결 초기화/PING 확인/종료와 Pub/Sub용 보조 클라이언트 생성을 담당한다.
디자인 패턴: 매니저 패턴
참조: src/datastore_examples/core/demos/redis_demo.py
"""

from __future__ import annotations

from typing import Any, Optional

import redis

from datastore_examples.shared.logging import Logger


class RedisConnectionManager:
    """Redis 연결 관리자."""

    def __init__(self, url: str, logger: Logger, redis_module: Any = redis) -> None:
        self._url = url
        self._logger = logger
        self._redis = redis_module
        self._client: Optional[Any] = None

    def connect(self) -> None:
        """Redis 연결을 초기화한다."""

        if self._client is not None:
            return
        self._client = self.create_client()
        self._logger.info("Redis 연결이 초기화되었습니다.")

    def create_client(self) -> redis.Redis:
        """같은 URL로 독립된 클라이언트를 생성하고 PING으로 확인한다."""

        client = self._redis.Redis.from_url(self._url, decode_responses=True)
        try:
            client.ping()
        except Exception:
            client.close()
            raise
        return client

    def close(self) -> None:
        """Redis 연결을 종료한다."""

        if self._client is None:
            return
        self._client.close()
        self._client = None
        self._logger.info("Redis 연결이 종료되었습니다.")

    def ensure_client(self) -> redis.Redis:
        """초기화된 Redis 클라이언트를 반환한다."""

        if self._client is None:
            raise RuntimeError("Redis 연결이 초기화되지 않았습니다.")
        return self._client
