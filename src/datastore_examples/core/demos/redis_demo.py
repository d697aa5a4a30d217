"""
목적: Redis(redis-py) 호출 예제를 제공한다.
설명: 자료구조별 CRUD, 키 명령, 자료구조 명령, MULTI/EXEC 트랜잭션, Lua 스크립트, Pub/Sub를 순서대로 실행한다.
디자인 패턴: 템플릿 메서드 패턴, 옵저버(구독 핸들러)
참조: src/datastore_examples/core/demos/base.py, src/datastore_examples/integrations/db/engines/redis/connection.py
"""

from __future__ import annotations

import threading
from contextlib import ExitStack
from typing import Any, Dict, List, Optional

from datastore_examples.core.demos.base import BaseDemo, DemoStep
from datastore_examples.integrations.db.engines.redis import RedisConnectionManager
from datastore_examples.shared.config import RedisSettings
from datastore_examples.shared.logging import Logger

_SET_SCRIPT = "return redis.call('SET', KEYS[1], ARGV[1])"


def _stop_worker(worker: Any, timeout: float) -> None:
    worker.stop()
    worker.join(timeout)


class RedisDemo(BaseDemo):
    """Redis 데모."""

    def __init__(
        self,
        settings: Optional[RedisSettings] = None,
        logger: Optional[Logger] = None,
        connection: Optional[RedisConnectionManager] = None,
        run_id: Optional[str] = None,
    ) -> None:
        super().__init__(logger=logger, run_id=run_id)
        self._settings = settings or RedisSettings()
        self._connection = connection or RedisConnectionManager(
            url=self._settings.resolve_url(),
            logger=self._logger,
        )

    @property
    def store(self) -> str:
        return "redis"

    def connect(self) -> None:
        self._connection.connect()

    def close(self) -> None:
        self._connection.close()

    def steps(self) -> List[DemoStep]:
        return [
            DemoStep("crud_operations", self.crud_operations),
            DemoStep("key_commands", self.key_commands),
            DemoStep("data_structures", self.data_structures),
            DemoStep("transactions", self.transactions),
            DemoStep("scripting", self.scripting),
            DemoStep("pub_sub", self.pub_sub),
        ]

    def crud_operations(self) -> None:
        client = self._connection.ensure_client()

        # Create
        client.set("name", "Alice")
        client.mset({"age": "30", "city": "New York"})
        client.hset("user:1000", mapping={"username": "bob", "email": "bob@example.com"})
        client.lpush("tasks", "task1", "task2")
        client.sadd("skills", "JavaScript", "TypeScript")
        client.zadd("scores", {"player1": 100, "player2": 200})

        # Read
        self.log_result("GET name", client.get("name"))
        self.log_result("MGET age, city", client.mget("age", "city"))
        self.log_result("HGET user:1000 email", client.hget("user:1000", "email"))
        self.log_result("LRANGE tasks 0 -1", client.lrange("tasks", 0, -1))
        self.log_result("SMEMBERS skills", sorted(client.smembers("skills")))
        self.log_result(
            "ZRANGE scores 0 -1 WITHSCORES",
            client.zrange("scores", 0, -1, withscores=True),
        )

        # Update
        client.set("name", "Alice Smith")
        client.hset("user:1000", "email", "alice@example.com")
        client.lset("tasks", 0, "task1-updated")
        client.sadd("skills", "Node.js")
        client.zadd("scores", {"player1": 150})

        # Delete
        client.delete("name")
        client.hdel("user:1000", "email")
        client.lpop("tasks")
        client.srem("skills", "JavaScript")
        client.zrem("scores", "player1")

    def key_commands(self) -> None:
        client = self._connection.ensure_client()
        client.set("temp", "value")
        self.log_result("EXISTS temp", client.exists("temp"))
        client.expire("temp", 10)
        self.log_result("TTL temp", client.ttl("temp"))
        self.log_result("TYPE temp", client.type("temp"))
        client.rename("temp", "temp_new")
        self.log_result("GET temp_new", client.get("temp_new"))
        client.delete("temp_new")

    def data_structures(self) -> None:
        client = self._connection.ensure_client()

        # Strings
        client.set("counter", "1")
        client.incr("counter")
        client.decr("counter")
        self.log_result("GET counter", client.get("counter"))

        # Hashes
        client.hset("profile:1001", mapping={"name": "Charlie", "age": "25"})
        self.log_result("HGETALL profile:1001", client.hgetall("profile:1001"))
        client.hdel("profile:1001", "age")

        # Lists
        client.rpush("queue", "item1", "item2")
        self.log_result("LRANGE queue 0 -1", client.lrange("queue", 0, -1))
        client.lpop("queue")

        # Sets
        client.sadd("tags", "redis", "database")
        self.log_result("SMEMBERS tags", sorted(client.smembers("tags")))
        self.log_result("SISMEMBER tags redis", client.sismember("tags", "redis"))
        client.srem("tags", "database")

        # Sorted Sets
        client.zadd("leaderboard", {"player1": 100, "player2": 200})
        self.log_result(
            "ZRANGE leaderboard 0 -1 WITHSCORES",
            client.zrange("leaderboard", 0, -1, withscores=True),
        )
        self.log_result("ZRANK leaderboard player1", client.zrank("leaderboard", "player1"))
        client.zrem("leaderboard", "player2")

    def transactions(self) -> None:
        client = self._connection.ensure_client()
        with client.pipeline(transaction=True) as pipe:
            pipe.set("foo", "bar")
            pipe.incr("counter")
            results = pipe.execute()
        self.log_result("MULTI/EXEC transaction", results)

    def scripting(self) -> None:
        client = self._connection.ensure_client()
        result = client.eval(_SET_SCRIPT, 1, "mykey", "myvalue")
        self.log_result("EVAL script", result)

    def pub_sub(self) -> None:
        """전용 구독/발행 연결로 메시지 한 건을 주고받는다.

        수신은 redis-py의 백그라운드 워커 스레드가 담당한다. 제한 시간 안에
        메시지가 오지 않으면 TimeoutError를 발생시킨다.
        """

        channel = self._settings.channel
        timeout = self._settings.pubsub_timeout
        received = threading.Event()

        with ExitStack() as cleanup:
            subscriber = self._connection.create_client()
            cleanup.callback(subscriber.close)
            publisher = self._connection.create_client()
            cleanup.callback(publisher.close)
            pubsub = subscriber.pubsub()
            cleanup.callback(pubsub.close)

            def handle_message(message: Dict[str, Any]) -> None:
                self.log_result(f"Received message from {message['channel']}", message["data"])
                pubsub.unsubscribe(channel)
                received.set()

            pubsub.subscribe(**{channel: handle_message})
            confirmation = pubsub.get_message(timeout=timeout)
            if confirmation is None:
                raise TimeoutError(f"구독 확인 응답이 없습니다: channel={channel}")
            self.log_result(f"Subscribed to {channel}", confirmation.get("data"))

            worker = pubsub.run_in_thread(sleep_time=0.01, daemon=True)
            cleanup.callback(_stop_worker, worker, timeout)
            receivers = publisher.publish(channel, "Hello, world!")
            self.log_result(f"PUBLISH {channel}", receivers)
            if not received.wait(timeout):
                raise TimeoutError(f"메시지를 제한 시간 안에 받지 못했습니다: channel={channel}")
