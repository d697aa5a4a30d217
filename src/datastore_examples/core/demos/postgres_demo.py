"""
목적: PostgreSQL(psycopg2) 호출 예제를 제공한다.
설명: 스키마 생성, 사용자 CRUD, 조건/갱신 연산자, 집계, 조인, 인덱스, 트랜잭션, EXPLAIN/VACUUM/ANALYZE/CSV 내보내기를 순서대로 실행한다.
디자인 패턴: 템플릿 메서드 패턴
참조: src/datastore_examples/core/demos/base.py, src/datastore_examples/integrations/db/engines/postgres/connection.py
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from datastore_examples.core.demos.base import BaseDemo, DemoStep
from datastore_examples.integrations.db.engines.postgres import PostgresConnectionManager
from datastore_examples.shared.config import PostgresSettings
from datastore_examples.shared.const import SharedConst
from datastore_examples.shared.logging import Logger

_CREATE_USERS_TABLE = """
    CREATE TABLE IF NOT EXISTS users (
        id SERIAL PRIMARY KEY,
        name VARCHAR(100) NOT NULL,
        email VARCHAR(100) UNIQUE,
        age INT
    )
"""

_CREATE_ORDERS_TABLE = """
    CREATE TABLE IF NOT EXISTS orders (
        id SERIAL PRIMARY KEY,
        user_id INT REFERENCES users(id),
        product VARCHAR(100),
        amount INT
    )
"""

_QUERY_OPERATORS = """
    SELECT * FROM users
    WHERE age >= %s AND age <= %s
        AND name IN %s
        AND (age < %s OR name = %s)
        AND age > %s AND name <> %s
"""

_UPDATE_OPERATORS = """
    UPDATE users
    SET age = CASE WHEN age + 1 > 30 THEN age ELSE age + 1 END,
        name = 'Updated Name',
        email = NULL
    WHERE name = %s
    RETURNING *
"""

_AGGREGATION = """
    SELECT user_id, SUM(amount) AS total_amount, AVG(amount) AS average_amount
    FROM orders
    GROUP BY user_id
    HAVING SUM(amount) > %s
    ORDER BY total_amount DESC
"""

_USERS_WITH_ORDERS = """
    SELECT u.name, u.email, o.product, o.amount
    FROM users u
    JOIN orders o ON u.id = o.user_id
"""

_SEED_ORDERS = (("Laptop", 120), ("Mouse", 25), ("Monitor", 80))


class PostgresDemo(BaseDemo):
    """PostgreSQL 데모."""

    def __init__(
        self,
        settings: Optional[PostgresSettings] = None,
        logger: Optional[Logger] = None,
        connection: Optional[PostgresConnectionManager] = None,
        run_id: Optional[str] = None,
    ) -> None:
        super().__init__(logger=logger, run_id=run_id)
        self._settings = settings or PostgresSettings()
        self._connection = connection or PostgresConnectionManager(
            dsn=self._settings.resolve_dsn(),
            logger=self._logger,
        )
        self._user_ids: List[int] = []

    @property
    def store(self) -> str:
        return "postgres"

    def connect(self) -> None:
        self._connection.connect()

    def close(self) -> None:
        self._connection.close()

    def steps(self) -> List[DemoStep]:
        steps: List[DemoStep] = []
        if self._settings.reset_schema:
            steps.append(DemoStep("reset_schema", self.reset_schema))
        steps.extend(
            [
                DemoStep("create_tables", self.create_tables),
                DemoStep(
                    "create_user",
                    lambda: self.create_user("Alice", "alice@example.com", 25),
                ),
                DemoStep(
                    "create_user",
                    lambda: self.create_user("Bob", "bob@example.com", 30),
                ),
                DemoStep("get_users", self.get_users),
                DemoStep(
                    "update_user",
                    lambda: self.update_user(
                        self._user_id(0), "Alice Smith", "alice.smith@example.com", 26
                    ),
                ),
                DemoStep("delete_user", lambda: self.delete_user(self._user_id(1))),
                DemoStep("get_users", self.get_users),
                DemoStep("create_orders", lambda: self.create_orders(self._user_id(0))),
                DemoStep("query_operators", self.query_operators),
                DemoStep("update_operators", self.update_operators),
                DemoStep("aggregation_functions", self.aggregation_functions),
                DemoStep("get_users_with_orders", self.get_users_with_orders),
                DemoStep("create_indexes", self.create_indexes),
                DemoStep("execute_transaction", self.execute_transaction),
                DemoStep("miscellaneous_operations", self.miscellaneous_operations),
            ]
        )
        return steps

    def execute_query(self, query: str, params: Optional[Sequence[Any]] = None) -> List[Dict[str, Any]]:
        """쿼리 하나를 자체 트랜잭션으로 실행하고 결과 행을 반환한다."""

        connection = self._connection.ensure_connection()
        with connection:
            with self._connection.cursor() as cursor:
                cursor.execute(query, params)
                if cursor.description is None:
                    return []
                return [dict(row) for row in cursor.fetchall()]

    # 스키마

    def reset_schema(self) -> None:
        self.execute_query("DROP TABLE IF EXISTS orders, users")
        self.log_result("Tables dropped", ["orders", "users"])

    def create_tables(self) -> None:
        self.execute_query(_CREATE_USERS_TABLE)
        self.execute_query(_CREATE_ORDERS_TABLE)
        self.log_result("Tables created successfully", ["users", "orders"])

    # CRUD

    def create_user(self, name: str, email: str, age: int) -> Dict[str, Any]:
        rows = self.execute_query(
            "INSERT INTO users (name, email, age) VALUES (%s, %s, %s) RETURNING *",
            (name, email, age),
        )
        created = rows[0]
        self._user_ids.append(created["id"])
        self.log_result("User created", created)
        return created

    def get_users(self) -> List[Dict[str, Any]]:
        rows = self.execute_query("SELECT * FROM users ORDER BY id")
        self.log_result("Users", rows)
        return rows

    def update_user(self, user_id: int, name: str, email: str, age: int) -> Optional[Dict[str, Any]]:
        rows = self.execute_query(
            "UPDATE users SET name = %s, email = %s, age = %s WHERE id = %s RETURNING *",
            (name, email, age, user_id),
        )
        updated = rows[0] if rows else None
        self.log_result("User updated", updated)
        return updated

    def delete_user(self, user_id: int) -> Optional[Dict[str, Any]]:
        rows = self.execute_query("DELETE FROM users WHERE id = %s RETURNING *", (user_id,))
        deleted = rows[0] if rows else None
        self.log_result("User deleted", deleted)
        return deleted

    def create_orders(self, user_id: int) -> List[Dict[str, Any]]:
        placeholders = ", ".join(["(%s, %s, %s)"] * len(_SEED_ORDERS))
        params: List[Any] = []
        for product, amount in _SEED_ORDERS:
            params.extend([user_id, product, amount])
        rows = self.execute_query(
            f"INSERT INTO orders (user_id, product, amount) VALUES {placeholders} RETURNING *",
            params,
        )
        self.log_result("Orders created", rows)
        return rows

    # 연산자/집계/조인

    def query_operators(self) -> None:
        rows = self.execute_query(
            _QUERY_OPERATORS,
            (18, 30, ("Alice", "Bob"), 25, "Charlie", 20, "Dave"),
        )
        self.log_result("Query operator results", rows)

    def update_operators(self) -> None:
        rows = self.execute_query(_UPDATE_OPERATORS, ("Alice Smith",))
        self.log_result("Update operators result", rows)

    def aggregation_functions(self) -> None:
        rows = self.execute_query(_AGGREGATION, (100,))
        self.log_result("Aggregation results", rows)

    def get_users_with_orders(self) -> None:
        rows = self.execute_query(_USERS_WITH_ORDERS)
        self.log_result("Users with orders", rows)

    def create_indexes(self) -> None:
        self.execute_query("CREATE INDEX IF NOT EXISTS idx_users_email ON users(email)")
        self.log_result("Index created successfully", "idx_users_email")
        self.execute_query("DROP INDEX IF EXISTS idx_users_email")
        self.log_result("Index dropped successfully", "idx_users_email")

    # 트랜잭션

    def execute_transaction(self) -> None:
        """두 사용자를 한 트랜잭션으로 추가한다. 실패 시 롤백 후 예외를 전파한다."""

        connection = self._connection.ensure_connection()
        insert = "INSERT INTO users (name, email, age) VALUES (%s, %s, %s)"
        try:
            with connection:
                with self._connection.cursor() as cursor:
                    cursor.execute(insert, ("Charlie", "charlie@example.com", 22))
                    cursor.execute(insert, ("Dana", "dana@example.com", 28))
        except Exception as exc:
            self._logger.error("Transaction rolled back", metadata={"error": repr(exc)})
            raise
        self.log_result("Transaction committed successfully", ["Charlie", "Dana"])

    # 기타

    def miscellaneous_operations(self) -> None:
        plan = self.execute_query("EXPLAIN SELECT * FROM users")
        self.log_result("Explain query result", [row.get("QUERY PLAN") for row in plan])

        # VACUUM은 트랜잭션 블록 안에서 실행할 수 없다.
        with self._connection.autocommit():
            with self._connection.cursor() as cursor:
                cursor.execute("VACUUM")
                self.log_result("VACUUM executed successfully", True)
                cursor.execute("ANALYZE")
                self.log_result("ANALYZE executed successfully", True)

        export_path = self._settings.export_path
        with open(export_path, "w", encoding=SharedConst.DEFAULT_ENCODING, newline="") as handle:
            with self._connection.cursor() as cursor:
                cursor.copy_expert("COPY users TO STDOUT WITH (FORMAT CSV)", handle)
        self.log_result("Data exported to CSV file successfully", export_path)

    def _user_id(self, position: int) -> int:
        if position >= len(self._user_ids):
            raise LookupError(f"생성된 사용자가 부족합니다: position={position}")
        return self._user_ids[position]
