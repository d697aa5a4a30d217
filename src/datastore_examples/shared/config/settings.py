"""
목적: 저장소별 데모 설정 모델을 제공한다.
설명: 접속 정보 조각으로부터 hosts/URI/DSN/URL을 조합하고, 로더 결과를 검증해 AppSettings를 만든다.
디자인 패턴: 설정 객체, 팩토리 함수
참조: src/datastore_examples/shared/config/loader.py, src/datastore_examples/main.py
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from datastore_examples.shared.config.loader import ConfigLoader
from datastore_examples.shared.exceptions import ConfigurationError
from datastore_examples.shared.logging import Logger


class _SectionSettings(BaseModel):
    # JSON 설정 파일에 숫자로 적힌 비밀번호/사용자명도 문자열로 받는다.
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")


def _build_auth(user: Optional[str], password: Optional[str]) -> str:
    if user and password:
        return f"{user}:{password}@"
    if user:
        return f"{user}@"
    if password:
        return f":{password}@"
    return ""


class ElasticsearchSettings(_SectionSettings):
    """Elasticsearch 데모 설정."""

    hosts: List[str] = Field(default_factory=list)
    host: str = "localhost"
    port: int = 9200
    scheme: str = "http"
    user: Optional[str] = None
    password: Optional[str] = None
    ca_certs: Optional[str] = None
    verify_certs: Optional[bool] = None
    ssl_assert_fingerprint: Optional[str] = None
    index: str = "index"
    document_id: str = "id"

    @field_validator("hosts", mode="before")
    @classmethod
    def _split_hosts(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    def resolve_hosts(self) -> List[str]:
        """접속 대상 노드 목록을 반환한다."""

        if self.hosts:
            return list(self.hosts)
        auth = _build_auth(self.user, self.password)
        return [f"{self.scheme}://{auth}{self.host}:{self.port}"]


class MongoSettings(_SectionSettings):
    """MongoDB 데모 설정."""

    uri: Optional[str] = None
    host: str = "localhost"
    port: int = 27017
    user: Optional[str] = None
    password: Optional[str] = None
    auth_source: Optional[str] = None
    scheme: str = "mongodb"
    database: str = "example_db"
    collection: str = "example_collection"
    lookup_collection: str = "another_collection"
    write_concern: str = "majority"
    reset_collection: bool = True

    def resolve_uri(self) -> str:
        """접속 URI를 반환한다."""

        if self.uri:
            return self.uri
        auth = _build_auth(self.user, self.password)
        uri = f"{self.scheme}://{auth}{self.host}:{self.port}"
        auth_source = (self.auth_source or "").strip() or None
        if auth_source is None and auth:
            auth_source = self.database
        if auth_source and auth:
            uri = f"{uri}/?authSource={auth_source}"
        return uri


class PostgresSettings(_SectionSettings):
    """PostgreSQL 데모 설정."""

    dsn: Optional[str] = None
    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: Optional[str] = None
    database: str = "postgres"
    scheme: str = "postgresql"
    reset_schema: bool = True
    export_path: str = "users.csv"

    def resolve_dsn(self) -> str:
        """접속 DSN을 반환한다."""

        if self.dsn:
            return self.dsn
        auth = f"{self.user}"
        if self.password:
            auth = f"{auth}:{self.password}"
        return f"{self.scheme}://{auth}@{self.host}:{self.port}/{self.database}"


class RedisSettings(_SectionSettings):
    """Redis 데모 설정."""

    url: Optional[str] = None
    host: str = "localhost"
    port: int = 6379
    db: int = 0
    username: Optional[str] = None
    password: Optional[str] = None
    scheme: str = "redis"
    channel: str = "news"
    pubsub_timeout: float = Field(default=5.0, gt=0)

    def resolve_url(self) -> str:
        """접속 URL을 반환한다."""

        if self.url:
            return self.url
        auth = ""
        if self.username and self.password:
            auth = f"{self.username}:{self.password}@"
        elif self.password:
            auth = f":{self.password}@"
        return f"{self.scheme}://{auth}{self.host}:{self.port}/{self.db}"


class AppSettings(BaseModel):
    """전체 데모 설정."""

    model_config = ConfigDict(extra="ignore")

    log_stdout: bool = True
    elasticsearch: ElasticsearchSettings = Field(default_factory=ElasticsearchSettings)
    mongodb: MongoSettings = Field(default_factory=MongoSettings)
    postgres: PostgresSettings = Field(default_factory=PostgresSettings)
    redis: RedisSettings = Field(default_factory=RedisSettings)


def load_settings(
    config_path: Optional[str] = None,
    env_file: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    logger: Optional[Logger] = None,
) -> AppSettings:
    """설정 소스를 병합하고 검증해 AppSettings를 반환한다.

    우선순위: 기본값 < JSON 파일 < 환경 변수(.env 포함) < overrides.

    Raises:
        ConfigurationError: 파일이 없거나 형식/값 검증에 실패한 경우.
    """

    loader = ConfigLoader(logger=logger)
    try:
        loader.load_env_file(env_file)
        if config_path:
            loader.add_json_file(config_path, required=True)
        loader.add_env()
        raw = loader.build(overrides)
        return AppSettings.model_validate(raw)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"파일을 찾을 수 없습니다: {exc}", original=exc) from exc
    except ValidationError as exc:
        raise ConfigurationError(f"설정 값 검증 실패: {exc.error_count()}건", original=exc) from exc
    except ValueError as exc:
        raise ConfigurationError(str(exc), original=exc) from exc
    except OSError as exc:
        raise ConfigurationError(f"설정 파일을 읽을 수 없습니다: {exc}", original=exc) from exc
