"""
목적: shared 패키지의 공개 API를 제공한다.
설명: 하위 공통 모듈(예외, 로깅)에 대한 접근 포인트를 제공한다.
디자인 패턴: 퍼사드
참조: src/datastore_examples/shared/exceptions, src/datastore_examples/shared/logging
"""

from __future__ import annotations

from datastore_examples.shared.exceptions import (
    BaseAppException,
    ConfigurationError,
    DemoConnectionError,
    DemoStepError,
    ExceptionDetail,
)
from datastore_examples.shared.logging import (
    InMemoryLogger,
    InMemoryLogRepository,
    LogContext,
    LogLevel,
    LogRecord,
    Logger,
    LogRepository,
    create_default_logger,
)

__all__ = [
    "BaseAppException",
    "ConfigurationError",
    "DemoConnectionError",
    "DemoStepError",
    "ExceptionDetail",
    "LogContext",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LogRepository",
    "InMemoryLogRepository",
    "InMemoryLogger",
    "create_default_logger",
]
