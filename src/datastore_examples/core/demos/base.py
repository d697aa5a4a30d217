"""
목적: 저장소 데모 공통 실행기를 제공한다.
설명: 연결 → 단계 순차 실행(결과 로깅) → 연결 종료 흐름과 치명 오류 변환 규칙을 정의한다.
디자인 패턴: 템플릿 메서드 패턴
참조: src/datastore_examples/shared/exceptions/base.py, src/datastore_examples/shared/logging/logger.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional
from uuid import uuid4

from datastore_examples.shared.exceptions import (
    BaseAppException,
    DemoConnectionError,
    DemoStepError,
)
from datastore_examples.shared.logging import LogContext, Logger, create_default_logger


@dataclass(frozen=True)
class DemoStep:
    """이름이 붙은 데모 단계."""

    name: str
    action: Callable[[], None]


@dataclass
class DemoReport:
    """데모 실행 결과 요약."""

    store: str
    run_id: str
    completed_steps: List[str] = field(default_factory=list)


class BaseDemo(ABC):
    """저장소 데모 베이스 클래스.

    하위 클래스는 `connect`/`close`/`steps`만 구현한다. 단계에서 새어 나온
    예외는 모두 `DemoStepError`로 감싸져 전파되며, 연결은 어떤 경로로든 닫힌다.

    Args:
        logger: 주입 가능한 로거.
        run_id: 실행 식별자. 없으면 새로 생성한다.
    """

    def __init__(self, logger: Optional[Logger] = None, run_id: Optional[str] = None) -> None:
        self._run_id = run_id or uuid4().hex[:12]
        base_logger = logger or create_default_logger(type(self).__name__)
        self._logger = base_logger.with_context(LogContext(run_id=self._run_id, store=self.store))
        self._current_step: Optional[str] = None

    @property
    @abstractmethod
    def store(self) -> str:
        """저장소 이름을 반환한다."""

    @property
    def run_id(self) -> str:
        return self._run_id

    @property
    def logger(self) -> Logger:
        return self._logger

    @abstractmethod
    def connect(self) -> None:
        """저장소에 연결한다."""

    @abstractmethod
    def close(self) -> None:
        """저장소 연결을 종료한다."""

    @abstractmethod
    def steps(self) -> List[DemoStep]:
        """실행 순서대로 정렬된 데모 단계를 반환한다."""

    def run(self) -> DemoReport:
        """연결 후 모든 단계를 순서대로 실행한다.

        Raises:
            DemoConnectionError: 연결 또는 연결 확인이 실패한 경우.
            DemoStepError: 단계 실행 중 예외가 발생한 경우.
        """

        try:
            self.connect()
        except BaseAppException:
            raise
        except Exception as exc:
            raise DemoConnectionError(self.store, exc) from exc

        report = DemoReport(store=self.store, run_id=self._run_id)
        try:
            for step in self.steps():
                self._run_step(step)
                report.completed_steps.append(step.name)
        finally:
            self._current_step = None
            self.close()
        self._logger.info(
            f"{self.store} 데모 실행 완료",
            metadata={"steps": list(report.completed_steps)},
        )
        return report

    def log_result(self, operation: str, result: Any) -> None:
        """연산 이름과 결과를 INFO 레코드로 남긴다."""

        self._logger.info(
            operation,
            LogContext(step=self._current_step),
            metadata={"result": result},
        )

    def _run_step(self, step: DemoStep) -> None:
        self._current_step = step.name
        self._logger.debug(f"단계 시작: {step.name}", LogContext(step=step.name))
        try:
            step.action()
        except BaseAppException:
            raise
        except Exception as exc:
            raise DemoStepError(self.store, step.name, exc) from exc
