"""
목적: 공통 예외 클래스를 제공한다.
설명: 베이스 예외와 데모 실행에서 쓰는 치명 오류 예외(연결/단계/설정)를 정의한다.
디자인 패턴: 도메인 예외 객체
참조: src/datastore_examples/shared/exceptions/models.py, src/datastore_examples/core/demos/base.py
"""

from __future__ import annotations

from typing import Optional

from datastore_examples.shared.exceptions.models import ExceptionDetail


class BaseAppException(Exception):
    """애플리케이션 공통 예외 클래스이다.

    Args:
        message: 사용자 또는 시스템에 전달할 메시지.
        detail: 예외 상세 정보 모델.
        original: 원본 예외 객체.
    """

    def __init__(
        self,
        message: str,
        detail: ExceptionDetail,
        original: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._detail = detail
        self._original = original

    @property
    def message(self) -> str:
        """주입된 메시지를 반환한다."""

        return self._message

    @property
    def detail(self) -> ExceptionDetail:
        """예외 상세 모델을 반환한다."""

        return self._detail

    @property
    def original(self) -> Optional[Exception]:
        """원본 예외를 반환한다."""

        return self._original

    def to_dict(self) -> dict:
        """예외 정보를 사전으로 변환한다."""

        return {
            "message": self._message,
            "detail": self._detail.model_dump(),
            "original": repr(self._original) if self._original else None,
        }


class ConfigurationError(BaseAppException):
    """설정을 읽거나 검증하지 못했을 때 발생한다."""

    CODE = "CONFIG_INVALID"

    def __init__(self, cause: str, original: Optional[Exception] = None) -> None:
        super().__init__(
            message="설정을 불러오지 못했습니다.",
            detail=ExceptionDetail(
                code=self.CODE,
                cause=cause,
                hint="설정 파일과 DATASTORE__* 환경 변수를 확인하세요.",
            ),
            original=original,
        )


class DemoConnectionError(BaseAppException):
    """저장소 연결 또는 연결 확인이 실패했을 때 발생한다."""

    CODE = "DEMO_CONNECTION_FAILED"

    def __init__(self, store: str, original: Optional[Exception] = None) -> None:
        super().__init__(
            message=f"{store} 연결에 실패했습니다.",
            detail=ExceptionDetail(
                code=self.CODE,
                cause=str(original) if original else None,
                hint="서비스 기동 여부와 접속 정보를 확인하세요.",
                metadata={"store": store},
            ),
            original=original,
        )

    @property
    def store(self) -> str:
        """대상 저장소 이름을 반환한다."""

        return str(self.detail.metadata["store"])


class DemoStepError(BaseAppException):
    """데모 단계 실행 중 예외가 발생했을 때 발생한다."""

    CODE = "DEMO_STEP_FAILED"

    def __init__(self, store: str, step: str, original: Optional[Exception] = None) -> None:
        super().__init__(
            message=f"{store} 데모 단계 실행에 실패했습니다: {step}",
            detail=ExceptionDetail(
                code=self.CODE,
                cause=str(original) if original else None,
                metadata={"store": store, "step": step},
            ),
            original=original,
        )

    @property
    def store(self) -> str:
        """대상 저장소 이름을 반환한다."""

        return str(self.detail.metadata["store"])

    @property
    def step(self) -> str:
        """실패한 단계 이름을 반환한다."""

        return str(self.detail.metadata["step"])
