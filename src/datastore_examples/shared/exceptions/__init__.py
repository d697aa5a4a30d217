"""
목적: 예외 모듈 공개 API를 제공한다.
설명: 외부에서 사용할 예외 모델과 예외 클래스를 노출한다.
디자인 패턴: 퍼사드
참조: src/datastore_examples/shared/exceptions/models.py, src/datastore_examples/shared/exceptions/base.py
"""

from datastore_examples.shared.exceptions.base import (
    BaseAppException,
    ConfigurationError,
    DemoConnectionError,
    DemoStepError,
)
from datastore_examples.shared.exceptions.models import ExceptionDetail

__all__ = [
    "BaseAppException",
    "ConfigurationError",
    "DemoConnectionError",
    "DemoStepError",
    "ExceptionDetail",
]
