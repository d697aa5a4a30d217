"""
목적: core 패키지 공개 API를 제공한다.
설명: 저장소 데모 실행 계층에 대한 접근 포인트이다.
디자인 패턴: 퍼사드
참조: src/datastore_examples/core/demos
"""

from datastore_examples.core.demos import DEMO_REGISTRY, BaseDemo, DemoReport

__all__ = ["DEMO_REGISTRY", "BaseDemo", "DemoReport"]
