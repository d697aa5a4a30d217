"""
목적: 공통 상수 집합을 제공한다.
설명: 설정 로더와 CLI가 공유하는 기본 상수 값을 정의한다.
디자인 패턴: 상수 객체
참조: src/datastore_examples/shared/config/loader.py, src/datastore_examples/main.py
"""


class SharedConst:
    """공통 상수 집합이다.

    Attributes:
        DEFAULT_ENCODING: 기본 파일 인코딩.
        ENV_PREFIX: 설정으로 읽을 환경 변수 접두사.
        ENV_NESTED_DELIMITER: 환경 변수 키를 중첩 경로로 해석하는 구분자.
        STORE_NAMES: 실행 가능한 데모 저장소 이름 목록(실행 순서).
    """

    DEFAULT_ENCODING = "utf-8"
    ENV_PREFIX = "DATASTORE__"
    ENV_NESTED_DELIMITER = "__"
    STORE_NAMES = ("elasticsearch", "mongodb", "postgres", "redis")


__all__ = ["SharedConst"]
