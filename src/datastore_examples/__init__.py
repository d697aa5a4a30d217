"""
목적: datastore_examples 패키지 루트.
설명: Elasticsearch/MongoDB/PostgreSQL/Redis 클라이언트 사용 예제를 묶는다.
디자인 패턴: 패키지 루트
참조: src/datastore_examples/main.py
"""

__version__ = "0.1.0"
