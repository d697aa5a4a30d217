"""
목적: 외부 시스템 통합 패키지를 정의한다.
설명: 데이터 저장소 클라이언트 연결 계층을 묶는다.
디자인 패턴: 패키지 네임스페이스
참조: src/datastore_examples/integrations/db
"""
