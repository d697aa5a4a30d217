"""
목적: 설정 테스트 공통 픽스처를 제공한다.
설명: 프로세스 환경의 DATASTORE__* 변수와 작업 디렉터리의 .env가 테스트에 섞이지 않도록 격리한다.
디자인 패턴: 테스트 픽스처
참조: tests/shared/config/test_loader.py, tests/shared/config/test_settings.py
"""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    """DATASTORE__* 환경 변수를 비우고 임시 디렉터리에서 실행한다."""

    for key in list(os.environ):
        if key.startswith("DATASTORE__"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
