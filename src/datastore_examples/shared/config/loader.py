"""
목적: 데모 설정 로더를 제공한다.
설명: dict/JSON 파일/.env/환경 변수를 병합해 설정 사전을 생성한다.
디자인 패턴: 빌더 패턴
참조: src/datastore_examples/shared/config/settings.py, src/datastore_examples/shared/const/__init__.py
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv

from datastore_examples.shared.const import SharedConst
from datastore_examples.shared.logging import Logger, create_default_logger


class ConfigLoader:
    """설정 로더 구현체이다.

    나중에 추가된 소스가 앞선 소스를 덮어쓴다. 중첩 사전은 키 단위로 병합된다.

    Args:
        logger: 주입 가능한 로거.
    """

    _DEFAULT_ENCODING = SharedConst.DEFAULT_ENCODING
    _DEFAULT_ENV_DELIMITER = SharedConst.ENV_NESTED_DELIMITER

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or create_default_logger("ConfigLoader")
        self._sources: list[Dict[str, Any]] = []

    def add_dict(self, data: Optional[Mapping[str, Any]]) -> "ConfigLoader":
        """딕셔너리 설정을 추가한다."""

        if not data:
            return self
        self._sources.append(dict(data))
        return self

    def add_json_file(
        self,
        path: str,
        required: bool = False,
        encoding: Optional[str] = None,
    ) -> "ConfigLoader":
        """JSON 파일 설정을 추가한다."""

        if not path:
            raise ValueError("path는 비어 있을 수 없습니다.")
        if not os.path.exists(path):
            if required:
                raise FileNotFoundError(path)
            self._logger.warning(f"설정 파일이 없어 건너뜁니다: {path}")
            return self
        encoding = encoding or self._DEFAULT_ENCODING
        with open(path, "r", encoding=encoding) as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError("JSON 설정 파일 파싱에 실패했습니다.") from exc
        if not isinstance(payload, dict):
            raise ValueError("JSON 설정 파일은 최상위가 객체여야 합니다.")
        self._sources.append(payload)
        return self

    def load_env_file(self, path: Optional[str] = None) -> "ConfigLoader":
        """`.env` 파일을 프로세스 환경 변수로 로드한다.

        이미 설정된 환경 변수는 덮어쓰지 않는다. 실제 값은 이후
        `add_env` 호출 시점에 소스로 편입된다.
        """

        env_path = Path(path) if path else Path.cwd() / ".env"
        if not env_path.exists():
            if path:
                raise FileNotFoundError(str(env_path))
            self._logger.debug(f".env 파일이 없어 건너뜁니다: {env_path}")
            return self
        load_dotenv(dotenv_path=env_path, override=False)
        self._logger.info(f".env 파일 로드 완료: {env_path}")
        return self

    def add_env(self, prefix: str = SharedConst.ENV_PREFIX) -> "ConfigLoader":
        """`DATASTORE__<SECTION>__<KEY>` 형태의 환경 변수를 설정 소스로 추가한다.

        값은 문자열 그대로 둔다. 타입 변환은 설정 모델이 필드 타입에 맞춰
        수행하므로 `007` 같은 비밀번호도 원문이 유지된다. 빈 값은 설정하지
        않은 것으로 본다.
        """

        env_data: Dict[str, Any] = {}
        for key, value in os.environ.items():
            if not key.startswith(prefix) or value == "":
                continue
            parts = [part.lower() for part in key[len(prefix) :].split(self._DEFAULT_ENV_DELIMITER) if part]
            if parts:
                self._assign_nested(env_data, parts, value)
        if env_data:
            self._sources.append(env_data)
        return self

    def build(self, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """수집된 설정을 병합해 반환한다."""

        merged: Dict[str, Any] = {}
        for source in self._sources:
            merged = self._merge(merged, source)
        if overrides:
            merged = self._merge(merged, dict(overrides))
        return merged

    def _assign_nested(self, root: Dict[str, Any], keys: list[str], value: Any) -> None:
        current = root
        for part in keys[:-1]:
            if part not in current or not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[keys[-1]] = value

    def _merge(self, base: Dict[str, Any], incoming: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(base)
        for key, value in incoming.items():
            if (
                key in merged
                and isinstance(merged[key], dict)
                and isinstance(value, dict)
            ):
                merged[key] = self._merge(merged[key], value)
            else:
                merged[key] = value
        return merged

