"""
목적: 저장소 데모 실행용 CLI 엔트리 포인트를 제공한다.
설명: 인자를 해석해 설정을 로드하고, 선택한 저장소(또는 전체) 데모를 순서대로 실행한다.
      치명 오류는 CRITICAL 로그로 남기고 종료 코드 1을 반환한다.
디자인 패턴: 단일 책임 원칙(SRP)
참조: src/datastore_examples/core/demos/__init__.py, src/datastore_examples/shared/config/settings.py
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Mapping, Optional, Sequence, Type

from datastore_examples.core.demos import DEMO_REGISTRY, BaseDemo
from datastore_examples.shared.config import AppSettings, load_settings
from datastore_examples.shared.const import SharedConst
from datastore_examples.shared.exceptions import BaseAppException
from datastore_examples.shared.logging import Logger, create_default_logger

_ALL = "all"
_LOGGER_NAME = "datastore_examples"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="datastore-examples",
        description="Elasticsearch/MongoDB/PostgreSQL/Redis 클라이언트 예제를 실행합니다.",
    )
    parser.add_argument(
        "store",
        choices=[*SharedConst.STORE_NAMES, _ALL],
        help="실행할 저장소 데모 (all이면 전체를 순서대로 실행)",
    )
    parser.add_argument("--config", dest="config_path", help="JSON 설정 파일 경로")
    parser.add_argument("--env-file", dest="env_file", help=".env 파일 경로")
    return parser


def resolve_stores(store: str) -> List[str]:
    """선택 값을 실행할 저장소 목록으로 변환한다."""

    if store == _ALL:
        return list(SharedConst.STORE_NAMES)
    return [store]


def run_demos(
    stores: Sequence[str],
    settings: AppSettings,
    logger: Logger,
    registry: Optional[Mapping[str, Type[BaseDemo]]] = None,
) -> None:
    """저장소 데모를 하나씩 실행한다. 데모마다 자체 연결을 사용한다."""

    registry = registry or DEMO_REGISTRY
    for store in stores:
        demo_cls = registry[store]
        demo = demo_cls(settings=getattr(settings, store), logger=logger)
        demo.run()


def run(
    argv: Optional[Sequence[str]] = None,
    registry: Optional[Mapping[str, Type[BaseDemo]]] = None,
    logger: Optional[Logger] = None,
) -> int:
    """CLI를 실행하고 종료 코드를 반환한다."""

    args = build_parser().parse_args(argv)
    bootstrap_logger = logger or create_default_logger(_LOGGER_NAME, emit_stdout=True)
    try:
        settings = load_settings(config_path=args.config_path, env_file=args.env_file)
    except BaseAppException as exc:
        bootstrap_logger.critical(exc.message, metadata=exc.to_dict())
        return 1

    app_logger = logger or create_default_logger(_LOGGER_NAME, emit_stdout=settings.log_stdout)
    try:
        run_demos(resolve_stores(args.store), settings, app_logger, registry)
    except BaseAppException as exc:
        app_logger.critical(exc.message, metadata=exc.to_dict())
        return 1
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
