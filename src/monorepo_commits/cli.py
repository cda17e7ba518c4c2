"""CLI 진입점

현재 디렉토리 패키지에 해당하는 커밋만 출력하는 명령행 인터페이스를 제공합니다.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .commit_filtering import Commit, CommitFilter
from .config.settings import FilterSettings, load_settings
from .vcs.git_client import GitClient

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", fmt: Optional[str] = None) -> None:
    """로깅 설정

    Args:
        level: 로그 레벨
        fmt: 로그 포맷 (기본값: 설정의 기본 포맷)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=fmt or FilterSettings().logging.format,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monorepo-commits",
        description="현재 패키지(및 의존 패키지)를 변경한 커밋만 출력합니다",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
사용 예시:
  monorepo-commits                       # HEAD까지 전체 이력
  monorepo-commits --from v1.2.0         # v1.2.0 이후 커밋
  monorepo-commits --json --max-threads 50
        """
    )
    parser.add_argument("--from", dest="from_rev", type=str, default=None,
                        help="시작 리비전 (포함하지 않음)")
    parser.add_argument("--to", dest="to_rev", type=str, default="HEAD",
                        help="끝 리비전 (기본값: HEAD)")
    parser.add_argument("--config", "-c", type=str, default=None,
                        help="YAML 설정 파일 경로")
    parser.add_argument("--max-threads", type=int, default=None,
                        help="동시 파일 조회 상한 (설정 및 SRM_MAX_THREADS보다 우선)")
    parser.add_argument("--log-level", "-l", type=str, default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="로그 레벨 (기본값: 설정 값)")
    parser.add_argument("--json", action="store_true",
                        help="변경 파일을 포함한 JSON으로 출력")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """메인 함수"""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
        if args.max_threads is not None:
            settings = FilterSettings(**{**settings.model_dump(), "max_threads": args.max_threads})
    except (FileNotFoundError, ValueError) as e:
        print(f"[ERROR] 설정 로드 실패: {e}", file=sys.stderr)
        return 1

    setup_logging(args.log_level or settings.logging.level, settings.logging.format)
    if args.config:
        logger.info(f"Loaded configuration from: {args.config}")

    git_client = GitClient(timeout=settings.git_timeout_seconds)
    commit_filter = CommitFilter(settings, git_client=git_client)

    try:
        commits = [
            Commit(hash=commit_hash, subject=subject)
            for commit_hash, subject in git_client.get_commits(args.to_rev, args.from_rev)
        ]
        filtered = commit_filter.filter_commits(commits)
    except RuntimeError as e:  # MonorepoError 포함
        print(f"[ERROR] 커밋 필터링 실패: {e}", file=sys.stderr)
        if (args.log_level or settings.logging.level) == "DEBUG":
            logger.exception("Commit filtering failed")
        return 1

    commit_filter.report(filtered)

    if args.json:
        print(json.dumps([commit.to_dict() for commit in filtered], indent=2, ensure_ascii=False))
    else:
        for commit in filtered:
            print(f"{commit.hash} {commit.subject}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
