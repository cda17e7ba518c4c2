"""Git 명령 실행 클라이언트

GitClient 클래스 정의입니다.
읽기 전용 git 명령만 실행하며, 실패 시 예외 대신 CommandResult를 반환합니다.
리비전 인자는 항상 --end-of-options 뒤에 두어 옵션으로 해석되지 않게 합니다.
"""

import logging
import subprocess
from typing import List, Optional, Sequence, Tuple

from .command_result import CommandResult

logger = logging.getLogger(__name__)

# git log 출력에서 해시와 제목을 구분하는 문자 (ASCII unit separator)
FIELD_SEPARATOR = "\x1f"
END_OF_OPTIONS = "--end-of-options"


class GitClient:
    """읽기 전용 git 명령 실행기"""

    ALLOWED_SUBCOMMANDS = {'rev-parse', 'diff-tree', 'log'}

    def __init__(self, cwd: Optional[str] = None, timeout: int = 60,
                 git_binary: str = "git"):
        """
        Args:
            cwd: git 명령 실행 디렉토리 (기본값: 현재 작업 디렉토리)
            timeout: 명령별 타임아웃 (초)
            git_binary: git 실행 파일 경로
        """
        self.cwd = cwd
        self.timeout = timeout
        self.git_binary = git_binary

    def run(self, args: Sequence[str]) -> CommandResult:
        """git 하위 명령을 실행합니다

        Args:
            args: git 이후의 인자 목록 (예: ["rev-parse", "--show-toplevel"])

        Returns:
            CommandResult: 명령 실행 결과
        """
        if not args or args[0] not in self.ALLOWED_SUBCOMMANDS:
            return CommandResult(
                success=False,
                error_message=f"Git command blocked: {' '.join(args)}"
            )

        command = [self.git_binary, *args]
        try:
            completed = subprocess.run(
                command,
                cwd=self.cwd,
                capture_output=True,
                encoding="utf-8",
                errors="surrogateescape",
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired:
            return CommandResult(
                success=False,
                error_message=f"Command timed out after {self.timeout} seconds",
            )
        except OSError as e:
            return CommandResult(
                success=False,
                error_message=f"Failed to execute command: {e}",
            )

        stdout = completed.stdout or ""
        stderr = completed.stderr or ""
        return CommandResult(
            success=completed.returncode == 0,
            stdout=stdout,
            stderr=stderr,
            returncode=completed.returncode,
            error_message=stderr.strip() if completed.returncode != 0 and stderr else None,
        )

    def get_root(self) -> CommandResult:
        """저장소 루트의 절대 경로를 조회합니다"""
        return self.run(["rev-parse", "--show-toplevel"])

    def get_commit_files(self, commit_hash: str) -> CommandResult:
        """커밋이 변경한 파일 목록을 조회합니다

        루트 커밋도 처리하기 위해 --root 옵션을 사용하고,
        파일 이름 인용을 피하기 위해 -z로 NUL 구분 출력을 받습니다.
        출력 순서는 git이 보고한 순서를 그대로 유지합니다.
        """
        return self.run([
            "diff-tree", "--root", "--no-commit-id", "--name-only", "-r", "-z",
            END_OF_OPTIONS, commit_hash
        ])

    def get_commits(self, to_rev: str = "HEAD",
                    from_rev: Optional[str] = None) -> List[Tuple[str, str]]:
        """범위 내 커밋의 (해시, 제목) 목록 조회

        Raises:
            RuntimeError: git log 실행에 실패한 경우
        """
        rev_range = f"{from_rev}..{to_rev}" if from_rev else to_rev
        result = self.run([
            "log", "-z", f"--format=%H{FIELD_SEPARATOR}%s", END_OF_OPTIONS, rev_range
        ])
        if not result.success:
            raise RuntimeError(f"git log failed for {rev_range}: {result.error_message}")

        commits: List[Tuple[str, str]] = []
        for record in result.records:
            commit_hash, _, subject = record.partition(FIELD_SEPARATOR)
            commits.append((commit_hash, subject))

        logger.debug(f"Collected {len(commits)} commits for {rev_range}")
        return commits
