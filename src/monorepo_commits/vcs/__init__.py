"""Git 접근 계층

저장소 루트 조회 및 커밋별 변경 파일 조회를 담당합니다.
"""

from .command_result import CommandResult
from .git_client import GitClient

__all__ = [
    "CommandResult",
    "GitClient",
]
