"""Git 명령 실행 결과

CommandResult 클래스 정의입니다.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class CommandResult:
    """Git 명령 실행 결과"""
    success: bool
    stdout: str = ""
    stderr: str = ""
    returncode: Optional[int] = None
    error_message: Optional[str] = None

    @property
    def records(self) -> List[str]:
        """NUL(-z)로 구분된 출력 레코드 목록

        파일 이름의 앞뒤 공백을 보존하기 위해 strip하지 않습니다.
        """
        return [record for record in self.stdout.split("\0") if record]
