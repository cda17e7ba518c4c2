"""커밋 필터링 예외 정의"""


class MonorepoError(RuntimeError):
    """모노레포 커밋 필터링 실패의 기본 예외"""


class ResolutionError(MonorepoError):
    """저장소 루트 또는 패키지 디스크립터를 찾지 못한 경우"""


class FetchError(MonorepoError):
    """커밋의 변경 파일 목록 조회에 실패한 경우"""

    def __init__(self, commit_hash: str, reason: str):
        super().__init__(f"Failed to fetch files for commit {commit_hash}: {reason}")
        self.commit_hash = commit_hash
        self.reason = reason
