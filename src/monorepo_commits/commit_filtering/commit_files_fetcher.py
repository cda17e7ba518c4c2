"""커밋 변경 파일 조회

커밋 해시별로 변경 파일 목록을 메모이즈하고,
동시 조회 수를 제한한 스레드 풀에서 일괄 조회합니다.
"""

import concurrent.futures
import logging
import threading
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from monorepo_commits.config.settings import DEFAULT_MAX_THREADS
from monorepo_commits.vcs.git_client import GitClient
from .commit import Commit
from .errors import FetchError

logger = logging.getLogger(__name__)

FileList = Tuple[str, ...]


class CommitFilesCache:
    """커밋 해시 → 변경 파일 목록 캐시

    같은 해시의 파일 목록은 변하지 않는다고 가정하므로 무효화하지 않습니다.
    여러 실행에서 공유하려면 같은 인스턴스를 넘기면 됩니다.
    """

    def __init__(self):
        self._entries: Dict[str, FileList] = {}
        self._lock = threading.Lock()

    def get(self, commit_hash: str) -> Optional[FileList]:
        with self._lock:
            return self._entries.get(commit_hash)

    def set(self, commit_hash: str, files: FileList) -> None:
        with self._lock:
            self._entries[commit_hash] = files

    def __contains__(self, commit_hash: str) -> bool:
        with self._lock:
            return commit_hash in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def git_file_lister(git_client: GitClient) -> Callable[[str], FileList]:
    """GitClient 기반 파일 조회 함수 생성

    Raises (반환된 함수):
        FetchError: git 명령이 실패한 경우
    """
    def list_files(commit_hash: str) -> FileList:
        result = git_client.get_commit_files(commit_hash)
        if not result.success:
            raise FetchError(commit_hash, result.error_message or "git diff-tree failed")
        return tuple(result.records)

    return list_files


class CommitFilesFetcher:
    """동시 조회 수를 제한한 커밋 변경 파일 조회기"""

    def __init__(self, list_files: Callable[[str], FileList],
                 cache: Optional[CommitFilesCache] = None,
                 max_threads: int = DEFAULT_MAX_THREADS):
        """
        Args:
            list_files: 커밋 해시를 받아 변경 파일 목록을 반환하는 함수
            cache: 공유 캐시 (기본값: 새 캐시)
            max_threads: 동시에 실행할 최대 조회 수
        """
        if max_threads < 1:
            raise ValueError(f"max_threads must be >= 1, got {max_threads}")
        self.list_files = list_files
        self.cache = cache if cache is not None else CommitFilesCache()
        self.max_threads = max_threads

    def get_files(self, commit_hash: str) -> FileList:
        """캐시를 거쳐 단일 커밋의 변경 파일 조회

        같은 배치에서 동시에 요청된 동일 해시는 중복 조회될 수 있으며,
        결과가 같으므로 나중 값이 캐시를 덮어써도 무방합니다.
        """
        cached = self.cache.get(commit_hash)
        if cached is not None:
            return cached

        try:
            files = tuple(self.list_files(commit_hash))
        except FetchError:
            raise
        except Exception as e:
            raise FetchError(commit_hash, str(e)) from e

        self.cache.set(commit_hash, files)
        return files

    def fetch_files(self, commits: Sequence[Commit]) -> List[Commit]:
        """커밋마다 변경 파일을 채운 새 Commit 목록 반환

        결과의 i번째는 입력의 i번째 커밋에 대응합니다.
        하나라도 실패하면 대기 중인 조회를 취소하고 FetchError를 전파합니다.
        """
        if not commits:
            return []

        workers = min(self.max_threads, len(commits))
        logger.debug(f"Fetching files for {len(commits)} commits with up to {workers} workers")

        results: List[Optional[Commit]] = [None] * len(commits)
        executor = concurrent.futures.ThreadPoolExecutor(max_workers=workers)
        try:
            future_to_index = {
                executor.submit(self.get_files, commit.hash): i
                for i, commit in enumerate(commits)
            }

            for future in concurrent.futures.as_completed(future_to_index):
                index = future_to_index[future]
                results[index] = commits[index].with_files(future.result())
        except BaseException:
            executor.shutdown(wait=True, cancel_futures=True)
            raise
        else:
            executor.shutdown(wait=True)

        return results
