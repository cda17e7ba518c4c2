"""패키지 커밋 필터

패키지 경로 해석, 변경 파일 조회, 관련성 판정을 묶어
패키지(및 의존 패키지)를 건드린 커밋만 남깁니다.
"""

import logging
import os
from typing import List, Optional, Sequence

from monorepo_commits.config.settings import FilterSettings
from monorepo_commits.vcs.git_client import GitClient
from .commit import Commit
from .commit_files_fetcher import CommitFilesCache, CommitFilesFetcher, git_file_lister
from .package_resolver import PackageDescriptor, PackageResolver
from .relevance import find_relevant_file

logger = logging.getLogger(__name__)


class CommitFilter:
    """패키지 관련 커밋 필터링 클래스"""

    def __init__(self, settings: Optional[FilterSettings] = None,
                 git_client: Optional[GitClient] = None,
                 cache: Optional[CommitFilesCache] = None,
                 cwd: Optional[str] = None):
        """
        Args:
            settings: 필터링 설정 (기본값: FilterSettings())
            git_client: git 접근 클라이언트 (기본값: cwd 기준 GitClient)
            cache: 커밋 파일 캐시. 여러 실행에서 재사용하려면 같은 인스턴스를 넘깁니다.
            cwd: 패키지 디스크립터 탐색 시작 디렉토리
        """
        self.settings = settings or FilterSettings()
        self.cwd = cwd or os.getcwd()
        self.git_client = git_client or GitClient(
            cwd=self.cwd, timeout=self.settings.git_timeout_seconds
        )
        self.resolver = PackageResolver(
            self.git_client,
            cwd=self.cwd,
            descriptor_filename=self.settings.descriptor_filename
        )
        self.fetcher = CommitFilesFetcher(
            git_file_lister(self.git_client),
            cache=cache,
            max_threads=self.settings.max_threads
        )
        self._descriptor: Optional[PackageDescriptor] = None

    @property
    def cache(self) -> CommitFilesCache:
        return self.fetcher.cache

    @property
    def descriptor(self) -> PackageDescriptor:
        """현재 패키지 디스크립터 (최초 접근 시 로드)"""
        if self._descriptor is None:
            self._descriptor = self.resolver.load_descriptor()
        return self._descriptor

    @property
    def package_name(self) -> Optional[str]:
        return self.descriptor.name

    def filter_commits(self, commits: Sequence[Commit]) -> List[Commit]:
        """패키지 관련 커밋만 원래 순서대로 반환

        Raises:
            ResolutionError: 패키지 디스크립터나 저장소 루트를 찾지 못한 경우
            FetchError: 커밋 변경 파일 조회에 실패한 경우
        """
        descriptor = self.descriptor
        package_path = self.resolver.resolve_package_path(descriptor)
        dependency_paths = descriptor.dependency_segments
        logger.debug(
            f'Filter commits by package path: "{"/".join(package_path)}" '
            f'and dependencies: {descriptor.dependencies}'
        )

        commits_with_files = self.fetcher.fetch_files(commits)

        filtered: List[Commit] = []
        for commit in commits_with_files:
            package_file = find_relevant_file(commit.files or (), package_path, dependency_paths)
            if package_file is None:
                continue
            logger.debug(
                f'Including commit "{commit.subject}" because it modified package file "{package_file}".'
            )
            filtered.append(commit)

        return filtered

    def report(self, commits: Sequence, report_logger=None) -> None:
        """필터링 결과 개수를 로깅 협력자에 보고"""
        (report_logger or logger).info(
            "Found %s commits for package %s since last release",
            len(commits),
            self.package_name
        )
