"""패키지 경로 해석

작업 디렉토리에서 가장 가까운 패키지 디스크립터를 찾고,
저장소 루트 기준 패키지 경로와 릴리스 설정의 의존 경로를 계산합니다.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, Field

from monorepo_commits.vcs.git_client import GitClient
from .errors import ResolutionError
from .path_segments import Segments, to_segments

logger = logging.getLogger(__name__)


class PackageDescriptor(BaseModel):
    """패키지 디스크립터에서 필요한 정보"""
    path: Path
    name: Optional[str] = None
    dependencies: List[str] = Field(default_factory=list)

    @property
    def directory(self) -> Path:
        """디스크립터가 위치한 패키지 루트 디렉토리"""
        return self.path.parent

    @property
    def dependency_segments(self) -> Tuple[Segments, ...]:
        """정규화된 의존 경로 세그먼트 목록"""
        return tuple(to_segments(dep) for dep in self.dependencies)


def find_descriptor(start_dir: Optional[str] = None,
                    filename: str = "package.json") -> Path:
    """start_dir부터 상위로 올라가며 가장 가까운 디스크립터 파일을 찾습니다

    Raises:
        ResolutionError: 파일시스템 루트까지 디스크립터가 없는 경우
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    raise ResolutionError(f"No {filename} found in {current} or any parent directory")


def _extract_dependencies(data: Any) -> List[str]:
    """release.monorepo.dependencies 추출 (형식이 맞지 않으면 빈 목록)"""
    release = data.get('release') if isinstance(data, dict) else None
    monorepo = release.get('monorepo') if isinstance(release, dict) else None
    dependencies = monorepo.get('dependencies') if isinstance(monorepo, dict) else None
    if not isinstance(dependencies, list):
        return []

    valid = [dep for dep in dependencies if isinstance(dep, str) and dep.strip()]
    if len(valid) != len(dependencies):
        logger.warning(f"Ignoring {len(dependencies) - len(valid)} invalid monorepo dependency entries")
    return valid


def load_descriptor(descriptor_path: Path) -> PackageDescriptor:
    """디스크립터 파일 로드

    Raises:
        ResolutionError: 파일을 읽을 수 없거나 JSON 형식이 아닌 경우
    """
    try:
        with open(descriptor_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ResolutionError(f"Cannot read package descriptor {descriptor_path}: {e}") from e

    name = data.get('name') if isinstance(data, dict) else None
    return PackageDescriptor(
        path=descriptor_path,
        name=name if isinstance(name, str) else None,
        dependencies=_extract_dependencies(data)
    )


class PackageResolver:
    """패키지 루트 경로 해석기"""

    def __init__(self, git_client: GitClient, cwd: Optional[str] = None,
                 descriptor_filename: str = "package.json"):
        """
        Args:
            git_client: 저장소 루트 조회에 사용할 git 클라이언트
            cwd: 디스크립터 탐색 시작 디렉토리 (기본값: 현재 작업 디렉토리)
            descriptor_filename: 패키지 디스크립터 파일 이름
        """
        self.git_client = git_client
        self.cwd = cwd
        self.descriptor_filename = descriptor_filename

    def get_root(self) -> Path:
        """저장소 루트 절대 경로

        Raises:
            ResolutionError: git 저장소가 아니거나 조회에 실패한 경우
        """
        result = self.git_client.get_root()
        root = result.stdout.strip() if result.success else ""
        if not root:
            raise ResolutionError(f"Cannot locate repository root: {result.error_message or 'empty output'}")
        return Path(root).resolve()

    def load_descriptor(self) -> PackageDescriptor:
        """가장 가까운 패키지 디스크립터 로드"""
        return load_descriptor(find_descriptor(self.cwd, self.descriptor_filename))

    def resolve_package_path(self, descriptor: Optional[PackageDescriptor] = None) -> Segments:
        """저장소 루트 기준 패키지 경로 세그먼트

        패키지가 저장소 루트 자체이면 빈 튜플을 반환합니다.

        Raises:
            ResolutionError: 디스크립터 또는 저장소 루트를 찾지 못했거나,
                패키지가 저장소 밖에 있는 경우
        """
        if descriptor is None:
            descriptor = self.load_descriptor()
        root = self.get_root()
        package_dir = descriptor.directory.resolve()

        try:
            relative = package_dir.relative_to(root)
        except ValueError as e:
            raise ResolutionError(f"Package {package_dir} is outside repository {root}") from e

        return to_segments(relative.as_posix())
