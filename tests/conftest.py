"""모노레포 커밋 필터 테스트를 위한 pytest 설정"""

import json
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Callable, Dict, Generator, List, Optional
from unittest.mock import Mock

import pytest

from monorepo_commits.vcs.command_result import CommandResult
from monorepo_commits.vcs.git_client import GitClient


def pytest_configure(config):
    """pytest 설정을 구성합니다. 단위/통합 테스트용 마커들을 등록합니다."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """테스트용 임시 디렉토리 생성 (심볼릭 링크 해석된 경로)"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def write_descriptor() -> Callable[..., Path]:
    """디렉토리에 package.json을 작성하는 헬퍼"""
    def _write(directory: Path, name: str = "pkg",
               dependencies: Optional[List[str]] = None, **extra) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        data: Dict = {"name": name, **extra}
        if dependencies is not None:
            data["release"] = {"monorepo": {"dependencies": dependencies}}
        path = directory / "package.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def monorepo(temp_dir: Path, write_descriptor) -> Path:
    """packages/core, packages/shared, packages/utils를 가진 모노레포 디렉토리"""
    write_descriptor(temp_dir, name="root")
    write_descriptor(temp_dir / "packages" / "core", name="@scope/core",
                     dependencies=["packages/shared"])
    write_descriptor(temp_dir / "packages" / "shared", name="@scope/shared")
    write_descriptor(temp_dir / "packages" / "utils", name="@scope/utils")
    return temp_dir


def make_git_client(root: Path, files_by_hash: Dict[str, List[str]]) -> Mock:
    """get_root/get_commit_files가 고정 값을 반환하는 GitClient 모킹"""
    client = Mock(spec=GitClient)
    client.get_root.return_value = CommandResult(success=True, stdout=f"{root}\n", returncode=0)

    def get_commit_files(commit_hash: str) -> CommandResult:
        if commit_hash not in files_by_hash:
            return CommandResult(
                success=False,
                stderr=f"fatal: bad object {commit_hash}",
                returncode=128,
                error_message=f"fatal: bad object {commit_hash}"
            )
        return CommandResult(success=True, stdout="\0".join(files_by_hash[commit_hash]), returncode=0)

    client.get_commit_files.side_effect = get_commit_files
    return client


@pytest.fixture
def git_available() -> None:
    """git 실행 파일이 없으면 테스트 건너뛰기"""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")


@pytest.fixture
def git_repo(monorepo: Path, git_available) -> Path:
    """monorepo 디렉토리를 git 저장소로 초기화"""
    def git(*args: str) -> str:
        completed = subprocess.run(
            ["git", *args], cwd=monorepo, capture_output=True, text=True, check=True
        )
        return completed.stdout.strip()

    git("init", "-q")
    git("config", "user.email", "test@example.com")
    git("config", "user.name", "Test")
    git("config", "commit.gpgsign", "false")
    git("add", "-A")
    git("commit", "-q", "-m", "chore: initial layout")
    return monorepo


@pytest.fixture
def fake_git_client() -> Callable[[Path, Dict[str, List[str]]], Mock]:
    """make_git_client 팩토리 픽스처"""
    return make_git_client
