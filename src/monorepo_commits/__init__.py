"""Monorepo commit filtering

모노레포에서 특정 패키지(및 선언된 의존 패키지)를 건드린 커밋만 남기는 기능을 제공합니다.
"""

from .commit_filtering import Commit, CommitFilter, FetchError, MonorepoError, ResolutionError
from .plugin import with_only_package_commits

__all__ = [
    "Commit",
    "CommitFilter",
    "FetchError",
    "MonorepoError",
    "ResolutionError",
    "with_only_package_commits",
]
