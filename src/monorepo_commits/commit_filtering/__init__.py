"""패키지 커밋 필터링 패키지

모노레포에서 패키지 경로와 의존 경로를 기준으로 커밋을 필터링하는 기능을 제공합니다.
"""

from .errors import MonorepoError, ResolutionError, FetchError
from .commit import Commit
from .path_segments import to_segments
from .relevance import is_relevant, is_segment_prefix, find_relevant_file
from .package_resolver import PackageDescriptor, PackageResolver, find_descriptor, load_descriptor
from .commit_files_fetcher import CommitFilesCache, CommitFilesFetcher, git_file_lister
from .commit_filter import CommitFilter

__all__ = [
    'MonorepoError',
    'ResolutionError',
    'FetchError',
    'Commit',
    'to_segments',
    'is_relevant',
    'is_segment_prefix',
    'find_relevant_file',
    'PackageDescriptor',
    'PackageResolver',
    'find_descriptor',
    'load_descriptor',
    'CommitFilesCache',
    'CommitFilesFetcher',
    'git_file_lister',
    'CommitFilter',
]
