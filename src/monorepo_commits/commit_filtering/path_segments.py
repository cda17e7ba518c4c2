"""경로 세그먼트 정규화

파일 경로와 패키지 경로를 비교 가능한 세그먼트 튜플로 변환합니다.
"""

import os
import posixpath
from typing import Tuple

Segments = Tuple[str, ...]


def to_segments(path: str) -> Segments:
    """경로를 정규화된 세그먼트 튜플로 변환

    OS 구분자는 '/'로 통일하고 '.'과 '..'을 정리합니다.
    저장소 루트를 가리키는 경로('', '.')는 빈 튜플이 됩니다.

    Examples:
        >>> to_segments("packages/core/./src/../index.js")
        ('packages', 'core', 'index.js')
        >>> to_segments(".")
        ()
    """
    if os.sep != '/':
        path = path.replace(os.sep, '/')
    if os.altsep and os.altsep != '/':
        path = path.replace(os.altsep, '/')

    if not path:
        return ()

    normalized = posixpath.normpath(path)
    if normalized == '.':
        return ()
    return tuple(segment for segment in normalized.split('/') if segment)
