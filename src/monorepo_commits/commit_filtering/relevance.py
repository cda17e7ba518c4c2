"""커밋 관련성 판정

파일 경로가 패키지 경로 또는 의존 패키지 경로 아래에 있는지 판정합니다.
부분 문자열이 아닌 세그먼트 단위 접두사 비교를 사용합니다.
"""

from typing import Iterable, Optional, Sequence

from .path_segments import Segments, to_segments


def is_segment_prefix(prefix: Segments, segments: Segments) -> bool:
    """prefix의 모든 세그먼트가 같은 위치의 segments와 일치하는지 확인

    segments가 prefix보다 짧으면 일치하지 않습니다. 빈 prefix는 모든 경로와 일치합니다.
    """
    if len(prefix) > len(segments):
        return False
    return all(seg == segments[i] for i, seg in enumerate(prefix))


def is_relevant(file_path: str, package_path: Segments,
                dependency_paths: Iterable[Segments] = ()) -> bool:
    """파일이 패키지 또는 의존 패키지에 속하는지 판정

    Args:
        file_path: 저장소 루트 기준 파일 경로
        package_path: 패키지 루트 세그먼트
        dependency_paths: 의존 패키지 루트 세그먼트 목록

    Returns:
        패키지 경로나 의존 경로 중 하나라도 접두사로 일치하면 True
    """
    file_segments = to_segments(file_path)
    if is_segment_prefix(package_path, file_segments):
        return True
    return any(is_segment_prefix(dep, file_segments) for dep in dependency_paths)


def find_relevant_file(files: Sequence[str], package_path: Segments,
                       dependency_paths: Sequence[Segments] = ()) -> Optional[str]:
    """첫 번째로 관련된 파일을 반환 (없으면 None)

    files의 순서대로 검사하며 처음 일치하는 파일에서 멈춥니다.
    """
    for file_path in files:
        if is_relevant(file_path, package_path, dependency_paths):
            return file_path
    return None
