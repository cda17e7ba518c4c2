"""릴리스 파이프라인 플러그인 래퍼

릴리스 단계 함수에 전달되는 컨텍스트의 커밋 목록을
현재 패키지 관련 커밋으로 교체한 뒤 원래 단계를 호출합니다.
"""

import functools
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from .commit_filtering import Commit, CommitFilesCache, CommitFilter

logger = logging.getLogger(__name__)

PluginStep = Callable[[Any, Dict[str, Any]], Any]
CommitsTransform = Callable[[List[Dict[str, Any]]], List[Dict[str, Any]]]


def map_commits(transform: CommitsTransform) -> Callable[[Mapping[str, Any]], Dict[str, Any]]:
    """컨텍스트의 commits만 변환한 새 컨텍스트를 만드는 함수 생성"""
    def apply(context: Mapping[str, Any]) -> Dict[str, Any]:
        new_context = dict(context)
        new_context['commits'] = transform(list(context.get('commits') or []))
        return new_context

    return apply


def only_package_commits(commit_filter: CommitFilter) -> CommitsTransform:
    """딕셔너리 커밋 목록을 패키지 관련 커밋으로 줄이는 변환 생성"""
    def transform(commits: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        filtered = commit_filter.filter_commits([Commit.from_dict(c) for c in commits])
        return [commit.to_dict() for commit in filtered]

    return transform


def with_only_package_commits(plugin_step: PluginStep,
                              commit_filter_factory: Optional[Callable[[], CommitFilter]] = None
                              ) -> PluginStep:
    """플러그인 단계 함수를 패키지 커밋 필터로 감쌉니다

    Args:
        plugin_step: (plugin_config, context)를 받는 원래 단계 함수
        commit_filter_factory: 호출마다 CommitFilter를 만드는 함수
            (기본값: 래핑된 단계 단위로 캐시를 공유하는 CommitFilter)

    Returns:
        같은 시그니처의 래핑된 단계 함수
    """
    if commit_filter_factory is None:
        cache = CommitFilesCache()
        commit_filter_factory = functools.partial(CommitFilter, cache=cache)

    def wrapped(plugin_config: Any, context: Mapping[str, Any]) -> Any:
        commit_filter = commit_filter_factory()
        new_context = map_commits(only_package_commits(commit_filter))(context)
        commit_filter.report(new_context['commits'], context.get('logger') or logger)
        return plugin_step(plugin_config, new_context)

    wrapped.__name__ = getattr(plugin_step, '__name__', 'wrapped')
    wrapped.__doc__ = getattr(plugin_step, '__doc__', None)
    return wrapped
