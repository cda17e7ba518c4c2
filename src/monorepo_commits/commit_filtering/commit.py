from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Commit:
    """필터링 대상 커밋

    files는 변경 파일 조회 전에는 None이며, with_files()로 새 객체를 만들어 채웁니다.
    extra에는 호출자가 넘긴 나머지 필드가 그대로 보존됩니다.
    """
    hash: str
    subject: str
    files: Optional[Tuple[str, ...]] = None
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'extra', MappingProxyType(dict(self.extra)))

    def with_files(self, files: Sequence[str]) -> 'Commit':
        """변경 파일 목록이 채워진 새 Commit 반환"""
        return replace(self, files=tuple(files), extra=dict(self.extra))

    def to_dict(self) -> Dict[str, Any]:
        """원래 필드를 보존한 딕셔너리 변환"""
        data = dict(self.extra)
        data['hash'] = self.hash
        data['subject'] = self.subject
        if self.files is not None:
            data['files'] = list(self.files)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Commit':
        """딕셔너리에서 Commit 객체 생성"""
        extra = {k: v for k, v in data.items() if k not in ('hash', 'subject', 'files')}
        files = data.get('files')
        return cls(
            hash=data['hash'],
            subject=data.get('subject', ''),
            files=tuple(files) if files is not None else None,
            extra=extra
        )
