"""설정 관리 모듈

YAML 설정 파일과 환경 변수로부터 필터링 설정을 로드하고 검증합니다.
Pydantic을 사용하여 타입 안전성과 검증을 보장합니다.
"""

import logging
import os
from typing import Mapping, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_MAX_THREADS = 500
MAX_THREADS_ENV_VAR = "SRM_MAX_THREADS"


class LoggingConfig(BaseModel):
    """로깅 설정"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


class FilterSettings(BaseModel):
    """커밋 필터링 설정"""
    max_threads: int = Field(default=DEFAULT_MAX_THREADS, ge=1)
    descriptor_filename: str = "package.json"
    git_timeout_seconds: int = Field(default=60, ge=1)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator('descriptor_filename')
    @classmethod
    def validate_descriptor_filename(cls, v):
        if not v or os.path.basename(v) != v:
            raise ValueError(f"Descriptor filename must be a bare file name: {v!r}")
        return v


def resolve_max_threads(environ: Optional[Mapping[str, str]] = None,
                        default: int = DEFAULT_MAX_THREADS) -> int:
    """환경 변수에서 동시 조회 상한을 읽습니다

    Args:
        environ: 환경 변수 매핑 (기본값: os.environ)
        default: 값이 없거나 잘못된 경우 사용할 기본값

    Returns:
        1 이상의 동시 조회 상한
    """
    environ = os.environ if environ is None else environ
    raw = environ.get(MAX_THREADS_ENV_VAR)
    if raw is None or not raw.strip():
        return default

    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring non-numeric {MAX_THREADS_ENV_VAR}={raw!r}, using {default}")
        return default

    if value < 1:
        logger.warning(f"Ignoring {MAX_THREADS_ENV_VAR}={value} (must be >= 1), using {default}")
        return default
    return value


def load_settings(config_path: Optional[str] = None,
                  environ: Optional[Mapping[str, str]] = None) -> FilterSettings:
    """설정 로드

    설정 파일 값 위에 환경 변수 오버라이드를 적용합니다.

    Args:
        config_path: YAML 설정 파일 경로 (없으면 기본값 사용)
        environ: 환경 변수 매핑 (기본값: os.environ)

    Returns:
        로드된 설정 객체

    Raises:
        FileNotFoundError: 설정 파일이 존재하지 않는 경우
        ValueError: 설정 파일 형식이 잘못된 경우
    """
    if config_path is None:
        settings = FilterSettings()
    else:
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML format: {e}") from e

        if not isinstance(config_data, dict):
            raise ValueError(f"Config root must be a mapping: {config_path}")

        try:
            settings = FilterSettings(**config_data)
        except ValidationError as e:
            raise ValueError(f"Failed to load config: {e}") from e

    max_threads = resolve_max_threads(environ, default=settings.max_threads)
    if max_threads != settings.max_threads:
        settings = settings.model_copy(update={"max_threads": max_threads})
    return settings
