"""설정 관리

- 경로 설정: get_*() 메서드 (호출 시점의 환경변수/cwd 기준 계산)
- 그 외 설정: 클래스 변수 (모듈 로드 시 평가)
"""

import os
from typing import List

from dotenv import load_dotenv

from shici.errors import ShiciError

load_dotenv()

DEFAULT_INDEX_PATH = ".poem_index"
DEFAULT_WRITER_LIMIT_MB = 10


class ConfigurationError(ShiciError):
    """설정 오류 예외

    환경변수 값을 해석할 수 없을 때 발생합니다.
    """

    def __init__(self, invalid_vars: List[str]):
        self.invalid_vars = invalid_vars
        message = f"Invalid environment variables: {', '.join(invalid_vars)}"
        super().__init__(message)


def _parse_bool(value: str | None, default: bool = False) -> bool:
    """문자열을 bool로 변환"""
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes")


def _parse_int(env_var: str, default: int) -> int:
    """환경변수를 int로 변환"""
    value = os.getenv(env_var)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError([env_var]) from None


class Config:
    """애플리케이션 설정"""

    DEBUG = _parse_bool(os.getenv("SHICI_DEBUG"), False)

    @staticmethod
    def get_writer_limit_mb() -> int:
        """Whoosh writer 메모리 한도 (MB)"""
        return _parse_int("SHICI_WRITER_LIMIT_MB", DEFAULT_WRITER_LIMIT_MB)

    @staticmethod
    def get_index_path() -> str:
        return os.getenv("SHICI_INDEX_PATH") or DEFAULT_INDEX_PATH

    @staticmethod
    def get_corpus_path() -> str | None:
        """외부 코퍼스 파일 경로. 없으면 내장 코퍼스를 사용"""
        return os.getenv("SHICI_CORPUS_PATH") or None

    @staticmethod
    def get_log_path() -> str | None:
        return os.getenv("SHICI_LOG_PATH") or None
