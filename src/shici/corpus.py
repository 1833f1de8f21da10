"""코퍼스 로더 - JSON 배열 → Poem 리스트.

기본은 패키지에 내장된 data/poems.json을 읽고, 외부 파일 경로가 주어지면 그 파일을 읽는다.
"""

import json
import logging
from importlib import resources
from pathlib import Path

from shici.errors import CorpusFormatError
from shici.models import Poem

logger = logging.getLogger(__name__)

POEM_KEYS = ("title", "author", "dynasty", "content")
EMBEDDED_SOURCE = "<embedded poems.json>"


def _read_embedded() -> str:
    """내장 코퍼스 텍스트 읽기"""
    return resources.files("shici").joinpath("data/poems.json").read_text(encoding="utf-8")


def parse_poems(text: str, source: str = "<string>") -> list[Poem]:
    """JSON 텍스트를 Poem 리스트로 변환.

    Args:
        text: 시 객체 배열 JSON
        source: 오류 메시지에 쓸 출처 이름

    Returns:
        원래 순서를 유지한 Poem 리스트

    Raises:
        CorpusFormatError: JSON이 깨졌거나 필드가 없거나 문자열이 아닌 경우
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CorpusFormatError(source, f"invalid JSON ({e})") from e

    if not isinstance(data, list):
        raise CorpusFormatError(source, "top-level value must be an array of poems")

    poems = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise CorpusFormatError(source, f"item {i} is not an object")
        values = {}
        for key in POEM_KEYS:
            value = item.get(key)
            if value is None:
                raise CorpusFormatError(source, f"item {i} is missing '{key}'")
            if not isinstance(value, str):
                raise CorpusFormatError(source, f"item {i} field '{key}' is not a string")
            values[key] = value
        poems.append(Poem(**values))

    return poems


def load_poems(path: str | Path | None = None) -> list[Poem]:
    """코퍼스 로드. path가 None이면 내장 코퍼스 사용."""
    if path is None:
        source = EMBEDDED_SOURCE
        text = _read_embedded()
    else:
        source = str(path)
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusFormatError(source, f"cannot read file ({e})") from e

    poems = parse_poems(text, source)
    logger.debug("Loaded %d poems from %s", len(poems), source)
    return poems
