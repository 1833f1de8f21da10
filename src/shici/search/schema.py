"""Whoosh schema definition for poem search."""

from typing import NamedTuple

from whoosh.fields import FieldType, Schema, TEXT

from .tokenizer import cjk_analyzer

# 필드 순서 고정: title, author, dynasty, content
FIELD_NAMES = ("title", "author", "dynasty", "content")


class PoemSchema(NamedTuple):
    """스키마와 필드 이름 → 필드 핸들 매핑."""

    schema: Schema
    fields: dict[str, FieldType]


def _text_field() -> TEXT:
    # 저장 + 위치 정보 포함 색인 (구문 검색 가능)
    # 분석 결과 토큰이 여러 개인 검색어는 구문 쿼리로 처리
    return TEXT(
        stored=True,
        phrase=True,
        analyzer=cjk_analyzer(),
        multitoken_query="phrase",
    )


def build_schema() -> PoemSchema:
    """시 인덱스 스키마 생성.

    호출할 때마다 같은 필드 구성의 새 스키마를 만든다. 필드 핸들은 필드 이름이므로
    서로 다른 호출에서 만든 스키마끼리도 이름으로 대응된다. 명령 파이프라인은
    실행당 한 번만 만들어 각 컴포넌트에 넘긴다.
    """
    schema = Schema()
    for name in FIELD_NAMES:
        schema.add(name, _text_field())

    fields = {name: schema[name] for name in FIELD_NAMES}
    return PoemSchema(schema, fields)
