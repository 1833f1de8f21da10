"""Poem ↔ Whoosh 문서 변환."""

from typing import Any, Mapping

from shici.errors import SchemaViolationError
from shici.models import Poem


def poem_to_document(poem: Poem, fields: Mapping[str, Any]) -> dict[str, str]:
    """Poem을 writer.add_document()에 넘길 필드 이름 → 텍스트 매핑으로 변환."""
    return {name: getattr(poem, name) for name in fields}


def extract_field_text(document: Mapping[str, Any], name: str) -> str:
    """저장된 문서에서 필드의 첫 번째 값을 텍스트로 꺼낸다.

    Raises:
        SchemaViolationError: 필드가 없거나 텍스트가 아닌 경우
    """
    if name not in document:
        raise SchemaViolationError(name, "field is missing")

    value = document[name]
    if isinstance(value, (list, tuple)):
        if not value:
            raise SchemaViolationError(name, "field has no stored value")
        value = value[0]

    if not isinstance(value, str):
        raise SchemaViolationError(name, f"expected text, got {type(value).__name__}")
    return value


def document_to_poem(document: Mapping[str, Any], fields: Mapping[str, Any]) -> Poem:
    """저장된 문서(hit.fields())를 Poem으로 복원."""
    values = {name: extract_field_text(document, name) for name in fields}
    return Poem(**values)
