"""Whoosh searcher for poems."""

import logging
import re

from whoosh.qparser import MultifieldParser, OrGroup
from whoosh.qparser.common import QueryParserError

from shici.errors import QuerySyntaxError
from shici.models import Poem

from .mapper import document_to_poem
from .schema import PoemSchema

logger = logging.getLogger(__name__)

# 한 번에 가져오는 최대 결과 수
SEARCH_LIMIT = 10000


# Whoosh 기본 파서의 불리언 연산자 (대문자만 연산자로 해석)
_BINARY_OPERATORS = {"AND", "OR", "ANDNOT", "ANDMAYBE"}
_OPERATORS = _BINARY_OPERATORS | {"NOT"}

_PHRASE_RE = re.compile(r'"[^"]*"')
_RANGE_CLOSE = {"[": "]", "{": "}"}


def _check_balanced(keyword: str) -> None:
    """따옴표/괄호 짝 검사. Whoosh 파서는 짝이 안 맞아도 조용히 넘어가므로 먼저 거른다."""
    if keyword.count('"') % 2:
        raise QuerySyntaxError(keyword, "unbalanced double quote")

    depth = 0
    in_phrase = False
    for ch in keyword:
        if ch == '"':
            in_phrase = not in_phrase
        elif in_phrase:
            continue
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                raise QuerySyntaxError(keyword, "unexpected ')'")
    if depth:
        raise QuerySyntaxError(keyword, "unbalanced parenthesis")


def _check_ranges(keyword: str, bare: str) -> None:
    """[a TO b] / {a TO b} 범위가 닫히고 TO를 포함하는지 검사."""
    for start, ch in enumerate(bare):
        if ch not in _RANGE_CLOSE:
            continue
        end = bare.find(_RANGE_CLOSE[ch], start + 1)
        if end < 0:
            raise QuerySyntaxError(keyword, f"unterminated range starting with '{ch}'")
        if "TO" not in bare[start + 1:end].split():
            raise QuerySyntaxError(keyword, "range is missing 'TO'")


def _check_fields(keyword: str, bare: str, field_names) -> None:
    """field: 접두사가 스키마 필드를 가리키고 값이 비어 있지 않은지 검사."""
    for match in re.finditer(r"(\w+):", bare):
        name = match.group(1)
        if name not in field_names:
            raise QuerySyntaxError(keyword, f"unknown field '{name}'")
        rest = bare[match.end():]
        if not rest or rest[0].isspace() or rest[0] == ")":
            raise QuerySyntaxError(keyword, f"empty clause for field '{name}'")


def _check_operators(keyword: str, bare: str) -> None:
    """연산자만 있거나 양 끝에 매달린 연산자 검사."""
    words = bare.replace("(", " ").replace(")", " ").split()
    if not words:
        return
    if all(w in _OPERATORS for w in words):
        raise QuerySyntaxError(keyword, "query contains only operators")
    if words[0] in _BINARY_OPERATORS:
        raise QuerySyntaxError(keyword, f"'{words[0]}' has no left operand")
    if words[-1] in _OPERATORS:
        raise QuerySyntaxError(keyword, f"'{words[-1]}' has no right operand")


def _check_syntax(keyword: str, field_names) -> None:
    """Whoosh 파서가 일반 검색어로 바꿔 버리는 잘못된 문법을 파싱 전에 거른다."""
    _check_balanced(keyword)
    # 구문("...") 안의 문자는 문법으로 보지 않는다
    bare = _PHRASE_RE.sub(" ", keyword)
    _check_ranges(keyword, bare)
    _check_fields(keyword, bare, field_names)
    _check_operators(keyword, bare)


def _find_parse_error(query) -> str | None:
    """파싱된 쿼리 트리에서 오류 표시가 붙은 노드를 찾는다."""
    if query.error:
        return query.error
    for child in query.children():
        error = _find_parse_error(child)
        if error:
            return error
    return None


class PoemSearcher:
    """시 검색 API."""

    def __init__(self, ix, poem_schema: PoemSchema):
        """
        Args:
            ix: open_or_create()로 연 인덱스
            poem_schema: build_schema() 결과
        """
        self.ix = ix
        self.fields = poem_schema.fields
        # 모든 필드 대상, 단어 사이는 OR
        self.parser = MultifieldParser(list(self.fields), ix.schema, group=OrGroup)

    def parse(self, keyword: str):
        """검색어를 쿼리로 변환.

        Raises:
            QuerySyntaxError: 검색어 문법 오류
        """
        _check_syntax(keyword, self.fields)
        try:
            query = self.parser.parse(keyword)
        except QueryParserError as e:
            raise QuerySyntaxError(keyword, str(e)) from e

        error = _find_parse_error(query)
        if error:
            raise QuerySyntaxError(keyword, error)
        return query

    def search(self, keyword: str, limit: int = SEARCH_LIMIT) -> list[Poem]:
        """시 검색.

        Args:
            keyword: 검색어. 제목/작자/왕조/본문 어느 필드에 있어도 매치
            limit: 최대 결과 수

        Returns:
            관련도 내림차순 Poem 리스트 (동점 순서는 보장하지 않음)
        """
        if not keyword.strip():
            return []

        query = self.parse(keyword)
        logger.debug("Parsed %r as %r", keyword, query)

        with self.ix.searcher() as searcher:
            results = searcher.search(query, limit=limit)
            poems = [document_to_poem(hit.fields(), self.fields) for hit in results]

        logger.debug("Query %r matched %d poems", keyword, len(poems))
        return poems

    def count(self) -> int:
        """색인된 문서 수."""
        with self.ix.searcher() as searcher:
            return searcher.doc_count()
