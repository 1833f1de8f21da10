"""CJK 토크나이저 어댑터.

사전 없이 구성된 분절기로, 단어 분리를 하지 않고 유니코드 코드포인트 단위로 토큰을 낸다.
공백과 구두점을 포함한 모든 문자가 각자 토큰과 위치를 가지며 대소문자는 그대로 둔다.
실제 사전을 넣거나 필터를 붙이면 검색 단위가 달라지므로 이 구성을 유지해야 한다.
"""

from whoosh.analysis import Token, Tokenizer

TOKENIZER_NAME = "cang_jie"


class CjkTokenizer(Tokenizer):
    """코드포인트 단위 분절 토크나이저 (빈 사전)."""

    name = TOKENIZER_NAME

    def __call__(self, value, positions=False, chars=False, keeporiginal=False,
                 removestops=True, start_pos=0, start_char=0, tokenize=True,
                 mode="", **kwargs):
        if not isinstance(value, str):
            raise TypeError("%r is not unicode" % (value,))

        t = Token(positions, chars, removestops=removestops, mode=mode, **kwargs)
        if not tokenize:
            t.original = t.text = value
            t.boost = 1.0
            if positions:
                t.pos = start_pos
            if chars:
                t.startchar = start_char
                t.endchar = start_char + len(value)
            yield t
            return

        for offset, ch in enumerate(value):
            t.text = ch
            t.boost = 1.0
            t.stopped = False
            if keeporiginal:
                t.original = ch
            if positions:
                t.pos = start_pos + offset
            if chars:
                t.startchar = start_char + offset
                t.endchar = t.startchar + 1
            yield t


def cjk_analyzer():
    """코퍼스 필드용 분석기 (코드포인트 분절만, 추가 필터 없음)."""
    return CjkTokenizer()


TOKENIZERS = {TOKENIZER_NAME: cjk_analyzer}


def _tokenizer_name(analyzer) -> str | None:
    """분석기 체인 첫 단계의 토크나이저 이름."""
    items = getattr(analyzer, "items", None)
    head = items[0] if items else analyzer
    return getattr(head, "name", None)


def register_tokenizer(schema, name: str = TOKENIZER_NAME) -> int:
    """스키마에서 name 토크나이저를 쓰는 필드에 새로 구성한 분석기를 바인딩.

    토크나이저 등록은 인덱스 인스턴스 단위이므로 인덱스를 열 때마다 호출해야 한다.

    Returns:
        분석기를 바인딩한 필드 수
    """
    factory = TOKENIZERS[name]
    bound = 0
    for field_name in schema.names():
        field = schema[field_name]
        analyzer = getattr(field, "analyzer", None)
        if analyzer is not None and _tokenizer_name(analyzer) == name:
            field.analyzer = factory()
            bound += 1
    return bound
