"""CJK 토크나이저 어댑터 테스트."""

import pytest
from whoosh.fields import Schema, TEXT, ID

from shici.search.tokenizer import (
    TOKENIZER_NAME,
    CjkTokenizer,
    cjk_analyzer,
    register_tokenizer,
)


def _texts(value, **kwargs):
    return [t.text for t in cjk_analyzer()(value, **kwargs)]


class TestCjkTokenizer:
    """코드포인트 분절 테스트."""

    def test_one_token_per_codepoint(self):
        assert _texts("床前明月光") == ["床", "前", "明", "月", "光"]

    def test_keeps_whitespace_and_punctuation(self):
        assert _texts("明月，光\n疑") == ["明", "月", "，", "光", "\n", "疑"]

    def test_keeps_case(self):
        assert _texts("Tang C1") == ["T", "a", "n", "g", " ", "C", "1"]

    def test_every_codepoint_takes_a_position(self):
        tokens = [(t.text, t.pos) for t in cjk_analyzer()("明月，光", positions=True)]
        assert tokens == [("明", 0), ("月", 1), ("，", 2), ("光", 3)]

    def test_char_offsets(self):
        tokens = [(t.startchar, t.endchar) for t in CjkTokenizer()("a b", chars=True)]
        assert tokens == [(0, 1), (1, 2), (2, 3)]

    def test_untokenized_value(self):
        assert _texts("明月", tokenize=False) == ["明月"]

    def test_empty_text(self):
        assert _texts("") == []

    def test_rejects_non_text(self):
        with pytest.raises(TypeError):
            list(CjkTokenizer()(b"bytes"))


class TestRegisterTokenizer:
    """토크나이저 등록 테스트."""

    def test_rebinds_only_cjk_fields(self):
        schema = Schema(body=TEXT(analyzer=cjk_analyzer()), key=ID(stored=True))
        original = schema["body"].analyzer

        bound = register_tokenizer(schema)

        assert bound == 1
        assert schema["body"].analyzer is not original
        assert schema["body"].analyzer.name == TOKENIZER_NAME

    def test_no_cjk_fields(self):
        schema = Schema(key=ID(stored=True))
        assert register_tokenizer(schema) == 0
