"""코퍼스 로더 테스트."""

import json

import pytest

from shici.corpus import load_poems, parse_poems
from shici.errors import CorpusFormatError


class TestEmbeddedCorpus:

    def test_loads_embedded_poems(self):
        poems = load_poems()
        assert len(poems) > 0
        assert poems[0].title == "静夜思"
        assert poems[0].author == "李白"
        for p in poems:
            assert p.title and p.author and p.dynasty and p.content

    def test_embedded_titles_unique(self):
        poems = load_poems()
        assert len(set(poems)) == len(poems)


class TestParsePoems:

    def test_keeps_order(self, scenario_corpus):
        poems = load_poems(scenario_corpus)
        assert [p.title for p in poems] == ["A", "B"]
        assert poems[1].dynasty == "Song"

    def test_ignores_extra_keys(self):
        text = json.dumps([{"title": "A", "author": "X", "dynasty": "Tang", "content": "c1", "id": 7}])
        assert parse_poems(text)[0].content == "c1"

    def test_empty_array(self):
        assert parse_poems("[]") == []

    @pytest.mark.parametrize(
        "text, reason",
        [
            ("not json", "invalid JSON"),
            ('{"title": "A"}', "array"),
            ('["A"]', "not an object"),
            ('[{"title": "A", "author": "X", "dynasty": "Tang"}]', "missing 'content'"),
            ('[{"title": "A", "author": 1, "dynasty": "Tang", "content": "c"}]', "'author' is not a string"),
        ],
    )
    def test_malformed(self, text, reason):
        with pytest.raises(CorpusFormatError) as exc_info:
            parse_poems(text, "test.json")
        assert reason in str(exc_info.value)
        assert exc_info.value.source == "test.json"

    def test_missing_file(self, tmp_path):
        with pytest.raises(CorpusFormatError) as exc_info:
            load_poems(tmp_path / "missing.json")
        assert "cannot read file" in str(exc_info.value)
