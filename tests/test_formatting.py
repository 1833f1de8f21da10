"""출력 포맷팅 테스트."""

import json

from shici.aggregation import Stat
from shici.formatting import format_poem, format_poems, format_stat
from shici.models import Poem


def test_format_poem():
    poem = Poem(title="静夜思", author="李白", dynasty="唐", content="床前明月光")
    assert format_poem(poem) == "\t静夜思\n\t李白〔唐〕\n床前明月光\n"


def test_format_poems_text_separates_with_blank_line(scenario_poems):
    text = format_poems(scenario_poems)
    assert text == "\tA\n\tX〔Tang〕\nc1\n\n\tB\n\tX〔Song〕\nc2\n"


def test_format_poems_json(scenario_poems):
    data = json.loads(format_poems(scenario_poems, "json"))
    assert data[0] == {"title": "A", "author": "X", "dynasty": "Tang", "content": "c1"}
    assert len(data) == 2


def test_format_poems_json_keeps_cjk():
    poem = Poem(title="静夜思", author="李白", dynasty="唐", content="床前明月光")
    assert "静夜思" in format_poems([poem], "json")


def test_format_stat():
    stat = Stat(total=2, author=[("X", 2)], dynasty=[("Tang", 1), ("Song", 1)])
    assert format_stat(stat).splitlines() == [
        "总数：2",
        "朝代：",
        "   Tang：1",
        "   Song：1",
        "作者：",
        "      X： 2",
    ]
