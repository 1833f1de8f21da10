"""Pytest 설정"""

import json
import sys
from pathlib import Path

import pytest

# src 경로 추가
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from shici.models import Poem  # noqa: E402


SCENARIO_POEMS = [
    {"title": "A", "author": "X", "dynasty": "Tang", "content": "c1"},
    {"title": "B", "author": "X", "dynasty": "Song", "content": "c2"},
]

CLASSIC_POEMS = [
    {
        "title": "静夜思",
        "author": "李白",
        "dynasty": "唐",
        "content": "床前明月光，疑是地上霜。\n举头望明月，低头思故乡。",
    },
    {
        "title": "春晓",
        "author": "孟浩然",
        "dynasty": "唐",
        "content": "春眠不觉晓，处处闻啼鸟。\n夜来风雨声，花落知多少。",
    },
    {
        "title": "泊船瓜洲",
        "author": "王安石",
        "dynasty": "宋",
        "content": "京口瓜洲一水间，钟山只隔数重山。\n春风又绿江南岸，明月何时照我还。",
    },
    {
        "title": "题西林壁",
        "author": "苏轼",
        "dynasty": "宋",
        "content": "横看成岭侧成峰，远近高低各不同。\n不识庐山真面目，只缘身在此山中。",
    },
]


def write_corpus(path: Path, items) -> Path:
    path.write_text(json.dumps(items, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def scenario_poems():
    return [Poem(**item) for item in SCENARIO_POEMS]


@pytest.fixture
def classic_poems():
    return [Poem(**item) for item in CLASSIC_POEMS]


@pytest.fixture
def scenario_corpus(tmp_path):
    """2편짜리 코퍼스 파일."""
    return write_corpus(tmp_path / "scenario.json", SCENARIO_POEMS)


@pytest.fixture
def classic_corpus(tmp_path):
    return write_corpus(tmp_path / "classic.json", CLASSIC_POEMS)


@pytest.fixture
def poem_schema():
    from shici.search import build_schema

    return build_schema()
