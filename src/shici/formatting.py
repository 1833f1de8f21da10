"""명령 출력 포맷팅."""

import json
from typing import Iterable

from shici.aggregation import Stat
from shici.models import Poem

NO_POEM_MESSAGE = "no poem in repo"


def format_poem(poem: Poem) -> str:
    """시 한 편을 텍스트로 (제목, 작자〔왕조〕, 본문)."""
    return f"\t{poem.title}\n\t{poem.author}〔{poem.dynasty}〕\n{poem.content}\n"


def format_poems(poems: Iterable[Poem], format_type: str = "text") -> str:
    """결과 포맷팅.

    Args:
        poems: 출력할 시
        format_type: text 또는 json
    """
    if format_type == "json":
        return json.dumps([p.to_dict() for p in poems], ensure_ascii=False, indent=2)
    return "\n".join(format_poem(p) for p in poems)


def format_stat(stat: Stat) -> str:
    lines = [f"总数：{stat.total}", "朝代："]
    lines.extend(f"{name:>7}：{count}" for name, count in stat.dynasty)
    lines.append("作者：")
    lines.extend(f"{name:>7}： {count}" for name, count in stat.author)
    return "\n".join(lines)
