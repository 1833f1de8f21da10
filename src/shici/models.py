"""시 레코드 데이터 모델"""

from dataclasses import dataclass, field, asdict


@dataclass(frozen=True)
class Poem:
    """시 한 편.

    같은 제목과 작자를 가진 시는 왕조나 본문이 달라도 같은 시로 본다.
    """

    title: str
    author: str
    dynasty: str = field(compare=False)
    content: str = field(compare=False)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
