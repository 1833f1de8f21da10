"""시 검색 도구 예외 정의

명령 하나가 실패하면 예외는 main()까지 전파되어 메시지 출력 후 종료 코드 1로 끝난다.
"""

from pathlib import Path


class ShiciError(Exception):
    """shici 예외 기본 클래스"""


class CorpusFormatError(ShiciError):
    """코퍼스 JSON이 없거나 형식이 잘못된 경우"""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid poem corpus {source}: {reason}")


class IndexIOError(ShiciError):
    """인덱스 디렉토리 생성/삭제/열기 중 파일시스템 오류"""

    def __init__(self, path: str | Path, cause: Exception):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Index I/O failed at {self.path}: {cause}")


class IndexNotFoundError(ShiciError):
    """읽기 전용으로 열 인덱스가 없거나 유효하지 않은 경우"""

    def __init__(self, path: str | Path, detail: str = ""):
        self.path = Path(path)
        message = f"Index not found at {self.path}. Run `shici index` first to build the index."
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class QuerySyntaxError(ShiciError):
    """검색어를 쿼리로 해석할 수 없는 경우"""

    def __init__(self, query: str, reason: str):
        self.query = query
        self.reason = reason
        super().__init__(f"Malformed query {query!r}: {reason}")


class SchemaViolationError(ShiciError):
    """검색 결과 문서에 필드가 없거나 텍스트가 아닌 경우

    정상 동작에서는 발생하지 않는다. 인덱스 손상이나 스키마 불일치를 뜻한다.
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Stored document violates schema at field '{field}': {reason}")
