"""Poem index lifecycle - 새로 생성(기존 삭제) 또는 읽기 전용 열기, 전체 재색인.

재색인은 항상 전체 재빌드다. 쓰기 모드로 열면 경로의 기존 내용을 확인 없이 모두 지운다.
"""

import logging
import shutil
from pathlib import Path
from typing import Callable, Iterable, Optional

from whoosh.index import EmptyIndexError, IndexVersionError, create_in, exists_in, open_dir

from shici.config import DEFAULT_WRITER_LIMIT_MB
from shici.errors import IndexIOError, IndexNotFoundError
from shici.models import Poem

from .mapper import poem_to_document
from .schema import PoemSchema
from .tokenizer import register_tokenizer

logger = logging.getLogger(__name__)

# 진행 로그 출력 간격 (문서 수)
PROGRESS_EVERY = 1000


def _wipe(path: Path) -> None:
    """기존 인덱스 경로 삭제."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def open_or_create(path: str | Path, poem_schema: PoemSchema, read_only: bool):
    """인덱스를 열거나 새로 만든다.

    Args:
        path: 인덱스 디렉토리
        poem_schema: build_schema() 결과
        read_only: True면 기존 인덱스를 읽기 전용으로 열고,
            False면 기존 내용을 지우고 빈 인덱스를 새로 만든다.

    Raises:
        IndexNotFoundError: 읽기 전용으로 열 인덱스가 없는 경우
        IndexIOError: 디렉토리 삭제/생성/열기 실패
    """
    path = Path(path)
    schema = poem_schema.schema

    if read_only:
        try:
            if path.exists() and not path.is_dir():
                raise IndexNotFoundError(path, "not a directory")
            if not exists_in(str(path)):
                raise IndexNotFoundError(path)
            # 저장된 스키마 대신 현재 프로세스의 스키마(토크나이저 포함)로 연다
            ix = open_dir(str(path), readonly=True, schema=schema)
        except (EmptyIndexError, IndexVersionError) as e:
            raise IndexNotFoundError(path, str(e)) from e
        except OSError as e:
            raise IndexIOError(path, e) from e
    else:
        try:
            if path.exists() or path.is_symlink():
                logger.info("Removing existing index at %s", path)
                _wipe(path)
            path.mkdir(parents=True, exist_ok=True)
            ix = create_in(str(path), schema)
        except OSError as e:
            raise IndexIOError(path, e) from e

    register_tokenizer(ix.schema)
    return ix


def build_index(
    path: str | Path,
    poems: Iterable[Poem],
    poem_schema: PoemSchema,
    limitmb: int = DEFAULT_WRITER_LIMIT_MB,
    progress: Optional[Callable[[int], None]] = None,
) -> int:
    """모든 시를 새 인덱스에 색인.

    writer 하나에 전부 추가한 뒤 한 번만 커밋한다. 도중에 실패하면 커밋하지 않으므로
    색인된 문서는 하나도 남지 않는다.

    Args:
        path: 인덱스 디렉토리 (기존 내용은 삭제됨)
        poems: 색인할 시
        poem_schema: build_schema() 결과
        limitmb: writer 메모리 한도 (MB)
        progress: 문서를 하나 추가할 때마다 누적 개수로 호출되는 콜백

    Returns:
        색인한 문서 수
    """
    ix = open_or_create(path, poem_schema, read_only=False)

    count = 0
    try:
        # with 블록을 정상 종료하면 commit, 예외면 cancel
        with ix.writer(limitmb=limitmb) as writer:
            for poem in poems:
                writer.add_document(**poem_to_document(poem, poem_schema.fields))
                count += 1
                if progress is not None:
                    progress(count)
                if count % PROGRESS_EVERY == 0:
                    logger.info("Indexed %d poems...", count)
    except OSError as e:
        raise IndexIOError(path, e) from e
    finally:
        ix.close()

    logger.info("Committed %d poems to %s", count, path)
    return count
