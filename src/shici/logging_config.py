"""로깅 설정 모듈"""

import logging
from datetime import datetime
from pathlib import Path

from shici.config import Config


def setup_logging(verbose: bool = False) -> logging.Logger:
    """로깅 설정 및 로거 반환

    명령 출력은 stdout을 쓰므로 로그는 stderr(및 선택적 파일)로만 보낸다.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    log_path = Config.get_log_path()
    if log_path:
        log_dir = Path(log_path)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"shici_{datetime.now().strftime('%Y%m%d')}.log"
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=logging.DEBUG if verbose or Config.DEBUG else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )

    return logging.getLogger("shici")
