"""shici CLI 진입점.

Usage:
    shici index [--index-path PATH]           # 내장 코퍼스로 인덱스 새로 빌드
    shici search [--index-path PATH] KEYWORD  # 제목/작자/왕조/본문 검색
    shici list [--limit N]                    # 코퍼스 순서대로 출력
    shici random [--count N]                  # 중복 없이 무작위 N편
    shici stat [--sort]                       # 작자/왕조별 통계
"""

import argparse
import logging
import random
import sys
from typing import Sequence

from shici import __version__
from shici.aggregation import build_stat, sample, take
from shici.config import Config
from shici.corpus import load_poems
from shici.errors import ShiciError
from shici.formatting import NO_POEM_MESSAGE, format_poems, format_stat
from shici.logging_config import setup_logging
from shici.search import PoemSearcher, build_index, build_schema, open_or_create

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer: {value}")
    return number


def _emit(text: str) -> None:
    if text:
        print(text)


def cmd_index(args) -> int:
    poems = load_poems(args.corpus)
    poem_schema = build_schema()
    count = build_index(
        args.index_path,
        poems,
        poem_schema,
        limitmb=Config.get_writer_limit_mb(),
    )
    print(f"indexed {count} poems into {args.index_path}")
    return 0


def cmd_search(args) -> int:
    poem_schema = build_schema()
    ix = open_or_create(args.index_path, poem_schema, read_only=True)
    try:
        poems = PoemSearcher(ix, poem_schema).search(args.keyword)
    finally:
        ix.close()
    _emit(format_poems(poems, args.format))
    return 0


def cmd_list(args) -> int:
    poems = take(load_poems(args.corpus), args.limit)
    _emit(format_poems(poems, args.format))
    return 0


def cmd_random(args) -> int:
    poems = load_poems(args.corpus)
    if not poems:
        print(NO_POEM_MESSAGE)
        return 0

    rng = random.Random(args.seed)
    _emit(format_poems(sample(poems, args.count, rng), args.format))
    return 0


def cmd_stat(args) -> int:
    poems = load_poems(args.corpus)
    print(format_stat(build_stat(poems, sort=args.sort)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shici",
        description="Index, search and sample a corpus of classical Chinese poems",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--corpus",
        default=Config.get_corpus_path(),
        help="JSON corpus file (default: embedded poems.json, or $SHICI_CORPUS_PATH)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    index_path_help = f"Index directory (default: {Config.get_index_path()})"

    p_index = subparsers.add_parser("index", help="index all poems")
    p_index.add_argument("--index-path", default=Config.get_index_path(), help=index_path_help)
    p_index.set_defaults(func=cmd_index)

    p_search = subparsers.add_parser("search", help="search poems")
    p_search.add_argument("--index-path", default=Config.get_index_path(), help=index_path_help)
    p_search.add_argument("--format", choices=["text", "json"], default="text",
                          help="Output format (default: text)")
    p_search.add_argument("keyword", help="the keyword")
    p_search.set_defaults(func=cmd_search)

    p_list = subparsers.add_parser("list", help="list poems")
    p_list.add_argument("--limit", type=_non_negative_int, help="the max count of poem list")
    p_list.add_argument("--format", choices=["text", "json"], default="text",
                        help="Output format (default: text)")
    p_list.set_defaults(func=cmd_list)

    p_random = subparsers.add_parser("random", help="get random poems")
    p_random.add_argument("--count", type=_non_negative_int, default=1,
                          help="the count you need (default: 1)")
    p_random.add_argument("--seed", type=int, help="Random seed for reproducible sampling")
    p_random.add_argument("--format", choices=["text", "json"], default="text",
                          help="Output format (default: text)")
    p_random.set_defaults(func=cmd_random)

    p_stat = subparsers.add_parser("stat", help="get stat of all poems")
    p_stat.add_argument("--sort", action="store_true", help="sort by count desc")
    p_stat.set_defaults(func=cmd_stat)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 진입점."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        return args.func(args)
    except ShiciError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
