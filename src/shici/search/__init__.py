"""Search module - poem indexing/searching."""

from .schema import FIELD_NAMES, PoemSchema, build_schema
from .tokenizer import TOKENIZER_NAME, CjkTokenizer, cjk_analyzer, register_tokenizer
from .mapper import document_to_poem, poem_to_document
from .index import build_index, open_or_create
from .searcher import SEARCH_LIMIT, PoemSearcher

__all__ = [
    "FIELD_NAMES",
    "PoemSchema",
    "build_schema",
    "TOKENIZER_NAME",
    "CjkTokenizer",
    "cjk_analyzer",
    "register_tokenizer",
    "document_to_poem",
    "poem_to_document",
    "build_index",
    "open_or_create",
    "SEARCH_LIMIT",
    "PoemSearcher",
]
