"""
pipeline/assembler.py — page blocks and the document text stream.

Pages may be fetched concurrently, but blocks are always joined in
page-index order. Pure Python apart from the gather.
"""

import asyncio
import logging
from typing import Awaitable, Callable

from vocab_parser.config import DEFAULT_ROW_TOLERANCE
from vocab_parser.pipeline.rows import page_block, reconstruct_rows
from vocab_parser.state import Fragment

logger = logging.getLogger(__name__)

PageFetcher = Callable[[int], Awaitable[list[Fragment]]]


def page_block_from_fragments(fragments: list[Fragment], tolerance: float = DEFAULT_ROW_TOLERANCE) -> str:
    return page_block(reconstruct_rows(fragments, tolerance))


def assemble_document(pages: list[list[Fragment]], tolerance: float = DEFAULT_ROW_TOLERANCE) -> str:
    """Join page blocks, page 1 first, each followed by a newline."""
    blocks = [page_block_from_fragments(fragments, tolerance) for fragments in pages]
    empty = sum(1 for b in blocks if not b)
    if empty:
        logger.warning("%d of %d pages produced no text", empty, len(blocks))
    return "".join(block + "\n" for block in blocks)


async def gather_pages(fetch_page: PageFetcher, page_count: int) -> list[list[Fragment]]:
    """Fetch every page at once; result i is page i + 1 whatever order fetches finish in."""
    tasks = [fetch_page(n) for n in range(1, page_count + 1)]
    return list(await asyncio.gather(*tasks))


def build_document_text(
    fetch_page: PageFetcher,
    page_count: int,
    tolerance: float = DEFAULT_ROW_TOLERANCE,
) -> str:
    pages = asyncio.run(gather_pages(fetch_page, page_count))
    logger.info("Fetched %d fragments from %d pages", sum(len(p) for p in pages), page_count)
    return assemble_document(pages, tolerance)


def assemble_text(state: dict) -> dict:
    """Fetch every page of the opened document and join them into one text stream."""
    config = state["config"]

    text = build_document_text(state["fetch_page"], state["page_count"], config.row_tolerance)

    logger.info("Assembled %d pages into %d chars", state["page_count"], len(text))
    return {"document_text": text}
