"""
PDF loading: pdfplumber word geometry turned into positioned fragments.

Pages are decoded concurrently, one worker thread per page, each with its
own pdfplumber handle.
"""

import asyncio
import logging
from pathlib import Path

import pdfplumber
from pdfminer.pdfparser import PDFSyntaxError
from pdfplumber.utils.exceptions import PdfminerException

from vocab_parser.errors import DocumentDecodeError
from vocab_parser.state import Fragment

logger = logging.getLogger(__name__)

_DECODE_ERRORS = (PdfminerException, PDFSyntaxError, OSError)


def _words_to_fragments(words: list[dict], page_height: float) -> list[Fragment]:
    """pdfplumber measures from the top edge; flip to a baseline y that grows upwards."""
    return [
        Fragment(
            text=w["text"],
            x=float(w["x0"]),
            y=float(page_height - w["bottom"]),
        )
        for w in words
        if w["text"]
    ]


def count_pages(pdf_path: str) -> int:
    try:
        with pdfplumber.open(pdf_path) as pdf:
            return len(pdf.pages)
    except _DECODE_ERRORS as exc:
        raise DocumentDecodeError(pdf_path, str(exc) or type(exc).__name__) from exc


def read_page_fragments(pdf_path: str, page_number: int) -> list[Fragment]:
    """Blocking decode of one 1-indexed page."""
    try:
        with pdfplumber.open(pdf_path, pages=[page_number]) as pdf:
            page = pdf.pages[0]
            words = page.extract_words(keep_blank_chars=True)
            return _words_to_fragments(words, float(page.height))
    except _DECODE_ERRORS as exc:
        raise DocumentDecodeError(pdf_path, str(exc) or type(exc).__name__, page=page_number) from exc


def make_page_fetcher(pdf_path: str):
    async def fetch_page(page_number: int) -> list[Fragment]:
        return await asyncio.to_thread(read_page_fragments, pdf_path, page_number)
    return fetch_page


def load_document(state: dict) -> dict:
    """Open the PDF and hand back a per-page fetcher for the assembler."""
    pdf_path = state["path"]
    path = Path(pdf_path)
    if not path.exists():
        raise FileNotFoundError(f"PDF not found: {pdf_path}")

    logger.info("Opening with pdfplumber: %s", pdf_path)
    page_count = count_pages(str(path))
    if page_count == 0:
        raise DocumentDecodeError(str(path), "document has no pages")

    logger.info("Found %d pages", page_count)
    return {"page_count": page_count, "fetch_page": make_page_fetcher(str(path))}
