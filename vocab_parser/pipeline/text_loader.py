"""
Plain text and Word documents: already in reading order, so they skip row
reconstruction and go straight to region location.
"""

import logging
from pathlib import Path
from zipfile import BadZipFile

from docx import Document
from docx.opc.exceptions import PackageNotFoundError
from docx.table import Table

from vocab_parser.errors import DocumentDecodeError

logger = logging.getLogger(__name__)


def load_text(state: dict) -> dict:
    path = Path(state["path"])
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentDecodeError(str(path), f"not UTF-8 text ({exc.reason} at byte {exc.start})") from exc

    logger.info("Read %d chars from %s", len(text), path)
    return {"document_text": text}


def _docx_lines(document) -> list[str]:
    """Paragraphs and table rows in body order; a row's cells read left to right."""
    lines: list[str] = []
    for block in document.iter_inner_content():
        if isinstance(block, Table):
            for row in block.rows:
                lines.append(" ".join(cell.text for cell in row.cells))
        else:
            lines.append(block.text)
    return lines


def load_docx(state: dict) -> dict:
    path = Path(state["path"])
    try:
        document = Document(str(path))
    except (PackageNotFoundError, BadZipFile, KeyError) as exc:
        raise DocumentDecodeError(str(path), str(exc) or type(exc).__name__) from exc

    text = "\n".join(_docx_lines(document)) + "\n"

    logger.info("Read %d chars from %s", len(text), path)
    return {"document_text": text}
