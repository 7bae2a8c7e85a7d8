"""
Row reconstruction: cluster a page's fragments into visual lines.

Decoders hand back text runs in content-stream order, which is often not
reading order. Fragments whose baselines sit within a tolerance of a row's
baseline join that row; rows are then read top to bottom, fragments left
to right.
"""

import logging

from vocab_parser.config import DEFAULT_ROW_TOLERANCE
from vocab_parser.state import Fragment, Row

logger = logging.getLogger(__name__)


def _find_row(rows: list[Row], y: float, tolerance: float) -> Row | None:
    # First match wins, not nearest
    for row in rows:
        if abs(row["y"] - y) < tolerance:
            return row
    return None


def reconstruct_rows(fragments: list[Fragment], tolerance: float = DEFAULT_ROW_TOLERANCE) -> list[Row]:
    """Group fragments into rows ordered top to bottom, each ordered left to right."""
    rows: list[Row] = []

    for fragment in fragments:
        row = _find_row(rows, fragment["y"], tolerance)
        if row is None:
            row = Row(y=fragment["y"], fragments=[])
            rows.append(row)
        row["fragments"].append(fragment)

    # PDF user space: higher y is higher on the page
    rows.sort(key=lambda r: r["y"], reverse=True)
    for row in rows:
        row["fragments"].sort(key=lambda f: f["x"])

    logger.debug("Clustered %d fragments into %d rows", len(fragments), len(rows))
    return rows


def row_text(row: Row) -> str:
    """Fragment strings joined by one space so adjacent runs never fuse."""
    return " ".join(f["text"] for f in row["fragments"])


def page_block(rows: list[Row]) -> str:
    return "".join(row_text(row) + "\n" for row in rows)
