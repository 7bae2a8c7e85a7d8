"""CLI entry point for the vocabulary list extractor."""

import argparse
import json
import logging
import os
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from vocab_parser.config import ExtractionConfig
from vocab_parser.errors import DocumentDecodeError, UnsupportedDocumentError
from vocab_parser.pipeline.loader import load_document
from vocab_parser.pipeline.assembler import assemble_text
from vocab_parser.pipeline.locator import locate_region
from vocab_parser.pipeline.text_loader import load_docx, load_text
from vocab_parser.pipeline.vocabulary import extract_vocabulary_stage

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_LOW_YIELD = 2


def run_pipeline(path: str, config: ExtractionConfig | None = None, id_factory=None) -> dict:
    """Run the full extraction pipeline, return final state."""
    state: dict = {"path": path, "config": config or ExtractionConfig(), "id_factory": id_factory}

    suffix = Path(path).suffix.lower()
    if suffix == ".pdf":
        state.update(load_document(state))
        state.update(assemble_text(state))
    elif suffix == ".txt":
        state.update(load_text(state))
    elif suffix == ".docx":
        state.update(load_docx(state))
    else:
        raise UnsupportedDocumentError(f"Unsupported file type {suffix or '(none)'}: expected .pdf, .docx or .txt")

    state.update(locate_region(state))
    state.update(extract_vocabulary_stage(state))

    return state


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Extract a word/definition list from a vocabulary PDF.")
    parser.add_argument("path", help="Path to a .pdf, .docx or .txt vocabulary list")
    parser.add_argument("--output", "-o", default="output/vocabulary.json")
    parser.add_argument("--min-items", type=int, default=ExtractionConfig.min_usable_items,
                        help="Fail when fewer entries than this are found")
    parser.add_argument("--log-level", default=os.getenv("VOCAB_PARSER_LOG_LEVEL", "INFO"),
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    path = Path(args.path)
    if not path.exists():
        logger.error("File not found: %s", path)
        return EXIT_FAILED

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    start = time.time()
    logger.info("Extracting vocabulary from %s", path)

    try:
        state = run_pipeline(str(path))
    except (DocumentDecodeError, UnsupportedDocumentError) as exc:
        logger.error("Cannot read document: %s", exc)
        return EXIT_FAILED
    except Exception:
        logger.exception("Pipeline failed")
        return EXIT_FAILED

    vocabulary = state.get("vocabulary", [])

    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(vocabulary, fh, indent=2, ensure_ascii=False)

    logger.info("Done: %d entries -> %s (%.1fs)",
                len(vocabulary), output_path, time.time() - start)

    if len(vocabulary) < args.min_items:
        logger.error("Found only %d entries (need %d), check the document format",
                     len(vocabulary), args.min_items)
        return EXIT_LOW_YIELD
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
