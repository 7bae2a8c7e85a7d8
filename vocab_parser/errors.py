"""Errors that abort a pipeline run. Low yield is not one of them."""


class DocumentDecodeError(Exception):
    """The document could not be turned into positioned text fragments."""

    def __init__(self, path: str, reason: str, page: int | None = None):
        self.path = path
        self.reason = reason
        self.page = page
        where = f"{path} (page {page})" if page is not None else path
        super().__init__(f"Cannot decode {where}: {reason}")


class UnsupportedDocumentError(Exception):
    """Input file type has no decoder."""
