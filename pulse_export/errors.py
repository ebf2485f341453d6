"""Export error types."""


class ExportError(Exception):
    """Base class for export failures."""


class NoDataError(ExportError):
    """Recording has no samples to export."""

    def __init__(self, message: str = "No heart rate samples to export"):
        super().__init__(message)


class UnsupportedFormatError(ExportError):
    """Format selector is not one of the supported export formats."""

    def __init__(self, selector: object):
        self.selector = selector
        super().__init__(f"Unsupported export format: {selector!r}")


class ProcessingError(ExportError):
    """Encoding or writing the document failed."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Export processing failed: {detail}")
