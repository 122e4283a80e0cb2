class ExtractionError(Exception):
    """Raised when local text extraction from a document container fails."""
