from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for local text extraction adapters."""

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """Extract plain text from raw document bytes.

        Args:
            data: Raw file content.

        Returns:
            Extracted text joined with newlines; may be empty.

        Raises:
            ExtractionError: if the container cannot be parsed.
        """
