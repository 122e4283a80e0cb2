"""Turns an uploaded Document into a ContentBlock for the model request."""

from typing import ClassVar

from lexguard.documents.models import Document
from lexguard.extraction.base import BaseTextExtractor
from lexguard.extraction.docx_adapter import DocxTextExtractor
from lexguard.extraction.exceptions import ExtractionError
from lexguard.extraction.models import ContentBlock
from lexguard.logging.logger import Log

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
FALLBACK_MIME_TYPE = "application/octet-stream"


class ContentExtractor:
    """Chooses between inline text and base64 binary for a document.

    Word documents are unpacked locally when possible; everything else, and
    any Word document whose extraction fails or yields no text, is sent as
    binary with a resolved MIME type.
    """

    EXTENSION_MIME_TYPES: ClassVar[dict[str, str]] = {
        "pdf": "application/pdf",
        "docx": DOCX_MIME_TYPE,
        "doc": "application/msword",
        "rtf": "application/rtf",
        "txt": "text/plain",
        "md": "text/markdown",
        "jpg": "image/jpeg",
        "jpeg": "image/jpeg",
        "png": "image/png",
        "gif": "image/gif",
        "webp": "image/webp",
        "heic": "image/heic",
    }

    def __init__(self, text_extractor: BaseTextExtractor | None = None) -> None:
        self._text_extractor = text_extractor or DocxTextExtractor()

    def extract(self, document: Document) -> ContentBlock:
        if self._is_word_document(document):
            text = self._try_extract_text(document)
            if text:
                Log.info(f"Extracted {len(text)} chars from {document.name}")
                return ContentBlock(text=text)

        mime_type = self.resolve_mime_type(document)
        Log.info(
            f"Sending {document.name} as binary",
            mime_type=mime_type,
            size=document.size,
        )
        return ContentBlock.from_bytes(document.data, mime_type)

    @classmethod
    def resolve_mime_type(cls, document: Document) -> str:
        """Declared type, else extension lookup, else octet-stream."""
        if document.mime_type:
            return document.mime_type
        return cls.EXTENSION_MIME_TYPES.get(document.extension, FALLBACK_MIME_TYPE)

    @staticmethod
    def _is_word_document(document: Document) -> bool:
        return document.mime_type == DOCX_MIME_TYPE or document.extension == "docx"

    def _try_extract_text(self, document: Document) -> str:
        try:
            return self._text_extractor.extract(document.data)
        except ExtractionError as exc:
            Log.warning(f"Text extraction failed for {document.name}, falling back to binary: {exc}")
            return ""
