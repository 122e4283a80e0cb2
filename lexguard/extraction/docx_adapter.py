import io

import docx

from lexguard.extraction.base import BaseTextExtractor
from lexguard.extraction.exceptions import ExtractionError


class DocxTextExtractor(BaseTextExtractor):
    """Extracts text runs from a Word (OOXML) document using python-docx."""

    def extract(self, data: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
            lines = [p.text for p in document.paragraphs if p.text.strip()]
            for table in document.tables:
                for row in table.rows:
                    cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                    if cells:
                        lines.append(" | ".join(cells))
        except Exception as exc:
            raise ExtractionError(f"python-docx extraction failed: {exc}") from exc
        return "\n".join(lines).strip()
