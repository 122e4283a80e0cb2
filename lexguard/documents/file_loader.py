import mimetypes
from pathlib import Path

from lexguard.documents.models import Document


class FileLoader:
    """Reads a document from the local filesystem into a Document."""

    def load(self, path: Path, mime_type: str | None = None) -> Document:
        """Read file bytes once and wrap them in a Document.

        When ``mime_type`` is not given it is guessed from the file name and
        left empty if the name gives no hint.

        Raises:
            FileNotFoundError: if nothing exists at ``path``.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        if mime_type is None:
            mime_type = mimetypes.guess_type(path.name)[0] or ""
        return Document(name=path.name, data=path.read_bytes(), mime_type=mime_type)
