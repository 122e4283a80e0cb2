from dataclasses import dataclass
from pathlib import PurePath


@dataclass(frozen=True)
class Document:
    """A user-supplied file as received by the analysis pipeline.

    ``mime_type`` may be empty when the uploader did not declare one.
    """

    name: str
    data: bytes
    mime_type: str = ""

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def extension(self) -> str:
        """Lower-case filename extension without the dot, or '' if none."""
        return PurePath(self.name).suffix.lower().lstrip(".")
