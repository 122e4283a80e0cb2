import base64
from dataclasses import dataclass


@dataclass(frozen=True)
class ContentBlock:
    """Document content in exactly one model-facing representation.

    Either ``text`` is set (inline UTF-8 text) or ``inline_data`` and
    ``mime_type`` are set (base64 payload). Never both, never neither.
    """

    text: str | None = None
    inline_data: str | None = None
    mime_type: str | None = None

    def __post_init__(self) -> None:
        has_text = bool(self.text)
        has_binary = bool(self.inline_data)
        if has_text == has_binary:
            raise ValueError("ContentBlock requires exactly one of text or inline_data")
        if has_binary and not self.mime_type:
            raise ValueError("ContentBlock inline_data requires a mime_type")
        if has_text and self.mime_type:
            raise ValueError("ContentBlock text must not carry a mime_type")

    @property
    def is_text(self) -> bool:
        return self.text is not None

    @classmethod
    def from_bytes(cls, data: bytes, mime_type: str) -> "ContentBlock":
        return cls(inline_data=base64.b64encode(data).decode("ascii"), mime_type=mime_type)

    def decoded_bytes(self) -> bytes:
        """Raw bytes of a binary block."""
        if self.inline_data is None:
            raise ValueError("ContentBlock has no inline data")
        return base64.b64decode(self.inline_data)
