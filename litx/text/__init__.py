"""Source text spans."""

from litx.text.text import TextSpan, byte_len, slice_text_span

__all__ = [
    "TextSpan",
    "byte_len",
    "slice_text_span",
]
