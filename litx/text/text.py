from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True, order=True)
class TextSpan:
    """
    Half-open range [low, high) of UTF-8 byte offsets into one source buffer.

    Invariant:
    - 0 <= low <= high
    """

    low: int
    high: int

    def __post_init__(self):
        if self.low < 0 or self.high < 0:
            raise ValueError("TextSpan positions cannot be negative")
        if self.low > self.high:
            raise ValueError("TextSpan invariant violated: low > high")

    @staticmethod
    def at(offset: int, length: int) -> "TextSpan":
        """Create a TextSpan at offset with given length."""
        return TextSpan(offset, offset + length)

    @staticmethod
    def empty(offset: int) -> "TextSpan":
        """Create an empty TextSpan at the given offset."""
        return TextSpan(offset, offset)

    def merge(self, other: "TextSpan") -> "TextSpan":
        """Get the smallest span covering both spans.

        Works unbound as well: `TextSpan.merge(a, b)`.
        """
        return TextSpan(min(self.low, other.low), max(self.high, other.high))

    def len(self) -> int:
        return self.high - self.low

    def is_empty(self) -> bool:
        return self.low == self.high

    def as_tuple(self) -> tuple[int, int]:
        return (self.low, self.high)

    def contains(self, offset: int) -> bool:
        """Check if the span contains the given offset."""
        return self.low <= offset < self.high

    def contains_span(self, other: "TextSpan") -> bool:
        """Check if the span fully contains another span."""
        return self.low <= other.low and other.high <= self.high

    def ordering(self, other: "TextSpan") -> Literal[-1, 0, 1]:
        """Compare this span to another span for ordering.

        Returns:
        - -1 if this span is before the other span
        - 0 if the spans overlap
        - 1 if this span is after the other span
        """
        if self.high <= other.low:
            return -1
        elif other.high <= self.low:
            return 1
        else:
            return 0

    def shift(self, delta: int) -> "TextSpan":
        """Shift the span by the given (possibly negative) delta."""
        return TextSpan(self.low + delta, self.high + delta)

    def __str__(self) -> str:
        return f"{self.low}..{self.high}"

    def __repr__(self) -> str:
        return f"TextSpan({self.low}, {self.high})"


def byte_len(text: str) -> int:
    """Length of text in UTF-8 bytes, the unit every span is measured in."""
    return len(text.encode("utf-8"))


def slice_text_span(source: str, span: TextSpan) -> str:
    """Get the substring of the source text covered by the given TextSpan.

    Spans count bytes, not code points, so slice the encoded buffer.
    """
    return source.encode("utf-8")[span.low : span.high].decode("utf-8")
