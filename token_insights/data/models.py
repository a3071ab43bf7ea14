"""
Canonical data models for classified tokens.

This module defines immutable data structures produced once per request
and read-only thereafter.
"""

from dataclasses import dataclass
from typing import Optional, Union

RawToken = Union[str, int, float]
Number = Union[int, float]


@dataclass(frozen=True)
class ClassifiedTokens:
    """Typed buckets derived from a raw token sequence."""
    numbers: tuple[Number, ...]             # First-seen order, duplicates kept
    alphabets: tuple[str, ...]              # Single ASCII letters, first-seen order
    highest_lowercase: Optional[str] = None
    dropped: int = 0                        # Tokens matching neither bucket

    @property
    def total(self) -> int:
        """Number of classified elements across both buckets."""
        return len(self.numbers) + len(self.alphabets)

    @property
    def has_numbers(self) -> bool:
        return bool(self.numbers)

    @property
    def has_alphabets(self) -> bool:
        return bool(self.alphabets)


@dataclass(frozen=True)
class FileInfo:
    """Attachment description supplied by the upload layer."""
    file_valid: bool = False
    mime_type: Optional[str] = None
    size_kb: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional["FileInfo"]:
        """Build from a request dict, accepting the wire field names."""
        if not data:
            return None
        return cls(
            file_valid=bool(data.get("file_valid", False)),
            mime_type=data.get("mime_type", data.get("file_mime_type")),
            size_kb=data.get("size_kb", data.get("file_size_kb")),
        )
