"""Media entries, their validation, and the CSV file that stores them."""

from __future__ import annotations

import os
import re
from dataclasses import astuple, dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

MAX_ENTRIES = 1000
"""Most entries that the edit and delete operations keep in memory."""

MAX_STRING = 256
"""Size of a field buffer; a stored field holds at most one less character."""

_LINE_CHUNK = 1023
_FIELD_WIDTH = MAX_STRING - 1
_C_SPACE = " \t\n\v\f\r"
MEDIA_TYPES = frozenset({"movie", "book", "album", "show"})
LINK_PREFIXES = ("http://", "https://", "www.")

_LINE_PATTERN = re.compile(
    ",".join([f"([^,]{{1,{_FIELD_WIDTH}}})"] * 6 + [f"([^\\n]{{1,{_FIELD_WIDTH}}})"])
)


class Field(Enum):
    """The fields of an entry, in the order they are stored in the file."""

    TITLE = "title"
    TYPE = "type"
    AUTHOR = "author"
    DURATION = "duration"
    GENRE = "genre"
    COMMENT = "comment"
    LINK = "link"

    @property
    def label(self) -> str:
        """Human-readable name used in prompts and listings."""
        return _LABELS[self]


_LABELS = {
    Field.TITLE: "Title",
    Field.TYPE: "Type",
    Field.AUTHOR: "Author",
    Field.DURATION: "Duration/Pages",
    Field.GENRE: "Genre",
    Field.COMMENT: "Comment",
    Field.LINK: "Link",
}


@dataclass
class MediaEntry:
    """One item in the media library."""

    title: str
    type: str
    author: str
    duration: str
    genre: str
    comment: str
    link: str

    def to_line(self) -> str:
        """Return the entry as a comma-separated line, without a line ending."""
        return ",".join(astuple(self))

    def value(self, field: Field) -> str:
        """Return the value held in the given field."""
        return getattr(self, Field(field).value)


def is_nonblank(text: Optional[str]) -> bool:
    """True when the text holds at least one non-whitespace character."""
    if text is None:
        return False
    return any(ch not in _C_SPACE for ch in text)


def is_valid_media_type(text: Optional[str]) -> bool:
    """True when the text names an allowed media type, in any letter case."""
    if not is_nonblank(text):
        return False
    return text[:_FIELD_WIDTH].lower() in MEDIA_TYPES


def is_valid_link(text: Optional[str]) -> bool:
    """True when the text starts with http://, https:// or www."""
    if not is_nonblank(text):
        return False
    return text.startswith(LINK_PREFIXES)


def parse_line(line: str) -> Optional[MediaEntry]:
    """Parse one stored line; return None unless all seven fields are present.

    Each of the first six fields must be 1 to 255 characters without a comma.
    The last field takes the rest of the line up to the newline and is cut
    to 255 characters; it may itself contain commas.
    """
    match = _LINE_PATTERN.match(line)
    if match is None:
        return None
    return MediaEntry(*match.groups())


def _read_chunks(path: PathLike) -> Iterator[str]:
    with open(path, "r", encoding="utf-8") as handle:
        for line in handle:
            for start in range(0, len(line), _LINE_CHUNK):
                yield line[start:start + _LINE_CHUNK]


def load_entries(path: PathLike) -> list[MediaEntry]:
    """Read every well-formed entry from the file, skipping malformed lines.

    Lines longer than the reader's line buffer are read in pieces, each
    piece parsed on its own.
    """
    return [
        entry
        for entry in map(parse_line, _read_chunks(path))
        if entry is not None
    ]


def append_entry(path: PathLike, entry: MediaEntry) -> None:
    """Add one entry to the end of the file, creating it if needed."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(entry.to_line() + "\n")


def write_entries(path: PathLike, entries: Iterable[MediaEntry]) -> None:
    """Replace the file's contents with the given entries."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(entry.to_line() + "\n" for entry in entries)


def search_entries(
    entries: Iterable[MediaEntry], field: Field, term: str
) -> Iterator[MediaEntry]:
    """Yield entries whose field contains the term, ignoring case.

    Surrounding whitespace is removed from the term; an empty term
    matches every entry.
    """
    needle = term.split("\n", 1)[0].strip(_C_SPACE).lower()
    field = Field(field)
    for entry in entries:
        if needle in entry.value(field)[:_FIELD_WIDTH].lower():
            yield entry