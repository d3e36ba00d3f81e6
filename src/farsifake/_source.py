r"""
\file _source.py
\brief Dictionary sources: open a line-oriented wordlist as a byte stream.

A source knows how to open its stream and how many entries it holds. The
line count is fixed when the source is built; the generator never rescans
the file to find it.
"""

import logging
from collections.abc import Callable
from importlib import resources
from pathlib import Path
from typing import BinaryIO

from ._errors import SourceUnavailable

logger = logging.getLogger("farsifake")

# Number of entries in the packaged data/fa.dic
BUNDLED_LINE_COUNT = 104


def detect_encoding(path: Path) -> str:
    r"""Heuristically detect text encoding of a dictionary file.

    Tries UTF-8, falls back to Latin-1.

    \param path File path to probe.
    \return Encoding string like "utf-8".
    """
    try:
        with open(path, "rb") as f:
            raw = f.read(4096)
    except FileNotFoundError:
        return "utf-8"
    try:
        raw.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError as e:
        # A multi-byte sequence cut by the probe window is still UTF-8
        if e.start >= len(raw) - 3 and e.reason == "unexpected end of data":
            return "utf-8"
        return "latin-1"


def count_lines(path: Path, encoding: str = "utf-8") -> int:
    r"""Count the non-blank lines of a dictionary file.

    Blank means empty after decoding and stripping, the same rule the
    generator uses when it skips lines.

    \param path Dictionary file.
    \param encoding Text encoding of the entries.
    \return Number of entries.
    \throws SourceUnavailable if the file cannot be read.
    """
    n = 0
    try:
        with open(path, "rb") as f:
            for raw in f:
                if raw.decode(encoding, errors="replace").strip():
                    n += 1
    except OSError as e:
        raise SourceUnavailable(f"cannot read dictionary {path}: {e}") from e
    logger.debug("counted %d entries in %s", n, path)
    return n


class DictionarySource:
    r"""A dictionary stream opener plus its entry count.

    \param opener Callable returning a fresh binary stream.
    \param line_count Number of entries (jump range upper bound).
    \param encoding Text encoding of the entries.
    \param name Label used in error messages.
    """

    def __init__(
        self,
        opener: Callable[[], BinaryIO],
        line_count: int,
        encoding: str = "utf-8",
        name: str = "<dictionary>",
    ):
        if line_count < 1:
            raise ValueError(f"line_count must be >= 1 for {name}, got {line_count}")
        self._opener = opener
        self.line_count = line_count
        self.encoding = encoding
        self.name = name

    def __repr__(self):
        return f"DictionarySource({self.name!r}, line_count={self.line_count})"

    @classmethod
    def bundled(cls) -> "DictionarySource":
        """Source over the wordlist shipped inside the package."""

        def opener():
            return resources.files("farsifake").joinpath("data").joinpath("fa.dic").open("rb")

        return cls(opener, BUNDLED_LINE_COUNT, "utf-8", name="fa.dic")

    @classmethod
    def from_path(
        cls, path, line_count: int | None = None, encoding: str = "utf-8"
    ) -> "DictionarySource":
        r"""Source over a dictionary file on disk.

        \param path Dictionary file path.
        \param line_count Known entry count; counted once when None.
        \param encoding Text encoding, or "auto" to probe the file.
        \throws SourceUnavailable if counting is needed and the file is unreadable.
        \throws ValueError if the dictionary holds no entries.
        """
        path = Path(path)
        if encoding == "auto":
            encoding = detect_encoding(path)
        if line_count is None:
            line_count = count_lines(path, encoding)

        def opener():
            return open(path, "rb")

        return cls(opener, line_count, encoding, name=str(path))

    @classmethod
    def from_stream(
        cls, stream: BinaryIO, line_count: int, encoding: str = "utf-8"
    ) -> "DictionarySource":
        r"""Source over an already-open binary stream.

        The stream can be handed out once; the generator that opens it owns it.

        \param stream Readable binary stream, ideally seekable.
        \param line_count Number of entries in the stream.
        \param encoding Text encoding of the entries.
        """
        taken = []

        def opener():
            if taken:
                raise SourceUnavailable("stream source already handed to a generator")
            taken.append(True)
            return stream

        return cls(opener, line_count, encoding, name=getattr(stream, "name", "<stream>"))

    def open(self) -> BinaryIO:
        r"""Open the dictionary stream.

        \return Binary stream positioned at the first entry.
        \throws SourceUnavailable when the stream cannot be opened.
        """
        try:
            return self._opener()
        except SourceUnavailable:
            raise
        except OSError as e:
            raise SourceUnavailable(f"cannot open dictionary {self.name}: {e}") from e
