r"""
\file _generator.py
\brief Random-jump word selection over a streamed dictionary.

Each word request draws a jump distance in [1, N] and walks that many
entries forward from the current cursor, wrapping to the top of the
dictionary when the stream runs out. Only one line is held in memory at a
time. Sentences and paragraphs are built by repeating the word primitive.
"""

import random
import time
from collections.abc import Iterator

from ._errors import CloseFailed, GenerationFailed, InvalidCount, InvalidRange
from ._source import DictionarySource


class FarsiFake:
    r"""Fake word, sentence and paragraph generator.

    Instances are not thread-safe; serialize calls on one instance.

    \param source Dictionary to draw from; the bundled wordlist when None.
    \param seed Seed for the random source; derived from the clock when None.
    \param rng Random source to use instead of seeding a new one.
    \param jump_from_start Rewind to the first entry before every word.
    \param bypass_error Return "" from generate() instead of raising on read errors.
    \throws SourceUnavailable when the dictionary cannot be opened.
    """

    def __init__(
        self,
        source: DictionarySource | None = None,
        *,
        seed: int | None = None,
        rng: random.Random | None = None,
        jump_from_start: bool = False,
        bypass_error: bool = False,
    ):
        self.jump_from_start = jump_from_start
        self.bypass_error = bypass_error

        self._source = source if source is not None else DictionarySource.bundled()
        self._file = self._source.open()
        self._lines = self._cursor()
        if rng is None:
            rng = random.Random(time.time_ns() if seed is None else seed)
        self._random = rng
        self._closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def line_count(self) -> int:
        return self._source.line_count

    def _cursor(self) -> Iterator[str]:
        enc = self._source.encoding
        while True:
            raw = self._file.readline()
            if not raw:
                return
            line = raw.decode(enc).strip()
            if line:
                yield line

    def _jump(self, lo: int, hi: int) -> int:
        return self._random.randint(lo, hi)

    def _rewind(self) -> bool:
        """Seek the stream to its start and reset the cursor; False if unseekable."""
        if not self._file.seekable():
            return False
        self._file.seek(0)
        self._lines = self._cursor()
        return True

    def _next_word(self) -> str:
        try:
            if self.jump_from_start:
                self._rewind()

            counter = self._jump(1, self.line_count)
            rewound = False
            read_since_rewind = False
            while True:
                line = next(self._lines, None)
                if line is None:
                    if rewound and not read_since_rewind:
                        raise GenerationFailed(f"dictionary {self._source.name} has no entries")
                    if not self._rewind():
                        raise GenerationFailed(
                            f"dictionary {self._source.name} exhausted and stream is not seekable"
                        )
                    rewound = True
                    read_since_rewind = False
                    continue
                read_since_rewind = True
                counter -= 1
                if counter == 0:
                    return line
        except (OSError, ValueError) as e:
            # ValueError covers decode errors and reads on a closed stream
            raise GenerationFailed(f"error reading dictionary {self._source.name}: {e}") from e

    def generate(self) -> str:
        r"""Generate a random word.

        \return A dictionary entry, or "" on read errors when bypass_error is set.
        \throws GenerationFailed on read errors when bypass_error is not set.
        """
        try:
            return self._next_word()
        except GenerationFailed:
            if self.bypass_error:
                return ""
            raise

    def sentence(self, count: int) -> str:
        r"""Generate a sentence of the given number of words.

        Word errors abort the sentence even when bypass_error is set.

        \param count Number of words (>= 1).
        \return Words joined by single spaces.
        \throws InvalidCount when count < 1.
        \throws GenerationFailed when any word fails.
        """
        if count < 1:
            raise InvalidCount(f"count must be >= 1, got {count}")
        words = [self._next_word() for _ in range(count)]
        return " ".join(words)

    def paragraph(self, min_count: int, max_count: int) -> str:
        r"""Generate a paragraph with a random number of words in [min_count, max_count].

        \param min_count Lower bound (>= 1).
        \param max_count Upper bound (>= min_count).
        \return Words joined by single spaces.
        \throws InvalidCount when min_count or max_count < 1.
        \throws InvalidRange when max_count < min_count.
        \throws GenerationFailed when any word fails.
        """
        if min_count < 1 or max_count < 1:
            raise InvalidCount(f"min and max must be >= 1, got {min_count},{max_count}")
        if max_count < min_count:
            raise InvalidRange(f"max {max_count} is lower than min {min_count}")
        return self.sentence(self._jump(min_count, max_count))

    def close(self) -> None:
        r"""Release the dictionary stream.

        \throws CloseFailed when already closed or the stream fails to close.
        """
        if self._closed:
            raise CloseFailed(f"dictionary {self._source.name} already closed")
        self._closed = True
        try:
            self._file.close()
        except OSError as e:
            raise CloseFailed(f"error closing dictionary {self._source.name}: {e}") from e
